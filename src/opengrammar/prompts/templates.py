"""Prompt template table.

Every template asks the model for two labelled sections: a short explanation
first, then the transformed text. Templates are keyed by action, then by
language code. Only the surface language differs between variants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from opengrammar import config

EN = config.DEFAULT_LANGUAGE
ID = config.INDONESIAN

CUSTOM_ACTION = "custom"

LANGUAGE_DIRECTIVES: Dict[str, str] = {
    ID: "Please respond in Indonesian (Bahasa Indonesia). ",
    EN: "Please respond in US English. ",
}


@dataclass(frozen=True)
class PromptTemplate:
    task: str
    text_label: str
    format_line: str
    explanation_header: str
    explanation_hint: str
    output_header: str
    output_hint: str
    # Free-form variant only: label placed before the caller's instruction.
    instruction_label: Optional[str] = None


_EN_FORMAT = "Please respond in this exact format:"
_ID_FORMAT = "Harap berikan respons dalam format yang tepat ini:"


ACTION_TEMPLATES: Dict[str, Dict[str, PromptTemplate]] = {
    "grammar": {
        EN: PromptTemplate(
            task="Analyze the following text for grammar, spelling, and style issues.",
            text_label="Text to analyze",
            format_line=_EN_FORMAT,
            explanation_header="ANALYSIS",
            explanation_hint=(
                "List specific grammar, spelling, and style issues found. "
                'If none found, write "No issues detected."'
            ),
            output_header="CORRECTED TEXT",
            output_hint="Provide the corrected version of the text with all issues fixed",
        ),
        ID: PromptTemplate(
            task="Analisis teks berikut untuk masalah tata bahasa, ejaan, dan gaya penulisan.",
            text_label="Teks yang akan dianalisis",
            format_line=_ID_FORMAT,
            explanation_header="ANALISIS",
            explanation_hint=(
                "Daftar masalah tata bahasa, ejaan, dan gaya yang ditemukan. "
                'Jika tidak ada masalah, tulis "Tidak ada masalah yang terdeteksi."'
            ),
            output_header="TEKS YANG DIPERBAIKI",
            output_hint="Berikan versi teks yang telah diperbaiki dengan semua masalah diperbaiki",
        ),
    },
    "improve": {
        EN: PromptTemplate(
            task=(
                "Improve the following text by enhancing clarity, flow, and overall "
                "quality while maintaining the original meaning."
            ),
            text_label="Original text",
            format_line=_EN_FORMAT,
            explanation_header="IMPROVEMENTS MADE",
            explanation_hint="List the specific improvements and enhancements made to the text",
            output_header="IMPROVED TEXT",
            output_hint="Provide the enhanced version of the text",
        ),
        ID: PromptTemplate(
            task=(
                "Tingkatkan teks berikut dengan meningkatkan kejelasan, alur, dan "
                "kualitas secara keseluruhan sambil mempertahankan makna aslinya."
            ),
            text_label="Teks asli",
            format_line=_ID_FORMAT,
            explanation_header="PERBAIKAN YANG DILAKUKAN",
            explanation_hint="Daftar perbaikan dan peningkatan spesifik yang dilakukan pada teks",
            output_header="TEKS YANG DITINGKATKAN",
            output_hint="Berikan versi teks yang telah ditingkatkan",
        ),
    },
    "rephrase": {
        EN: PromptTemplate(
            task=(
                "Rephrase the following text using different words and sentence "
                "structures while keeping the same meaning."
            ),
            text_label="Original text",
            format_line=_EN_FORMAT,
            explanation_header="REPHRASING NOTES",
            explanation_hint="Brief explanation of the rephrasing approach used",
            output_header="REPHRASED TEXT",
            output_hint="Provide the rephrased version of the text",
        ),
        ID: PromptTemplate(
            task=(
                "Parafrase teks berikut menggunakan kata-kata dan struktur kalimat "
                "yang berbeda sambil mempertahankan makna yang sama."
            ),
            text_label="Teks asli",
            format_line=_ID_FORMAT,
            explanation_header="CATATAN PARAFRASA",
            explanation_hint="Penjelasan singkat tentang pendekatan parafrasa yang digunakan",
            output_header="TEKS YANG DIPARAFRASA",
            output_hint="Berikan versi teks yang telah diparafrasa",
        ),
    },
    "formal": {
        EN: PromptTemplate(
            task=(
                "Rewrite the following text in a more formal, professional tone "
                "suitable for business or academic contexts."
            ),
            text_label="Original text",
            format_line=_EN_FORMAT,
            explanation_header="FORMALIZATION NOTES",
            explanation_hint="Explain what changes were made to make the text more formal",
            output_header="FORMAL TEXT",
            output_hint="Provide the formal version of the text",
        ),
        ID: PromptTemplate(
            task=(
                "Tulis ulang teks berikut dengan nada yang lebih formal dan "
                "profesional yang cocok untuk konteks bisnis atau akademik."
            ),
            text_label="Teks asli",
            format_line=_ID_FORMAT,
            explanation_header="CATATAN FORMALISASI",
            explanation_hint="Jelaskan perubahan apa yang dilakukan untuk membuat teks lebih formal",
            output_header="TEKS FORMAL",
            output_hint="Berikan versi formal dari teks",
        ),
    },
    "detailed": {
        EN: PromptTemplate(
            task=(
                "Expand the following text by adding more details, explanations, "
                "and context while maintaining accuracy."
            ),
            text_label="Original text",
            format_line=_EN_FORMAT,
            explanation_header="EXPANSION DETAILS",
            explanation_hint="Explain what additional information and details were added",
            output_header="DETAILED TEXT",
            output_hint="Provide the expanded, more detailed version of the text",
        ),
        ID: PromptTemplate(
            task=(
                "Kembangkan teks berikut dengan menambahkan lebih banyak detail, "
                "penjelasan, dan konteks sambil mempertahankan keakuratan."
            ),
            text_label="Teks asli",
            format_line=_ID_FORMAT,
            explanation_header="DETAIL PENGEMBANGAN",
            explanation_hint="Jelaskan informasi dan detail tambahan apa yang ditambahkan",
            output_header="TEKS YANG DIPERLUAS",
            output_hint="Berikan versi teks yang diperluas dan lebih detail",
        ),
    },
}

# Used when the action is not one of the named ones; the action string is
# then the instruction itself.
CUSTOM_TEMPLATES: Dict[str, PromptTemplate] = {
    EN: PromptTemplate(
        task="Please perform the following action on the given text:",
        instruction_label="Instruction",
        text_label="Text to process",
        format_line=_EN_FORMAT,
        explanation_header="ANALYSIS",
        explanation_hint="Brief explanation of the action performed",
        output_header="FINAL RESULT",
        output_hint="Provide the final result of the requested action",
    ),
    ID: PromptTemplate(
        task="Silakan lakukan tindakan berikut pada teks yang diberikan:",
        instruction_label="Instruksi",
        text_label="Teks yang akan diproses",
        format_line=_ID_FORMAT,
        explanation_header="ANALISIS",
        explanation_hint="Penjelasan singkat tentang tindakan yang dilakukan",
        output_header="HASIL AKHIR",
        output_hint="Berikan hasil akhir dari tindakan yang diminta",
    ),
}


def all_templates() -> List[PromptTemplate]:
    out = [tpl for variants in ACTION_TEMPLATES.values() for tpl in variants.values()]
    out.extend(CUSTOM_TEMPLATES.values())
    return out


# --- Option catalog (display labels for callers building a picker) ---

LANGUAGE_OPTIONS: List[Tuple[str, str]] = [
    (EN, "🇺🇸 US English"),
    (ID, "🇮🇩 Bahasa Indonesia"),
]

_ACTION_LABELS: Dict[str, Tuple[str, str]] = {
    "grammar": ("Check Grammar & Spelling", "Periksa Tata Bahasa & Ejaan"),
    "improve": ("Improve It", "Tingkatkan Teks"),
    "rephrase": ("Re-paraphrase It", "Parafrase Ulang"),
    "formal": ("Make It Formal", "Buat Lebih Formal"),
    "detailed": ("Make It More Detailed", "Buat Lebih Detail"),
    CUSTOM_ACTION: ("Custom Action", "Aksi Kustom"),
}


def action_options(language: str = EN) -> List[Tuple[str, str]]:
    """Return (value, label) pairs for every action, localized for ``language``.

    ``custom`` is a picker value only; callers pass their own instruction text
    as the action when it is chosen.
    """
    idx = 1 if language == ID else 0
    return [(value, labels[idx]) for value, labels in _ACTION_LABELS.items()]
