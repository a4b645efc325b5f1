from __future__ import annotations

from opengrammar import config

from .templates import ACTION_TEMPLATES, CUSTOM_TEMPLATES, LANGUAGE_DIRECTIVES, PromptTemplate


def language_directive(language: str) -> str:
    """Sentence telling the model which language to answer in; US English by default."""
    return LANGUAGE_DIRECTIVES.get(language, LANGUAGE_DIRECTIVES[config.DEFAULT_LANGUAGE])


def _variant(variants: dict[str, PromptTemplate], language: str) -> PromptTemplate:
    return variants.get(language, variants[config.DEFAULT_LANGUAGE])


def select_template(action_type: str, language: str) -> PromptTemplate:
    """Pick the template for ``action_type``; unknown actions get the free-form one."""
    variants = ACTION_TEMPLATES.get(action_type, CUSTOM_TEMPLATES)
    return _variant(variants, language)


def render(directive: str, tpl: PromptTemplate, text: str, instruction: str | None = None) -> str:
    # Text and instruction go in verbatim; nothing here is a format string.
    head = directive + tpl.task
    if tpl.instruction_label is not None:
        head += "\n\n" + tpl.instruction_label + ": " + (instruction or "")
    return (
        head
        + "\n\n"
        + tpl.text_label
        + ':\n"'
        + text
        + '"\n\n'
        + tpl.format_line
        + "\n\n"
        + tpl.explanation_header
        + ":\n["
        + tpl.explanation_hint
        + "]\n\n"
        + tpl.output_header
        + ":\n["
        + tpl.output_hint
        + "]"
    )


def build_prompt(text: str, action_type: str, language: str) -> str:
    """Render the full prompt for one request.

    Named actions (grammar, improve, rephrase, formal, detailed) use their own
    template. Anything else is treated as a literal instruction and rendered
    with the free-form template. Unknown language codes fall back to US
    English. Never raises for unrecognized values.

    Args:
        text: The user's text, inserted between double quotes as-is.
        action_type: A named action or a free-form instruction.
        language: Response language code ("en" or "id").

    Returns:
        The rendered prompt string.
    """
    tpl = select_template(action_type, language)
    return render(language_directive(language), tpl, text, instruction=action_type)
