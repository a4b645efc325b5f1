from __future__ import annotations

from dataclasses import dataclass

from .errors import ValidationError


@dataclass(frozen=True)
class ProcessRequest:
    text: str
    credential: str
    action_type: str
    language: str

    def validate(self) -> None:
        if not self.text.strip():
            raise ValidationError("text cannot be empty")
        if not self.credential.strip():
            raise ValidationError("API key is required")


@dataclass(frozen=True)
class ProcessedResult:
    """Model reply split into its explanation and final-output parts."""

    comments: str
    final_text: str
    raw_result: str
