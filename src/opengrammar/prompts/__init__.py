"""Prompt rendering for the text actions."""

from .builder import build_prompt, language_directive, select_template
from .templates import (
    ACTION_TEMPLATES,
    CUSTOM_ACTION,
    CUSTOM_TEMPLATES,
    LANGUAGE_DIRECTIVES,
    LANGUAGE_OPTIONS,
    PromptTemplate,
    action_options,
)

__all__ = [
    "ACTION_TEMPLATES",
    "CUSTOM_ACTION",
    "CUSTOM_TEMPLATES",
    "LANGUAGE_DIRECTIVES",
    "LANGUAGE_OPTIONS",
    "PromptTemplate",
    "action_options",
    "build_prompt",
    "language_directive",
    "select_template",
]
