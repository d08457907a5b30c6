"""Core declarations: options, terms, templates, metadata and resolution."""

from formwright.core.constants import (
    BoolDefault,
    CaseNormalization,
    ChoiceStyle,
    FeedbackPolicy,
    TemplateUsage,
)
from formwright.core.template import Template, TemplateOptions
from formwright.core.terms import Terms

__all__ = [
    "BoolDefault",
    "CaseNormalization",
    "ChoiceStyle",
    "FeedbackPolicy",
    "TemplateUsage",
    "Template",
    "TemplateOptions",
    "Terms",
]
