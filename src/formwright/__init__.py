"""formwright - field metadata and template resolution for conversational forms.

Attach descriptions, recognition terms, numeric limits and usage-tagged
templates to the fields of a form, then resolve every template once against
form-level and global defaults.

Quick start:
    from formwright import FormBuilder, FormCatalog, Template, TemplateUsage

    schema = (
        FormBuilder("pizza")
        .field("size", templates=[Template.of("Which {&}? {||}", usage=TemplateUsage.PROMPT)])
        .build()
    )
    catalog = FormCatalog.from_schemas([schema])
    request = catalog.form("pizza").prepare("size", TemplateUsage.PROMPT)
"""

from formwright.__version__ import __version__
from formwright.catalog import FormCatalog
from formwright.core.constants import (
    BoolDefault,
    CaseNormalization,
    ChoiceStyle,
    FeedbackPolicy,
    TemplateUsage,
)
from formwright.core.defaults import FormConfiguration
from formwright.core.errors import (
    ConfigError,
    DuplicateTemplateError,
    FormwrightError,
    InvalidPatternSetError,
    InvalidRangeError,
    ResolutionError,
    TemplateSealedError,
)
from formwright.core.metadata import FieldMetadata, NumericRange, SchemaElement, ValueMetadata
from formwright.core.resolution import RenderRequest, ResolvedForm, TemplateResolver, resolve_template
from formwright.core.schema import FormBuilder, FormSchema
from formwright.core.template import Template, TemplateOptions
from formwright.core.terms import Terms

__author__ = "formwright contributors"

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # High-level API
    "FormCatalog",
    "FormBuilder",
    "FormSchema",
    "FormConfiguration",
    "TemplateResolver",
    "ResolvedForm",
    "RenderRequest",
    "resolve_template",
    # Declarations
    "Template",
    "TemplateOptions",
    "Terms",
    "FieldMetadata",
    "NumericRange",
    "SchemaElement",
    "ValueMetadata",
    # Options
    "BoolDefault",
    "CaseNormalization",
    "ChoiceStyle",
    "FeedbackPolicy",
    "TemplateUsage",
    # Errors
    "FormwrightError",
    "ConfigError",
    "InvalidPatternSetError",
    "InvalidRangeError",
    "DuplicateTemplateError",
    "TemplateSealedError",
    "ResolutionError",
]
