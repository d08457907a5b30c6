"""Explicit registration of form schemas.

Fields, enum values and templates are declared through :class:`FormBuilder`
instead of being discovered from annotations:

    schema = (
        FormBuilder("sandwich")
        .field("bread", description="kind of bread", templates=[
            Template.of("What {&} would you like? {||}", usage=TemplateUsage.PROMPT),
        ])
        .value("bread", "nineGrainWheat", terms=["wheat", "grain"])
        .field("length", numeric=(6, 12))
        .field("toppings", optional=True)
        .build()
    )
"""

import logging
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from formwright.core.constants import TemplateUsage
from formwright.core.errors import ConfigError, DuplicateTemplateError, ResolutionError
from formwright.core.interfaces import TermGenerator
from formwright.core.language import (
    DEFAULT_MAX_PHRASE_LENGTH,
    camel_case_description,
    generate_terms,
)
from formwright.core.metadata import FieldMetadata, NumericRange, SchemaElement, ValueMetadata
from formwright.core.template import Template
from formwright.core.terms import Terms

logger = logging.getLogger(__name__)

TermsInput = str | Sequence[str] | Terms | None


class FormSchema(BaseModel):
    """Declared metadata of one form: its fields and form-level templates."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    elements: dict[str, SchemaElement] = Field(default_factory=dict)
    templates: dict[TemplateUsage, Template] = Field(default_factory=dict)

    @property
    def display_name(self) -> str:
        """Description of the form, derived from its name when none is declared."""
        return self.description or camel_case_description(self.name)

    @property
    def fields(self) -> list[str]:
        """Field names in declaration order."""
        return list(self.elements)

    def element(self, name: str) -> SchemaElement:
        try:
            return self.elements[name]
        except KeyError:
            raise ResolutionError(
                f"Form '{self.name}' has no field '{name}'. Available: {self.fields}"
            ) from None

    def form_template(self, usage: TemplateUsage) -> Template | None:
        return self.templates.get(usage)


def _index_templates(owner: str, templates: Iterable[Template]) -> dict[TemplateUsage, Template]:
    """Index templates by usage; an untagged template is the prompt."""
    indexed: dict[TemplateUsage, Template] = {}
    for template in templates:
        usage = template.usage or TemplateUsage.PROMPT
        if usage in indexed:
            raise DuplicateTemplateError(f"{owner} declares more than one '{usage.value}' template")
        indexed[usage] = template
    return indexed


class FormBuilder:
    """Collects field declarations and builds an immutable :class:`FormSchema`.

    Fields and values without explicit terms get terms generated from their
    name. Explicit terms are used verbatim unless ``max_phrase_length`` is
    given, in which case they are expanded through the term generator.
    """

    def __init__(
        self,
        name: str,
        *,
        description: str | None = None,
        generator: TermGenerator = generate_terms,
        max_phrase_length: int = DEFAULT_MAX_PHRASE_LENGTH,
    ):
        self.name = name
        self.description = description
        self._generator = generator
        self._max_phrase_length = max_phrase_length
        self._elements: dict[str, SchemaElement] = {}
        self._templates: dict[TemplateUsage, Template] = {}

    def _terms(self, name: str, terms: TermsInput, max_phrase_length: int | None) -> Terms:
        if terms is None:
            return Terms.expand(name, self._max_phrase_length, self._generator)
        if isinstance(terms, Terms):
            if max_phrase_length is not None:
                return terms.with_expanded_terms(max_phrase_length, self._generator)
            return terms
        # declared terms are literals when they are expanded, regexes otherwise
        if max_phrase_length is not None:
            return Terms.expand(terms, max_phrase_length, self._generator)
        return Terms.model_validate(terms)

    def field(
        self,
        name: str,
        *,
        description: str | None = None,
        terms: TermsInput = None,
        max_phrase_length: int | None = None,
        numeric: NumericRange | Sequence[float] | None = None,
        optional: bool = False,
        templates: Iterable[Template] = (),
    ) -> "FormBuilder":
        """Declare a field.

        Raises:
            ConfigError: If the field is already declared
            InvalidRangeError: If numeric has min greater than max
            DuplicateTemplateError: If two templates share a usage
        """
        if name in self._elements:
            raise ConfigError(f"Field '{name}' is already declared on form '{self.name}'")

        if numeric is not None and not isinstance(numeric, NumericRange):
            numeric = NumericRange.model_validate(numeric)

        self._elements[name] = SchemaElement(
            name=name,
            metadata=FieldMetadata(description=description, numeric=numeric, optional=optional),
            terms=self._terms(name, terms, max_phrase_length),
            templates=_index_templates(f"Field '{name}'", templates),
        )
        logger.debug(f"Declared field '{name}' on form '{self.name}'")
        return self

    def value(
        self,
        field: str,
        value: str,
        *,
        description: str | None = None,
        terms: TermsInput = None,
        max_phrase_length: int | None = None,
    ) -> "FormBuilder":
        """Declare metadata for one enum value of an already declared field."""
        element = self._elements.get(field)
        if element is None:
            raise ConfigError(f"Cannot add value '{value}': field '{field}' is not declared")
        if value in element.values:
            raise ConfigError(f"Value '{value}' is already declared on field '{field}'")

        metadata = ValueMetadata(
            name=value,
            description=description,
            terms=self._terms(value, terms, max_phrase_length),
        )
        self._elements[field] = element.model_copy(
            update={"values": {**element.values, value: metadata}}
        )
        return self

    def template(self, template: Template) -> "FormBuilder":
        """Declare a form-level template, shared by every field of the form."""
        usage = template.usage or TemplateUsage.PROMPT
        if usage in self._templates:
            raise DuplicateTemplateError(
                f"Form '{self.name}' declares more than one '{usage.value}' template"
            )
        self._templates[usage] = template
        return self

    def build(self) -> FormSchema:
        logger.info(
            f"Built form '{self.name}' with {len(self._elements)} field(s) "
            f"and {len(self._templates)} form template(s)"
        )
        return FormSchema(
            name=self.name,
            description=self.description,
            elements=dict(self._elements),
            templates=dict(self._templates),
        )
