"""Field metadata and schema elements."""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from formwright.core.constants import TemplateUsage
from formwright.core.errors import InvalidRangeError
from formwright.core.language import camel_case_description
from formwright.core.template import Template
from formwright.core.terms import Terms


class NumericRange(BaseModel):
    """Inclusive limits on the values of a numeric field."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float

    @model_validator(mode="before")
    @classmethod
    def _coerce_pair(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)) and len(data) == 2:
            return {"min": data[0], "max": data[1]}
        return data

    @model_validator(mode="after")
    def _check_bounds(self) -> "NumericRange":
        if not (math.isfinite(self.min) and math.isfinite(self.max)):
            raise InvalidRangeError(f"Numeric limits must be finite, got [{self.min}, {self.max}]")
        if self.min > self.max:
            raise InvalidRangeError(f"Numeric min {self.min} is greater than max {self.max}")
        return self

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class FieldMetadata(BaseModel):
    """Description override, numeric limits and optional marker of a field."""

    model_config = ConfigDict(frozen=True)

    description: str | None = Field(default=None, description="Overrides the generated description")
    numeric: NumericRange | None = Field(default=None, description="Allowed numeric range")
    optional: bool = Field(
        default=False, description="Whether no value is an acceptable answer"
    )


class ValueMetadata(BaseModel):
    """Description and terms of one enum value of a field."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    terms: Terms | None = None

    @property
    def display_name(self) -> str:
        return self.description or camel_case_description(self.name)


class SchemaElement(BaseModel):
    """Everything declared for one field of a form.

    Holds at most one template per usage; :class:`~formwright.core.schema.FormBuilder`
    rejects duplicates at registration.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    metadata: FieldMetadata = Field(default_factory=FieldMetadata)
    terms: Terms | None = None
    templates: dict[TemplateUsage, Template] = Field(default_factory=dict)
    values: dict[str, ValueMetadata] = Field(default_factory=dict)

    @property
    def display_name(self) -> str:
        """Declared description, or one derived from the field name."""
        return self.metadata.description or camel_case_description(self.name)

    @property
    def is_optional(self) -> bool:
        return self.metadata.optional

    def template_for(self, usage: TemplateUsage) -> Template | None:
        return self.templates.get(usage)
