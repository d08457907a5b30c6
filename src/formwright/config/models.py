"""Configuration models for formwright YAML files."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from formwright.core.constants import TemplateUsage
from formwright.core.defaults import standard_default_prompt
from formwright.core.errors import ConfigError
from formwright.core.language import DEFAULT_MAX_PHRASE_LENGTH
from formwright.core.metadata import NumericRange
from formwright.core.template import Template

# DSL Version constants
SUPPORTED_VERSIONS = frozenset({"1.0"})
CURRENT_VERSION = "1.0"


class ValueConfig(BaseModel):
    """Configuration for one enum value of a field."""

    description: str | None = Field(default=None, description="Description shown for the value")
    terms: list[str] | None = Field(default=None, description="Terms or regexes matching the value")
    max_phrase_length: int | None = Field(
        default=None, ge=1, description="Expand terms through the term generator"
    )

    @field_validator("terms", mode="before")
    @classmethod
    def _single_term(cls, value: Any) -> Any:
        return [value] if isinstance(value, str) else value


class FieldConfig(BaseModel):
    """Configuration for one field of a form."""

    description: str | None = Field(default=None, description="Overrides the generated description")
    terms: list[str] | None = Field(default=None, description="Terms or regexes matching the field")
    max_phrase_length: int | None = Field(
        default=None, ge=1, description="Expand terms through the term generator"
    )
    numeric: NumericRange | None = Field(default=None, description="Allowed [min, max] range")
    optional: bool = Field(default=False, description="Whether the field may be left empty")
    templates: dict[TemplateUsage, Template] = Field(
        default_factory=dict, description="Templates by usage"
    )
    values: dict[str, ValueConfig] = Field(default_factory=dict, description="Enum values")

    @field_validator("terms", mode="before")
    @classmethod
    def _single_term(cls, value: Any) -> Any:
        return [value] if isinstance(value, str) else value

    @field_validator("values", mode="before")
    @classmethod
    def _value_list(cls, value: Any) -> Any:
        # "values: [small, large]" declares values without metadata
        if isinstance(value, list):
            return {name: {} for name in value}
        if isinstance(value, dict):
            return {name: meta or {} for name, meta in value.items()}
        return value


class FormConfig(BaseModel):
    """Configuration for one form."""

    description: str | None = Field(default=None, description="Description of the form")
    templates: dict[TemplateUsage, Template] = Field(
        default_factory=dict, description="Form-level templates by usage"
    )
    fields: dict[str, FieldConfig] = Field(default_factory=dict)

    @field_validator("fields", mode="before")
    @classmethod
    def _empty_fields(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {name: config or {} for name, config in value.items()}
        return value


class DefaultsConfig(BaseModel):
    """Overrides of the built-in default template table."""

    prompt: Template | None = Field(
        default=None, description="Options every default template falls back to"
    )
    templates: dict[TemplateUsage, Template] = Field(default_factory=dict)

    @field_validator("prompt", mode="before")
    @classmethod
    def _builtin_prompt_patterns(cls, value: Any) -> Any:
        # an options-only prompt keeps the built-in patterns
        if isinstance(value, dict) and "patterns" not in value and "pattern" not in value:
            return {**value, "patterns": standard_default_prompt().patterns}
        return value


class SettingsConfig(BaseModel):
    """Global settings configuration."""

    max_phrase_length: int = Field(
        default=DEFAULT_MAX_PHRASE_LENGTH,
        ge=1,
        description="Phrase length for terms generated from field and value names",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Log level used by the CLI"
    )


class FormwrightConfig(BaseModel):
    """Root configuration with DSL versioning."""

    version: str = Field(default=CURRENT_VERSION, description="DSL version")
    settings: SettingsConfig = Field(default_factory=SettingsConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    forms: dict[str, FormConfig] = Field(default_factory=dict)

    @field_validator("version", mode="before")
    @classmethod
    def _numeric_version(cls, value: Any) -> Any:
        # YAML reads an unquoted 1.0 as a float
        return str(value) if isinstance(value, (int, float)) else value

    def model_post_init(self, __context: object) -> None:
        """Validate DSL version after initialization."""
        if self.version not in SUPPORTED_VERSIONS:
            raise ConfigError(
                f"Unsupported DSL version: {self.version}. "
                f"Supported: {', '.join(sorted(SUPPORTED_VERSIONS))}"
            )
