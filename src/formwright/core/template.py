"""Template records: alternative patterns plus formatting options.

A template holds one or more alternative patterns for a conversational usage
(prompt, help, feedback, ...) and a bundle of formatting options. Options
start unset and are filled by merging against fallback templates:

    field template -> form template -> global default template

Resolution happens once at load time. After :meth:`Template.seal` the
template is read-only and may be shared by concurrent sessions.
"""

import random
import threading
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator

from formwright.core.constants import (
    BoolDefault,
    CaseNormalization,
    ChoiceStyle,
    FeedbackPolicy,
    TemplateUsage,
)
from formwright.core.errors import ConfigError, InvalidPatternSetError, TemplateSealedError
from formwright.core.interfaces import RandomSource

_thread_state = threading.local()


def _thread_random() -> random.Random:
    """Per-thread generator so selection never touches shared state."""
    rng = getattr(_thread_state, "rng", None)
    if rng is None:
        rng = _thread_state.rng = random.Random()
    return rng


def _is_unset(value: Any) -> bool:
    return value is None or (isinstance(value, Enum) and value.value == "default")


class TemplateOptions(BaseModel):
    """Formatting options handed to the pattern renderer.

    Each option is either unset (its ``DEFAULT`` member or ``None``) or
    resolved. Records are immutable; merging returns a new record.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    allow_default_choice: BoolDefault = Field(
        default=BoolDefault.DEFAULT, description="Offer the current value as a choice in {||}"
    )
    allow_number_matching: BoolDefault = Field(
        default=BoolDefault.DEFAULT, description="Allow choosing by number"
    )
    field_case: CaseNormalization = Field(
        default=CaseNormalization.DEFAULT, description="Case of {&} field references"
    )
    value_case: CaseNormalization = Field(
        default=CaseNormalization.DEFAULT, description="Case of {} value references"
    )
    feedback_policy: FeedbackPolicy = Field(
        default=FeedbackPolicy.DEFAULT, description="When feedback is given after input"
    )
    choice_format: str | None = Field(
        default=None, description="Format of each choice; {0} is the number, {1} the name"
    )
    list_last_separator: str | None = Field(
        default=None, description="Separator before the last item of a {[]} list"
    )
    list_separator: str | None = Field(
        default=None, description="Separator between the other items of a {[]} list"
    )
    choice_style: ChoiceStyle = Field(
        default=ChoiceStyle.DEFAULT, description="Layout of {||} choices"
    )

    @field_validator("allow_default_choice", "allow_number_matching", mode="before")
    @classmethod
    def _yaml_bool(cls, value: Any) -> Any:
        # YAML reads unquoted yes/no as booleans
        if isinstance(value, bool):
            return BoolDefault.YES if value else BoolDefault.NO
        return value

    def unset_fields(self) -> list[str]:
        """Names of the options still at their sentinel."""
        return [name for name in type(self).model_fields if _is_unset(getattr(self, name))]

    @property
    def is_resolved(self) -> bool:
        return not self.unset_fields()

    def merged_with(self, fallback: "TemplateOptions") -> "TemplateOptions":
        """Return a record where every unset option is taken from ``fallback``.

        Options already resolved here always win over the fallback.
        """
        updates = {name: getattr(fallback, name) for name in self.unset_fields()}
        return self.model_copy(update=updates) if updates else self


OPTION_NAMES = frozenset(TemplateOptions.model_fields)


class Template(BaseModel):
    """A set of alternative patterns with formatting options.

    A template without ``usage`` is a plain prompt record; a template with a
    usage is bound to that conversational purpose. Option keys may be given
    flat when constructing, e.g. ``Template(patterns=["..."], field_case="lower")``.

    Example:
        >>> prompt = Template.of("What is your {&}?", usage=TemplateUsage.PROMPT)
        >>> prompt.select_pattern()
        'What is your {&}?'
    """

    model_config = ConfigDict(extra="forbid")

    patterns: tuple[str, ...] = Field(description="Alternative patterns, chosen at random")
    options: TemplateOptions = Field(default_factory=TemplateOptions)
    usage: TemplateUsage | None = Field(default=None, frozen=True)

    _sealed: bool = PrivateAttr(default=False)

    @model_validator(mode="before")
    @classmethod
    def _collect_fields(cls, data: Any) -> Any:
        if isinstance(data, str):
            data = {"patterns": (data,)}
        elif isinstance(data, (list, tuple)):
            data = {"patterns": tuple(data)}
        if not isinstance(data, dict):
            return data

        data = dict(data)
        if "pattern" in data:
            data["patterns"] = data.pop("pattern")
        patterns = data.get("patterns")
        if isinstance(patterns, str):
            data["patterns"] = (patterns,)
        elif not patterns:
            raise InvalidPatternSetError("A template requires at least one pattern")

        flat = {key: data.pop(key) for key in list(data) if key in OPTION_NAMES}
        if flat:
            options = data.get("options") or {}
            if isinstance(options, TemplateOptions):
                options = options.model_dump(exclude_defaults=True)
            data["options"] = {**options, **flat}
        return data

    def __setattr__(self, name: str, value: Any) -> None:
        if not name.startswith("_") and self._sealed:
            raise TemplateSealedError(f"Cannot set '{name}' on a sealed template")
        super().__setattr__(name, value)

    @classmethod
    def of(cls, *patterns: str, usage: TemplateUsage | None = None, **options: Any) -> "Template":
        """Build a template from positional patterns and flat option keywords."""
        return cls(patterns=patterns, usage=usage, **options)

    @classmethod
    def from_template(cls, other: "Template", usage: TemplateUsage | None = None) -> "Template":
        """Copy another template.

        The pattern tuple is shared and every option is copied. The copy is
        never sealed, so it can be resolved independently of ``other``.
        ``usage`` defaults to the usage of ``other``.
        """
        # both fields were validated on other; skip revalidation so the tuple stays shared
        return cls.model_construct(
            patterns=other.patterns,
            options=other.options,
            usage=usage if usage is not None else other.usage,
        )

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    @property
    def is_resolved(self) -> bool:
        return self.options.is_resolved

    def select_pattern(self, rng: RandomSource | None = None) -> str:
        """Pick the pattern to use for one rendering.

        With a single pattern that pattern is returned. Otherwise one of the
        alternatives is chosen uniformly using ``rng`` or a per-thread
        generator.
        """
        if len(self.patterns) == 1:
            return self.patterns[0]
        source = rng if rng is not None else _thread_random()
        return self.patterns[source.randrange(len(self.patterns))]

    def all_patterns(self) -> tuple[str, ...]:
        """All alternative patterns in declaration order."""
        return self.patterns

    def apply_defaults(self, fallback: "Template | None") -> "Template":
        """Fill every unset option from ``fallback``.

        Only this template changes; ``fallback`` is left as is. Options
        already set here are kept, so chaining from the most specific to the
        most general template keeps the closest setting. Returns ``self`` to
        allow chaining.

        Raises:
            ConfigError: If fallback is None
            TemplateSealedError: If this template was sealed
        """
        if fallback is None:
            raise ConfigError("apply_defaults requires a fallback template")
        self.options = self.options.merged_with(fallback.options)
        return self

    def seal(self) -> "Template":
        """End the load-time phase; the template is read-only afterwards."""
        self._sealed = True
        return self
