"""Term descriptors used to recognize user input for a field or value."""

import logging
import re
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from formwright.core.errors import ConfigError
from formwright.core.interfaces import TermGenerator
from formwright.core.language import generate_terms

logger = logging.getLogger(__name__)


class Terms(BaseModel):
    """Literal terms or regular expressions matching a field or enum value.

    Descriptors are immutable. Expansion through a term generator returns a
    new descriptor; see :meth:`with_expanded_terms`.
    """

    model_config = ConfigDict(frozen=True)

    alternatives: tuple[str, ...] = Field(description="Terms or regular expressions to match")
    declared: tuple[str, ...] | None = Field(
        default=None, description="Terms as declared, before expansion"
    )
    max_phrase_length: int | None = Field(
        default=None, description="Phrase length used to expand the declared terms"
    )

    @model_validator(mode="before")
    @classmethod
    def _coerce_alternatives(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"alternatives": (data,)}
        if isinstance(data, (list, tuple)):
            return {"alternatives": tuple(data)}
        if isinstance(data, dict) and isinstance(data.get("alternatives"), str):
            return {**data, "alternatives": (data["alternatives"],)}
        return data

    @model_validator(mode="after")
    def _check_alternatives(self) -> "Terms":
        if not self.alternatives:
            raise ConfigError("Terms require at least one alternative")
        if (self.declared is None) != (self.max_phrase_length is None):
            raise ConfigError("Expanded terms must record both declared terms and phrase length")
        for alternative in self.alternatives:
            try:
                re.compile(alternative)
            except re.error as e:
                raise ConfigError(f"Invalid term expression {alternative!r}: {e}") from e
        return self

    @classmethod
    def of(cls, *alternatives: str) -> "Terms":
        """Build a descriptor from one or more terms."""
        return cls(alternatives=tuple(alternatives))

    @classmethod
    def expand(
        cls,
        declared: str | Sequence[str],
        max_phrase_length: int,
        generator: TermGenerator = generate_terms,
    ) -> "Terms":
        """Build an expanded descriptor from declared literal terms.

        Only the generated expressions must be valid regular expressions;
        declared terms are passed to ``generator`` as plain text.

        Raises:
            ConfigError: If nothing is declared or max_phrase_length is not positive
        """
        source = (declared,) if isinstance(declared, str) else tuple(declared)
        if not source:
            raise ConfigError("Terms require at least one alternative")
        if max_phrase_length < 1:
            raise ConfigError(f"max_phrase_length must be positive, got {max_phrase_length}")

        expanded = [
            term for alternative in source for term in generator(alternative, max_phrase_length)
        ]
        logger.debug(
            f"Expanded {len(source)} term(s) into {len(expanded)} expression(s)",
            extra={"max_phrase_length": max_phrase_length},
        )
        return cls(
            alternatives=tuple(expanded), declared=source, max_phrase_length=max_phrase_length
        )

    @property
    def is_expanded(self) -> bool:
        return self.max_phrase_length is not None

    def with_expanded_terms(
        self,
        max_phrase_length: int,
        generator: TermGenerator = generate_terms,
    ) -> "Terms":
        """Return a new descriptor with every declared term run through ``generator``.

        The generated expressions are concatenated in declaration order.
        Expansion always starts from the declared terms, so expanding an
        already expanded descriptor replaces the previous expansion instead
        of compounding it.

        Args:
            max_phrase_length: Longest phrase the generator should emit
            generator: Term generator, defaults to :func:`generate_terms`

        Raises:
            ConfigError: If max_phrase_length is not positive
        """
        source = self.declared if self.declared is not None else self.alternatives
        return Terms.expand(source, max_phrase_length, generator)

    def matches(self, text: str) -> bool:
        """Check whether any alternative matches ``text`` (case-insensitive)."""
        return any(re.search(alternative, text, re.IGNORECASE) for alternative in self.alternatives)
