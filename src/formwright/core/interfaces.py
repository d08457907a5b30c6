"""Core interfaces (Protocols) for collaborators outside formwright."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from formwright.core.resolution import RenderRequest


class RandomSource(Protocol):
    """Source of randomness used for pattern selection.

    ``random.Random`` satisfies this protocol. Tests inject a deterministic
    source so selection is reproducible.
    """

    def randrange(self, stop: int) -> int:
        """Return an integer in ``range(stop)``."""
        ...


class TermGenerator(Protocol):
    """Turns a word or phrase into regular expressions that match it."""

    def __call__(self, text: str, max_phrase_length: int) -> list[str]:
        """Generate matching expressions for ``text``.

        Must be pure: the same input always yields the same expressions.
        """
        ...


class PatternRenderer(Protocol):
    """Expands the ``{...}`` directives of a resolved pattern into prose."""

    def render(self, request: "RenderRequest") -> str:
        """Render a prepared request into display text."""
        ...
