"""Global default template table.

The table is an explicitly constructed :class:`FormConfiguration` that is
passed to resolution. There is no module-level mutable default; callers build
one (usually with :meth:`FormConfiguration.standard`) and thread it through.
"""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from formwright.core.constants import (
    BoolDefault,
    CaseNormalization,
    ChoiceStyle,
    FeedbackPolicy,
    TemplateUsage,
)
from formwright.core.errors import ConfigError
from formwright.core.template import Template

logger = logging.getLogger(__name__)


def standard_default_prompt() -> Template:
    """Fully resolved prompt every built-in template falls back to."""
    return Template.of(
        "{||}",
        allow_default_choice=BoolDefault.YES,
        allow_number_matching=BoolDefault.YES,
        choice_format="{0}. {1}",
        choice_style=ChoiceStyle.AUTO,
        field_case=CaseNormalization.LOWER,
        feedback_policy=FeedbackPolicy.AUTO,
        list_last_separator=", and ",
        list_separator=", ",
        value_case=CaseNormalization.INITIAL_UPPER,
    )


def standard_templates() -> dict[TemplateUsage, Template]:
    """Built-in English templates, one per usage, with options still unset."""
    U = TemplateUsage
    patterns: dict[TemplateUsage, str | list[str]] = {
        U.PROMPT: "{||}",
        U.CLARIFY: 'By "{0}" {&} did you mean {||}',
        U.CURRENT_CHOICE: "(current choice: {})",
        U.DATE_TIME: "Please enter a date and time for {&} {||}",
        U.DOUBLE: "Please enter a number for {&} {||}",
        U.FEEDBACK: 'For {&} I understood {}. {?"{0}" is not an option.}',
        U.HELP: "You are filling in the {&} field. Possible responses:\n{0}\n{1}",
        U.HELP_CLARIFY: "Please enter a number {0}-{1} or words from the choices.",
        U.HELP_DATE_TIME: "Please enter a date or time expression like 'Monday' or 'July 3rd'.",
        U.HELP_DOUBLE: "Please enter a number{?, between {0} and {1}}.",
        U.HELP_INTEGER: "Please enter an integer{?, between {0} and {1}}.",
        U.HELP_NAVIGATION: "Choose what to change by entering a number or the name of a field.",
        U.HELP_ONE_NUMBER: "You can enter a number {0}-{1} or words from the descriptions. ({2})",
        U.HELP_MANY_NUMBER: (
            "You can enter one or more numbers {0}-{1} or words from the descriptions. ({2})"
        ),
        U.HELP_ONE_WORD: "You can enter any words from the descriptions. ({2})",
        U.HELP_MANY_WORD: (
            "You can select one or more choices by entering words from the descriptions. ({2})"
        ),
        U.HELP_STRING: "You can enter anything.",
        U.INTEGER: "Please enter a number for {&} {||}",
        U.NAVIGATION: "What do you want to change? {||}",
        U.NO_PREFERENCE: "No Preference",
        U.NOT_UNDERSTOOD: '"{0}" is not a {&} option.',
        U.SELECT_ONE: "Please select a {&} {||}",
        U.SELECT_MANY: "Please select one or more {&} {||}",
        U.STRING: "Please enter {&} {||}",
        U.UNSPECIFIED: "Unspecified",
    }
    templates = {usage: Template(patterns=pattern, usage=usage) for usage, pattern in patterns.items()}
    # Navigation lists fields, so one per line reads better
    templates[U.NAVIGATION] = Template.of(
        patterns[U.NAVIGATION],
        usage=U.NAVIGATION,
        choice_style=ChoiceStyle.PER_LINE,
        field_case=CaseNormalization.NONE,
    )
    return templates


class FormConfiguration:
    """Global default templates, one fully resolved template per usage.

    Construction applies ``default_prompt`` to every entry, checks that each
    entry ends up fully resolved, and seals the entries. The table is
    read-only afterwards.

    Raises:
        ConfigError: If the default prompt is not fully resolved, a usage has
            no entry, or an entry is keyed under a usage other than its own
    """

    def __init__(self, default_prompt: Template, templates: Mapping[TemplateUsage, Template]):
        unset = default_prompt.options.unset_fields()
        if unset:
            raise ConfigError(f"Default prompt leaves options unset: {unset}")

        missing = [usage.value for usage in TemplateUsage if usage not in templates]
        if missing:
            raise ConfigError(f"Default template table has no entry for: {missing}")

        resolved: dict[TemplateUsage, Template] = {}
        for usage, template in templates.items():
            if template.usage is not None and template.usage != usage:
                raise ConfigError(
                    f"Template for '{template.usage.value}' registered under '{usage.value}'"
                )
            entry = Template.from_template(template, usage=usage).apply_defaults(default_prompt)
            resolved[usage] = entry.seal()

        self.default_prompt = Template.from_template(default_prompt).seal()
        self._templates = MappingProxyType(resolved)
        logger.debug(f"Default template table ready with {len(resolved)} usage(s)")

    @classmethod
    def standard(cls) -> "FormConfiguration":
        """The built-in English default table."""
        return cls(standard_default_prompt(), standard_templates())

    @property
    def templates(self) -> Mapping[TemplateUsage, Template]:
        return self._templates

    def template(self, usage: TemplateUsage) -> Template:
        return self._templates[usage]

    def with_overrides(
        self,
        templates: Mapping[TemplateUsage, Template] | Iterable[Template],
        default_prompt: Template | None = None,
    ) -> "FormConfiguration":
        """Return a new table with some usages replaced.

        Overrides with unset options fall back to the default prompt. Passing
        ``default_prompt`` replaces it for the overridden entries only; the
        remaining entries are already resolved.
        """
        if not isinstance(templates, Mapping):
            templates = {template.usage or TemplateUsage.PROMPT: template for template in templates}
        merged = {**self._templates, **templates}
        return FormConfiguration(default_prompt or self.default_prompt, merged)
