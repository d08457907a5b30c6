"""Unit tests for the global default template table."""

import pytest

from formwright.core.constants import CaseNormalization, ChoiceStyle, TemplateUsage
from formwright.core.defaults import (
    FormConfiguration,
    standard_default_prompt,
    standard_templates,
)
from formwright.core.errors import ConfigError, TemplateSealedError
from formwright.core.template import Template


class TestStandardTable:
    def test_every_usage_is_present_and_resolved(self, standard_config):
        """
        GIVEN the built-in default table
        WHEN it is inspected
        THEN every usage has a sealed, fully resolved template tagged with that usage
        """
        for usage in TemplateUsage:
            template = standard_config.template(usage)
            assert template.usage is usage
            assert template.is_resolved
            assert template.is_sealed

    def test_default_prompt_is_fully_resolved(self):
        assert standard_default_prompt().is_resolved

    def test_entry_specific_options_survive(self, standard_config):
        navigation = standard_config.template(TemplateUsage.NAVIGATION)

        assert navigation.options.choice_style is ChoiceStyle.PER_LINE
        assert navigation.options.field_case is CaseNormalization.NONE
        assert navigation.options.list_separator == ", "

    def test_source_templates_are_not_modified(self):
        templates = standard_templates()
        FormConfiguration(standard_default_prompt(), templates)

        assert not templates[TemplateUsage.HELP].is_resolved
        assert not templates[TemplateUsage.HELP].is_sealed

    def test_table_is_read_only(self, standard_config):
        with pytest.raises(TypeError):
            standard_config.templates[TemplateUsage.HELP] = Template.of("x")
        with pytest.raises(TemplateSealedError):
            standard_config.template(TemplateUsage.HELP).apply_defaults(standard_default_prompt())


class TestConfigurationErrors:
    def test_unresolved_default_prompt_rejected(self):
        with pytest.raises(ConfigError, match="Default prompt leaves options unset"):
            FormConfiguration(Template.of("{||}"), standard_templates())

    def test_missing_usage_rejected(self):
        templates = standard_templates()
        del templates[TemplateUsage.UNSPECIFIED]

        with pytest.raises(ConfigError, match="unspecified"):
            FormConfiguration(standard_default_prompt(), templates)

    def test_mismatched_usage_rejected(self):
        templates = standard_templates()
        templates[TemplateUsage.HELP] = Template.of("x", usage=TemplateUsage.FEEDBACK)

        with pytest.raises(ConfigError, match="registered under 'help'"):
            FormConfiguration(standard_default_prompt(), templates)


class TestOverrides:
    def test_with_overrides_returns_new_table(self, standard_config):
        """
        GIVEN the standard table
        WHEN the prompt usage is overridden
        THEN the new table uses the override and the original is unchanged
        """
        override = Template.of(
            "What is your {&}?",
            usage=TemplateUsage.PROMPT,
            field_case=CaseNormalization.INITIAL_UPPER,
        )

        updated = standard_config.with_overrides([override])

        prompt = updated.template(TemplateUsage.PROMPT)
        assert prompt.all_patterns() == ("What is your {&}?",)
        assert prompt.options.field_case is CaseNormalization.INITIAL_UPPER
        assert prompt.options.value_case is CaseNormalization.INITIAL_UPPER
        assert standard_config.template(TemplateUsage.PROMPT).all_patterns() == ("{||}",)
        assert updated.template(TemplateUsage.HELP) == standard_config.template(TemplateUsage.HELP)

    def test_with_overrides_mapping(self, standard_config):
        updated = standard_config.with_overrides({TemplateUsage.UNSPECIFIED: Template.of("None yet")})
        assert updated.template(TemplateUsage.UNSPECIFIED).all_patterns() == ("None yet",)
