"""Tests for building schemas and default tables from configuration."""

import pytest

from formwright.config.builder import build_configuration, build_schemas
from formwright.config.models import FormwrightConfig
from formwright.core.constants import CaseNormalization, ChoiceStyle, TemplateUsage
from formwright.core.errors import ConfigError


def make_config(data: dict) -> FormwrightConfig:
    return FormwrightConfig.model_validate(data)


class TestBuildConfiguration:
    def test_no_overrides_matches_standard(self, standard_config):
        configuration = build_configuration(make_config({}))

        for usage in TemplateUsage:
            assert configuration.template(usage) == standard_config.template(usage)

    def test_default_prompt_override_reaches_every_usage(self):
        """
        GIVEN a configured default prompt that only changes the choice style
        WHEN the default table is built
        THEN every built-in template uses that style and keeps the other built-in options
        """
        configuration = build_configuration(
            make_config({"defaults": {"prompt": {"patterns": "{||}", "choice_style": "inline"}}})
        )

        help_template = configuration.template(TemplateUsage.HELP)
        assert help_template.options.choice_style is ChoiceStyle.INLINE
        assert help_template.options.field_case is CaseNormalization.LOWER
        # entries with their own style keep it
        navigation = configuration.template(TemplateUsage.NAVIGATION)
        assert navigation.options.choice_style is ChoiceStyle.PER_LINE

    def test_options_only_default_prompt(self):
        """
        GIVEN a configured default prompt with options but no patterns
        WHEN the default table is built
        THEN the built-in prompt patterns are kept and the option applies
        """
        configuration = build_configuration(
            make_config({"defaults": {"prompt": {"choice_style": "inline"}}})
        )

        assert configuration.default_prompt.all_patterns() == ("{||}",)
        assert configuration.default_prompt.options.choice_style is ChoiceStyle.INLINE
        help_template = configuration.template(TemplateUsage.HELP)
        assert help_template.options.choice_style is ChoiceStyle.INLINE

    def test_template_override(self):
        configuration = build_configuration(
            make_config({"defaults": {"templates": {"unspecified": ["Not yet", "Nothing yet"]}}})
        )

        assert configuration.template(TemplateUsage.UNSPECIFIED).all_patterns() == (
            "Not yet",
            "Nothing yet",
        )

    def test_template_keyed_under_other_usage(self):
        config = make_config(
            {"defaults": {"templates": {"help": {"patterns": "x", "usage": "feedback"}}}}
        )
        with pytest.raises(ConfigError):
            build_configuration(config)


class TestBuildSchemas:
    def test_fields_values_and_templates(self, fake_generator):
        config = make_config(
            {
                "settings": {"max_phrase_length": 2},
                "forms": {
                    "pizza": {
                        "templates": {"help": "Form help"},
                        "fields": {
                            "size": {
                                "terms": ["big"],
                                "max_phrase_length": 1,
                                "templates": {"prompt": "Which {&}?"},
                                "values": {"large": {"description": "Large pie"}},
                            },
                            "tip": {"numeric": [0, 20], "optional": True},
                        },
                    }
                },
            }
        )

        schemas = build_schemas(config, fake_generator)

        schema = schemas["pizza"]
        size = schema.element("size")
        assert size.terms.alternatives == ("big-1", "big-alt")
        assert size.template_for(TemplateUsage.PROMPT).usage is TemplateUsage.PROMPT
        assert size.values["large"].display_name == "Large pie"
        assert size.values["large"].terms.alternatives == ("large-2", "large-alt")
        assert schema.element("tip").is_optional
        assert schema.form_template(TemplateUsage.HELP).all_patterns() == ("Form help",)

    def test_form_description_reaches_schema(self):
        config = make_config(
            {"forms": {"pizza": {"description": "Order a pizza"}, "orderStatus": {}}}
        )

        schemas = build_schemas(config)

        assert schemas["pizza"].display_name == "Order a pizza"
        assert schemas["orderStatus"].description is None
        assert schemas["orderStatus"].display_name == "order status"
