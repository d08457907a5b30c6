"""Turn validated YAML configuration into schemas and default tables."""

from collections.abc import Mapping

from formwright.config.models import FieldConfig, FormConfig, FormwrightConfig
from formwright.core.constants import TemplateUsage
from formwright.core.defaults import FormConfiguration, standard_default_prompt, standard_templates
from formwright.core.errors import ConfigError
from formwright.core.interfaces import TermGenerator
from formwright.core.language import generate_terms
from formwright.core.schema import FormBuilder, FormSchema
from formwright.core.template import Template


def _tag(templates: Mapping[TemplateUsage, Template], owner: str) -> list[Template]:
    """Bind YAML templates to the usage they are keyed under."""
    tagged = []
    for usage, template in templates.items():
        if template.usage is not None and template.usage != usage:
            raise ConfigError(
                f"{owner}: template keyed '{usage.value}' declares usage '{template.usage.value}'"
            )
        tagged.append(Template.from_template(template, usage=usage))
    return tagged


def build_configuration(config: FormwrightConfig) -> FormConfiguration:
    """Build the default table: built-in templates with configured overrides.

    A configured default prompt only needs to set the options it changes;
    the rest come from the built-in default prompt.
    """
    default_prompt = standard_default_prompt()
    if config.defaults.prompt is not None:
        default_prompt = Template.from_template(config.defaults.prompt).apply_defaults(default_prompt)

    templates: dict[TemplateUsage, Template] = standard_templates()
    for template in _tag(config.defaults.templates, "defaults"):
        templates[template.usage] = template
    return FormConfiguration(default_prompt, templates)


def _add_field(builder: FormBuilder, name: str, field: FieldConfig) -> None:
    builder.field(
        name,
        description=field.description,
        terms=field.terms,
        max_phrase_length=field.max_phrase_length,
        numeric=field.numeric,
        optional=field.optional,
        templates=_tag(field.templates, f"Field '{name}'"),
    )
    for value_name, value in field.values.items():
        builder.value(
            name,
            value_name,
            description=value.description,
            terms=value.terms,
            max_phrase_length=value.max_phrase_length,
        )


def build_schema(
    name: str,
    form: FormConfig,
    *,
    max_phrase_length: int,
    generator: TermGenerator = generate_terms,
) -> FormSchema:
    builder = FormBuilder(
        name,
        description=form.description,
        generator=generator,
        max_phrase_length=max_phrase_length,
    )
    for template in _tag(form.templates, f"Form '{name}'"):
        builder.template(template)
    for field_name, field in form.fields.items():
        _add_field(builder, field_name, field)
    return builder.build()


def build_schemas(
    config: FormwrightConfig,
    generator: TermGenerator = generate_terms,
) -> dict[str, FormSchema]:
    """Build one schema per configured form."""
    return {
        name: build_schema(
            name,
            form,
            max_phrase_length=config.settings.max_phrase_length,
            generator=generator,
        )
        for name, form in config.forms.items()
    }
