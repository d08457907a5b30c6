"""Template resolution.

Resolution is a load-time phase: every template a form can use is copied,
merged against its fallbacks (field -> form -> global) and sealed. The
:class:`ResolvedForm` that comes out is read-only and safe to share between
concurrent form-filling sessions; the only per-call work left is picking one
of the alternative patterns.
"""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from formwright.core.constants import TemplateUsage
from formwright.core.defaults import FormConfiguration
from formwright.core.errors import ConfigError, ResolutionError
from formwright.core.interfaces import PatternRenderer, RandomSource
from formwright.core.metadata import NumericRange, SchemaElement
from formwright.core.schema import FormSchema
from formwright.core.template import Template, TemplateOptions
from formwright.observability.logging import ContextLogger

logger = ContextLogger(__name__)


class RenderRequest(BaseModel):
    """One concrete pattern plus everything the renderer needs to expand it."""

    model_config = ConfigDict(frozen=True)

    form: str
    field: str | None
    usage: TemplateUsage
    pattern: str
    options: TemplateOptions
    description: str
    terms: tuple[str, ...] = ()
    optional: bool = False
    numeric: NumericRange | None = None


def resolve_template(
    usage: TemplateUsage,
    *,
    config: FormConfiguration,
    element: SchemaElement | None = None,
    form: FormSchema | None = None,
) -> Template:
    """Resolve the template used for ``usage``.

    The most specific declared template supplies the patterns; its unset
    options are filled from the form template and then the global table.
    Declared templates are never modified.

    Returns:
        A sealed, fully resolved template tagged with ``usage``

    Raises:
        ConfigError: If options are still unset after the global table
    """
    chain: list[Template] = []
    if element is not None and (declared := element.template_for(usage)) is not None:
        chain.append(declared)
    if form is not None and (form_level := form.form_template(usage)) is not None:
        chain.append(form_level)
    chain.append(config.template(usage))

    resolved = Template.from_template(chain[0], usage=usage)
    for fallback in chain[1:]:
        resolved.apply_defaults(fallback)

    unset = resolved.options.unset_fields()
    if unset:
        raise ConfigError(f"Template '{usage.value}' still has unset options: {unset}")
    return resolved.seal()


class ResolvedForm:
    """Read-only view of every resolved template of a form."""

    def __init__(
        self,
        schema: FormSchema,
        field_templates: Mapping[str, Mapping[TemplateUsage, Template]],
        form_templates: Mapping[TemplateUsage, Template],
    ):
        self.schema = schema
        self._field_templates = MappingProxyType(
            {name: MappingProxyType(dict(templates)) for name, templates in field_templates.items()}
        )
        self._form_templates = MappingProxyType(dict(form_templates))

    @property
    def name(self) -> str:
        return self.schema.name

    def template(self, field: str | None, usage: TemplateUsage) -> Template:
        """Resolved template of a field, or of the form itself when field is None."""
        if field is None:
            return self._form_templates[usage]
        templates = self._field_templates.get(field)
        if templates is None:
            raise ResolutionError(
                f"Form '{self.name}' has no field '{field}'. Available: {list(self._field_templates)}"
            )
        return templates[usage]

    def prepare(
        self,
        field: str | None,
        usage: TemplateUsage,
        rng: RandomSource | None = None,
    ) -> RenderRequest:
        """Select a pattern and bundle it with options and matching terms."""
        template = self.template(field, usage)
        if field is None:
            return RenderRequest(
                form=self.name,
                field=None,
                usage=usage,
                pattern=template.select_pattern(rng),
                options=template.options,
                description=self.schema.display_name,
            )

        element = self.schema.element(field)
        return RenderRequest(
            form=self.name,
            field=field,
            usage=usage,
            pattern=template.select_pattern(rng),
            options=template.options,
            description=element.display_name,
            terms=element.terms.alternatives if element.terms else (),
            optional=element.is_optional,
            numeric=element.metadata.numeric,
        )

    def render(
        self,
        field: str | None,
        usage: TemplateUsage,
        renderer: PatternRenderer,
        rng: RandomSource | None = None,
    ) -> str:
        """Prepare a request and hand it to an external pattern renderer."""
        return renderer.render(self.prepare(field, usage, rng))


class TemplateResolver:
    """Resolves every template of a form against a default table.

    Run once per schema at load time, before serving begins.
    """

    def __init__(self, config: FormConfiguration):
        self.config = config

    def resolve(self, schema: FormSchema) -> ResolvedForm:
        log = logger.bind(form=schema.name)

        form_templates = {
            usage: resolve_template(usage, config=self.config, form=schema) for usage in TemplateUsage
        }
        field_templates: dict[str, dict[TemplateUsage, Template]] = {}
        for name, element in schema.elements.items():
            field_templates[name] = {
                usage: resolve_template(usage, config=self.config, element=element, form=schema)
                for usage in TemplateUsage
            }
            declared = sorted(usage.value for usage in element.templates)
            log.debug(f"Resolved templates for field '{name}' (declared: {declared})")

        log.info(f"Resolved form '{schema.name}' with {len(field_templates)} field(s)")
        return ResolvedForm(schema, field_templates, form_templates)
