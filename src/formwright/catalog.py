"""High-level API: load form definitions and resolve them once.

    from formwright import FormCatalog

    catalog = FormCatalog.from_yaml("examples/sandwich/formwright.yaml")
    request = catalog.form("sandwich").prepare("bread", TemplateUsage.PROMPT)

Loading is the load-time phase: schemas are built and every template is
resolved and sealed. The catalog is read-only afterwards and can serve many
sessions at once.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from formwright.config.builder import build_configuration, build_schemas
from formwright.config.loader import ConfigLoader
from formwright.config.models import FormwrightConfig
from formwright.core.defaults import FormConfiguration
from formwright.core.errors import ResolutionError
from formwright.core.interfaces import TermGenerator
from formwright.core.language import generate_terms
from formwright.core.resolution import ResolvedForm, TemplateResolver
from formwright.core.schema import FormSchema

logger = logging.getLogger(__name__)


class FormCatalog:
    """Resolved forms sharing one default template table.

    Example:
        >>> catalog = FormCatalog.from_schemas([schema])
        >>> catalog.form("sandwich").template("bread", TemplateUsage.PROMPT).is_sealed
        True
    """

    def __init__(self, configuration: FormConfiguration, forms: Mapping[str, ResolvedForm]):
        self.configuration = configuration
        self._forms = MappingProxyType(dict(forms))

    @classmethod
    def from_schemas(
        cls,
        schemas: list[FormSchema],
        configuration: FormConfiguration | None = None,
    ) -> "FormCatalog":
        """Resolve schemas registered in code."""
        configuration = configuration or FormConfiguration.standard()
        resolver = TemplateResolver(configuration)
        return cls(configuration, {schema.name: resolver.resolve(schema) for schema in schemas})

    @classmethod
    def from_config(
        cls,
        config: FormwrightConfig,
        generator: TermGenerator = generate_terms,
    ) -> "FormCatalog":
        """Build and resolve every form of a validated configuration."""
        configuration = build_configuration(config)
        schemas = build_schemas(config, generator)
        return cls.from_schemas(list(schemas.values()), configuration)

    @classmethod
    def from_yaml(
        cls,
        path: str | Path,
        generator: TermGenerator = generate_terms,
    ) -> "FormCatalog":
        """Load a YAML file or directory and resolve every form in it."""
        catalog = cls.from_config(ConfigLoader.load(path), generator)
        logger.info(f"Catalog ready with forms: {catalog.names}")
        return catalog

    @property
    def names(self) -> list[str]:
        return list(self._forms)

    def form(self, name: str) -> ResolvedForm:
        try:
            return self._forms[name]
        except KeyError:
            raise ResolutionError(f"Unknown form '{name}'. Available: {self.names}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._forms

    def __len__(self) -> int:
        return len(self._forms)
