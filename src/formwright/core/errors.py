"""Core formwright errors."""


class FormwrightError(Exception):
    """Base class for all formwright errors."""

    pass


class ConfigError(FormwrightError):
    """Raised when form configuration is invalid."""


class InvalidPatternSetError(ConfigError):
    """Raised when a template is declared without any pattern."""

    pass


class InvalidRangeError(ConfigError):
    """Raised when numeric metadata has min greater than max."""

    pass


class DuplicateTemplateError(ConfigError):
    """Raised when a schema element declares two templates for one usage."""

    pass


class TemplateSealedError(FormwrightError):
    """Raised when a resolved template is modified after load time."""

    pass


class ResolutionError(FormwrightError):
    """Raised when a resolved form is asked for an unknown field."""

    pass
