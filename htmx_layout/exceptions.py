"""Exceptions raised by htmx-layout."""


class HtmxLayoutError(Exception):
    """Base class for all htmx-layout errors."""


class ConfigurationError(HtmxLayoutError, ValueError):
    """Raised when a renderer is built with a missing or invalid template set or config."""


class TemplateExecutionError(HtmxLayoutError):
    """Raised when a named template cannot be found or fails while rendering.

    ``partial_output`` holds whatever the template produced before it failed,
    so callers that choose to carry on can still use it.
    """

    def __init__(self, template_name: str, partial_output: str = "", message: str = ""):
        self.template_name = template_name
        self.partial_output = partial_output
        super().__init__(message or f"Template {template_name!r} failed to render")
