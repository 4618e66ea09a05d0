from typing import Any, Mapping, Protocol, runtime_checkable

from fastapi.templating import Jinja2Templates
from jinja2 import Environment, TemplateNotFound

from htmx_layout.exceptions import ConfigurationError, TemplateExecutionError


@runtime_checkable
class TemplateEngine(Protocol):
    """Looks up a template by name and renders it against a model."""

    def execute(self, name: str, model: Mapping[str, Any]) -> str:
        """Render ``name`` and return the output.

        Raises ``TemplateExecutionError`` for unknown names and for failures
        inside the template, with the output produced so far attached.
        """
        ...


class JinjaTemplateEngine:
    def __init__(self, env: Environment):
        self.env = env

    def execute(self, name: str, model: Mapping[str, Any]) -> str:
        chunks: list[str] = []
        try:
            template = self.env.get_template(name)
            for chunk in template.generate(model):
                chunks.append(chunk)
        except TemplateNotFound as e:
            raise TemplateExecutionError(
                name, "", f"Template {name!r} not found"
            ) from e
        except Exception as e:
            raise TemplateExecutionError(
                name, "".join(chunks), f"Template {name!r} failed: {e}"
            ) from e

        return "".join(chunks)


def as_engine(template_set) -> TemplateEngine:
    """Wrap a Jinja environment (or FastAPI's ``Jinja2Templates``) as an engine."""
    if template_set is None:
        raise ConfigurationError("A template set is required")
    if isinstance(template_set, Jinja2Templates):
        return JinjaTemplateEngine(template_set.env)
    if isinstance(template_set, Environment):
        return JinjaTemplateEngine(template_set)
    if isinstance(template_set, TemplateEngine):
        return template_set
    raise ConfigurationError(
        f"Unsupported template set: {type(template_set).__name__}"
    )
