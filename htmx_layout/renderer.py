"""Render named templates either as HTMX fragments or wrapped in a layout.

Requests carrying a non-empty ``HX-Request`` header get the rendered
templates as-is. Every other request gets them embedded in the layout
template under the configured content variable.
"""

import logging
from http import HTTPStatus
from typing import Any, Sequence

from markupsafe import Markup

from htmx_layout.config import RenderConfig
from htmx_layout.engine import TemplateEngine, as_engine
from htmx_layout.exceptions import ConfigurationError, TemplateExecutionError
from htmx_layout.exchange import HTML_MEDIA_TYPE, HttpExchange

logger = logging.getLogger(__name__)

FRAGMENT_HEADER = "HX-Request"


class HtmxRenderer:
    """Shared, read-only renderer bound to a template set and a config.

    Holds no per-request state; all request data travels through the
    ``exchange`` and ``model`` arguments of each call.
    """

    def __init__(self, engine: TemplateEngine, config: RenderConfig):
        self.engine = engine
        self.config = config

    @staticmethod
    def is_fragment_request(exchange: HttpExchange) -> bool:
        return bool(exchange.get_header(FRAGMENT_HEADER))

    def render(
        self,
        exchange: HttpExchange,
        model: dict[str, Any] | None,
        template_names: Sequence[str],
        status: int = HTTPStatus.OK,
    ) -> None:
        """Render ``template_names`` in order and write the result.

        The status is set before anything else so the client sees it even
        when rendering fails afterwards.
        """
        exchange.set_status(status)
        is_fragment = self.is_fragment_request(exchange)

        if model is None:
            model = {}

        if self.config.model_decorator is not None:
            self.config.model_decorator.decorate_model(exchange, model)

        content = "".join(self._execute(name, model) for name in template_names)

        if is_fragment:
            logger.debug(f"Rendering {list(template_names)} as fragment")
            exchange.write(content, HTML_MEDIA_TYPE)
            return

        logger.debug(
            f"Rendering {list(template_names)} in layout {self.config.layout_template_name!r}"
        )
        # Already escaped by the content templates, must not be escaped again.
        model[self.config.content_variable_key] = Markup(content)
        exchange.write(self._execute(self.config.layout_template_name, model))

    def render_default(
        self, exchange: HttpExchange, model: dict[str, Any] | None, *template_names: str
    ) -> None:
        self.render(exchange, model, template_names, HTTPStatus.OK)

    def render_template(
        self, exchange: HttpExchange, template_name: str, model: dict[str, Any] | None
    ) -> None:
        self.render(exchange, model, [template_name], HTTPStatus.OK)

    def render_template_with_status(
        self,
        exchange: HttpExchange,
        template_name: str,
        model: dict[str, Any] | None,
        status: int,
    ) -> None:
        self.render(exchange, model, [template_name], status)

    def _execute(self, name: str, model: dict[str, Any]) -> str:
        try:
            return self.engine.execute(name, model)
        except TemplateExecutionError as e:
            if self.config.propagate_template_errors:
                raise
            logger.warning(f"Ignoring template error, using partial output: {e}")
            return e.partial_output


def create(template_set, config: RenderConfig | None = None) -> HtmxRenderer:
    """Build a renderer over a template set.

    ``template_set`` is a ``jinja2.Environment``, FastAPI's ``Jinja2Templates``
    or any ``TemplateEngine``. Without ``config`` the layout is ``"layout"``
    and content goes under ``"Content"``.
    """
    engine = as_engine(template_set)
    if config is None:
        config = RenderConfig()
    if not isinstance(config, RenderConfig):
        raise ConfigurationError(
            f"Expected a RenderConfig, got {type(config).__name__}"
        )

    if not config.layout_template_name:
        raise ConfigurationError("layout_template_name must not be empty")
    if not config.content_variable_key:
        raise ConfigurationError("content_variable_key must not be empty")

    decorator = config.model_decorator
    if decorator is not None and not callable(getattr(decorator, "decorate_model", None)):
        raise ConfigurationError(
            f"{type(decorator).__name__} does not implement decorate_model()"
        )

    return HtmxRenderer(engine, config)
