from htmx_layout.config import RenderConfig, Settings, get_settings
from htmx_layout.decorators import ModelDecorator, RequestModelDecorator
from htmx_layout.engine import JinjaTemplateEngine, TemplateEngine
from htmx_layout.exceptions import (
    ConfigurationError,
    HtmxLayoutError,
    TemplateExecutionError,
)
from htmx_layout.exchange import HTML_MEDIA_TYPE, HttpExchange, StarletteExchange
from htmx_layout.renderer import FRAGMENT_HEADER, HtmxRenderer, create

__all__ = [
    "ConfigurationError",
    "FRAGMENT_HEADER",
    "HTML_MEDIA_TYPE",
    "HtmxLayoutError",
    "HtmxRenderer",
    "HttpExchange",
    "JinjaTemplateEngine",
    "ModelDecorator",
    "RenderConfig",
    "RequestModelDecorator",
    "Settings",
    "StarletteExchange",
    "TemplateEngine",
    "TemplateExecutionError",
    "create",
    "get_settings",
]
