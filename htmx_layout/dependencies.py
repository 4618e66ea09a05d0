from functools import lru_cache
from typing import Sequence

from fastapi import Request, status
from fastapi.responses import (
    RedirectResponse as FastAPIRedirect,
    Response as FastAPIResponse,
)
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader
from starlette.background import BackgroundTask

from htmx_layout.config import RenderConfig, get_settings
from htmx_layout.decorators import RequestModelDecorator
from htmx_layout.exchange import StarletteExchange
from htmx_layout.log import configure_logging
from htmx_layout.renderer import FRAGMENT_HEADER, HtmxRenderer, create


@lru_cache
def get_templates() -> Jinja2Templates:
    settings = get_settings()
    env = Environment(
        loader=FileSystemLoader(settings.template_directory),
        autoescape=True,
        auto_reload=settings.env == "development",
    )
    return Jinja2Templates(env=env)


@lru_cache
def get_renderer() -> HtmxRenderer:
    settings = get_settings()
    configure_logging(settings)
    return create(
        get_templates(),
        RenderConfig.from_settings(settings, model_decorator=RequestModelDecorator()),
    )


def is_htmx_request(request: Request) -> bool:
    return bool(request.headers.get(FRAGMENT_HEADER))


def TemplateResponse(
    request: Request,
    names: str | Sequence[str],
    context: dict | None = None,
    status_code: int = 200,
    headers: dict | None = None,
    background: BackgroundTask | None = None,
    renderer: HtmxRenderer | None = None,
) -> FastAPIResponse:
    """Render templates for a route, wrapped in the layout unless HTMX asked for a fragment."""
    if isinstance(names, str):
        names = [names]

    exchange = StarletteExchange(request)
    (renderer or get_renderer()).render(exchange, context, names, status_code)
    return exchange.to_response(headers=headers, background=background)


def RedirectResponseX(
    url: str,
    status_code: int = status.HTTP_307_TEMPORARY_REDIRECT,
    headers: dict[str, str] | None = None,
    request: Request | None = None,
):
    """Redirect that HTMX can follow.

    HTMX requests get a 200 carrying an ``HX-Redirect`` header. Other
    requests get a plain ``RedirectResponse``.
    """
    if request is not None and is_htmx_request(request):
        return FastAPIResponse(
            status_code=200,
            headers={"HX-Redirect": str(url), **(headers or {})},
        )
    return FastAPIRedirect(url=url, status_code=status_code, headers=headers)
