from typing import Any, Protocol, runtime_checkable

from htmx_layout.exchange import HttpExchange


@runtime_checkable
class ModelDecorator(Protocol):
    """Hook that may add, overwrite or remove model keys before rendering.

    Called exactly once per render, synchronously, before any template runs,
    for both fragment and full-page requests.
    """

    def decorate_model(self, exchange: HttpExchange, model: dict[str, Any]) -> None: ...


class RequestModelDecorator:
    """Expose the current request to templates, as Starlette's template responses do."""

    def __init__(self, key: str = "request"):
        self.key = key

    def decorate_model(self, exchange: HttpExchange, model: dict[str, Any]) -> None:
        request = getattr(exchange, "request", None)
        if request is not None:
            model.setdefault(self.key, request)
