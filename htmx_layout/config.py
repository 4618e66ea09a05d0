from functools import lru_cache

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from htmx_layout.decorators import ModelDecorator

DEFAULT_LAYOUT_TEMPLATE_NAME = "layout"
DEFAULT_CONTENT_VARIABLE_KEY = "Content"


class Settings(BaseSettings):
    layout_template_name: str = DEFAULT_LAYOUT_TEMPLATE_NAME
    content_variable_key: str = DEFAULT_CONTENT_VARIABLE_KEY
    propagate_template_errors: bool = False
    template_directory: str = "templates"
    env: str = "production"
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="HTMX_", extra="ignore")


@lru_cache
def get_settings():
    return Settings()


class RenderConfig(BaseModel):
    """Construction-time options for a renderer.

    ``model_decorator`` is any object with a ``decorate_model(exchange, model)``
    method; it is called once per render, before any template runs.
    """

    layout_template_name: str = DEFAULT_LAYOUT_TEMPLATE_NAME
    content_variable_key: str = DEFAULT_CONTENT_VARIABLE_KEY
    model_decorator: ModelDecorator | None = None
    propagate_template_errors: bool = False

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @classmethod
    def from_settings(
        cls, settings: Settings, model_decorator: ModelDecorator | None = None
    ) -> "RenderConfig":
        return cls(
            layout_template_name=settings.layout_template_name,
            content_variable_key=settings.content_variable_key,
            model_decorator=model_decorator,
            propagate_template_errors=settings.propagate_template_errors,
        )
