import pytest
from jinja2 import DictLoader, Environment

from htmx_layout.config import get_settings
from htmx_layout.dependencies import get_renderer, get_templates

TEMPLATES = {
    "layout": """<html>
<body>
  <div>Menu Bar Here</div>
  <div>
    {{ Content }}
  </div>
  <div>Footer Here</div>
</body>
</html>""",
    "customlayout": """<html>
<body>
  <div>Menu Bar Here</div>
  <div>
    {{ CustomBody }}
  </div>
  <div>Footer Here</div>
</body>
</html>""",
    "hello": '<h1 id="greeting">Hello, {{ Name }}!</h1>',
    "bye": '<p id="farewell">Bye, {{ Name }}.</p>',
    "marker": "<span>{{ X }}</span>",
    "broken": "<p>before</p>{{ boom() }}<p>after</p>",
    "error": """{% if Message %}<div class="alert alert-danger" role="alert">{{ Message }}</div>{% endif %}""",
}


class RecordingExchange:
    """In-memory exchange that records what a renderer does with it."""

    def __init__(self, headers: dict | None = None):
        self.headers = {k.lower(): v for k, v in (headers or {}).items()}
        self.status = None
        self.status_calls = 0
        self.writes: list[tuple[str, str | None]] = []

    def get_header(self, name: str) -> str | None:
        return self.headers.get(name.lower())

    def set_status(self, status: int) -> None:
        self.status = status
        self.status_calls += 1

    def write(self, body: str, media_type: str | None = None) -> None:
        self.writes.append((body, media_type))

    @property
    def body(self) -> str:
        return "".join(body for body, _ in self.writes)


def boom():
    raise RuntimeError("boom")


@pytest.fixture
def jinja_env():
    return Environment(loader=DictLoader(TEMPLATES), autoescape=True)


@pytest.fixture
def page_exchange():
    return RecordingExchange()


@pytest.fixture
def fragment_exchange():
    return RecordingExchange({"HX-Request": "true"})


@pytest.fixture(autouse=True)
def clear_cached_settings():
    get_settings.cache_clear()
    get_templates.cache_clear()
    get_renderer.cache_clear()
    yield
    get_settings.cache_clear()
    get_templates.cache_clear()
    get_renderer.cache_clear()
