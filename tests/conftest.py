import pytest

from pagecheck import config
from pagecheck.audit.types import LayoutMetrics

GH_VARS = ("GITHUB_STEP_SUMMARY", "GITHUB_EVENT_NAME", "GITHUB_REF")
PC_VARS = (
    "PAGECHECK_WIDTHS",
    "PAGECHECK_HEIGHT",
    "PAGECHECK_WAIT_UNTIL",
    "PAGECHECK_NAV_TIMEOUT_MS",
    "PAGECHECK_CONCURRENCY",
    "PAGECHECK_LANG",
)

GOOD_DESCRIPTION = "A small landing page used to exercise every markup rule of the checker."

GOOD_HTML = f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Landing</title>
  <meta name="description" content="{GOOD_DESCRIPTION}">
</head>
<body>
  <h1>Welcome</h1>
  <img src="logo.png" alt="logo">
  <a href="/about">About</a>
</body>
</html>
"""


@pytest.fixture(autouse=True)
def reset_pagecheck_state(monkeypatch):
    """Isolate every test from CI and pagecheck environment variables."""
    for var in GH_VARS + PC_VARS:
        monkeypatch.delenv(var, raising=False)
    config.reload()
    yield
    config.reload()


@pytest.fixture
def good_html():
    return GOOD_HTML


@pytest.fixture
def site(tmp_path):
    """Write index.html into a temp dir and return the dir."""
    def _write(html=GOOD_HTML, name="index.html"):
        p = tmp_path / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(html, encoding="utf-8")
        return tmp_path
    return _write


class FakeMeasurer:
    """Stand-in for the browser: returns canned metrics per width and records calls."""

    def __init__(self, scroll=None, inner=None, errors=None):
        self.scroll = scroll or {}
        self.inner = inner or {}
        self.errors = errors or {}
        self.calls = []

    async def __call__(self, url, width):
        self.calls.append((url, width))
        if width in self.errors:
            raise self.errors[width]
        inner = self.inner.get(width, width)
        return LayoutMetrics(scroll_width=self.scroll.get(width, inner), inner_width=inner)


@pytest.fixture
def fake_measure():
    return FakeMeasurer
