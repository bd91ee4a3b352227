"""Shared fixtures: fast settings, fake Playwright objects, mock HTTP origins."""
import httpx
import pytest

from vidextract.core.config import Settings


@pytest.fixture
def fast_settings(tmp_path):
    """Settings with every wait collapsed to zero."""
    return Settings(
        static_root=str(tmp_path / "no-such-dir"),
        settle_delay=0,
        tab_delay=0,
        scroll_delay=0,
        final_delay=0,
        static_fetch_timeout=5,
    )


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True)


class FakeResponse:
    def __init__(self, url):
        self.url = url


class FakeMouse:
    def __init__(self, page):
        self.page = page
        self.wheels = []

    async def wheel(self, delta_x, delta_y):
        self.page.maybe_fail("mouse")
        self.wheels.append((delta_x, delta_y))


class FakePage:
    """Just enough of ``playwright.async_api.Page`` for the browser stage."""

    def __init__(self, html="", network_urls=(), playback_urls=(), tab_found=True, fail_on=None):
        self.html = html
        self.network_urls = list(network_urls)
        self.playback_urls = list(playback_urls)
        self.tab_found = tab_found
        self.fail_on = fail_on
        self.handlers = {}
        self.goto_calls = []
        self.evaluate_calls = []
        self.waits = []
        self.mouse = FakeMouse(self)

    def maybe_fail(self, step):
        if self.fail_on == step:
            raise RuntimeError(f"forced failure in {step}")

    def on(self, event, handler):
        self.handlers.setdefault(event, []).append(handler)

    def _emit_responses(self, urls):
        for url in urls:
            for handler in self.handlers.get("response", []):
                handler(FakeResponse(url))

    async def goto(self, url, **kwargs):
        self.goto_calls.append((url, kwargs))
        self.maybe_fail("goto")
        self._emit_responses(self.network_urls)

    async def wait_for_timeout(self, ms):
        self.maybe_fail("wait")
        self.waits.append(ms)

    async def evaluate(self, script, arg=None):
        self.evaluate_calls.append((script, arg))
        self.maybe_fail("evaluate")
        if arg and "keywords" in arg:
            self._emit_responses(self.playback_urls)
            return {"clicked": 1, "played": 1}
        return self.tab_found

    async def content(self):
        self.maybe_fail("content")
        return self.html


class FakeContext:
    def __init__(self, page):
        self.page = page
        self.init_scripts = []

    async def add_init_script(self, script):
        self.init_scripts.append(script)

    async def new_page(self):
        self.page.maybe_fail("new_page")
        return self.page


class FakeBrowser:
    def __init__(self, page):
        self.page = page
        self.context = FakeContext(page)
        self.context_kwargs = None
        self.closed = False

    async def new_context(self, **kwargs):
        self.page.maybe_fail("new_context")
        self.context_kwargs = kwargs
        return self.context

    async def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self, page):
        self.page = page
        self.launch_kwargs = None
        self.browsers = []

    async def launch(self, **kwargs):
        self.page.maybe_fail("launch")
        self.launch_kwargs = kwargs
        browser = FakeBrowser(self.page)
        self.browsers.append(browser)
        return browser


class FakePlaywright:
    """Stands in for the ``async_playwright()`` context manager."""

    def __init__(self, page):
        self.chromium = FakeChromium(page)
        self.entered = 0
        self.exited = 0

    def __call__(self):
        return self

    async def __aenter__(self):
        self.entered += 1
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.exited += 1
        return False

    @property
    def browser(self):
        return self.chromium.browsers[-1]


@pytest.fixture
def fake_playwright():
    def build(**page_kwargs):
        return FakePlaywright(FakePage(**page_kwargs))
    return build


class CountingStage:
    """Extraction stage stub that records how often it ran."""

    def __init__(self, urls=(), error=None):
        self.urls = list(urls)
        self.error = error
        self.calls = 0

    async def extract(self, page_url):
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.urls)
