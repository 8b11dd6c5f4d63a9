"""
Pytest configuration for markupkit tests.

Why: Make the repository root importable for plain `pytest` runs and force
AnyIO to the asyncio backend for the ASGI response tests.
"""
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from markupkit.builders.tag import TagBuilder  # noqa: E402
from markupkit.components.base import ComponentBase  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _default_trace_env(monkeypatch: pytest.MonkeyPatch):
    """Keep tests independent of the developer's trace settings."""
    monkeypatch.delenv("MARKUPKIT_TRACE_LOG", raising=False)
    monkeypatch.delenv("MARKUPKIT_TRACE_LEVEL", raising=False)


class CountingComponent(ComponentBase):
    """Minimal <div> component that records builder factory calls and pipeline phases."""

    def __init__(self) -> None:
        super().__init__()
        self.factory_calls = 0
        self.events: list[tuple[str, str | None]] = []

    def _create_tag_builder(self) -> TagBuilder:
        self.factory_calls += 1
        return TagBuilder("div")

    def note(self, text: str) -> "CountingComponent":
        return self.add_attribute("title", text)

    def _render_before(self) -> None:
        self.events.append(("before", None))

    def _render(self) -> str:
        result = super()._render()
        self.events.append(("render", result))
        return result

    def _render_after(self, result: str) -> None:
        self.events.append(("after", result))
        super()._render_after(result)


@pytest.fixture
def component() -> CountingComponent:
    return CountingComponent()
