"""
Render pipeline — before hook, serialization, after hook.

Why:
    Subclasses rely on the fixed order: the before hook may still mutate the
    builder, and the after hook only observes the exact string returned.
"""

from __future__ import annotations

import logging

import pytest

from markupkit.builders.tag import TagBuilder
from markupkit.components.base import ComponentBase

from conftest import CountingComponent


def test_hooks_run_in_order_with_returned_string(component: CountingComponent) -> None:
    component.id("c1")

    result = component.render()

    assert [name for name, _ in component.events] == ["before", "render", "after"]
    assert component.events[1][1] == result
    assert component.events[2][1] == result


def test_before_hook_can_mutate_builder() -> None:
    class Stamped(ComponentBase):
        def _create_tag_builder(self) -> TagBuilder:
            return TagBuilder("section")

        def _render_before(self) -> None:
            self.class_("stamped")

    assert Stamped().render() == '<section class="stamped"></section>'


def test_after_hook_cannot_change_result() -> None:
    class Meddling(ComponentBase):
        def _create_tag_builder(self) -> TagBuilder:
            return TagBuilder("p")

        def _render_after(self, result: str) -> None:
            self.class_("late")

    component = Meddling()

    assert component.render() == "<p></p>"


def test_default_after_hook_writes_trace(component: CountingComponent, caplog: pytest.LogCaptureFixture) -> None:
    component.id("traced")

    with caplog.at_level(logging.DEBUG, logger="markupkit.trace"):
        html = component.render()

    records = [r for r in caplog.records if r.name == "markupkit.trace"]
    assert len(records) == 1
    assert "CountingComponent" in records[0].getMessage()
    assert html in records[0].getMessage()


def test_trace_respects_configured_logger_and_level(
    component: CountingComponent,
    caplog: pytest.LogCaptureFixture,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("MARKUPKIT_TRACE_LOG", "app.render")
    monkeypatch.setenv("MARKUPKIT_TRACE_LEVEL", "INFO")

    with caplog.at_level(logging.INFO, logger="app.render"):
        component.render()

    records = [r for r in caplog.records if r.name == "app.render"]
    assert len(records) == 1
    assert records[0].levelno == logging.INFO


def test_no_trace_when_logger_disabled(component: CountingComponent, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="markupkit.trace"):
        component.render()

    assert not [r for r in caplog.records if r.name == "markupkit.trace"]
