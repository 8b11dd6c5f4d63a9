"""
FastAPI integration.

Why: Route handlers build components and want to return them directly
without calling `render()` and wrapping the string by hand.

Usage:
    @app.get("/toolbar/save", response_class=ComponentResponse)
    def save_button() -> ComponentResponse:
        return ComponentResponse(Button("Save").id("btn1").click("onSave()"))
"""

from __future__ import annotations

from typing import Any

from fastapi.responses import HTMLResponse


class ComponentResponse(HTMLResponse):
    """HTMLResponse that accepts a component (anything with `__html__`) or a string."""

    def render(self, content: Any) -> bytes:
        if hasattr(content, "__html__"):
            content = content.__html__()
        return super().render(content)
