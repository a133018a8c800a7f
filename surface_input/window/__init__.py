"""Host window adapters."""

from surface_input.window.rendercanvas_source import (
    RenderCanvasEventSource,
    create_rendercanvas_source,
)

__all__ = ["RenderCanvasEventSource", "create_rendercanvas_source"]
