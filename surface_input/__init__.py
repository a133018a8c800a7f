"""Input translation layer for interactive rendering surfaces."""

from surface_input.api.input import create_canvas_input, create_surface_input

__all__ = ["create_canvas_input", "create_surface_input"]
