"""Surface-relative coordinate normalization."""

from __future__ import annotations

from surface_input.api.input_events import RawPointerEvent, SurfaceElement


def element_offset(element: SurfaceElement | None) -> tuple[float, float]:
    """Sum offsets along the offset-parent chain, starting element included."""
    total_left = 0.0
    total_top = 0.0
    while element is not None:
        total_left += element.offset_left
        total_top += element.offset_top
        element = element.offset_parent
    return total_left, total_top


def surface_coords(event: RawPointerEvent) -> tuple[int, int]:
    """Translate page coordinates into the target element's local space.

    Without a target element the event's own ``x``/``y`` are used unchanged.
    """
    if event.target is None:
        return int(event.x), int(event.y)
    left, top = element_offset(event.target)
    return int(event.page_x - left), int(event.page_y - top)


__all__ = ["element_offset", "surface_coords"]
