"""Tracked keyboard/pointer state."""

from __future__ import annotations

from dataclasses import dataclass, field

from surface_input.api.input_events import BUTTON_LEFT, BUTTON_MIDDLE, BUTTON_RIGHT


@dataclass(frozen=True, slots=True)
class ButtonState:
    """Per-button pointer-down flags."""

    left: bool = False
    middle: bool = False
    right: bool = False


@dataclass(slots=True)
class InputState:
    """Mutable state record owned by one input controller.

    ``key_down`` is sparse: a code missing from the mapping is not held.
    """

    alt_down: bool = False
    ctrl_down: bool = False
    left_down: bool = False
    middle_down: bool = False
    right_down: bool = False
    key_down: dict[int, bool] = field(default_factory=dict)
    enabled: bool = True

    @property
    def buttons(self) -> ButtonState:
        return ButtonState(left=self.left_down, middle=self.middle_down, right=self.right_down)

    def is_key_down(self, key_code: int) -> bool:
        return self.key_down.get(int(key_code), False)

    def set_key(self, key_code: int, is_down: bool) -> None:
        self.key_down[key_code] = is_down

    def set_button(self, button: int, is_down: bool) -> bool:
        """Update one button flag; return False for unknown identifiers."""
        if button == BUTTON_LEFT:
            self.left_down = is_down
        elif button == BUTTON_MIDDLE:
            self.middle_down = is_down
        elif button == BUTTON_RIGHT:
            self.right_down = is_down
        else:
            return False
        return True

    def release_on_double_click(self, button: int) -> None:
        # A double click ends any drag on the primary buttons.
        self.left_down = False
        self.right_down = False
        if button == BUTTON_MIDDLE:
            self.middle_down = False

    def clear(self) -> None:
        """Drop tracked modifiers, buttons and keys; ``enabled`` is kept."""
        self.alt_down = False
        self.ctrl_down = False
        self.left_down = False
        self.middle_down = False
        self.right_down = False
        self.key_down.clear()


__all__ = ["ButtonState", "InputState"]
