"""Input translation runtime modules."""

from surface_input.input.click_synthesizer import ClickSynthesizer
from surface_input.input.input_controller import SurfaceInputController
from surface_input.input.state import ButtonState, InputState

__all__ = ["ButtonState", "ClickSynthesizer", "InputState", "SurfaceInputController"]
