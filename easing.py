# easing.py
"""
Hover-driven easing of the two card-wide scalars.

HoverEasing keeps the hover flag set by pointer signals and ramps the wave
front (the normalized radius inside which squares may light up) and the card
intensity (the overall opacity of the card) toward 1 while hovered and toward
0 otherwise, one fixed step per frame.
"""
import logging

from constants import EASING_SNAP_EPSILON

# --- Data Contracts ---
#
# class HoverEasing:
#   - __init__(self, fade_speed_factor: float, card_speed_factor: float):
#     - Inputs: per-frame step sizes for wave_front and intensity.
#   - step(self) -> None:
#     - Side Effects: Moves wave_front by +/- fade_speed_factor and intensity
#       by +/- card_speed_factor toward the hover target.
#     - Invariants: 0 <= wave_front <= 1 and 0 <= intensity <= 1.
#       step() reads `hovering` but never changes it.


def _ramp(value: float, delta: float, target: float) -> float:
    """Moves `value` toward `target` (0 or 1) by `delta`, clamped to [0, 1]."""
    if target >= 1.0:
        value = min(1.0, value + delta)
        if 1.0 - value < EASING_SNAP_EPSILON:
            value = 1.0
    else:
        value = max(0.0, value - delta)
        if value < EASING_SNAP_EPSILON:
            value = 0.0
    return value


class HoverEasing:
    """
    Tracks pointer hover and eases wave_front and intensity each frame.
    """
    def __init__(self, fade_speed_factor: float, card_speed_factor: float):
        self.fade_speed_factor = fade_speed_factor
        self.card_speed_factor = card_speed_factor
        self.hovering = False
        self.wave_front = 0.0
        self.intensity = 0.0

    def on_pointer_enter(self):
        self.hovering = True
        logging.debug("Pointer entered card; wave expanding.")

    def on_pointer_leave(self):
        self.hovering = False
        logging.debug("Pointer left card; wave contracting.")

    def step(self):
        """
        Advances both scalars by one frame.
        """
        target = 1.0 if self.hovering else 0.0
        self.wave_front = _ramp(self.wave_front, self.fade_speed_factor, target)
        self.intensity = _ramp(self.intensity, self.card_speed_factor, target)
