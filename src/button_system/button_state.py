"""
ButtonState - button snapshot with calculated edge-detection fields
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class ButtonState:
    """
    Snapshot of button states with automatic edge detection.

    Usage:
        state = ButtonState([True, False], [False, False])
        state.just_pressed    # [0]
    """
    for_button: List[bool]           # Current state: [button0, button1, ...]
    previous_state_of: List[bool]    # Previous state: [button0_prev, button1_prev, ...]

    # Calculated fields (not in constructor, computed automatically)
    was_changed: List[bool] = field(init=False)      # Per-button edge detection
    just_pressed: List[int] = field(init=False)      # Indices with a rising edge
    total_buttons_pressed: int = field(init=False)

    def __post_init__(self):
        if len(self.for_button) != len(self.previous_state_of):
            raise ValueError(
                f"State lists must have same length: "
                f"for_button={len(self.for_button)}, previous_state_of={len(self.previous_state_of)}"
            )

        self.was_changed = [
            previous != current
            for previous, current in zip(self.previous_state_of, self.for_button)
        ]
        self.just_pressed = [
            i for i, (changed, pressed) in enumerate(zip(self.was_changed, self.for_button))
            if changed and pressed
        ]
        self.total_buttons_pressed = sum(self.for_button)

    def __str__(self) -> str:
        pressed_buttons = [i for i, pressed in enumerate(self.for_button) if pressed]
        return (
            f"ButtonState("
            f"pressed={pressed_buttons}, "
            f"just_pressed={self.just_pressed}, "
            f"total_pressed={self.total_buttons_pressed}"
            f")"
        )
