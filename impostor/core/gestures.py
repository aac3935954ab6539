"""
Reveal gesture controller: turns press/release and drag-end signals into
reveal/hide commands on the game session.
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .game_engine import GameSession


# Drag thresholds (pixels, pixels/second). Negative y is upward.
# Revealing takes less motion than hiding.
REVEAL_OFFSET_Y = -50
REVEAL_VELOCITY_Y = -500
HIDE_OFFSET_Y = 30
HIDE_VELOCITY_Y = 500


class GestureOutcome(Enum):
    """Result of interpreting a drag."""
    REVEALED = "revealed"
    HIDDEN = "hidden"
    IGNORED = "ignored"


def classify_drag(offset_y: float, velocity_y: float) -> GestureOutcome:
    """
    Classify a finished vertical drag.
    
    Upward motion past either threshold reveals; otherwise downward motion
    past either threshold hides; anything smaller is ignored.
    """
    if offset_y < REVEAL_OFFSET_Y or velocity_y < REVEAL_VELOCITY_Y:
        return GestureOutcome.REVEALED
    if offset_y > HIDE_OFFSET_Y or velocity_y > HIDE_VELOCITY_Y:
        return GestureOutcome.HIDDEN
    return GestureOutcome.IGNORED


class RevealGestureController:
    """Feeds hold-to-view and drag-to-reveal gestures into a GameSession."""
    
    def __init__(self, session: 'GameSession'):
        self.session = session
    
    def press(self) -> bool:
        """Pointer engaged on the hold-to-view control."""
        applied = self.session.set_pressed(True)
        if applied:
            self.session.effects.haptic_pulse(self.session.config.hold_haptic_ms)
        return applied
    
    def release(self) -> bool:
        """Pointer released or left the hold-to-view control."""
        return self.session.set_pressed(False)
    
    def drag_end(self, offset_y: float, velocity_y: float) -> GestureOutcome:
        """
        Apply a finished drag to the session's revealed flag.
        
        Args:
            offset_y: Net vertical displacement of the drag
            velocity_y: Signed vertical speed at release
            
        Returns:
            The outcome actually applied (IGNORED outside a round)
        """
        outcome = classify_drag(offset_y, velocity_y)
        if outcome == GestureOutcome.IGNORED:
            return outcome
        
        config = self.session.config
        if outcome == GestureOutcome.REVEALED:
            applied = self.session.set_revealed(True)
            duration_ms = config.drag_reveal_haptic_ms
        else:
            applied = self.session.set_revealed(False)
            duration_ms = config.drag_hide_haptic_ms
        
        if not applied:
            return GestureOutcome.IGNORED
        
        self.session.effects.haptic_pulse(duration_ms)
        return outcome
