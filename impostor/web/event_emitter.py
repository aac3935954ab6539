"""
Event emitter that fans session effects and state updates out to listeners.
"""

from typing import Callable, Dict, Any, List, Sequence
from threading import Lock

from ..core.effects import EffectsPort


Listener = Callable[[str, Dict[str, Any]], None]


class EventEmitter(EffectsPort):
    """Effects port that forwards every request to registered listeners."""
    
    def __init__(self):
        self._listeners: List[Listener] = []
        self._lock = Lock()
    
    def register_listener(self, listener: Listener) -> None:
        """Register a callback receiving (event_type, data)."""
        with self._lock:
            self._listeners.append(listener)
    
    def unregister_listener(self, listener: Listener) -> None:
        """Remove a previously registered callback."""
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)
    
    def _emit(self, event_type: str, data: Dict[str, Any]) -> None:
        """Emit an event to every listener."""
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(event_type, data)
            except Exception as e:
                # Don't let a broken listener break the game
                print(f"Error delivering {event_type} event: {e}")
    
    def haptic_pulse(self, duration_ms: int) -> None:
        """Emit haptic pulse request."""
        self._emit("haptic_pulse", {
            "duration_ms": duration_ms
        })
    
    def confetti(self, particle_count: int, spread: int, origin_y: float, colors: Sequence[str]) -> None:
        """Emit confetti burst request."""
        self._emit("confetti", {
            "particle_count": particle_count,
            "spread": spread,
            "origin": {"y": origin_y},
            "colors": list(colors)
        })
    
    def emit_game_state_update(self, game_state: Dict[str, Any]) -> None:
        """Emit game state update event."""
        self._emit("game_state_update", {
            "game_state": game_state
        })
