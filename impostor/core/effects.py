"""
Effects port for fire-and-forget feedback (haptics, confetti).

The session only requests effects; front ends decide how to perform them.
"""

from abc import ABC, abstractmethod
from typing import Sequence


class EffectsPort(ABC):
    """Receiver for effect requests emitted by the game session."""
    
    @abstractmethod
    def haptic_pulse(self, duration_ms: int) -> None:
        """
        Request a short vibration.
        
        Args:
            duration_ms: Pulse length in milliseconds
        """
        pass
    
    @abstractmethod
    def confetti(self, particle_count: int, spread: int, origin_y: float, colors: Sequence[str]) -> None:
        """
        Request a celebratory particle burst.
        
        Args:
            particle_count: Number of particles
            spread: Spread angle in degrees
            origin_y: Vertical origin as a fraction of the screen height
            colors: Particle colors as hex strings
        """
        pass


class NullEffects(EffectsPort):
    """Effects port that drops every request."""
    
    def haptic_pulse(self, duration_ms: int) -> None:
        pass
    
    def confetti(self, particle_count: int, spread: int, origin_y: float, colors: Sequence[str]) -> None:
        pass
