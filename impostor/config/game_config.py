"""
Game configuration and constants.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class GameConfig:
    """Configuration for game parameters."""
    
    # Game settings
    game_mode: str = "classic"  # Options: "classic" or "uncertainty"
    random_seed: Optional[int] = None  # Seed for reproducible rounds and shuffles
    words_file: Optional[str] = None  # YAML list or one word per line; None uses the built-in list
    reset_round_on_reset: bool = False  # Whether "back to start" also resets the round counter to 1
    
    # Haptic pulse durations (milliseconds)
    start_round_haptic_ms: int = 50
    shuffle_haptic_ms: int = 20
    hold_haptic_ms: int = 10
    drag_reveal_haptic_ms: int = 10
    drag_hide_haptic_ms: int = 5
    
    # Round completion confetti
    confetti_particle_count: int = 150
    confetti_spread: int = 70
    confetti_origin_y: float = 0.6
    confetti_colors: List[str] = field(default_factory=lambda: ["#dc2626", "#ef4444", "#000000"])
    
    # Web adapter
    host: str = "127.0.0.1"
    port: int = 5000


# Default configuration instance
default_config = GameConfig()
