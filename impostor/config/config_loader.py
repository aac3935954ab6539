"""
Configuration loader for YAML-based game configurations.
"""

import yaml
from dataclasses import replace
from pathlib import Path
from typing import Any, Optional

from .game_config import GameConfig, default_config
from ..core.roles import GameMode


# Fields that must be non-negative integers (bool is rejected even though it is an int)
INT_FIELDS = (
    "start_round_haptic_ms",
    "shuffle_haptic_ms",
    "hold_haptic_ms",
    "drag_reveal_haptic_ms",
    "drag_hide_haptic_ms",
    "confetti_particle_count",
    "confetti_spread",
    "port",
)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(config: GameConfig) -> GameConfig:
    """
    Check field types and normalize the game mode.
    
    Args:
        config: Configuration to check (game_mode is rewritten to its canonical value)
        
    Returns:
        The same config
        
    Raises:
        ValueError: If a field has the wrong type or an unknown game mode
    """
    config.game_mode = GameMode.parse(config.game_mode).value
    
    for name in INT_FIELDS:
        value = getattr(config, name)
        if not _is_int(value) or value < 0:
            raise ValueError(f"Config key '{name}' must be a non-negative integer, got {value!r}")
    
    origin_y = config.confetti_origin_y
    if not (_is_int(origin_y) or isinstance(origin_y, float)) or not 0 <= origin_y <= 1:
        raise ValueError(f"Config key 'confetti_origin_y' must be a number between 0 and 1, got {origin_y!r}")
    
    colors = config.confetti_colors
    if not isinstance(colors, list) or not all(isinstance(c, str) for c in colors):
        raise ValueError(f"Config key 'confetti_colors' must be a list of color strings, got {colors!r}")
    
    if not isinstance(config.reset_round_on_reset, bool):
        raise ValueError(f"Config key 'reset_round_on_reset' must be true or false, got {config.reset_round_on_reset!r}")
    
    if config.random_seed is not None and not _is_int(config.random_seed):
        raise ValueError(f"Config key 'random_seed' must be an integer, got {config.random_seed!r}")
    
    for name in ("host", "words_file"):
        value = getattr(config, name)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"Config key '{name}' must be a string, got {value!r}")
    
    return config


def load_config_from_yaml(config_path: str) -> GameConfig:
    """
    Load game configuration from a YAML file.
    
    Args:
        config_path: Path to the YAML configuration file
        
    Returns:
        GameConfig instance with values from YAML file
        
    Raises:
        FileNotFoundError: If the config file doesn't exist
        yaml.YAMLError: If the YAML file is invalid
        ValueError: If a value has the wrong type or game_mode is not a known mode
    """
    config_file = Path(config_path)
    
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    with open(config_file, 'r') as f:
        config_dict = yaml.safe_load(f)
    
    if config_dict is None:
        return replace(default_config)
    
    # Create config from dict, using defaults for missing values
    config = GameConfig()
    
    # Update config with values from YAML
    for key, value in config_dict.items():
        if hasattr(config, key):
            setattr(config, key, value)
        else:
            # Warn about unknown keys but don't fail
            print(f"Warning: Unknown config key '{key}' in YAML file")
    
    return validate_config(config)


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load configuration from YAML file or return a copy of the default.
    
    Args:
        config_path: Optional path to YAML config file. If None, returns default config.
        
    Returns:
        GameConfig instance
    """
    if config_path is None:
        return replace(default_config)
    
    return load_config_from_yaml(config_path)
