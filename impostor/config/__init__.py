"""Game configuration module."""

from .game_config import GameConfig, default_config
from .config_loader import load_config, load_config_from_yaml, validate_config
from .words import WORDS, load_words, get_words

__all__ = ['GameConfig', 'default_config', 'load_config', 'load_config_from_yaml', 'validate_config', 'WORDS', 'load_words', 'get_words']
