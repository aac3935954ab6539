"""
Web interface module for playing from a browser.
"""

from .event_emitter import EventEmitter
from .game_server import GameServer

__all__ = ['EventEmitter', 'GameServer']
