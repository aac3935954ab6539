"""
Core game engine components: roster, assignment, round session and gestures.
"""

from .player import Player, default_players, generate_player_id
from .roster import Roster, MIN_PLAYERS
from .roles import GameMode, Role, RoundAssignment
from .assignment import assign_round, pick_word, pick_classic_impostors, pick_uncertainty_impostors
from .effects import EffectsPort, NullEffects
from .exceptions import AssignmentError, InvalidRosterSizeError, EmptyWordListError
from .game_engine import GameSession, GamePhase
from .gestures import RevealGestureController, GestureOutcome, classify_drag

__all__ = [
    'Player',
    'default_players',
    'generate_player_id',
    'Roster',
    'MIN_PLAYERS',
    'GameMode',
    'Role',
    'RoundAssignment',
    'assign_round',
    'pick_word',
    'pick_classic_impostors',
    'pick_uncertainty_impostors',
    'EffectsPort',
    'NullEffects',
    'AssignmentError',
    'InvalidRosterSizeError',
    'EmptyWordListError',
    'GameSession',
    'GamePhase',
    'RevealGestureController',
    'GestureOutcome',
    'classify_drag',
]
