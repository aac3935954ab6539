"""
Core game engine managing the round session and phase transitions.
"""

import random
from enum import Enum
from typing import List, Optional, Dict, Any, Sequence, Union

from .assignment import assign_round
from .effects import EffectsPort, NullEffects
from .player import Player
from .roles import GameMode, Role, RoundAssignment
from .roster import Roster
from ..config.game_config import GameConfig, default_config
from ..config.words import get_words


class GamePhase(Enum):
    """Current session phase."""
    SETUP = "setup"
    PLAYING = "playing"
    FINISHED = "finished"


class GameSession:
    """
    Round session state machine.

    SETUP -> PLAYING -> FINISHED -> PLAYING (new round) -> ... and any phase
    back to SETUP via reset(). Commands that are not valid in the current
    phase are ignored and return a falsy value.
    """

    def __init__(self, config: GameConfig = default_config, words: Optional[Sequence[str]] = None,
                 rng: Optional[random.Random] = None, effects: Optional[EffectsPort] = None,
                 roster: Optional[Roster] = None):
        self.config = config
        self.words: List[str] = list(words) if words is not None else get_words(config.words_file)
        self.rng = rng or random.Random(config.random_seed)
        self.effects = effects or NullEffects()
        self.roster = roster if roster is not None else Roster.default(rng=self.rng)
        self.mode = GameMode.parse(config.game_mode)

        self.phase = GamePhase.SETUP
        self.round_number = 1
        self.current_player_index = 0
        self.revealed = False
        self.pressed = False
        self.assignment: Optional[RoundAssignment] = None
        # Players and mode as seated when the round started; the reveal reads these
        self.seating: List[Player] = []
        self.round_mode: Optional[GameMode] = None

        self.action_log: List[Dict[str, Any]] = []

    # --- Read model ---

    @property
    def is_playing(self) -> bool:
        return self.phase == GamePhase.PLAYING

    @property
    def current_player(self) -> Optional[Player]:
        """Player whose turn it is, or None outside a round."""
        if not self.is_playing:
            return None
        return self.roster[self.current_player_index]

    @property
    def is_last_player(self) -> bool:
        return self.is_playing and self.current_player_index == len(self.roster) - 1

    @property
    def secret_visible(self) -> bool:
        """Whether the current player's card is showing."""
        return self.is_playing and (self.pressed or self.revealed)

    def is_impostor(self, position: int) -> bool:
        """Check if the player at `position` is an impostor this round."""
        return self.assignment is not None and self.assignment.role_for(position) == Role.IMPOSTOR

    def current_card(self) -> Optional[Dict[str, Any]]:
        """
        Get what the current player's card shows.
        Returns None unless a round is in progress and the card is visible.
        """
        if not self.secret_visible or self.assignment is None:
            return None

        position = self.current_player_index
        return {
            "player": self.roster[position].name,
            "is_impostor": self.is_impostor(position),
            "word": self.assignment.word_for(position),
        }

    def results(self) -> Optional[Dict[str, Any]]:
        """
        Get the round reveal (word and impostors). Only available when FINISHED.
        Names come from the seating taken at round start, so roster edits on the
        finished screen do not change the reveal.
        """
        if self.phase != GamePhase.FINISHED or self.assignment is None:
            return None

        seating = self.seating
        return {
            "round": self.round_number,
            "mode": self.round_mode.value,
            "word": self.assignment.word,
            "impostors": [seating[i].name for i in self.assignment.impostor_order],
            "impostor_count": self.assignment.impostor_count,
            "word_holders": [seating[i].name for i in self.assignment.word_holders(len(seating))],
        }

    def public_state(self) -> Dict[str, Any]:
        """
        Snapshot safe to show to everyone around the device.
        The card itself is never included; see current_card().
        """
        state = {
            "phase": self.phase.value,
            "mode": self.mode.value,
            "round": self.round_number,
            "players": [{"id": p.id, "name": p.name} for p in self.roster],
            "current_player_index": self.current_player_index if self.is_playing else None,
            "current_player": self.current_player.name if self.is_playing else None,
            "is_last_player": self.is_last_player,
            "pressed": self.pressed,
            "revealed": self.revealed,
            "results": self.results(),
        }
        return state

    # --- Roster and mode commands (SETUP / FINISHED only) ---

    def add_player(self, name: str) -> Optional[Player]:
        """Add a player. Ignored while a round is in progress or for blank names."""
        if self._reject_during_round("add_player"):
            return None
        player = self.roster.add(name)
        if player:
            self._log_action("player_added", {"id": player.id, "name": player.name})
        return player

    def remove_player(self, player_id: str) -> bool:
        """Remove a player. Ignored mid-round or at the minimum roster size."""
        if self._reject_during_round("remove_player"):
            return False
        removed = self.roster.remove(player_id)
        if removed:
            self._log_action("player_removed", {"id": player_id})
        return removed

    def rename_player(self, player_id: str, name: str) -> bool:
        """Rename a player. Ignored mid-round."""
        if self._reject_during_round("rename_player"):
            return False
        renamed = self.roster.rename(player_id, name)
        if renamed:
            self._log_action("player_renamed", {"id": player_id, "name": name})
        return renamed

    def shuffle_players(self) -> bool:
        """Randomize turn order. Ignored mid-round."""
        if self._reject_during_round("shuffle_players"):
            return False
        self.roster.shuffle()
        self._log_action("players_shuffled", {"order": self.roster.ids()})
        self.effects.haptic_pulse(self.config.shuffle_haptic_ms)
        return True

    def set_mode(self, mode: Union[GameMode, str]) -> bool:
        """
        Select the game mode for the next rounds. Ignored mid-round.

        Raises:
            ValueError: If mode is not a known game mode
        """
        mode = GameMode.parse(mode)
        if self._reject_during_round("set_mode"):
            return False
        self.mode = mode
        self._log_action("mode_changed", {"mode": mode.value})
        return True

    # --- Round commands ---

    def start_round(self) -> bool:
        """
        Assign a word and impostors and hand the device to the first player.
        Callable from SETUP or FINISHED; a restart from FINISHED counts as a new round.
        """
        if self.is_playing:
            self._log_action("rejected", {"command": "start_round"})
            return False

        assignment = assign_round(len(self.roster), self.mode, self.words, self.rng)

        if self.phase == GamePhase.FINISHED:
            self.round_number += 1

        self.assignment = assignment
        self.seating = [Player(id=p.id, name=p.name) for p in self.roster]
        self.round_mode = self.mode
        self.current_player_index = 0
        self.phase = GamePhase.PLAYING
        self.revealed = False
        self.pressed = False

        self._log_action("round_start", {
            "players": len(self.roster),
            "mode": self.mode.value,
        })
        self.effects.haptic_pulse(self.config.start_round_haptic_ms)
        return True

    def advance(self) -> bool:
        """
        Pass the device to the next player, or finish the round after the last one.
        Each new turn starts hidden.
        """
        if not self.is_playing:
            self._log_action("rejected", {"command": "advance"})
            return False

        if self.current_player_index < len(self.roster) - 1:
            self.current_player_index += 1
            self.revealed = False
            self.pressed = False
            self._log_action("turn_start", {"player_index": self.current_player_index})
            return True

        self.phase = GamePhase.FINISHED
        self.revealed = False
        self.pressed = False
        self._log_action("round_finished", {
            "word": self.assignment.word,
            "impostors": list(self.assignment.impostor_order),
        })
        self.effects.confetti(
            particle_count=self.config.confetti_particle_count,
            spread=self.config.confetti_spread,
            origin_y=self.config.confetti_origin_y,
            colors=list(self.config.confetti_colors),
        )
        return True

    def set_pressed(self, pressed: bool) -> bool:
        """Mirror the hold-to-view press state. PLAYING only."""
        if not self.is_playing:
            return False
        self.pressed = bool(pressed)
        return True

    def set_revealed(self, revealed: bool) -> bool:
        """Set the drag-to-reveal state. PLAYING only."""
        if not self.is_playing:
            return False
        self.revealed = bool(revealed)
        return True

    def reset(self) -> bool:
        """Return to SETUP with the three default players. Valid from any phase."""
        self.phase = GamePhase.SETUP
        self.current_player_index = 0
        self.revealed = False
        self.pressed = False
        self.assignment = None
        self.seating = []
        self.round_mode = None
        self.roster = Roster.default(rng=self.rng)
        if self.config.reset_round_on_reset:
            self.round_number = 1
        self._log_action("reset", {"round": self.round_number})
        return True

    # --- Internals ---

    def _reject_during_round(self, command: str) -> bool:
        """Record and report a setup command issued while a round is in progress."""
        if self.is_playing:
            self._log_action("rejected", {"command": command})
            return True
        return False

    def _log_action(self, action_type: str, data: Dict[str, Any]) -> None:
        """Log a session action."""
        self.action_log.append({
            "type": action_type,
            "phase": self.phase.value,
            "round": self.round_number,
            "data": data
        })

    def get_game_summary(self) -> Dict[str, Any]:
        """Get a summary of the current session."""
        return {
            "phase": self.phase.value,
            "mode": self.mode.value,
            "round": self.round_number,
            "players": len(self.roster),
            "current_player_index": self.current_player_index if self.is_playing else None,
            "actions": len(self.action_log),
        }
