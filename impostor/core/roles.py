"""
Game modes, role definitions and the per-round assignment record.
"""

from enum import Enum
from typing import FrozenSet, List, Optional, Tuple
from dataclasses import dataclass, field


class GameMode(Enum):
    """How many impostors a round can have."""
    CLASSIC = "classic"  # Exactly one impostor
    UNCERTAINTY = "uncertainty"  # Secret count between 1 and N-1
    
    @classmethod
    def parse(cls, value) -> "GameMode":
        """Accept a GameMode or its string value (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown game mode: {value!r}. Must be one of: {valid}") from None


class Role(Enum):
    """What a player sees on their card."""
    WORD_HOLDER = "word_holder"
    IMPOSTOR = "impostor"


@dataclass(frozen=True)
class RoundAssignment:
    """Secret word and impostor seats for one round."""
    word: str
    impostor_order: Tuple[int, ...]  # Positions in the order they were drawn
    impostor_positions: FrozenSet[int] = field(init=False)
    
    def __post_init__(self):
        object.__setattr__(self, "impostor_positions", frozenset(self.impostor_order))
    
    def __str__(self) -> str:
        return f"word={self.word!r} impostors={sorted(self.impostor_positions)}"
    
    @property
    def impostor_count(self) -> int:
        """Number of impostors this round."""
        return len(self.impostor_positions)
    
    def role_for(self, position: int) -> Role:
        """Get the role of the player seated at `position`."""
        return Role.IMPOSTOR if position in self.impostor_positions else Role.WORD_HOLDER
    
    def word_for(self, position: int) -> Optional[str]:
        """Get the word shown to `position`, or None for an impostor."""
        if self.role_for(position) == Role.IMPOSTOR:
            return None
        return self.word
    
    def word_holders(self, roster_size: int) -> List[int]:
        """Get the positions that receive the word."""
        return [i for i in range(roster_size) if i not in self.impostor_positions]
