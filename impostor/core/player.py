"""
Player class representing a participant sharing the device.
"""

import random
import string
from dataclasses import dataclass
from typing import Collection, List


DEFAULT_PLAYER_NAMES = ["Jugador 1", "Jugador 2", "Jugador 3"]

ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 9


@dataclass
class Player:
    """Represents a player in the roster."""
    id: str
    name: str
    
    def __str__(self) -> str:
        return f"{self.name} ({self.id})"
    
    def rename(self, name: str) -> None:
        """Replace the display name as given (no trimming)."""
        self.name = name


def generate_player_id(rng: random.Random, taken: Collection[str] = ()) -> str:
    """
    Generate a short base-36 identifier not present in `taken`.
    
    Args:
        rng: Random source used for the draw
        taken: Identifiers already in use
        
    Returns:
        A fresh 9-character identifier
    """
    while True:
        player_id = "".join(rng.choice(ID_ALPHABET) for _ in range(ID_LENGTH))
        if player_id not in taken:
            return player_id


def default_players() -> List[Player]:
    """Get the three-player seed used at bootstrap and on reset."""
    return [
        Player(id=str(number), name=name)
        for number, name in enumerate(DEFAULT_PLAYER_NAMES, start=1)
    ]
