"""
Ordered player roster with the minimum-player invariant.
"""

import random
from typing import Iterator, List, Optional

from .player import Player, default_players, generate_player_id


MIN_PLAYERS = 3


class Roster:
    """
    Ordered list of players. Insertion order is turn order.
    
    Removals that would leave fewer than MIN_PLAYERS players are ignored,
    so a roster never drops below the minimum once it has reached it.
    """
    
    def __init__(self, players: Optional[List[Player]] = None, rng: Optional[random.Random] = None):
        self.players: List[Player] = list(players) if players is not None else default_players()
        self.rng = rng or random.Random()
    
    @classmethod
    def default(cls, rng: Optional[random.Random] = None) -> "Roster":
        """Create a roster seeded with the three default players."""
        return cls(default_players(), rng=rng)
    
    def __len__(self) -> int:
        return len(self.players)
    
    def __iter__(self) -> Iterator[Player]:
        return iter(self.players)
    
    def __getitem__(self, index: int) -> Player:
        return self.players[index]
    
    def ids(self) -> List[str]:
        """Get player identifiers in turn order."""
        return [p.id for p in self.players]
    
    def names(self) -> List[str]:
        """Get player names in turn order."""
        return [p.name for p in self.players]
    
    def get_player(self, player_id: str) -> Optional[Player]:
        """Get player by identifier."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None
    
    def add(self, name: str) -> Optional[Player]:
        """
        Append a player with the trimmed name.
        Returns the new player, or None if the trimmed name is empty.
        """
        name = name.strip()
        if not name:
            return None
        
        player = Player(id=generate_player_id(self.rng, taken=set(self.ids())), name=name)
        self.players.append(player)
        return player
    
    def remove(self, player_id: str) -> bool:
        """
        Remove a player by identifier.
        Returns False when the roster is at the minimum or the id is unknown.
        """
        if len(self.players) <= MIN_PLAYERS:
            return False
        
        player = self.get_player(player_id)
        if player is None:
            return False
        
        self.players.remove(player)
        return True
    
    def rename(self, player_id: str, name: str) -> bool:
        """Rename a player in place. The name is stored verbatim."""
        player = self.get_player(player_id)
        if player is None:
            return False
        
        player.rename(name)
        return True
    
    def shuffle(self) -> None:
        """Reorder players with a uniform random permutation."""
        self.rng.shuffle(self.players)
