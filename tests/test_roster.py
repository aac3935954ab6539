"""
Tests for the player roster.
"""

import random
import pytest
from impostor.core import Roster, Player, MIN_PLAYERS, default_players, generate_player_id


def test_default_roster(roster):
    """Test that bootstrap seeds exactly three default players."""
    assert len(roster) == 3
    assert roster.ids() == ["1", "2", "3"]
    assert roster.names() == ["Jugador 1", "Jugador 2", "Jugador 3"]


def test_add_trims_name(roster):
    """Test that add stores the trimmed name at the end of the roster."""
    player = roster.add("  Ana  ")
    
    assert player is not None
    assert player.name == "Ana"
    assert roster[-1] is player
    assert len(roster) == 4


def test_add_blank_name_ignored(roster):
    """Test that blank names are rejected before a player is created."""
    for name in ["", "   ", "\t\n"]:
        assert roster.add(name) is None
    assert len(roster) == 3


def test_added_ids_are_unique(roster):
    """Test that generated identifiers never collide."""
    for i in range(200):
        roster.add(f"Player {i}")
    
    ids = roster.ids()
    assert len(ids) == len(set(ids))


def test_generate_player_id_skips_taken():
    """Test that a colliding id is re-drawn."""
    first = generate_player_id(random.Random(5))
    second = generate_player_id(random.Random(5), taken={first})
    
    assert len(first) == 9
    assert second != first


def test_remove_at_minimum_ignored(roster):
    """Test that the roster never drops below the minimum."""
    assert not roster.remove("1")
    assert len(roster) == MIN_PLAYERS


def test_roster_floor_under_many_removals(roster):
    """Test the floor for any sequence of removals."""
    for i in range(4):
        roster.add(f"Extra {i}")
    
    rng = random.Random(9)
    for _ in range(50):
        roster.remove(rng.choice(roster.ids()))
        assert len(roster) >= MIN_PLAYERS
    assert len(roster) == MIN_PLAYERS


def test_remove_player(roster):
    """Test removal by identifier above the minimum."""
    extra = roster.add("Ana")
    
    assert roster.remove("2")
    assert roster.ids() == ["1", "3", extra.id]


def test_remove_unknown_id(roster):
    """Test that removing an unknown id is a no-op."""
    roster.add("Ana")
    
    assert not roster.remove("missing")
    assert len(roster) == 4


def test_rename_keeps_name_verbatim(roster):
    """Test that rename neither trims nor rejects empty names."""
    assert roster.rename("2", "  Luis ")
    assert roster.get_player("2").name == "  Luis "
    
    assert roster.rename("2", "")
    assert roster.get_player("2").name == ""
    assert len(roster) == 3


def test_rename_unknown_id(roster):
    """Test renaming a missing player."""
    assert not roster.rename("missing", "Luis")
    assert roster.names() == ["Jugador 1", "Jugador 2", "Jugador 3"]


def test_shuffle_preserves_membership(roster):
    """Test that shuffle only changes order."""
    for name in ["Ana", "Luis", "Marta", "Pablo"]:
        roster.add(name)
    before = {(p.id, p.name) for p in roster}
    
    for _ in range(20):
        roster.shuffle()
        assert {(p.id, p.name) for p in roster} == before
        assert len(roster) == 7


def test_shuffle_changes_order_eventually(roster):
    """Test that shuffle actually permutes."""
    orders = set()
    for _ in range(50):
        roster.shuffle()
        orders.add(tuple(roster.ids()))
    
    # 3! = 6 possible orders
    assert len(orders) > 1


def test_get_player(roster):
    """Test getting player by id."""
    player = roster.get_player("3")
    assert player is not None
    assert player.name == "Jugador 3"
    
    assert roster.get_player("99") is None


def test_default_players_are_fresh():
    """Test that each seed is an independent list of new players."""
    first = default_players()
    second = default_players()
    first[0].rename("Changed")
    
    assert second[0].name == "Jugador 1"
    assert first[0] == Player(id="1", name="Changed")
