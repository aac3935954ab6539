"""
Tests for word and impostor assignment.
"""

import random
from itertools import combinations
from collections import Counter

import pytest
from impostor.core import (
    GameMode, Role, RoundAssignment, assign_round, pick_word,
    pick_classic_impostors, pick_uncertainty_impostors,
    InvalidRosterSizeError, EmptyWordListError, AssignmentError
)

from conftest import ScriptedRandom, WORDS


@pytest.mark.parametrize("roster_size", [3, 4, 7, 12])
def test_classic_single_impostor(roster_size):
    """Test classic mode always yields exactly one impostor in range."""
    rng = random.Random(roster_size)
    for _ in range(200):
        assignment = assign_round(roster_size, GameMode.CLASSIC, WORDS, rng)
        assert assignment.impostor_count == 1
        (position,) = assignment.impostor_positions
        assert 0 <= position < roster_size


@pytest.mark.parametrize("roster_size", [3, 4, 7, 12])
def test_uncertainty_bounds(roster_size):
    """Test uncertainty mode yields 1..n-1 distinct impostors in range."""
    rng = random.Random(roster_size)
    for _ in range(300):
        assignment = assign_round(roster_size, GameMode.UNCERTAINTY, WORDS, rng)
        assert 1 <= assignment.impostor_count <= roster_size - 1
        assert len(assignment.impostor_order) == assignment.impostor_count
        assert all(0 <= i < roster_size for i in assignment.impostor_positions)


def test_uncertainty_covers_every_count():
    """Test that both extremes of the impostor count occur."""
    rng = random.Random(42)
    counts = Counter(
        assign_round(5, GameMode.UNCERTAINTY, WORDS, rng).impostor_count
        for _ in range(2000)
    )
    
    assert set(counts) == {1, 2, 3, 4}
    # Count is uniform over 1..4, so each should be near 500
    for count in counts.values():
        assert 350 < count < 650


def test_uncertainty_uniform_within_count():
    """Test that every pair is drawn when two impostors are picked from four players."""
    rng = random.Random(3)
    pairs = Counter()
    for _ in range(3000):
        assignment = assign_round(4, GameMode.UNCERTAINTY, WORDS, rng)
        if assignment.impostor_count == 2:
            pairs[assignment.impostor_positions] += 1
    
    assert set(pairs) == {frozenset(c) for c in combinations(range(4), 2)}


def test_uncertainty_draw_sequence():
    """Test the count-then-pool draw against scripted random values."""
    # k = floor(0.99 * 4) + 1 = 4; pool draws: idx 0 -> 0, idx 2 -> 3, idx 0 -> 1, idx 1 -> 4
    rng = ScriptedRandom([0.99, 0.0, 0.5, 0.0, 0.9])
    
    assert pick_uncertainty_impostors(5, rng) == [0, 3, 1, 4]


def test_classic_draw_sequence():
    """Test the classic draw and the word drawn after it."""
    rng = ScriptedRandom([0.7, 0.5])
    
    assignment = assign_round(3, GameMode.CLASSIC, ["A", "B"], rng)
    
    assert assignment.impostor_order == (2,)
    assert assignment.word == "B"


def test_word_validity():
    """Test that the assigned word always comes from the word list."""
    rng = random.Random(11)
    words = ["SUN", "MOON", "STAR", "COMET"]
    seen = set()
    for _ in range(500):
        word = assign_round(3, GameMode.CLASSIC, words, rng).word
        assert word in words
        seen.add(word)
    
    assert seen == set(words)


def test_pick_word_single_entry():
    """Test a one-word list."""
    assert pick_word(["SUN"], random.Random()) == "SUN"


def test_classic_helper_range():
    """Test the classic helper directly."""
    rng = random.Random(1)
    assert {pick_classic_impostors(3, rng)[0] for _ in range(200)} == {0, 1, 2}


@pytest.mark.parametrize("roster_size", [0, 1, 2])
def test_roster_too_small(roster_size):
    """Test that a roster below the minimum is a contract violation."""
    with pytest.raises(InvalidRosterSizeError) as exc_info:
        assign_round(roster_size, GameMode.CLASSIC, WORDS, random.Random())
    
    assert exc_info.value.roster_size == roster_size
    assert isinstance(exc_info.value, AssignmentError)


def test_empty_word_list():
    """Test that an empty word source is rejected."""
    with pytest.raises(EmptyWordListError):
        assign_round(3, GameMode.UNCERTAINTY, [], random.Random())


def test_seeded_rounds_are_reproducible():
    """Test that the same seed replays the same assignments."""
    rng_a = random.Random(77)
    rng_b = random.Random(77)
    first = [assign_round(6, GameMode.UNCERTAINTY, WORDS, rng_a) for _ in range(10)]
    second = [assign_round(6, GameMode.UNCERTAINTY, WORDS, rng_b) for _ in range(10)]
    
    assert first == second


def test_round_assignment_roles():
    """Test the role lookups on an assignment."""
    assignment = RoundAssignment(word="SUN", impostor_order=(2, 0))
    
    assert assignment.impostor_positions == frozenset({0, 2})
    assert assignment.role_for(0) == Role.IMPOSTOR
    assert assignment.role_for(1) == Role.WORD_HOLDER
    assert assignment.word_for(1) == "SUN"
    assert assignment.word_for(2) is None
    assert assignment.word_holders(4) == [1, 3]


def test_game_mode_parse():
    """Test parsing game modes from strings."""
    assert GameMode.parse("classic") == GameMode.CLASSIC
    assert GameMode.parse(" Uncertainty ") == GameMode.UNCERTAINTY
    assert GameMode.parse(GameMode.CLASSIC) == GameMode.CLASSIC
    
    with pytest.raises(ValueError):
        GameMode.parse("chaos")
