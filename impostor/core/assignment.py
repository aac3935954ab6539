"""
Randomized word and impostor assignment.

All functions are pure given an explicit `random.Random`; seeding that source
makes a round reproducible.
"""

import math
import random
from typing import List, Sequence

from .exceptions import EmptyWordListError, InvalidRosterSizeError
from .roles import GameMode, RoundAssignment
from .roster import MIN_PLAYERS


def _draw_index(rng: random.Random, length: int) -> int:
    """Uniform index in [0, length), drawn as floor(u * length)."""
    return math.floor(rng.random() * length)


def pick_word(words: Sequence[str], rng: random.Random) -> str:
    """Draw one word uniformly from the word source."""
    if not words:
        raise EmptyWordListError()
    return words[_draw_index(rng, len(words))]


def pick_classic_impostors(roster_size: int, rng: random.Random) -> List[int]:
    """Exactly one impostor seat, uniform over the roster."""
    return [_draw_index(rng, roster_size)]


def pick_uncertainty_impostors(roster_size: int, rng: random.Random) -> List[int]:
    """
    Draw a secret number of impostors, then that many distinct seats.
    
    The count k is uniform over [1, roster_size - 1]. Seats are then drawn
    without replacement from a shrinking pool, so every subset of size k is
    equally likely. Across different k the subsets are not uniform: a lone
    impostor is as likely as n-1 impostors regardless of how many subsets
    each size has.
    
    Args:
        roster_size: Number of players (at least MIN_PLAYERS)
        rng: Random source
        
    Returns:
        Impostor positions in draw order
    """
    count = _draw_index(rng, roster_size - 1) + 1
    pool = list(range(roster_size))
    picked = []
    for _ in range(count):
        picked.append(pool.pop(_draw_index(rng, len(pool))))
    return picked


def assign_round(roster_size: int, mode: GameMode, words: Sequence[str], rng: random.Random) -> RoundAssignment:
    """
    Produce the word and impostor seats for a new round.
    
    Raises:
        InvalidRosterSizeError: If roster_size is below MIN_PLAYERS
        EmptyWordListError: If words is empty
    """
    if roster_size < MIN_PLAYERS:
        raise InvalidRosterSizeError(roster_size, MIN_PLAYERS)
    if not words:
        raise EmptyWordListError()
    
    if mode == GameMode.CLASSIC:
        impostors = pick_classic_impostors(roster_size, rng)
    else:
        impostors = pick_uncertainty_impostors(roster_size, rng)
    
    word = pick_word(words, rng)
    return RoundAssignment(word=word, impostor_order=tuple(impostors))
