"""
Exceptions for round assignment contract violations.
"""


class AssignmentError(ValueError):
    """Base class for invalid inputs to the assignment engine."""


class InvalidRosterSizeError(AssignmentError):
    """Raised when a round is assigned for fewer players than the roster minimum."""
    
    def __init__(self, roster_size: int, minimum: int, message: str = ""):
        self.roster_size = roster_size
        self.minimum = minimum
        self.message = message or f"Cannot assign a round for {roster_size} players (minimum is {minimum})"
        super().__init__(self.message)


class EmptyWordListError(AssignmentError):
    """Raised when the word source has no candidate words."""
    
    def __init__(self, message: str = "Word list must contain at least one word"):
        self.message = message
        super().__init__(self.message)
