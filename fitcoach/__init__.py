"""FitCoach program recommendation and session-scheduling backend."""

__version__ = "0.1.0"
