"""Top-level package for the Happy Families game engine."""

from . import cards, engine, ports, rules, scoreboard, state

__version__ = "0.1.0"

__all__ = [
    "cards",
    "engine",
    "ports",
    "rules",
    "scoreboard",
    "state",
]
