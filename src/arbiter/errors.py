"""Exceptions raised for caller errors (malformed input, bad indices).

Rule violations inside a game (contradicting hints, illegal plays) are not
exceptions: they end the game and produce a GameResult.
"""


class ArbiterError(Exception):
    """Base class for arbiter errors."""


class InvalidActionError(ArbiterError, ValueError):
    """An action references a hand slot or player state that does not exist."""


class CommandParseError(ArbiterError, ValueError):
    """A command line or card abbreviation could not be parsed."""
