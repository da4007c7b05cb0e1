"""Parsing of text commands into typed arbiter actions, and result formatting."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from pydantic import ValidationError

from .errors import CommandParseError
from .models import (
    COLORS,
    Action,
    Card,
    Color,
    DropCardAction,
    GameResult,
    PlayCardAction,
    StartNewGameAction,
    TellColorAction,
    TellRankAction,
)

COLOR_BY_ABBREVIATION: dict[str, Color] = {color.abbreviation: color for color in COLORS}

START_NEW_GAME_RE = re.compile(r"Start new game with deck (.*)")
TELL_COLOR_RE = re.compile(r"Tell color (\w*) for cards (.*)")
TELL_RANK_RE = re.compile(r"Tell rank (\d) for cards (.*)")
PLAY_CARD_RE = re.compile(r"Play card (\d)")
DROP_CARD_RE = re.compile(r"Drop card (\d)")


def parse_card(abbreviation: str) -> Card:
    """
    Parse a two-character card abbreviation: color letter, then rank digit.

    Examples:
        >>> str(parse_card("R1"))
        'R1'
    """
    if len(abbreviation) != 2:
        raise CommandParseError(f"Invalid card abbreviation: {abbreviation!r}")
    color = COLOR_BY_ABBREVIATION.get(abbreviation[0])
    if color is None:
        raise CommandParseError(f"Unknown color letter in card {abbreviation!r}")
    if not abbreviation[1].isdigit():
        raise CommandParseError(f"Invalid rank in card {abbreviation!r}")
    try:
        return Card(rank=int(abbreviation[1]), color=color)
    except ValidationError as e:
        raise CommandParseError(f"Invalid rank in card {abbreviation!r}") from e


def parse_color(name: str) -> Color:
    """Parse a color name, case-insensitively."""
    try:
        return Color(name.lower())
    except ValueError as e:
        raise CommandParseError(f"Unknown color: {name!r}") from e


def parse_indices(text: str) -> list[int]:
    """Parse a space-separated list of card indices."""
    try:
        return [int(token) for token in text.split()]
    except ValueError as e:
        raise CommandParseError(f"Invalid card indices: {text!r}") from e


def parse_command(line: str) -> Action | None:
    """
    Parse one command line.

    Returns:
        The parsed action, or None if the line matches no known command.

    Raises:
        CommandParseError: if the line looks like a command but carries
            malformed arguments.
    """
    if match := START_NEW_GAME_RE.search(line):
        cards = [parse_card(token) for token in match.group(1).split()]
        return StartNewGameAction(cards=cards)

    if match := TELL_COLOR_RE.search(line):
        return TellColorAction(
            color=parse_color(match.group(1)),
            card_indices=parse_indices(match.group(2)),
        )

    if match := TELL_RANK_RE.search(line):
        try:
            return TellRankAction(
                rank=int(match.group(1)),
                card_indices=parse_indices(match.group(2)),
            )
        except ValidationError as e:
            raise CommandParseError(f"Invalid rank in command: {line!r}") from e

    if match := PLAY_CARD_RE.search(line):
        return PlayCardAction(card_index=int(match.group(1)))

    if match := DROP_CARD_RE.search(line):
        return DropCardAction(card_index=int(match.group(1)))

    return None


def parse_commands(lines: Iterable[str]) -> Iterator[Action | None]:
    """Lazily parse lines; unrecognized lines become None."""
    for line in lines:
        yield parse_command(line.rstrip("\r\n"))


def format_result(result: GameResult) -> str:
    """Format a result the way the arbiter reports it on the console."""
    return f"Turn: {result.turns}, cards: {result.played_cards}, with risk: {result.risked_turns}"
