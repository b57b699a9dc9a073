"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
import textwrap
import unicodedata
from typing import Sequence

from futureyou.core.types import Move
from futureyou.domain.round_resolver import Outcome
from futureyou.services.game_service import GameView

_PANEL_WIDTH = 44


def debug_enabled() -> bool:
    """Return True only when FUTURE_YOU_DEBUG is explicitly set to '1'."""
    return os.getenv("FUTURE_YOU_DEBUG") == "1"


def wrap_text_for_box(text: str, width: int) -> list[str]:
    """Wrap text on word boundaries so every line is at most ``width`` wide."""
    if not text or width <= 0:
        return [text] if text else [""]
    return textwrap.wrap(text, width=width, break_long_words=False, break_on_hyphens=False) or [""]


def display_width(text: str) -> int:
    """Return the number of terminal columns the text occupies."""
    width = 0
    for char in text:
        if unicodedata.combining(char) or char == "\ufe0f":
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def _pad(text: str, width: int) -> str:
    return text + " " * max(0, width - display_width(text))


def boxed_panel(title: str, lines: Sequence[str], width: int = _PANEL_WIDTH) -> list[str]:
    """Return the lines of a box with a centred title."""
    inner = width - 4
    border = "+" + "-" * (width - 2) + "+"
    out = [border, f"| {title.upper().center(inner)} |", border]
    for line in lines:
        for wrapped in wrap_text_for_box(line, inner):
            out.append(f"| {_pad(wrapped, inner)} |")
    out.append(border)
    return out


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def format_score_delta(delta: int) -> str:
    return f"{delta:+d}"


def render_status(view: GameView, *, debug: bool = False) -> None:
    """Print score, streak, hour block and beast task."""
    lines = [
        f"Life Score: {view.score}",
        f"Control Streak: 🔥 {view.streak}",
        "",
        f"Current Hour Block: {view.hour_block}",
        f"Beast Task: [ {view.beast_task} ]",
    ]
    if debug:
        lines.append(f"(DEBUG hour_start={view.hour_start} lock={view.lock_state.value})")
    for line in boxed_panel("Future You vs Present You", lines):
        print(line)
    if view.is_locked:
        print()
        print("LOCKED")
        print("Hour intent established. Execute your task.")
        print(f"NEXT GAME AT: {view.next_game_at}")


def outcome_lines(outcome: Outcome) -> list[str]:
    move_word = "Cooperate" if outcome.player_move is Move.FOCUS else "Defect"
    return [
        outcome.message,
        outcome.sub_message,
        "",
        f"You: {outcome.player_move.value} ({move_word})",
        f"Future You: {outcome.counterpart_move.value}",
        f"Life Score: {format_score_delta(outcome.score_delta)}",
        f"Streak: 🔥 {outcome.new_streak}",
    ]


def render_outcome(outcome: Outcome) -> None:
    """Display the result of a round."""
    print()
    for line in boxed_panel(outcome.label, outcome_lines(outcome)):
        print(line)
