"""
Bounded conversation transcript handling.

A transcript always starts with the instruction pair (a synthetic user turn
carrying the system prompt, then a model acknowledgement). Trimming keeps that
pair plus the most recent exchanges; recency is the only retention rule.

All functions here are pure: they return new lists and never mutate the
transcript handed in by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .models import ConversationTurn, Role
from .prompts import ACKNOWLEDGEMENT, SYSTEM_PROMPT


DEFAULT_MAX_HISTORY_TURNS = 4
INSTRUCTION_PAIR_LEN = 2


@dataclass(frozen=True)
class HistoryConfig:
    """Seed text and retention window for a transcript."""

    system_prompt: str = SYSTEM_PROMPT
    acknowledgement: str = ACKNOWLEDGEMENT
    max_history_turns: int = DEFAULT_MAX_HISTORY_TURNS  # user/model exchanges to keep


def trim_history(
    history: Sequence[ConversationTurn],
    max_turns: int = DEFAULT_MAX_HISTORY_TURNS,
) -> List[ConversationTurn]:
    """
    Keep the instruction pair plus the last ``2 * max_turns`` turns.

    Transcripts that already fit are returned unchanged (as a list). No check
    is made that roles alternate or that the first two turns really are the
    instruction pair.
    """
    history = list(history)
    recent = 2 * max_turns
    if len(history) <= INSTRUCTION_PAIR_LEN + recent:
        return history
    if recent == 0:
        return history[:INSTRUCTION_PAIR_LEN]
    return history[:INSTRUCTION_PAIR_LEN] + history[-recent:]


def seed_history(config: Optional[HistoryConfig] = None) -> List[ConversationTurn]:
    """Return a fresh instruction pair."""
    config = config or HistoryConfig()
    return [
        ConversationTurn.from_text(Role.USER, config.system_prompt),
        ConversationTurn.from_text(Role.MODEL, config.acknowledgement),
    ]


def get_or_init_history(
    existing: Optional[Sequence[ConversationTurn]],
    config: Optional[HistoryConfig] = None,
) -> List[ConversationTurn]:
    """Return ``existing`` when it has turns, otherwise a seeded transcript."""
    if existing:
        return list(existing)
    return seed_history(config)


def append_turn(
    history: Sequence[ConversationTurn],
    role: Role,
    text: str,
) -> List[ConversationTurn]:
    return list(history) + [ConversationTurn.from_text(role, text)]
