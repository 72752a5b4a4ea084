"""
airline_seats.errors — Custom exception classes
===============================================

Defines the exception hierarchy for contract violations.
Each exception stores full context for structured logging.

All of these are programmer or integration errors, not game outcomes:
a driver that only offers legal actions never sees them.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence
import json


class AirlineSeatsError(Exception):
    """Base exception for all airline_seats package errors."""

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="AIRLINE_SEATS_ERROR",
            summary=str(self),
            context={},
            details=None,
        )


class InvalidActionError(AirlineSeatsError):
    """Raised when an action is not in the current phase's legal set."""

    def __init__(
        self,
        action: int,
        phase: str,
        legal_actions: Sequence[int],
        current_player: Optional[int] = None,
    ):
        self.action = action
        self.phase = phase
        self.legal_actions = list(legal_actions)
        self.current_player = current_player
        super().__init__(
            f"Action {action} is not valid in phase {phase} "
            f"(legal actions: {self.legal_actions})"
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="INVALID_ACTION",
            summary=str(self),
            context={
                "action": self.action,
                "phase": self.phase,
                "current_player": self.current_player,
                "legal_actions": self.legal_actions,
            },
            details=None,
        )


class PlayerIndexError(AirlineSeatsError):
    """Raised when a player index is outside 0..num_players-1."""

    def __init__(self, player: int, num_players: int):
        self.player = player
        self.num_players = num_players
        super().__init__(
            f"Player {player} is out of range for a {num_players}-player game"
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="PLAYER_INDEX_OUT_OF_RANGE",
            summary=str(self),
            context={"player": self.player, "num_players": self.num_players},
            details=None,
        )


class MalformedStateError(AirlineSeatsError):
    """Raised when a serialized state record cannot be parsed."""

    def __init__(self, record: str, reason: str):
        self.record = record
        self.reason = reason
        super().__init__(f"Malformed state record: {reason}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="MALFORMED_STATE",
            summary=str(self),
            context={"record": _truncate(self.record)},
            details=[self.reason],
        )


class NotChanceNodeError(AirlineSeatsError):
    """Raised when chance outcomes are requested at a decision node."""

    def __init__(self, phase: str):
        self.phase = phase
        super().__init__(f"Phase {phase} is not a chance node")


def _truncate(text: str, limit: int = 200) -> str:
    """Shorten long records (the RNG snapshot alone is several KB)."""
    if len(text) <= limit:
        return text
    return text[:limit] + f"... ({len(text)} chars)"


def _format_error_block(
    error_type: str,
    summary: str,
    context: Dict[str, Any],
    details: Optional[List[str]],
) -> str:
    """Format a structured error block for logs."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " AIRLINE SEATS ERROR — MATCH STATE MUST BE DISCARDED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Summary:      {summary}",
    ]

    if context:
        lines.append("")
        lines.append(" ── CONTEXT " + "─" * 52)
        lines.append(_indent_json(context))

    if details:
        lines.append("")
        lines.append(" ── DETAILS " + "─" * 52)
        for detail in details:
            lines.append(f" • {detail}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        # Add leading space to each line
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
