"""Domain models for the points_table project.

These dataclasses describe a single match result and the running standing of
one team. They stay free of any serialization concern so that callers can
build them from fixtures, JSON payloads or plain mappings alike.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union


WIN_POINTS = 2
TIE_POINTS = 1
NO_RESULT_POINTS = 1


class MatchOutcome(Enum):
    """Supported outcomes for a single match."""

    WIN = "win"
    TIE = "tie"
    NO_RESULT = "no_result"


@dataclass(frozen=True)
class MatchResult:
    """A single match record between two teams."""

    team1: str
    team2: str
    result: Union[MatchOutcome, str]
    winner: Optional[str] = None

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> "MatchResult":
        """Build a match from a ``{"team1", "team2", "result", "winner"}`` mapping."""

        return cls(
            team1=record.get("team1"),
            team2=record.get("team2"),
            result=record.get("result"),
            winner=record.get("winner"),
        )

    @property
    def outcome(self) -> Optional[MatchOutcome]:
        """Return the parsed outcome, or ``None`` for an unrecognised result."""

        try:
            return MatchOutcome(self.result)
        except ValueError:
            return None

    def opponent_of(self, team: str) -> Optional[str]:
        """Return the opponent of ``team`` in this match."""

        if team == self.team1:
            return self.team2
        if team == self.team2:
            return self.team1
        return None


@dataclass
class TeamStanding:
    """Aggregate statistics for a team across the matches it played."""

    team: str
    played: int = 0
    won: int = 0
    lost: int = 0
    tied: int = 0
    no_result: int = 0

    @property
    def points(self) -> int:
        return WIN_POINTS * self.won + TIE_POINTS * self.tied + NO_RESULT_POINTS * self.no_result

    def record_match(self, match: MatchResult) -> None:
        """Update standing based on the provided match."""

        self.played += 1
        outcome = match.outcome

        if outcome is MatchOutcome.TIE:
            self.tied += 1
            return
        if outcome is MatchOutcome.NO_RESULT:
            self.no_result += 1
            return
        if outcome is not MatchOutcome.WIN:
            return

        # A winner outside the pair leaves both sides with a bare appearance.
        if match.winner == self.team:
            self.won += 1
        if match.winner == match.opponent_of(self.team):
            self.lost += 1


__all__ = [
    "MatchOutcome",
    "MatchResult",
    "NO_RESULT_POINTS",
    "TIE_POINTS",
    "TeamStanding",
    "WIN_POINTS",
]
