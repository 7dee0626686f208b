"""pydantic models for validating match payloads and rendering standings."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .models import MatchOutcome, MatchResult, TeamStanding
from .standings import compute_standings


class MatchResultPayload(BaseModel):
    team1: str = Field(..., min_length=1)
    team2: str = Field(..., min_length=1)
    result: MatchOutcome
    winner: Optional[str] = None

    @model_validator(mode="after")
    def _validate_winner(self) -> "MatchResultPayload":
        if self.result is MatchOutcome.WIN and self.winner not in (self.team1, self.team2):
            raise ValueError("winner must be team1 or team2 when result is 'win'")
        return self

    def to_match(self) -> MatchResult:
        return MatchResult(
            team1=self.team1,
            team2=self.team2,
            result=self.result,
            winner=self.winner if self.result is MatchOutcome.WIN else None,
        )


class TeamStandingResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    team: str
    played: int = Field(..., ge=0)
    won: int = Field(..., ge=0)
    lost: int = Field(..., ge=0)
    tied: int = Field(..., ge=0)
    no_result: int = Field(..., ge=0, alias="noResult")
    points: int = Field(..., ge=0)


def parse_matches(records: Iterable[Mapping[str, Any]]) -> List[MatchResult]:
    """Strictly validate ``records``, raising ``ValidationError`` on the first bad one."""

    return [MatchResultPayload.model_validate(record).to_match() for record in records]


def _standing_to_response(standing: TeamStanding) -> TeamStandingResponse:
    return TeamStandingResponse(
        team=standing.team,
        played=standing.played,
        won=standing.won,
        lost=standing.lost,
        tied=standing.tied,
        no_result=standing.no_result,
        points=standing.points,
    )


def standings_to_payload(standings: Iterable[TeamStanding]) -> List[Dict[str, Any]]:
    return [_standing_to_response(standing).model_dump(by_alias=True) for standing in standings]


def points_table(matches: Sequence[Any]) -> List[Dict[str, Any]]:
    """Compute the standings for ``matches`` and return them as plain records."""

    return standings_to_payload(compute_standings(matches))


__all__ = [
    "MatchResultPayload",
    "TeamStandingResponse",
    "parse_matches",
    "points_table",
    "standings_to_payload",
]
