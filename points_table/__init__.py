"""points_table package exposing match models and the standings calculator."""

from .models import MatchOutcome, MatchResult, TeamStanding
from .schemas import (
    MatchResultPayload,
    TeamStandingResponse,
    parse_matches,
    points_table,
    standings_to_payload,
)
from .standings import compute_standings, rank_standings, standing_sort_key

__all__ = [
    "MatchOutcome",
    "MatchResult",
    "MatchResultPayload",
    "TeamStanding",
    "TeamStandingResponse",
    "compute_standings",
    "parse_matches",
    "points_table",
    "rank_standings",
    "standing_sort_key",
    "standings_to_payload",
]
