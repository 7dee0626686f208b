"""Aggregate match results into a ranked points table."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from .models import MatchResult, TeamStanding


logger = logging.getLogger(__name__)

MatchRecord = Union[MatchResult, Mapping]


def _is_match_sequence(matches: Any) -> bool:
    return isinstance(matches, Sequence) and not isinstance(matches, (str, bytes))


def _is_team_name(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def _as_match(record: Any) -> Optional[MatchResult]:
    if isinstance(record, MatchResult):
        match = record
    elif isinstance(record, Mapping):
        match = MatchResult.from_mapping(record)
    else:
        return None

    if not (_is_team_name(match.team1) and _is_team_name(match.team2)):
        return None
    return match


def standing_sort_key(standing: TeamStanding) -> Tuple[int, str, str]:
    """Points descending, then team name ascending ignoring case."""

    return (-standing.points, standing.team.casefold(), standing.team)


def rank_standings(standings: Iterable[TeamStanding]) -> List[TeamStanding]:
    return sorted(standings, key=standing_sort_key)


def compute_standings(matches: Sequence[MatchRecord]) -> List[TeamStanding]:
    """Build the points table for ``matches``.

    Each entry is either a :class:`MatchResult` or a mapping with the keys
    ``team1``, ``team2``, ``result`` and optionally ``winner``. Anything that
    is not a non-empty sequence yields an empty table. Entries without two
    team names are skipped; unknown results and winners outside the pair only
    count as a played match for both sides.
    """

    if not _is_match_sequence(matches) or not matches:
        return []

    standings: Dict[str, TeamStanding] = {}
    processed = 0

    for index, record in enumerate(matches):
        match = _as_match(record)
        if match is None:
            logger.debug("Skipping unreadable match entry at index %d: %r", index, record)
            continue
        if match.outcome is None:
            logger.debug("Unrecognised result %r at index %d", match.result, index)

        for team in (match.team1, match.team2):
            standing = standings.get(team)
            if standing is None:
                standing = standings[team] = TeamStanding(team=team)
            standing.record_match(match)
        processed += 1

    logger.debug("Aggregated %d matches across %d teams", processed, len(standings))
    return rank_standings(standings.values())


__all__ = ["compute_standings", "rank_standings", "standing_sort_key"]
