"""Standings ranking for group stages.

This module orders a group's standings table and assigns positions.
"""

# Group Stage Engine
# Copyright (C) 2025  Group Stage Engine developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import replace
from typing import Any, Dict, List, Sequence, Tuple

from groupstage.constants import STANDINGS_SORT_KEYS
from groupstage.models import GroupStanding
from groupstage.utils import setup_logger

logger = setup_logger(__name__)


def standing_sort_key(standing: GroupStanding) -> Tuple[int, ...]:
    """Key for ranking, higher is better on every criterion.

    Criteria in order:
    1. Points
    2. Set difference
    3. Game difference
    """
    return tuple(getattr(standing, name) for name in STANDINGS_SORT_KEYS)


def recalculate_standings(standings: Sequence[GroupStanding]) -> List[GroupStanding]:
    """Rank a group's standings and assign 1-based positions.

    The sort is stable, so records equal on every criterion keep their
    incoming relative order. Every record gets its own position, even on a
    full tie.

    Args:
        standings: Current standings; not modified

    Returns:
        New standing objects in rank order with ``position`` set 1..N.
        All other fields are copied unchanged.
    """
    ranked = sorted(standings, key=standing_sort_key, reverse=True)
    result = [
        replace(standing, position=index)
        for index, standing in enumerate(ranked, start=1)
    ]
    logger.debug(
        "Ranked standings: %s",
        ", ".join(f"{s.position}. {s.player_id} ({s.points} pts)" for s in result),
    )
    return result


def mark_qualified(
    standings: Sequence[GroupStanding], players_advancing: int
) -> List[GroupStanding]:
    """Flag the top ``players_advancing`` positions as qualified.

    Positions must already be assigned by :func:`recalculate_standings`.

    Returns:
        New standing objects in the same order
    """
    return [
        replace(
            standing,
            qualified_for_knockout=0 < standing.position <= players_advancing,
        )
        for standing in standings
    ]


def standings_table(standings: Sequence[GroupStanding]) -> List[Dict[str, Any]]:
    """Rows for displaying a standings table, in the order given."""
    return [
        {
            "position": s.position,
            "player": s.player_name or s.player_id,
            "played": s.matches_played,
            "won": s.wins,
            "drawn": s.draws,
            "lost": s.losses,
            "sets": f"{s.sets_won}-{s.sets_lost}",
            "games": f"{s.games_won}-{s.games_lost}",
            "points": s.points,
            "qualified": s.qualified_for_knockout,
        }
        for s in standings
    ]
