"""Round-robin fixture generation for a single group.

Uses the circle method: the first participant stays put while the others
rotate one seat per round. A bye slot is added for an odd field; whoever
faces it sits the round out.
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

from typing import List, Sequence

from groupstage.exceptions import DuplicateParticipantException
from groupstage.models import GroupMatch
from groupstage.type_hints import MaybePlayerId, RoundSchedule
from groupstage.utils import generate_id, setup_logger

logger = setup_logger(__name__)


def total_rounds(group_size: int) -> int:
    """Rounds needed for a full round robin of ``group_size`` players."""
    if group_size < 2:
        return 0
    if group_size % 2 == 0:
        return group_size - 1
    return group_size


def round_robin_schedule(participant_ids: Sequence[str]) -> List[RoundSchedule]:
    """Pairings per round for a full round robin.

    Args:
        participant_ids: Player ids; the first one holds the fixed seat

    Returns:
        One list of (player1_id, player2_id) per round. Bye pairings are
        left out, so an odd field has one player idle in every round.

    Raises:
        DuplicateParticipantException: If an id appears twice
    """
    seats: List[MaybePlayerId] = list(participant_ids)
    if len(set(seats)) != len(seats):
        raise DuplicateParticipantException(
            f"Duplicate participant ids in round robin: {list(participant_ids)}"
        )
    if len(seats) < 2:
        return []

    if len(seats) % 2 == 1:
        seats.append(None)  # bye

    n = len(seats)
    half = n // 2
    rounds: List[RoundSchedule] = []

    for rnd in range(n - 1):
        pairs: RoundSchedule = []
        for i in range(half):
            home = seats[i]
            away = seats[n - 1 - i]
            if home is None or away is None:
                continue
            # alternate sides so the fixed seat is not always player 1
            if rnd % 2 == 0:
                pairs.append((home, away))
            else:
                pairs.append((away, home))
        rounds.append(pairs)

        # rotate everything but the fixed seat one step clockwise
        seats = [seats[0]] + [seats[-1]] + seats[1:-1]

    return rounds


def generate_round_robin_fixtures(
    participant_ids: Sequence[str], group_id: str
) -> List[GroupMatch]:
    """Build every match of a group's round robin.

    Args:
        participant_ids: Ids of the group's players
        group_id: Id stamped on each match

    Returns:
        n*(n-1)/2 unplayed matches, each unordered pair exactly once, with
        ``round`` set from the circle schedule. Fewer than two players
        gives an empty list.
    """
    matches: List[GroupMatch] = []
    for round_number, pairs in enumerate(round_robin_schedule(participant_ids), start=1):
        for player1_id, player2_id in pairs:
            matches.append(
                GroupMatch(
                    id=generate_id(),
                    group_id=group_id,
                    player1_id=player1_id,
                    player2_id=player2_id,
                    round=round_number,
                )
            )

    logger.debug(
        "Generated %d fixtures over %d rounds for %s",
        len(matches),
        total_rounds(len(participant_ids)),
        group_id,
    )
    return matches
