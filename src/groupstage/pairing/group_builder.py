"""Balanced group generation using snake seeding.

Participants are ranked by rating and dealt into groups in serpentine order,
the same way professional tours distribute seeds. With 16 players and
4 groups:

    Ranking:  1  2  3  4  5  6  7  8  9 10 11 12 13 14 15 16

    Grupo A:  1                    8  9                   16
    Grupo B:     2              7       10             15
    Grupo C:        3        6             11       14
    Grupo D:           4  5                   12 13
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

import random
from typing import Dict, Iterator, List, Optional, Sequence

from groupstage.constants import (
    GROUP_ID_PREFIX,
    GROUP_LABELS,
    GROUP_NAME_PREFIX,
    MAX_GROUPS,
)
from groupstage.exceptions import EmptyParticipantsException, InvalidGroupCountException
from groupstage.models import Group, GroupStanding, Participant
from groupstage.utils import setup_logger

logger = setup_logger(__name__)


def group_label(index: int) -> str:
    """Letter for the group at ``index`` (0 -> "A")."""
    if not 0 <= index < MAX_GROUPS:
        raise InvalidGroupCountException(
            f"Group index {index} has no label (at most {MAX_GROUPS} groups)"
        )
    return GROUP_LABELS[index]


def snake_order(number_of_groups: int) -> Iterator[int]:
    """Yield group indices in serpentine order, forever.

    The walk turns around on the end groups, so each end group is visited
    twice in a row: 0, 1, ..., G-1, G-1, ..., 1, 0, 0, 1, ...
    """
    index = 0
    direction = 1
    while True:
        yield index
        index += direction
        if index >= number_of_groups:
            index = number_of_groups - 1
            direction = -1
        elif index < 0:
            index = 0
            direction = 1


def rank_participants(participants: Sequence[Participant]) -> List[Participant]:
    """Strongest first. Equal ratings keep the caller's order."""
    return sorted(participants, key=lambda p: p.elo, reverse=True)


def _validate_request(participants: Sequence[Participant], number_of_groups: int) -> None:
    if number_of_groups is None or number_of_groups <= 0:
        logger.error("Rejected group generation: %s groups requested", number_of_groups)
        raise InvalidGroupCountException(
            f"Number of groups must be at least 1, got {number_of_groups}"
        )
    if not participants:
        logger.error("Rejected group generation: no participants")
        raise EmptyParticipantsException("Cannot build groups without participants")
    if number_of_groups > len(participants):
        logger.error(
            "Rejected group generation: %d groups for %d participants",
            number_of_groups,
            len(participants),
        )
        raise InvalidGroupCountException(
            f"There are fewer participants ({len(participants)}) "
            f"than groups ({number_of_groups})"
        )
    if number_of_groups > MAX_GROUPS:
        raise InvalidGroupCountException(
            f"At most {MAX_GROUPS} groups are supported, got {number_of_groups}"
        )


def generate_balanced_groups(
    participants: Sequence[Participant],
    number_of_groups: int,
    rng: Optional[random.Random] = None,
) -> List[Group]:
    """Seed participants into balanced groups.

    Args:
        participants: Pool of participants; ranked by elo here, so any order works
        number_of_groups: How many groups to build
        rng: When given, the pool is shuffled with it instead of ranked
            (random seeding)

    Returns:
        Groups named "Grupo A", "Grupo B", ... with zero-valued standings in
        seeding order. Sizes differ by at most one.

    Raises:
        InvalidGroupCountException: If the group count is not positive or
            exceeds the number of participants
        EmptyParticipantsException: If there are no participants
    """
    _validate_request(participants, number_of_groups)

    if rng is None:
        pool = rank_participants(participants)
    else:
        pool = list(participants)
        rng.shuffle(pool)

    groups: List[Group] = []
    for i in range(number_of_groups):
        label = group_label(i)
        groups.append(
            Group(
                id=f"{GROUP_ID_PREFIX}{label}",
                name=f"{GROUP_NAME_PREFIX}{label}",
                seed=i + 1,
            )
        )

    by_id: Dict[str, Participant] = {}
    for participant, group_index in zip(pool, snake_order(number_of_groups)):
        groups[group_index].participants.append(participant.user_id)
        by_id.setdefault(participant.user_id, participant)

    for group in groups:
        group.standings = [
            GroupStanding.initial(by_id[player_id]) for player_id in group.participants
        ]
        logger.debug("%s: %s", group.name, ", ".join(group.participants))

    logger.info(
        "Generated %d groups for %d participants (sizes %s)",
        len(groups),
        len(pool),
        [g.size for g in groups],
    )
    return groups
