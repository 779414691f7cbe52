"""Manual adjustments to draft groups.

Organisers may move or swap players between groups before the stage is
locked. Sizes must stay within one player of each other.
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

from groupstage.exceptions import (
    GroupBalanceException,
    GroupNotFoundException,
    GroupStageStateException,
    InvalidGroupEditException,
    ParticipantNotFoundException,
)
from groupstage.models import Group, GroupStage, GroupStageStatus
from groupstage.utils import setup_logger

logger = setup_logger(__name__)


def _require_draft(stage: GroupStage, action: str) -> None:
    if stage.status != GroupStageStatus.DRAFT:
        logger.warning("Cannot %s: group stage is %s", action, stage.status.value)
        raise GroupStageStateException(
            f"Players can only be {action} while the group stage is DRAFT"
        )


def _require_group(stage: GroupStage, group_id: str) -> Group:
    group = stage.get_group(group_id)
    if group is None:
        raise GroupNotFoundException(f"Group {group_id} not found")
    return group


def move_participant(
    stage: GroupStage, participant_id: str, from_group_id: str, to_group_id: str
) -> GroupStage:
    """Move one player, with their standing, to another group.

    Raises:
        GroupStageStateException: If the stage is not DRAFT
        GroupNotFoundException: If either group is unknown
        InvalidGroupEditException: If both ids name the same group
        ParticipantNotFoundException: If the player is not in the source group
        GroupBalanceException: If the sizes would end up more than one apart
    """
    _require_draft(stage, "moved")
    source = _require_group(stage, from_group_id)
    target = _require_group(stage, to_group_id)
    if source is target:
        raise InvalidGroupEditException("Source and target group are the same")
    if participant_id not in source.participants:
        raise ParticipantNotFoundException(
            f"Participant {participant_id} is not in {source.name}"
        )

    if abs((target.size + 1) - (source.size - 1)) > 1:
        logger.warning(
            "Refusing to move %s: %s would have %d, %s %d",
            participant_id,
            source.name,
            source.size - 1,
            target.name,
            target.size + 1,
        )
        raise GroupBalanceException(
            "Groups must stay balanced (maximum difference: 1 player)"
        )

    source.participants.remove(participant_id)
    target.participants.append(participant_id)

    standing = source.get_standing(participant_id)
    if standing is not None:
        source.standings.remove(standing)
        target.standings.append(standing)

    logger.info("Moved %s from %s to %s", participant_id, source.name, target.name)
    return stage


def swap_participants(
    stage: GroupStage,
    participant1_id: str,
    group1_id: str,
    participant2_id: str,
    group2_id: str,
) -> GroupStage:
    """Exchange two players between different groups, keeping their slots.

    Raises:
        InvalidGroupEditException: If both players are in the same group
        GroupStageStateException: If the stage is not DRAFT
        GroupNotFoundException: If either group is unknown
        ParticipantNotFoundException: If a player is not in the named group
    """
    if group1_id == group2_id:
        raise InvalidGroupEditException("Participants must be in different groups")
    _require_draft(stage, "swapped")
    group1 = _require_group(stage, group1_id)
    group2 = _require_group(stage, group2_id)

    try:
        index1 = group1.participants.index(participant1_id)
    except ValueError:
        raise ParticipantNotFoundException(
            f"Participant {participant1_id} is not in {group1.name}"
        ) from None
    try:
        index2 = group2.participants.index(participant2_id)
    except ValueError:
        raise ParticipantNotFoundException(
            f"Participant {participant2_id} is not in {group2.name}"
        ) from None

    group1.participants[index1] = participant2_id
    group2.participants[index2] = participant1_id

    standing1 = group1.get_standing(participant1_id)
    standing2 = group2.get_standing(participant2_id)
    if standing1 is not None and standing2 is not None:
        slot1 = group1.standings.index(standing1)
        slot2 = group2.standings.index(standing2)
        group1.standings[slot1] = standing2
        group2.standings[slot2] = standing1

    logger.debug(
        "After swap: %s=%s, %s=%s",
        group1.name,
        group1.participants,
        group2.name,
        group2.participants,
    )
    logger.info(
        "Swapped %s (%s) with %s (%s)",
        participant1_id,
        group1.name,
        participant2_id,
        group2.name,
    )
    return stage
