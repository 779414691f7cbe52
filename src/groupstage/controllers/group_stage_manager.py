"""Group stage lifecycle management.

This module drives a group stage from generation through locking and
result recording to completion.
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
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from groupstage.constants import SEEDING_RANDOM
from groupstage.controllers.result_recorder import ResultRecorder
from groupstage.exceptions import GroupStageStateException, MatchNotFoundException
from groupstage.models import (
    Group,
    GroupStage,
    GroupStageConfig,
    GroupStageStatus,
    Participant,
)
from groupstage.pairing import generate_balanced_groups, generate_round_robin_fixtures
from groupstage.tournament import mark_qualified, recalculate_standings, standings_table
from groupstage.utils import setup_logger

logger = setup_logger(__name__)

# States in which results may be recorded
OPEN_STATES = (GroupStageStatus.LOCKED, GroupStageStatus.IN_PROGRESS)


class GroupStageManager:
    """Manages the lifecycle of a group stage.

    This class is responsible for:
    - Building the groups from the category's participants and config
    - Locking the groups and generating every group's fixtures
    - Recording results and advancing the stage status
    - Marking qualifiers once every group is finished
    """

    def create_group_stage(
        self,
        tournament_id: str,
        category_id: str,
        participants: Sequence[Participant],
        config: GroupStageConfig,
        rng: Optional[random.Random] = None,
    ) -> GroupStage:
        """Generate a DRAFT group stage without fixtures.

        Args:
            tournament_id: Owning tournament
            category_id: Owning category
            participants: Players to seed
            config: Group count, seeding method and points scheme
            rng: Random source for RANDOM seeding; a fresh one by default

        Raises:
            InvalidConfigurationException: If the config is invalid
            InvalidGroupCountException: If the groups cannot be built
            EmptyParticipantsException: If there are no participants
        """
        config.validate()

        if config.seeding_method == SEEDING_RANDOM:
            groups = generate_balanced_groups(
                participants, config.number_of_groups, rng=rng or random.Random()
            )
        else:
            groups = generate_balanced_groups(participants, config.number_of_groups)

        now = datetime.now(timezone.utc)
        stage = GroupStage(
            tournament_id=tournament_id,
            category_id=category_id,
            config=config,
            groups=groups,
            status=GroupStageStatus.DRAFT,
            created_at=now,
            updated_at=now,
        )
        logger.info(
            "Created group stage for %s/%s with %d groups (%s seeding)",
            tournament_id,
            category_id,
            len(groups),
            config.seeding_method,
        )
        return stage

    def lock_and_generate_fixtures(self, stage: GroupStage) -> GroupStage:
        """Freeze the groups and create every group's round robin.

        Raises:
            GroupStageStateException: If the stage is not DRAFT
        """
        if stage.status != GroupStageStatus.DRAFT:
            logger.error("Cannot lock group stage in state %s", stage.status.value)
            raise GroupStageStateException("Groups are already locked")

        for group in stage.groups:
            group.matches = generate_round_robin_fixtures(group.participants, group.id)

        stage.status = GroupStageStatus.LOCKED
        self._touch(stage)
        logger.info(
            "Locked group stage with %d fixtures",
            sum(len(g.matches) for g in stage.groups),
        )
        # only single-player groups: nothing to play
        if stage.all_groups_complete:
            self.complete(stage)
        return stage

    def record_result(
        self,
        stage: GroupStage,
        match_id: str,
        winner_id: Optional[str],
        score: Optional[str],
        played_at: Optional[datetime] = None,
    ) -> GroupStage:
        """Record a match result and advance the stage status.

        Args:
            stage: The group stage; updated in place
            match_id: Id of the match in any group
            winner_id: Winner, or None to record a draw
            score: Score text from the winner's side (player 1's for a draw)
            played_at: Result timestamp

        Raises:
            GroupStageStateException: If the stage is not LOCKED or IN_PROGRESS
            MatchNotFoundException: If no group holds the match
        """
        if stage.status not in OPEN_STATES:
            logger.error("Cannot record result in state %s", stage.status.value)
            raise GroupStageStateException(
                f"Results cannot be recorded while the group stage is {stage.status.value}"
            )

        group, _ = stage.find_match(match_id)
        if group is None:
            raise MatchNotFoundException(f"Match {match_id} not found")

        recorder = ResultRecorder(stage.config)
        if winner_id is None:
            recorder.record_draw(group, match_id, score, played_at)
        else:
            recorder.record_match_result(group, match_id, winner_id, score, played_at)

        stage.status = GroupStageStatus.IN_PROGRESS
        if stage.all_groups_complete:
            self.complete(stage)

        self._touch(stage)
        return stage

    def complete(self, stage: GroupStage) -> GroupStage:
        """Mark qualifiers in every group and close the stage."""
        advancing = stage.config.players_advancing_per_group
        for group in stage.groups:
            # groups without fixtures were never ranked
            ranked = recalculate_standings(group.standings)
            group.standings = mark_qualified(ranked, advancing)
        stage.status = GroupStageStatus.COMPLETED
        logger.info(
            "Group stage complete; top %d of each group qualified", advancing
        )
        return stage

    def standings_table(self, group: Group) -> List[Dict[str, Any]]:
        """Display rows for a group's current standings."""
        return standings_table(group.standings)

    @staticmethod
    def _touch(stage: GroupStage) -> None:
        stage.updated_at = datetime.now(timezone.utc)
