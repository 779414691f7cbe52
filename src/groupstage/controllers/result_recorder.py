"""Result recording for group stage matches.

This module applies completed match results to a group's standings with
proper validation and then re-ranks the group.
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

from datetime import datetime, timezone
from typing import Optional, Tuple

from groupstage.exceptions import (
    DuplicateResultException,
    InvalidResultException,
    MatchNotFoundException,
    ParticipantNotFoundException,
)
from groupstage.models import Group, GroupMatch, GroupStageConfig, GroupStanding
from groupstage.tournament import recalculate_standings
from groupstage.utils import setup_logger
from groupstage.utils.score_parser import ScoreSummary, parse_score

logger = setup_logger(__name__)


class ResultRecorder:
    """Records match results into a group's standings.

    This class is responsible for:
    - Validating that a result belongs to a known, unplayed match
    - Parsing the score into set and game totals
    - Updating both players' counters with the configured points scheme
    - Re-ranking the group afterwards
    """

    def __init__(self, config: GroupStageConfig):
        """Initialize the recorder.

        Args:
            config: Supplies points for a win, draw and loss
        """
        self.config = config

    def record_match_result(
        self,
        group: Group,
        match_id: str,
        winner_id: str,
        score: str,
        played_at: Optional[datetime] = None,
    ) -> Group:
        """Record a decided match.

        Args:
            group: Group holding the match; updated in place
            match_id: Id of the match
            winner_id: Id of the winning player
            score: Score from the winner's side, e.g. "6-4, 6-3"
            played_at: Result timestamp, now (UTC) by default

        Returns:
            The same group, with the match closed and standings re-ranked

        Raises:
            MatchNotFoundException: If the match is not in the group
            DuplicateResultException: If the match already has a result
            InvalidResultException: If the winner did not play the match or
                the score does not give them more sets
            InvalidScoreException: If the score cannot be parsed
        """
        match = self._get_open_match(group, match_id)

        if not match.involves(winner_id):
            logger.error(
                "Winner %s is not a player of match %s (%s vs %s)",
                winner_id,
                match_id,
                match.player1_id,
                match.player2_id,
            )
            raise InvalidResultException(
                "The winner must be one of the players of the match"
            )

        summary = parse_score(score)
        if summary.sets_won <= summary.sets_lost:
            logger.error("Score %r does not give %s the match", score, winner_id)
            raise InvalidResultException(
                f"Score '{score}' must be written from the winner's side"
            )
        loser_id = match.opponent_of(winner_id)
        winner, loser = self._get_standings(group, winner_id, loser_id)

        self._apply(winner, summary, self.config.points_for_win)
        winner.wins += 1
        self._apply(loser, summary.mirrored(), self.config.points_for_loss)
        loser.losses += 1

        match.winner_id = winner_id
        match.score = score
        match.match_date = played_at or datetime.now(timezone.utc)

        group.standings = recalculate_standings(group.standings)

        logger.info(
            "Recorded %s: %s beat %s %s", group.name, winner_id, loser_id, score
        )
        return group

    def record_draw(
        self,
        group: Group,
        match_id: str,
        score: Optional[str] = None,
        played_at: Optional[datetime] = None,
    ) -> Group:
        """Record a match that ended without a winner.

        Args:
            group: Group holding the match; updated in place
            match_id: Id of the match
            score: Optional score from player 1's side
            played_at: Result timestamp, now (UTC) by default

        Returns:
            The same group, with the match closed and standings re-ranked
        """
        match = self._get_open_match(group, match_id)
        summary = parse_score(score) if score else ScoreSummary()
        if summary.sets_won != summary.sets_lost:
            logger.error("Score %r of match %s is not a draw", score, match_id)
            raise InvalidResultException(f"Score '{score}' has a winner")
        first, second = self._get_standings(group, match.player1_id, match.player2_id)

        self._apply(first, summary, self.config.points_for_draw)
        first.draws += 1
        self._apply(second, summary.mirrored(), self.config.points_for_draw)
        second.draws += 1

        match.is_draw = True
        match.score = score
        match.match_date = played_at or datetime.now(timezone.utc)

        group.standings = recalculate_standings(group.standings)

        logger.info(
            "Recorded %s: %s drew with %s", group.name, match.player1_id, match.player2_id
        )
        return group

    def _get_open_match(self, group: Group, match_id: str) -> GroupMatch:
        match = group.get_match(match_id)
        if match is None:
            logger.error("Match %s not found in %s", match_id, group.name)
            raise MatchNotFoundException(f"Match {match_id} not found in {group.name}")
        if match.is_played:
            logger.warning("Match %s already has a result", match_id)
            raise DuplicateResultException(f"Match {match_id} already has a result")
        return match

    def _get_standings(
        self, group: Group, first_id: str, second_id: str
    ) -> Tuple[GroupStanding, GroupStanding]:
        first = group.get_standing(first_id)
        second = group.get_standing(second_id)
        if first is None or second is None:
            logger.error("Cannot find standings for %s and/or %s", first_id, second_id)
            raise ParticipantNotFoundException(
                f"Standings missing for {first_id} and/or {second_id} in {group.name}"
            )
        return first, second

    @staticmethod
    def _apply(standing: GroupStanding, summary: ScoreSummary, points: int) -> None:
        standing.matches_played += 1
        standing.points += points
        standing.sets_won += summary.sets_won
        standing.sets_lost += summary.sets_lost
        standing.games_won += summary.games_won
        standing.games_lost += summary.games_lost
        standing.update_differences()
