"""Group match (fixture) data class."""

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

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from dateutil import parser as date_parser


@dataclass
class GroupMatch:
    """A single one-on-one match inside a group.

    Attributes
    ----------
    id : str
        Unique match identifier.
    group_id : str
        Id of the group the match belongs to.
    player1_id : str
        First player.
    player2_id : str
        Second player.
    round : int
        1-based round; matches in one round share no player.
    winner_id : str or None
        Set once the match has been played and won.
    score : str or None
        Score text from the winner's side, e.g. "6-4, 6-3".
    match_date : datetime or None
        When the result was recorded.
    is_draw : bool
        True when the match was recorded without a winner.
    """

    id: str
    group_id: str
    player1_id: str
    player2_id: str
    round: int = 1
    winner_id: Optional[str] = None
    score: Optional[str] = None
    match_date: Optional[datetime] = None
    is_draw: bool = False

    @property
    def is_played(self) -> bool:
        """Whether a result has been recorded."""
        return self.winner_id is not None or self.is_draw

    def involves(self, player_id: str) -> bool:
        """Check if a player takes part in this match."""
        return player_id in (self.player1_id, self.player2_id)

    def opponent_of(self, player_id: str) -> str:
        """Return the other player of the match."""
        if player_id == self.player1_id:
            return self.player2_id
        if player_id == self.player2_id:
            return self.player1_id
        raise ValueError(f"Player {player_id} is not part of match {self.id}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "groupId": self.group_id,
            "player1Id": self.player1_id,
            "player2Id": self.player2_id,
            "round": self.round,
            "winnerId": self.winner_id,
            "score": self.score,
            "matchDate": self.match_date.isoformat() if self.match_date else None,
            "isDraw": self.is_draw,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GroupMatch":
        """Deserialize match from dictionary."""
        match_date = data.get("matchDate")
        if isinstance(match_date, str):
            match_date = date_parser.isoparse(match_date)
        return cls(
            id=data["id"],
            group_id=data["groupId"],
            player1_id=data["player1Id"],
            player2_id=data["player2Id"],
            round=data.get("round", 1),
            winner_id=data.get("winnerId"),
            score=data.get("score"),
            match_date=match_date,
            is_draw=data.get("isDraw", False),
        )
