"""Group stage aggregate and its configuration."""

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

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from dateutil import parser as date_parser

from groupstage.constants import (
    DEFAULT_PLAYERS_ADVANCING,
    DEFAULT_POINTS_FOR_DRAW,
    DEFAULT_POINTS_FOR_LOSS,
    DEFAULT_POINTS_FOR_WIN,
    DEFAULT_SEEDING_METHOD,
    SEEDING_METHODS,
)
from groupstage.exceptions import InvalidConfigurationException
from groupstage.models.group import Group
from groupstage.models.match import GroupMatch


class GroupStageStatus(str, Enum):
    """Lifecycle of a group stage."""

    DRAFT = "DRAFT"  # groups generated, organiser may still adjust them
    LOCKED = "LOCKED"  # groups frozen, fixtures generated
    IN_PROGRESS = "IN_PROGRESS"  # at least one result recorded
    COMPLETED = "COMPLETED"  # every match of every group played


@dataclass
class GroupStageConfig:
    """Group stage configuration for one tournament category.

    Attributes
    ----------
    number_of_groups : int
        How many groups to build.
    players_advancing_per_group : int
        Top positions per group that qualify for the knockout stage.
    seeding_method : str
        "RANKING" (by elo) or "RANDOM".
    points_for_win, points_for_draw, points_for_loss : int
        Table points awarded per match outcome.
    """

    number_of_groups: int
    players_advancing_per_group: int = DEFAULT_PLAYERS_ADVANCING
    seeding_method: str = DEFAULT_SEEDING_METHOD
    points_for_win: int = DEFAULT_POINTS_FOR_WIN
    points_for_draw: int = DEFAULT_POINTS_FOR_DRAW
    points_for_loss: int = DEFAULT_POINTS_FOR_LOSS

    def validate(self) -> None:
        """Check the configuration.

        Raises:
            InvalidConfigurationException: If any value is out of range
        """
        if self.number_of_groups is None or self.number_of_groups <= 0:
            raise InvalidConfigurationException(
                f"Number of groups must be positive, got {self.number_of_groups}"
            )
        if self.players_advancing_per_group < 0:
            raise InvalidConfigurationException(
                "Players advancing per group cannot be negative"
            )
        if self.seeding_method not in SEEDING_METHODS:
            raise InvalidConfigurationException(
                f"Unknown seeding method '{self.seeding_method}'"
            )
        for name in ("points_for_win", "points_for_draw", "points_for_loss"):
            if getattr(self, name) < 0:
                raise InvalidConfigurationException(f"{name} cannot be negative")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "numberOfGroups": self.number_of_groups,
            "playersAdvancingPerGroup": self.players_advancing_per_group,
            "seedingMethod": self.seeding_method,
            "pointsForWin": self.points_for_win,
            "pointsForDraw": self.points_for_draw,
            "pointsForLoss": self.points_for_loss,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GroupStageConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            number_of_groups=data["numberOfGroups"],
            players_advancing_per_group=data.get(
                "playersAdvancingPerGroup", DEFAULT_PLAYERS_ADVANCING
            ),
            seeding_method=data.get("seedingMethod", DEFAULT_SEEDING_METHOD),
            points_for_win=data.get("pointsForWin", DEFAULT_POINTS_FOR_WIN),
            points_for_draw=data.get("pointsForDraw", DEFAULT_POINTS_FOR_DRAW),
            points_for_loss=data.get("pointsForLoss", DEFAULT_POINTS_FOR_LOSS),
        )


@dataclass
class GroupStage:
    """The group stage of one tournament category.

    Attributes
    ----------
    tournament_id : str
        Owning tournament.
    category_id : str
        Owning category.
    config : GroupStageConfig
        Settings used to build and score the stage.
    groups : list of Group
        Groups in creation order.
    status : GroupStageStatus
        Current lifecycle state.
    created_at, updated_at : datetime or None
        Audit timestamps.
    """

    tournament_id: str
    category_id: str
    config: GroupStageConfig
    groups: List[Group] = field(default_factory=list)
    status: GroupStageStatus = GroupStageStatus.DRAFT
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def get_group(self, group_id: str) -> Optional[Group]:
        for group in self.groups:
            if group.id == group_id:
                return group
        return None

    def find_match(self, match_id: str) -> Tuple[Optional[Group], Optional[GroupMatch]]:
        """Locate a match and the group holding it."""
        for group in self.groups:
            match = group.get_match(match_id)
            if match is not None:
                return group, match
        return None, None

    @property
    def all_groups_complete(self) -> bool:
        return bool(self.groups) and all(g.is_complete for g in self.groups)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize group stage to dictionary."""
        return {
            "tournamentId": self.tournament_id,
            "categoryId": self.category_id,
            "config": self.config.to_dict(),
            "groups": [g.to_dict() for g in self.groups],
            "status": self.status.value,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GroupStage":
        """Deserialize group stage from dictionary."""
        return cls(
            tournament_id=data["tournamentId"],
            category_id=data["categoryId"],
            config=GroupStageConfig.from_dict(data["config"]),
            groups=[Group.from_dict(g) for g in data.get("groups", [])],
            status=GroupStageStatus(data.get("status", GroupStageStatus.DRAFT.value)),
            created_at=_parse_datetime(data.get("createdAt")),
            updated_at=_parse_datetime(data.get("updatedAt")),
        )


def _parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return date_parser.isoparse(value)
