"""Participant data class."""

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
from typing import Any, Dict

from groupstage.constants import DEFAULT_ELO


@dataclass(frozen=True)
class Participant:
    """A ranked entrant to be seeded into a group.

    Attributes
    ----------
    user_id : str
        Unique identifier of the player. Uniqueness is the caller's concern.
    user_name : str
        Display name.
    elo : float
        Skill rating; higher is stronger.
    """

    user_id: str
    user_name: str
    elo: float = DEFAULT_ELO

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary."""
        return {"userId": self.user_id, "userName": self.user_name, "elo": self.elo}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Deserialize participant from dictionary."""
        return cls(
            user_id=str(data["userId"]),
            user_name=data.get("userName", data.get("name", "")),
            elo=data.get("elo", DEFAULT_ELO),
        )
