"""Data models for a group and its standings table."""

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
from typing import Any, Dict, List, Optional

from groupstage.models.match import GroupMatch
from groupstage.models.participant import Participant


@dataclass
class GroupStanding:
    """One player's row in a group's standings table.

    Attributes
    ----------
    player_id : str
        Id of the player.
    player_name : str
        Display name.
    points : int
        Accumulated table points.
    wins, losses, draws, matches_played : int
        Match counters.
    sets_won, sets_lost : int
        Set counters.
    set_difference : int
        sets_won - sets_lost; may be negative.
    games_won, games_lost : int
        Game counters.
    game_difference : int
        games_won - games_lost; may be negative.
    position : int
        1-based rank inside the group; 0 until standings are ranked.
    qualified_for_knockout : bool
        Set by qualification logic once positions are known.
    player_elo : float or None
        Rating at the time the group was generated.
    """

    player_id: str
    player_name: str = ""
    points: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0
    matches_played: int = 0
    sets_won: int = 0
    sets_lost: int = 0
    set_difference: int = 0
    games_won: int = 0
    games_lost: int = 0
    game_difference: int = 0
    position: int = 0
    qualified_for_knockout: bool = False
    player_elo: Optional[float] = None

    @classmethod
    def initial(cls, participant: Participant) -> "GroupStanding":
        """Zero-valued standing for a freshly seeded participant."""
        return cls(
            player_id=participant.user_id,
            player_name=participant.user_name,
            player_elo=participant.elo,
        )

    def update_differences(self) -> None:
        """Recompute the two difference fields from the counters."""
        self.set_difference = self.sets_won - self.sets_lost
        self.game_difference = self.games_won - self.games_lost

    def to_dict(self) -> Dict[str, Any]:
        """Serialize standing to dictionary."""
        return {
            "playerId": self.player_id,
            "playerName": self.player_name,
            "playerElo": self.player_elo,
            "points": self.points,
            "wins": self.wins,
            "losses": self.losses,
            "draws": self.draws,
            "matchesPlayed": self.matches_played,
            "setsWon": self.sets_won,
            "setsLost": self.sets_lost,
            "setDifference": self.set_difference,
            "gamesWon": self.games_won,
            "gamesLost": self.games_lost,
            "gameDifference": self.game_difference,
            "position": self.position,
            "qualifiedForKnockout": self.qualified_for_knockout,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GroupStanding":
        """Deserialize standing from dictionary."""
        sets_won = data.get("setsWon", 0)
        sets_lost = data.get("setsLost", 0)
        games_won = data.get("gamesWon", 0)
        games_lost = data.get("gamesLost", 0)
        return cls(
            player_id=data["playerId"],
            player_name=data.get("playerName", ""),
            player_elo=data.get("playerElo"),
            points=data.get("points", 0),
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            draws=data.get("draws", 0),
            matches_played=data.get("matchesPlayed", 0),
            sets_won=sets_won,
            sets_lost=sets_lost,
            set_difference=data.get("setDifference", sets_won - sets_lost),
            games_won=games_won,
            games_lost=games_lost,
            game_difference=data.get("gameDifference", games_won - games_lost),
            position=data.get("position", 0),
            qualified_for_knockout=data.get("qualifiedForKnockout", False),
        )


@dataclass
class Group:
    """A group of the group stage.

    ``participants`` and ``standings`` hold the same player ids. They share
    index order only when the group is created; afterwards ``standings`` is
    the canonical record and may be reordered on its own.

    Attributes
    ----------
    id : str
        Group identifier ("group-A", ...).
    name : str
        Display name ("Grupo A", ...).
    seed : int
        1-based creation order.
    participants : list of str
        Player ids in seeding order.
    standings : list of GroupStanding
        One row per participant.
    matches : list of GroupMatch
        Fixtures; empty until the stage is locked.
    """

    id: str
    name: str
    seed: int
    participants: List[str] = field(default_factory=list)
    standings: List[GroupStanding] = field(default_factory=list)
    matches: List[GroupMatch] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.participants)

    @property
    def is_complete(self) -> bool:
        """True when every fixture has a result; a group without fixtures is complete."""
        return all(m.is_played for m in self.matches)

    def get_standing(self, player_id: str) -> Optional[GroupStanding]:
        for standing in self.standings:
            if standing.player_id == player_id:
                return standing
        return None

    def get_match(self, match_id: str) -> Optional[GroupMatch]:
        for match in self.matches:
            if match.id == match_id:
                return match
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize group to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "seed": self.seed,
            "participants": list(self.participants),
            "standings": [s.to_dict() for s in self.standings],
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Group":
        """Deserialize group from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            seed=data.get("seed", 0),
            participants=list(data.get("participants", [])),
            standings=[GroupStanding.from_dict(s) for s in data.get("standings", [])],
            matches=[GroupMatch.from_dict(m) for m in data.get("matches", [])],
        )
