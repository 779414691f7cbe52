"""Parsing of tennis-style set scores.

A score is written from the winner's side, one set per token:
``"6-4, 6-3"``, ``"6-4 3-6 7-5"`` or ``"7-6(5), 6-2"``.
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

import re
from dataclasses import dataclass
from typing import List, Tuple

from groupstage.constants import GAMES_SEPARATOR, SET_SEPARATOR_PATTERN
from groupstage.exceptions import InvalidScoreException
from groupstage.utils import setup_logger

logger = setup_logger(__name__)

# "7-6(5)" -> games 7 and 6, tie-break points dropped
SET_PATTERN = re.compile(r"^(\d+)-(\d+)(?:\(\d+\))?$")


@dataclass(frozen=True)
class ScoreSummary:
    """Sets and games totals seen from the first number of each set.

    Attributes:
        sets_won: Sets where the first number is higher
        sets_lost: Sets where the second number is higher
        games_won: Sum of the first numbers
        games_lost: Sum of the second numbers
    """

    sets_won: int = 0
    sets_lost: int = 0
    games_won: int = 0
    games_lost: int = 0

    def mirrored(self) -> "ScoreSummary":
        """The same score seen from the other player's side."""
        return ScoreSummary(
            sets_won=self.sets_lost,
            sets_lost=self.sets_won,
            games_won=self.games_lost,
            games_lost=self.games_won,
        )


def split_sets(score: str) -> List[Tuple[int, int]]:
    """Split a score string into (games, games) tuples.

    Raises:
        InvalidScoreException: If the string is empty or a set is malformed
    """
    if score is None or not score.strip():
        raise InvalidScoreException("Score is empty")

    # "6 - 4" is still one set
    normalized = re.sub(r"\s*" + GAMES_SEPARATOR + r"\s*", GAMES_SEPARATOR, score.strip())
    normalized = re.sub(r"\s+\(", "(", normalized)
    tokens = [t for t in re.split(SET_SEPARATOR_PATTERN, normalized) if t]

    sets: List[Tuple[int, int]] = []
    for token in tokens:
        match = SET_PATTERN.match(token)
        if not match:
            logger.error("Malformed set %r in score %r", token, score)
            raise InvalidScoreException(f"Malformed set '{token}' in score '{score}'")
        first, second = int(match.group(1)), int(match.group(2))
        if first == second:
            raise InvalidScoreException(
                f"Set '{token}' has no winner in score '{score}'"
            )
        sets.append((first, second))
    return sets


def parse_score(score: str) -> ScoreSummary:
    """Parse a score string into set and game totals.

    Args:
        score: Score text such as "6-4, 3-6, 7-5"

    Returns:
        ScoreSummary from the point of view of the first number in each set

    Raises:
        InvalidScoreException: If the score cannot be parsed

    Example:
        >>> parse_score("6-4, 3-6, 7-5")
        ScoreSummary(sets_won=2, sets_lost=1, games_won=16, games_lost=15)
    """
    sets_won = sets_lost = games_won = games_lost = 0
    for first, second in split_sets(score):
        if first > second:
            sets_won += 1
        else:
            sets_lost += 1
        games_won += first
        games_lost += second

    return ScoreSummary(
        sets_won=sets_won,
        sets_lost=sets_lost,
        games_won=games_won,
        games_lost=games_lost,
    )
