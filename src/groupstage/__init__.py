"""Group stage generation and standings engine.

Seeds ranked participants into balanced groups, builds each group's
round-robin fixtures and ranks group standings with deterministic
tie-breaks.
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

from groupstage.controllers import (
    GroupStageManager,
    ResultRecorder,
    move_participant,
    swap_participants,
)
from groupstage.models import (
    Group,
    GroupMatch,
    GroupStage,
    GroupStageConfig,
    GroupStageStatus,
    GroupStanding,
    Participant,
)
from groupstage.pairing import (
    generate_balanced_groups,
    generate_round_robin_fixtures,
    round_robin_schedule,
)
from groupstage.tournament import mark_qualified, recalculate_standings
from groupstage.utils.score_parser import ScoreSummary, parse_score

__version__ = "0.1.0"

__all__ = [
    "generate_balanced_groups",
    "generate_round_robin_fixtures",
    "round_robin_schedule",
    "recalculate_standings",
    "mark_qualified",
    "parse_score",
    "ScoreSummary",
    "ResultRecorder",
    "GroupStageManager",
    "move_participant",
    "swap_participants",
    "Participant",
    "Group",
    "GroupStanding",
    "GroupMatch",
    "GroupStage",
    "GroupStageConfig",
    "GroupStageStatus",
]
