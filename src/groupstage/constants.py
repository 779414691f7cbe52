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

# --- Constants ---

# Group labelling: index 0 -> "Grupo A" / "group-A"
GROUP_NAME_PREFIX = "Grupo "
GROUP_ID_PREFIX = "group-"
GROUP_LABELS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
MAX_GROUPS = len(GROUP_LABELS)

# Rating used when a participant has no ranking yet
DEFAULT_ELO = 1500

# Points scheme (configurable per category)
DEFAULT_POINTS_FOR_WIN = 3
DEFAULT_POINTS_FOR_DRAW = 1
DEFAULT_POINTS_FOR_LOSS = 0

# How many players per group move on to the knockout stage
DEFAULT_PLAYERS_ADVANCING = 2

# Seeding methods
SEEDING_RANKING = "RANKING"
SEEDING_RANDOM = "RANDOM"
SEEDING_METHODS = (SEEDING_RANKING, SEEDING_RANDOM)
DEFAULT_SEEDING_METHOD = SEEDING_RANKING

# Standings sort keys, in priority order (all descending)
STANDINGS_SORT_KEYS = ("points", "set_difference", "game_difference")

# Score text: sets separated by commas and/or whitespace, games by a dash
SET_SEPARATOR_PATTERN = r"[,\s]+"
GAMES_SEPARATOR = "-"
