"""Command-line interface for drawing group stages.

Reads a JSON list of participants, builds the groups and their fixtures and
prints them as text or JSON.
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

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from groupstage.constants import SEEDING_METHODS, SEEDING_RANKING
from groupstage.controllers import GroupStageManager
from groupstage.exceptions import GroupStageEngineException
from groupstage.models import GroupStage, GroupStageConfig, Participant
from groupstage.utils import setup_logger

logger = setup_logger(__name__)


def load_participants(path: str) -> List[Participant]:
    """Load participants from a JSON file ("-" reads stdin).

    The file holds a list of objects with ``userId``, ``userName`` and ``elo``.
    """
    if path == "-":
        data = json.load(sys.stdin)
    else:
        with Path(path).open(encoding="utf-8") as handle:
            data = json.load(handle)

    if not isinstance(data, list):
        raise argparse.ArgumentTypeError("Participants file must contain a JSON list")
    return [Participant.from_dict(item) for item in data]


def format_stage(stage: GroupStage, with_fixtures: bool) -> str:
    """Plain-text rendering of the groups and, optionally, their fixtures."""
    lines: List[str] = []
    for group in stage.groups:
        lines.append(f"{group.name} ({group.size} players)")
        for seed, standing in enumerate(group.standings, start=1):
            elo = f" [{standing.player_elo:g}]" if standing.player_elo is not None else ""
            lines.append(f"  {seed}. {standing.player_name or standing.player_id}{elo}")
        if with_fixtures:
            names = {s.player_id: s.player_name or s.player_id for s in group.standings}
            for match in sorted(group.matches, key=lambda m: m.round):
                lines.append(
                    f"    R{match.round}: {names[match.player1_id]} vs {names[match.player2_id]}"
                )
        lines.append("")
    return "\n".join(lines)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        description="Draw balanced groups and round-robin fixtures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Four groups, ranked by elo
  groupstage-draw players.json --groups 4

  # Random draw with fixtures, as JSON
  groupstage-draw players.json --groups 3 --seeding RANDOM --seed 7 --fixtures --json
        """,
    )

    parser.add_argument("participants", help="JSON file with participants ('-' for stdin)")

    parser.add_argument(
        "--groups",
        type=int,
        required=True,
        help="Number of groups to build",
    )

    parser.add_argument(
        "--seeding",
        choices=SEEDING_METHODS,
        default=SEEDING_RANKING,
        help="Seeding method (default: RANKING)",
    )

    parser.add_argument("--seed", type=int, help="Random seed for reproducible RANDOM draws")

    parser.add_argument(
        "--fixtures", action="store_true", help="Also generate round-robin fixtures"
    )

    parser.add_argument("--json", action="store_true", help="Print the stage as JSON")

    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        for name in list(logging.root.manager.loggerDict):
            if name.startswith("groupstage"):
                logging.getLogger(name).setLevel(logging.DEBUG)

    try:
        participants = load_participants(args.participants)
        config = GroupStageConfig(number_of_groups=args.groups, seeding_method=args.seeding)
        manager = GroupStageManager()
        stage = manager.create_group_stage(
            "cli", "cli", participants, config, rng=random.Random(args.seed)
        )
        if args.fixtures:
            manager.lock_and_generate_fixtures(stage)
    except (OSError, ValueError, KeyError, argparse.ArgumentTypeError) as e:
        logger.error("Could not read participants: %s", e)
        return 2
    except GroupStageEngineException as e:
        logger.error("Group draw failed: %s", e)
        return 1

    if args.json:
        print(json.dumps(stage.to_dict(), indent=2))
    else:
        print(format_stage(stage, args.fixtures))
    return 0


if __name__ == "__main__":
    sys.exit(main())
