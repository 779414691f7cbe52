from groupstage.pairing.group_builder import (
    generate_balanced_groups,
    rank_participants,
    snake_order,
)
from groupstage.pairing.round_robin import (
    generate_round_robin_fixtures,
    round_robin_schedule,
    total_rounds,
)

__all__ = [
    "generate_balanced_groups",
    "rank_participants",
    "snake_order",
    "generate_round_robin_fixtures",
    "round_robin_schedule",
    "total_rounds",
]
