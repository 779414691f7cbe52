"""Type hints used in the Group Stage Engine."""

from typing import List, Optional, Tuple

# One fixture as (player1_id, player2_id)
MatchPairing = Tuple[str, str]
# All pairings for one round
RoundSchedule = List[MatchPairing]
# Circle seat; None is the bye
MaybePlayerId = Optional[str]

#  LocalWords:  MatchPairing RoundSchedule
