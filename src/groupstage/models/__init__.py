from groupstage.models.group import Group, GroupStanding
from groupstage.models.group_stage import GroupStage, GroupStageConfig, GroupStageStatus
from groupstage.models.match import GroupMatch
from groupstage.models.participant import Participant

__all__ = [
    "Participant",
    "Group",
    "GroupStanding",
    "GroupMatch",
    "GroupStage",
    "GroupStageConfig",
    "GroupStageStatus",
]
