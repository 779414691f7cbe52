from groupstage.controllers.group_editor import move_participant, swap_participants
from groupstage.controllers.group_stage_manager import GroupStageManager
from groupstage.controllers.result_recorder import ResultRecorder

__all__ = [
    "GroupStageManager",
    "ResultRecorder",
    "move_participant",
    "swap_participants",
]
