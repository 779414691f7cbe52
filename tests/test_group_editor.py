import pytest

from groupstage.controllers import GroupStageManager, move_participant, swap_participants
from groupstage.exceptions import (
    GroupBalanceException,
    GroupNotFoundException,
    GroupStageStateException,
    InvalidGroupEditException,
    ParticipantNotFoundException,
)
from groupstage.models import GroupStageConfig, Participant


def _stage(count, groups):
    participants = [
        Participant(user_id=f"user{i + 1}", user_name=f"Player {i + 1}", elo=2000 - i * 50)
        for i in range(count)
    ]
    return GroupStageManager().create_group_stage(
        "t1", "c1", participants, GroupStageConfig(number_of_groups=groups)
    )


def test_move_to_smaller_group():
    # 7 over 2: A gets seeds 1, 4, 5 and B gets 2, 3, 6, 7
    stage = _stage(7, 2)
    group_a, group_b = stage.groups
    assert (group_a.size, group_b.size) == (3, 4)

    move_participant(stage, "user2", "group-B", "group-A")

    assert (group_a.size, group_b.size) == (4, 3)
    assert group_a.participants[-1] == "user2"
    assert {s.player_id for s in group_a.standings} == set(group_a.participants)
    assert {s.player_id for s in group_b.standings} == set(group_b.participants)


def test_move_that_unbalances_is_rejected():
    stage = _stage(8, 2)

    with pytest.raises(GroupBalanceException):
        move_participant(stage, "user1", "group-A", "group-B")
    assert "user1" in stage.groups[0].participants


def test_move_requires_participant_in_source():
    stage = _stage(7, 2)

    with pytest.raises(ParticipantNotFoundException):
        move_participant(stage, "user2", "group-A", "group-B")


def test_move_requires_known_groups():
    stage = _stage(7, 2)

    with pytest.raises(GroupNotFoundException):
        move_participant(stage, "user1", "group-A", "group-Z")


def test_move_to_same_group_is_rejected():
    stage = _stage(7, 2)

    with pytest.raises(InvalidGroupEditException):
        move_participant(stage, "user1", "group-A", "group-A")


def test_swap_exchanges_slots_and_standings():
    stage = _stage(8, 2)
    group_a, group_b = stage.groups
    slot_a = group_a.participants.index("user1")
    slot_b = group_b.participants.index("user2")

    swap_participants(stage, "user1", "group-A", "user2", "group-B")

    assert group_a.participants[slot_a] == "user2"
    assert group_b.participants[slot_b] == "user1"
    assert group_a.standings[slot_a].player_id == "user2"
    assert group_b.standings[slot_b].player_id == "user1"


def test_swap_within_same_group_is_rejected():
    stage = _stage(8, 2)

    with pytest.raises(InvalidGroupEditException):
        swap_participants(stage, "user1", "group-A", "user4", "group-A")


def test_swap_requires_participants_in_named_groups():
    stage = _stage(8, 2)

    with pytest.raises(ParticipantNotFoundException):
        swap_participants(stage, "user2", "group-A", "user1", "group-B")


def test_edits_are_rejected_once_locked():
    stage = _stage(7, 2)
    GroupStageManager().lock_and_generate_fixtures(stage)

    with pytest.raises(GroupStageStateException):
        move_participant(stage, "user1", "group-A", "group-B")
    with pytest.raises(GroupStageStateException):
        swap_participants(stage, "user1", "group-A", "user2", "group-B")
