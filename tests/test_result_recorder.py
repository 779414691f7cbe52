from datetime import datetime, timezone

import pytest

from groupstage.controllers import ResultRecorder
from groupstage.exceptions import (
    DuplicateResultException,
    InvalidResultException,
    InvalidScoreException,
    MatchNotFoundException,
)
from groupstage.models import GroupStageConfig, Participant
from groupstage.pairing import generate_balanced_groups, generate_round_robin_fixtures


def _group_with_fixtures(count=4):
    participants = [
        Participant(user_id=f"user{i + 1}", user_name=f"Player {i + 1}", elo=2000 - i * 50)
        for i in range(count)
    ]
    group = generate_balanced_groups(participants, 1)[0]
    group.matches = generate_round_robin_fixtures(group.participants, group.id)
    return group


def _match_between(group, a, b):
    for match in group.matches:
        if {match.player1_id, match.player2_id} == {a, b}:
            return match
    raise AssertionError(f"no match between {a} and {b}")


def test_win_updates_both_standings():
    group = _group_with_fixtures()
    match = _match_between(group, "user1", "user2")
    recorder = ResultRecorder(GroupStageConfig(number_of_groups=1))

    recorder.record_match_result(group, match.id, "user2", "6-4, 6-2")

    winner = group.get_standing("user2")
    loser = group.get_standing("user1")
    assert (winner.points, winner.wins, winner.losses, winner.matches_played) == (3, 1, 0, 1)
    assert (winner.sets_won, winner.sets_lost, winner.set_difference) == (2, 0, 2)
    assert (winner.games_won, winner.games_lost, winner.game_difference) == (12, 6, 6)
    assert (loser.points, loser.wins, loser.losses, loser.matches_played) == (0, 0, 1, 1)
    assert (loser.sets_won, loser.sets_lost, loser.set_difference) == (0, 2, -2)
    assert (loser.games_won, loser.games_lost, loser.game_difference) == (6, 12, -6)


def test_win_closes_match_and_reranks_group():
    group = _group_with_fixtures()
    match = _match_between(group, "user3", "user4")
    played_at = datetime(2025, 3, 1, 10, 0, tzinfo=timezone.utc)
    recorder = ResultRecorder(GroupStageConfig(number_of_groups=1))

    recorder.record_match_result(group, match.id, "user4", "6-3, 6-3", played_at=played_at)

    assert match.winner_id == "user4"
    assert match.score == "6-3, 6-3"
    assert match.match_date == played_at
    assert match.is_played
    assert group.standings[0].player_id == "user4"
    assert group.standings[-1].player_id == "user3"
    assert [s.position for s in group.standings] == [1, 2, 3, 4]


def test_custom_points_scheme():
    group = _group_with_fixtures()
    match = _match_between(group, "user1", "user2")
    config = GroupStageConfig(number_of_groups=1, points_for_win=2, points_for_loss=1)

    ResultRecorder(config).record_match_result(group, match.id, "user1", "6-0, 6-0")

    assert group.get_standing("user1").points == 2
    assert group.get_standing("user2").points == 1


def test_draw_awards_draw_points():
    group = _group_with_fixtures()
    match = _match_between(group, "user1", "user2")
    recorder = ResultRecorder(GroupStageConfig(number_of_groups=1))

    recorder.record_draw(group, match.id, "6-4, 4-6")

    first = group.get_standing(match.player1_id)
    second = group.get_standing(match.player2_id)
    for standing in (first, second):
        assert standing.points == 1
        assert standing.draws == 1
        assert standing.matches_played == 1
        assert standing.sets_won == 1
        assert standing.sets_lost == 1
    assert match.is_draw
    assert match.winner_id is None
    assert match.is_played


def test_draw_without_score():
    group = _group_with_fixtures()
    match = _match_between(group, "user1", "user3")

    ResultRecorder(GroupStageConfig(number_of_groups=1)).record_draw(group, match.id)

    assert group.get_standing("user1").games_won == 0
    assert group.get_standing("user3").draws == 1


def test_recording_twice_is_rejected():
    group = _group_with_fixtures()
    match = _match_between(group, "user1", "user2")
    recorder = ResultRecorder(GroupStageConfig(number_of_groups=1))
    recorder.record_match_result(group, match.id, "user1", "6-4, 6-4")

    with pytest.raises(DuplicateResultException):
        recorder.record_match_result(group, match.id, "user2", "6-4, 6-4")


def test_winner_must_play_the_match():
    group = _group_with_fixtures()
    match = _match_between(group, "user1", "user2")
    recorder = ResultRecorder(GroupStageConfig(number_of_groups=1))

    with pytest.raises(InvalidResultException):
        recorder.record_match_result(group, match.id, "user3", "6-4, 6-4")
    assert not match.is_played


def test_unknown_match_is_rejected():
    group = _group_with_fixtures()

    with pytest.raises(MatchNotFoundException):
        ResultRecorder(GroupStageConfig(number_of_groups=1)).record_match_result(
            group, "nope", "user1", "6-0, 6-0"
        )


def test_bad_score_leaves_standings_untouched():
    group = _group_with_fixtures()
    match = _match_between(group, "user1", "user2")

    with pytest.raises(InvalidScoreException):
        ResultRecorder(GroupStageConfig(number_of_groups=1)).record_match_result(
            group, match.id, "user1", "six love"
        )
    assert group.get_standing("user1").matches_played == 0
    assert not match.is_played


def test_draw_with_decisive_score_is_rejected():
    group = _group_with_fixtures()
    match = _match_between(group, "user1", "user2")

    with pytest.raises(InvalidResultException):
        ResultRecorder(GroupStageConfig(number_of_groups=1)).record_draw(
            group, match.id, "6-0, 6-0"
        )
    assert group.get_standing("user1").draws == 0
    assert group.get_standing("user2").points == 0
    assert not match.is_played


def test_win_with_losing_score_is_rejected():
    group = _group_with_fixtures()
    match = _match_between(group, "user1", "user2")

    with pytest.raises(InvalidResultException):
        ResultRecorder(GroupStageConfig(number_of_groups=1)).record_match_result(
            group, match.id, "user1", "4-6, 4-6"
        )
    assert group.get_standing("user1").wins == 0
    assert not match.is_played
