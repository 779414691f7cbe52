import random

import pytest

from groupstage.exceptions import EmptyParticipantsException, InvalidGroupCountException
from groupstage.models import Participant
from groupstage.pairing import generate_balanced_groups, snake_order


def _ranked_participants(count):
    return [
        Participant(user_id=f"user{i + 1}", user_name=f"Player {i + 1}", elo=2000 - i * 50)
        for i in range(count)
    ]


def test_sixteen_players_four_groups_snake_seeding():
    groups = generate_balanced_groups(_ranked_participants(16), 4)

    assert len(groups) == 4
    assert [g.name for g in groups] == ["Grupo A", "Grupo B", "Grupo C", "Grupo D"]
    assert [g.id for g in groups] == ["group-A", "group-B", "group-C", "group-D"]
    assert [g.seed for g in groups] == [1, 2, 3, 4]
    for group in groups:
        assert len(group.participants) == 4
        assert len(group.standings) == 4

    assert set(groups[0].participants) == {"user1", "user8", "user9", "user16"}
    assert set(groups[1].participants) == {"user2", "user7", "user10", "user15"}
    assert set(groups[2].participants) == {"user3", "user6", "user11", "user14"}
    assert set(groups[3].participants) == {"user4", "user5", "user12", "user13"}


def test_uneven_distribution_sizes_differ_by_at_most_one():
    groups = generate_balanced_groups(_ranked_participants(15), 4)

    sizes = [len(g.participants) for g in groups]
    assert sorted(sizes) == [3, 4, 4, 4]
    assert sum(sizes) == 15


@pytest.mark.parametrize("count,number_of_groups", [(5, 2), (7, 3), (10, 4), (23, 5), (9, 9)])
def test_group_sizes_are_balanced(count, number_of_groups):
    groups = generate_balanced_groups(_ranked_participants(count), number_of_groups)

    sizes = [g.size for g in groups]
    assert len(groups) == number_of_groups
    assert max(sizes) - min(sizes) <= 1
    assert sum(sizes) == count
    all_ids = [pid for g in groups for pid in g.participants]
    assert sorted(all_ids) == sorted(f"user{i + 1}" for i in range(count))


def test_unsorted_input_is_ranked_by_elo():
    participants = _ranked_participants(8)
    shuffled = list(reversed(participants))

    groups = generate_balanced_groups(shuffled, 2)

    # seeds 1, 4, 5, 8 land in the first group
    assert groups[0].participants == ["user1", "user4", "user5", "user8"]
    assert groups[1].participants == ["user2", "user3", "user6", "user7"]


def test_equal_ratings_keep_input_order():
    participants = [
        Participant(user_id="a", user_name="A", elo=1500),
        Participant(user_id="b", user_name="B", elo=1500),
        Participant(user_id="c", user_name="C", elo=1500),
    ]

    groups = generate_balanced_groups(participants, 3)

    assert [g.participants for g in groups] == [["a"], ["b"], ["c"]]


def test_standings_initialized_with_zero_values():
    participants = [
        Participant(user_id="user1", user_name="Player 1", elo=2000),
        Participant(user_id="user2", user_name="Player 2", elo=1900),
    ]

    groups = generate_balanced_groups(participants, 1)

    standings = groups[0].standings
    assert [s.player_id for s in standings] == ["user1", "user2"]
    assert [s.player_name for s in standings] == ["Player 1", "Player 2"]
    for standing in standings:
        assert standing.points == 0
        assert standing.wins == 0
        assert standing.losses == 0
        assert standing.draws == 0
        assert standing.matches_played == 0
        assert standing.sets_won == 0
        assert standing.sets_lost == 0
        assert standing.set_difference == 0
        assert standing.games_won == 0
        assert standing.games_lost == 0
        assert standing.game_difference == 0
        assert standing.position == 0
        assert standing.qualified_for_knockout is False


def test_standings_mirror_seeding_order():
    groups = generate_balanced_groups(_ranked_participants(16), 4)

    for group in groups:
        assert [s.player_id for s in group.standings] == group.participants
        assert group.matches == []


@pytest.mark.parametrize("number_of_groups", [0, -1])
def test_non_positive_group_count_is_rejected(number_of_groups):
    with pytest.raises(InvalidGroupCountException):
        generate_balanced_groups(_ranked_participants(4), number_of_groups)


def test_more_groups_than_participants_is_rejected():
    with pytest.raises(InvalidGroupCountException):
        generate_balanced_groups(_ranked_participants(3), 4)


def test_empty_participants_is_rejected():
    with pytest.raises(EmptyParticipantsException):
        generate_balanced_groups([], 2)


def test_more_than_26_groups_is_rejected():
    with pytest.raises(InvalidGroupCountException):
        generate_balanced_groups(_ranked_participants(30), 27)


def test_random_seeding_is_reproducible_and_balanced():
    participants = _ranked_participants(12)

    first = generate_balanced_groups(participants, 3, rng=random.Random(42))
    second = generate_balanced_groups(participants, 3, rng=random.Random(42))

    assert [g.participants for g in first] == [g.participants for g in second]
    assert [g.size for g in first] == [4, 4, 4]


def test_snake_order_turns_on_end_groups():
    order = snake_order(3)
    assert [next(order) for _ in range(8)] == [0, 1, 2, 2, 1, 0, 0, 1]


def test_input_is_not_mutated():
    participants = list(reversed(_ranked_participants(6)))
    before = list(participants)

    generate_balanced_groups(participants, 2)

    assert participants == before
