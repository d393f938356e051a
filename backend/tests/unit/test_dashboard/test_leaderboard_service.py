"""
Leaderboard service tests
"""

from gamelayer_proxy.services.leaderboard import (
    DEFAULT_DESCRIPTION,
    DEFAULT_NAME,
    Ranking,
    build_leaderboard_view,
    collect_player_ids,
)

LEADERBOARD = {
    "leaderboard": {"name": "Monthly"},
    "scores": {"data": [{"player": "p2", "scores": 50}, {"player": "p1", "scores": 80}, {"player": "p4"}]},
}

ALL_PLAYERS = {
    "data": [
        {"player": "p1", "name": "One"},
        {"player": "p2", "name": "Two"},
        {"player": "p3", "name": "Three"},
    ]
}


def test_collect_player_ids():
    assert collect_player_ids(LEADERBOARD, ALL_PLAYERS) == ["p1", "p2", "p3", "p4"]


def test_collect_player_ids_malformed():
    assert collect_player_ids(None, {"data": "x"}) == []


def test_ranked_by_score_with_unscored_players():
    view = build_leaderboard_view(LEADERBOARD, ALL_PLAYERS)

    assert [entry.id for entry in view.entries] == ["p1", "p2", "p4", "p3"]
    assert [entry.points for entry in view.entries] == [80, 50, 0, 0]
    assert view.total_players == 4


def test_details_and_current_player():
    view = build_leaderboard_view(
        LEADERBOARD,
        ALL_PLAYERS,
        player_details=[{"player": "p2", "name": "Second", "imgUrl": "p2.png"}],
        current_player="p2",
    )

    second = view.entries[1]
    assert second.name == "Second"
    assert second.avatar == "p2.png"
    assert second.is_current_user
    assert view.entries[3].name == "Three"
    assert view.your_ranking == Ranking(rank=2, points=50)


def test_metadata():
    view = build_leaderboard_view(LEADERBOARD, ALL_PLAYERS)
    assert view.name == "Monthly"
    assert view.description == DEFAULT_DESCRIPTION


def test_empty_payloads():
    view = build_leaderboard_view(None, None, current_player="p1")

    assert view.name == DEFAULT_NAME
    assert view.entries == []
    assert view.your_ranking == Ranking()


def test_paginator():
    players = {"data": [{"player": f"p{i}"} for i in range(25)]}
    view = build_leaderboard_view({}, players)

    paginator = view.paginator(page=3)
    assert [entry.id for entry in paginator.items_on_page] == ["p20", "p21", "p22", "p23", "p24"]
    assert paginator.range_label() == "Showing 21 - 25 of 25 players"
