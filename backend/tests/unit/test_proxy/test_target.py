"""
Upstream target resolution tests
"""

import pytest

from gamelayer_proxy.domain.request import UpstreamTarget
from gamelayer_proxy.proxy.target import filter_query, resolve_target

ORIGIN = "https://api.gamelayer.co"


class TestSubPath:
    """Sub-path extraction"""

    @pytest.mark.parametrize(
        "raw_url, expected",
        [
            ("/api/v0/players/42", "players/42"),
            ("/api/v0/players/42/", "players/42"),
            ("/api/v0//missions", "missions"),
            ("/api/v0/events/e1/complete?x=1", "events/e1/complete"),
        ],
    )
    def test_prefix_and_slashes_stripped(self, raw_url, expected):
        assert resolve_target(raw_url).sub_path == expected

    def test_literal_path_wins_over_capture_param(self):
        target = resolve_target("/api/v0/players?path=missions")
        assert target.sub_path == "players"

    def test_falls_back_to_query_param_without_prefix(self):
        target = resolve_target("/api/proxy?path=players/42&account=gl")
        assert target.sub_path == "players/42"
        assert target.query == "?account=gl"

    def test_falls_back_when_prefix_has_no_sub_path(self):
        assert resolve_target("/api/v0?path=levels").sub_path == "levels"

    def test_repeated_capture_params_are_joined_as_segments(self):
        assert resolve_target("/handler?path=players&path=42").sub_path == "players/42"

    def test_route_params_string(self):
        target = resolve_target("/handler", route_params={"path": "/rewards/r1/"})
        assert target.sub_path == "rewards/r1"

    def test_route_params_segment_list(self):
        target = resolve_target("/handler", route_params={"path": ["rewards", "r1", "redeem"]})
        assert target.sub_path == "rewards/r1/redeem"

    def test_empty_sub_path_still_builds_url(self):
        target = resolve_target("/api/v0")
        assert target.sub_path == ""
        assert target.url(ORIGIN) == "https://api.gamelayer.co/api/v0/"

    def test_empty_raw_url(self):
        assert resolve_target("") == UpstreamTarget(sub_path="", query="")


class TestQueryFiltering:
    """Query string filtering"""

    def test_capture_param_removed_order_kept(self):
        target = resolve_target("/api/v0/players?b=2&path=players&a=1&c=3")
        assert target.query == "?b=2&a=1&c=3"

    def test_only_capture_param_gives_empty_query(self):
        assert resolve_target("/api/v0/players?path=players").query == ""

    def test_no_query(self):
        assert resolve_target("/api/v0/players").query == ""

    def test_blank_values_and_repeats_kept(self):
        assert filter_query([("a", ""), ("tag", "x"), ("tag", "y")]) == "?a=&tag=x&tag=y"

    def test_values_reencoded(self):
        target = resolve_target("/api/v0/players?name=John%20Doe&q=a%26b")
        assert target.query == "?name=John+Doe&q=a%26b"


def test_upstream_url():
    target = resolve_target("/api/v0/players?limit=10")
    assert target.url(ORIGIN + "/") == "https://api.gamelayer.co/api/v0/players?limit=10"
