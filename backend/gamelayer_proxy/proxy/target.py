"""
Upstream Target Resolution

Turns the raw inbound URL into the forwarded sub-path and filtered query string.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional
from urllib.parse import parse_qsl, urlencode

from gamelayer_proxy.domain.request import API_PREFIX, UpstreamTarget

# Query/route parameter some hosting setups use to pass the wildcard path
ROUTE_CAPTURE_PARAM = "path"


def _strip_slashes(value: str) -> str:
    return value.strip("/")


def _join_capture(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return "/".join(str(part) for part in value)
    return str(value or "")


def extract_sub_path(
    path_part: str,
    query_pairs: list[tuple[str, str]],
    route_params: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    Extract the forwarded sub-path

    The literal URL path wins when it carries the mount prefix. Otherwise the
    routing-capture parameter is read, first from framework route params,
    then from the query string (repeated values are joined as segments).
    """
    sub_path = ""
    if path_part.startswith(API_PREFIX):
        sub_path = _strip_slashes(path_part[len(API_PREFIX):])
    if sub_path:
        return sub_path

    if route_params and route_params.get(ROUTE_CAPTURE_PARAM):
        return _strip_slashes(_join_capture(route_params[ROUTE_CAPTURE_PARAM]))

    captured = [value for key, value in query_pairs if key == ROUTE_CAPTURE_PARAM]
    if len(captured) == 1:
        return _strip_slashes(captured[0])
    return _strip_slashes(_join_capture(captured))


def filter_query(query_pairs: list[tuple[str, str]]) -> str:
    """
    Drop the routing-capture parameter and re-serialize the rest in order

    Returns:
        str: "?a=1&b=2", or "" when nothing is left
    """
    kept = [(key, value) for key, value in query_pairs if key != ROUTE_CAPTURE_PARAM]
    encoded = urlencode(kept)
    return f"?{encoded}" if encoded else ""


def resolve_target(
    raw_url: str,
    route_params: Optional[Mapping[str, Any]] = None,
) -> UpstreamTarget:
    """
    Resolve the upstream target for an inbound URL

    Args:
        raw_url: Raw request path with optional "?query"
        route_params: Route values captured by the hosting framework

    Returns:
        UpstreamTarget: Sub-path and filtered query

    Example:
        >>> resolve_target("/api/v0/players/42?account=x&path=players/42")
        UpstreamTarget(sub_path='players/42', query='?account=x')
    """
    path_part, _, query = (raw_url or "").partition("?")
    query_pairs = parse_qsl(query, keep_blank_values=True) if query else []

    return UpstreamTarget(
        sub_path=extract_sub_path(path_part, query_pairs, route_params),
        query=filter_query(query_pairs),
    )
