"""
Cache key derivation.

Every cacheable request is reduced to the fields that change its result,
so a bare identifier and a request object wrapping the same identifier map
to one key. Key parts are percent-encoded and joined with ``:``; ``*`` marks
an absent part. The functions here are pure and raise
``MalformedRequestError`` before any upstream call can happen.
"""

from typing import Any, Optional, Tuple
from urllib.parse import quote

from shared.errors import MalformedRequestError
from ..domain.identifiers import IDENTIFIER_KINDS, ServerApiId
from ..domain.requests import Game, Statistic, effective_leaderboard_limit

GAME_SERVER_DETAILS = "gameServerDetails"
PLAYER_DETAILS = "playerDetails"
LEADERBOARD = "leaderboard"
PRIORITY_QUEUE = "priorityQueue"
WHITELIST = "whitelist"

ABSENT = "*"


def make_cache_key(operation: str, *parts: Optional[str]) -> str:
    """Join an operation name and identity parts into a cache key."""
    encoded = [quote(operation, safe="")]
    encoded.extend(ABSENT if part is None else quote(part, safe="") for part in parts)
    return ":".join(encoded)


def player_cache_key(operation: str, request: Any, default_server_api_id: Optional[ServerApiId] = None) -> str:
    """Key for a player-scoped lookup given a request object or bare identifier."""
    player_id, server_api_id = _unwrap_player(request)
    kind, identifier = _identifier_parts(player_id)
    server = _server_part(server_api_id, default_server_api_id)
    return make_cache_key(operation, server, kind, identifier)


def leaderboard_cache_key(request: Any, default_server_api_id: Optional[ServerApiId] = None) -> str:
    statistic = _statistic(getattr(request, "statistic", None))
    order = _order(getattr(request, "order", "DESC"))
    limit = effective_leaderboard_limit(getattr(request, "limit", None))
    server = _server_part(getattr(request, "server_api_id", None), default_server_api_id)
    return make_cache_key(
        LEADERBOARD,
        server,
        statistic.value,
        order,
        None if limit is None else str(limit),
    )


def game_server_cache_key(request: Any) -> str:
    game = getattr(request, "game", None)
    try:
        game = Game(game)
    except ValueError:
        raise MalformedRequestError("Unknown game", details={"game": str(game)})

    ip = getattr(request, "ip", None)
    if not isinstance(ip, str) or not ip:
        raise MalformedRequestError("Game server request needs an ip address", details={"ip": ip})

    port = getattr(request, "port", None)
    if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
        raise MalformedRequestError("Game server request needs a valid port", details={"port": port})

    return make_cache_key(GAME_SERVER_DETAILS, game.value, ip, str(port))


def _unwrap_player(request: Any) -> Tuple[Any, Optional[ServerApiId]]:
    if type(request) in IDENTIFIER_KINDS:
        return request, None
    player_id = getattr(request, "player_id", None)
    if player_id is None:
        raise MalformedRequestError(
            "Request does not identify a player",
            details={"request_type": type(request).__name__},
        )
    return player_id, getattr(request, "server_api_id", None)


def _identifier_parts(player_id: Any) -> Tuple[str, str]:
    kind = IDENTIFIER_KINDS.get(type(player_id))
    if kind is None:
        raise MalformedRequestError(
            "Unsupported player identifier",
            details={"identifier_type": type(player_id).__name__},
        )
    if not isinstance(player_id.id, str) or not player_id.id:
        raise MalformedRequestError("Player identifier is empty", details={"kind": kind})
    return kind, player_id.id


def _server_part(override: Any, default: Optional[ServerApiId]) -> Optional[str]:
    server = override if override is not None else default
    if server is None:
        return None
    if not isinstance(server, ServerApiId) or not isinstance(server.id, str) or not server.id:
        raise MalformedRequestError("Invalid server API id", details={"server_api_id": repr(server)})
    return server.id


def _statistic(value: Any) -> Statistic:
    if value is None:
        raise MalformedRequestError("Leaderboard request needs a statistic")
    try:
        return Statistic(value)
    except ValueError:
        raise MalformedRequestError("Unknown leaderboard statistic", details={"statistic": str(value)})


def _order(value: Any) -> str:
    order = value.upper() if isinstance(value, str) else value
    if order not in ("ASC", "DESC"):
        raise MalformedRequestError("Leaderboard order must be ASC or DESC", details={"order": value})
    return order
