"""
Request models accepted by the client operations.

Lookup and delete operations also accept a bare player identifier in place
of the request object.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union

from .identifiers import GenericId, ServerApiId


class Statistic(str, Enum):
    """Leaderboard statistics."""
    KILLS = "kills"
    DEATHS = "deaths"
    SUICIDES = "suicides"
    PLAYTIME = "playtime"
    LONGEST_KILL = "longest_kill"
    LONGEST_SHOT = "longest_shot"
    KILL_DEATH_RATIO = "kdratio"


class Game(str, Enum):
    """Games known to the data API."""
    DAYZ = "1"


PERMANENT = "Permanent"

MAX_LEADERBOARD_LIMIT = 100

Expiration = Union[datetime, str]


@dataclass(frozen=True)
class GetPlayerDetailsRequest:
    player_id: GenericId
    server_api_id: Optional[ServerApiId] = None


@dataclass(frozen=True)
class GetPriorityQueueRequest:
    player_id: GenericId
    server_api_id: Optional[ServerApiId] = None


@dataclass(frozen=True)
class DeletePriorityQueueRequest:
    player_id: GenericId
    server_api_id: Optional[ServerApiId] = None


@dataclass(frozen=True)
class GetWhitelistRequest:
    player_id: GenericId
    server_api_id: Optional[ServerApiId] = None


@dataclass(frozen=True)
class DeleteWhitelistRequest:
    player_id: GenericId
    server_api_id: Optional[ServerApiId] = None


@dataclass(frozen=True)
class PutPriorityQueueItemRequest:
    """Create a priority queue entry; ``expires`` is a datetime or ``PERMANENT``."""
    id: GenericId
    comment: str
    expires: Optional[Expiration] = None
    server_api_id: Optional[ServerApiId] = None


@dataclass(frozen=True)
class PutWhitelistItemRequest:
    """Create a whitelist entry; ``expires`` is a datetime or ``PERMANENT``."""
    id: GenericId
    comment: str
    expires: Optional[Expiration] = None
    server_api_id: Optional[ServerApiId] = None


@dataclass(frozen=True)
class GetLeaderboardRequest:
    """Leaderboard query. ``limit`` is only honoured between 1 and 100."""
    statistic: Statistic
    order: str = "DESC"
    limit: Optional[int] = None
    server_api_id: Optional[ServerApiId] = None


@dataclass(frozen=True)
class GetGameServerDetailsRequest:
    game: Game
    ip: str
    port: int


def effective_leaderboard_limit(limit: Any) -> Optional[int]:
    """The limit the data API honours, or None when it would be ignored."""
    if isinstance(limit, bool) or not isinstance(limit, int):
        return None
    if 0 < limit <= MAX_LEADERBOARD_LIMIT:
        return limit
    return None
