"""
Read-through caching client.

Wraps any ``CFToolsClient``. Lookups are memoized per operation TTL, writes
are always forwarded and never touch the cache.
Callers get their own copy of a cached result, so mutating it leaves the
stored entry intact.
"""

import copy
from typing import Any, Awaitable, Callable, List, Mapping, Optional, TYPE_CHECKING, Union

from shared.logging import get_logger
from ..domain.contract import CFToolsClient
from ..domain.identifiers import GenericId, ServerApiId
from ..domain.models import GameServerItem, LeaderboardItem, Player, PriorityQueueItem, WhitelistItem
from ..domain.requests import (
    DeletePriorityQueueRequest,
    DeleteWhitelistRequest,
    GetGameServerDetailsRequest,
    GetLeaderboardRequest,
    GetPlayerDetailsRequest,
    GetPriorityQueueRequest,
    GetWhitelistRequest,
    PutPriorityQueueItemRequest,
    PutWhitelistItemRequest,
)
from .cache_keys import (
    GAME_SERVER_DETAILS,
    LEADERBOARD,
    PLAYER_DETAILS,
    PRIORITY_QUEUE,
    WHITELIST,
    game_server_cache_key,
    leaderboard_cache_key,
    player_cache_key,
)
from .cache_store import Cache
from .ttl_config import CacheTTLConfig

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector

_MISSING = object()


class CachingCFToolsClient(CFToolsClient):
    """Caching decorator over another client.

    ``server_api_id`` is the default server context of the wrapped client.
    It only takes part in cache keys, so a request that names the default
    server explicitly shares its entry with one that omits it.

    Concurrent misses for the same key are not coalesced; each one calls
    the wrapped client and the last result stored wins.
    """

    def __init__(
        self,
        cache: Cache,
        ttls: Union[CacheTTLConfig, Mapping[str, Any]],
        client: CFToolsClient,
        server_api_id: Optional[ServerApiId] = None,
        *,
        metrics: Optional["MetricsCollector"] = None,
    ):
        self.cache = cache
        self.ttls = CacheTTLConfig.parse(ttls)
        self.client = client
        self.server_api_id = server_api_id
        self.metrics = metrics
        self.logger = get_logger("cftools.caching_client")

    async def get_game_server_details(self, request: GetGameServerDetailsRequest) -> GameServerItem:
        key = game_server_cache_key(request)
        return await self._read_through(
            GAME_SERVER_DETAILS, key, lambda: self.client.get_game_server_details(request)
        )

    async def get_player_details(self, player_id: Union[GetPlayerDetailsRequest, GenericId]) -> Player:
        key = player_cache_key(PLAYER_DETAILS, player_id, self.server_api_id)
        return await self._read_through(
            PLAYER_DETAILS, key, lambda: self.client.get_player_details(player_id)
        )

    async def get_leaderboard(self, request: GetLeaderboardRequest) -> List[LeaderboardItem]:
        key = leaderboard_cache_key(request, self.server_api_id)
        return await self._read_through(
            LEADERBOARD, key, lambda: self.client.get_leaderboard(request)
        )

    async def get_priority_queue(
        self, player_id: Union[GetPriorityQueueRequest, GenericId]
    ) -> Optional[PriorityQueueItem]:
        key = player_cache_key(PRIORITY_QUEUE, player_id, self.server_api_id)
        return await self._read_through(
            PRIORITY_QUEUE, key, lambda: self.client.get_priority_queue(player_id)
        )

    async def put_priority_queue(self, request: PutPriorityQueueItemRequest) -> None:
        return await self.client.put_priority_queue(request)

    async def delete_priority_queue(self, player_id: Union[DeletePriorityQueueRequest, GenericId]) -> None:
        return await self.client.delete_priority_queue(player_id)

    async def get_whitelist(self, player_id: Union[GetWhitelistRequest, GenericId]) -> Optional[WhitelistItem]:
        key = player_cache_key(WHITELIST, player_id, self.server_api_id)
        return await self._read_through(
            WHITELIST, key, lambda: self.client.get_whitelist(player_id)
        )

    async def put_whitelist(self, request: PutWhitelistItemRequest) -> None:
        return await self.client.put_whitelist(request)

    async def delete_whitelist(self, player_id: Union[DeleteWhitelistRequest, GenericId]) -> None:
        return await self.client.delete_whitelist(player_id)

    async def _read_through(self, operation: str, key: str, fetch: Callable[[], Awaitable[Any]]) -> Any:
        """Serve ``key`` from the cache or fetch, store and return it.

        ``None`` results are stored like any other value. Errors from
        ``fetch`` propagate and leave the cache untouched.
        """
        ttl = self.ttls.ttl_for(operation)
        if ttl <= 0:
            return await fetch()

        cached = self.cache.get(key, _MISSING)
        if cached is not _MISSING:
            self._record_access(operation, hit=True)
            self.logger.debug("Cache hit", operation=operation, cache_key=key)
            return copy.deepcopy(cached)

        self._record_access(operation, hit=False)
        self.logger.debug("Cache miss", operation=operation, cache_key=key)

        try:
            value = await fetch()
        except Exception as exc:
            self.logger.warning(
                "Upstream fetch failed, nothing cached",
                operation=operation,
                cache_key=key,
                error=str(exc),
            )
            raise

        self.cache.set(key, copy.deepcopy(value), ttl)
        return value

    def _record_access(self, operation: str, hit: bool) -> None:
        if self.metrics:
            self.metrics.record_cache_access(operation, hit)
