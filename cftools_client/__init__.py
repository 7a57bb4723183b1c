"""
Client library for the CFTools Cloud data API.

Covers player lookup, priority queue and whitelist management, leaderboards
and game server status. Any client can be fronted by a read-through cache
that memoizes lookups per operation TTL and always forwards writes.

Structure:
- domain: identifiers, requests, results and the client contract.
- adapters: httpx transport, token acquisition, payload mapping.
- caching: in-memory TTL store, cache keys and the caching client.
- builder: fluent construction, also from environment settings.
"""

from .adapters import HttpCFToolsClient, LoginCredentials
from .builder import CFToolsClientBuilder
from .caching import CacheTTLConfig, CachingCFToolsClient, InMemoryCache
from .domain import (
    PERMANENT,
    BattlEyeGUID,
    BohemiaInteractiveId,
    CFToolsClient,
    CFToolsId,
    Game,
    GetGameServerDetailsRequest,
    GetLeaderboardRequest,
    GetPlayerDetailsRequest,
    GetPriorityQueueRequest,
    GetWhitelistRequest,
    PutPriorityQueueItemRequest,
    PutWhitelistItemRequest,
    ServerApiId,
    Statistic,
    SteamId64,
)

__all__ = [
    "HttpCFToolsClient",
    "LoginCredentials",
    "CFToolsClientBuilder",
    "CacheTTLConfig",
    "CachingCFToolsClient",
    "InMemoryCache",
    "PERMANENT",
    "BattlEyeGUID",
    "BohemiaInteractiveId",
    "CFToolsClient",
    "CFToolsId",
    "Game",
    "GetGameServerDetailsRequest",
    "GetLeaderboardRequest",
    "GetPlayerDetailsRequest",
    "GetPriorityQueueRequest",
    "GetWhitelistRequest",
    "PutPriorityQueueItemRequest",
    "PutWhitelistItemRequest",
    "ServerApiId",
    "Statistic",
    "SteamId64",
]
