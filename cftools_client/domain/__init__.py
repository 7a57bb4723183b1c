"""
Domain types for the CFTools client: identifiers, requests, results and the
client contract every implementation conforms to.
"""

from .contract import CFToolsClient
from .identifiers import (
    BattlEyeGUID,
    BohemiaInteractiveId,
    CFToolsId,
    GenericId,
    ServerApiId,
    SteamId64,
)
from .models import (
    GameServerItem,
    HitZones,
    LeaderboardItem,
    Player,
    PlayerStatistics,
    PriorityQueueItem,
    WeaponStatistic,
    WhitelistItem,
)
from .requests import (
    PERMANENT,
    DeletePriorityQueueRequest,
    DeleteWhitelistRequest,
    Game,
    GetGameServerDetailsRequest,
    GetLeaderboardRequest,
    GetPlayerDetailsRequest,
    GetPriorityQueueRequest,
    GetWhitelistRequest,
    PutPriorityQueueItemRequest,
    PutWhitelistItemRequest,
    Statistic,
)

__all__ = [
    "CFToolsClient",
    "BattlEyeGUID",
    "BohemiaInteractiveId",
    "CFToolsId",
    "GenericId",
    "ServerApiId",
    "SteamId64",
    "GameServerItem",
    "HitZones",
    "LeaderboardItem",
    "Player",
    "PlayerStatistics",
    "PriorityQueueItem",
    "WeaponStatistic",
    "WhitelistItem",
    "PERMANENT",
    "DeletePriorityQueueRequest",
    "DeleteWhitelistRequest",
    "Game",
    "GetGameServerDetailsRequest",
    "GetLeaderboardRequest",
    "GetPlayerDetailsRequest",
    "GetPriorityQueueRequest",
    "GetWhitelistRequest",
    "PutPriorityQueueItemRequest",
    "PutWhitelistItemRequest",
    "Statistic",
]
