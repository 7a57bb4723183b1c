"""
The client contract shared by the HTTP client and the caching decorator.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Union

from .identifiers import GenericId
from .models import GameServerItem, LeaderboardItem, Player, PriorityQueueItem, WhitelistItem
from .requests import (
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


class CFToolsClient(ABC):
    """Operations offered by a CFTools data API client.

    Lookup and delete operations accept either a request object or a bare
    player identifier. Implementations can be stacked, e.g. a caching client
    in front of the HTTP client.
    """

    @abstractmethod
    async def get_game_server_details(self, request: GetGameServerDetailsRequest) -> GameServerItem:
        ...

    @abstractmethod
    async def get_player_details(self, player_id: Union[GetPlayerDetailsRequest, GenericId]) -> Player:
        ...

    @abstractmethod
    async def get_leaderboard(self, request: GetLeaderboardRequest) -> List[LeaderboardItem]:
        ...

    @abstractmethod
    async def get_priority_queue(
        self, player_id: Union[GetPriorityQueueRequest, GenericId]
    ) -> Optional[PriorityQueueItem]:
        """Return the entry, or ``None`` when the player has none."""

    @abstractmethod
    async def put_priority_queue(self, request: PutPriorityQueueItemRequest) -> None:
        ...

    @abstractmethod
    async def delete_priority_queue(self, player_id: Union[DeletePriorityQueueRequest, GenericId]) -> None:
        ...

    @abstractmethod
    async def get_whitelist(self, player_id: Union[GetWhitelistRequest, GenericId]) -> Optional[WhitelistItem]:
        """Return the entry, or ``None`` when the player has none."""

    @abstractmethod
    async def put_whitelist(self, request: PutWhitelistItemRequest) -> None:
        ...

    @abstractmethod
    async def delete_whitelist(self, player_id: Union[DeleteWhitelistRequest, GenericId]) -> None:
        ...
