"""
CFTools data API client over HTTP.
"""

import hashlib
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple, TYPE_CHECKING, Union

from shared.config import DEFAULT_BASE_URL
from shared.logging import get_logger
from shared.errors import AuthenticationRequired, ResourceNotFound, ServerApiIdRequired
from ..domain.contract import CFToolsClient
from ..domain.identifiers import CFToolsId, GenericId, ServerApiId
from ..domain.models import GameServerItem, LeaderboardItem, Player, PriorityQueueItem, WhitelistItem
from ..domain.requests import (
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
    effective_leaderboard_limit,
)
from .auth_provider import CFToolsAuthorizationProvider, LoginCredentials
from .http import CFToolsHttp
from .responses import format_timestamp, to_game_server, to_leaderboard, to_list_entry, to_player

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


class HttpCFToolsClient(CFToolsClient):
    """Client for the CFTools data API.

    ``server_api_id`` is the default server context; requests may override
    it. Without ``credentials`` only game server details can be fetched.
    """

    def __init__(
        self,
        server_api_id: Optional[ServerApiId] = None,
        credentials: Optional[LoginCredentials] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        metrics: Optional["MetricsCollector"] = None,
    ):
        self.server_api_id = server_api_id
        self.http = CFToolsHttp(base_url, timeout, metrics=metrics)
        self.auth: Optional[CFToolsAuthorizationProvider] = None
        if credentials:
            self.auth = CFToolsAuthorizationProvider(credentials, self.http)
        self.logger = get_logger("cftools.http_client")

    async def get_player_details(self, player_id: Union[GetPlayerDetailsRequest, GenericId]) -> Player:
        self._assert_authentication()
        player, override = _split_player(player_id)
        server = self._resolve_server_api_id(override)
        cftools_id = await self._resolve(player)
        response = await self._authorized_get(
            f"v1/server/{server.id}/player",
            endpoint="player",
            params={"cftools_id": cftools_id.id},
        )
        if not response or cftools_id.id not in response:
            raise ResourceNotFound("Player has no data on this server", details={"cftools_id": cftools_id.id})
        return to_player(response[cftools_id.id])

    async def get_leaderboard(self, request: GetLeaderboardRequest) -> List[LeaderboardItem]:
        self._assert_authentication()
        server = self._resolve_server_api_id(request.server_api_id)
        statistic = getattr(request.statistic, "value", request.statistic)
        params: Dict[str, Any] = {
            "stat": statistic,
            "order": "-1" if str(request.order).upper() == "ASC" else "1",
        }
        limit = effective_leaderboard_limit(request.limit)
        if limit is not None:
            params["limit"] = str(limit)

        response = await self._authorized_get(
            f"v1/server/{server.id}/leaderboard",
            endpoint="leaderboard",
            params=params,
        )
        return to_leaderboard(response or {})

    async def get_priority_queue(
        self, player_id: Union[GetPriorityQueueRequest, GenericId]
    ) -> Optional[PriorityQueueItem]:
        response = await self._get_list_entry("queuepriority", player_id)
        return to_list_entry(response or {}, PriorityQueueItem)

    async def put_priority_queue(self, request: PutPriorityQueueItemRequest) -> None:
        await self._put_list_entry("queuepriority", request)

    async def delete_priority_queue(self, player_id: Union[DeletePriorityQueueRequest, GenericId]) -> None:
        await self._delete_list_entry("queuepriority", player_id)

    async def get_whitelist(self, player_id: Union[GetWhitelistRequest, GenericId]) -> Optional[WhitelistItem]:
        response = await self._get_list_entry("whitelist", player_id)
        return to_list_entry(response or {}, WhitelistItem)

    async def put_whitelist(self, request: PutWhitelistItemRequest) -> None:
        await self._put_list_entry("whitelist", request)

    async def delete_whitelist(self, player_id: Union[DeleteWhitelistRequest, GenericId]) -> None:
        await self._delete_list_entry("whitelist", player_id)

    async def get_game_server_details(self, request: GetGameServerDetailsRequest) -> GameServerItem:
        server_resource = game_server_resource_id(request)
        response = await self.http.request(
            "GET",
            f"v1/gameserver/{server_resource}",
            endpoint="gameserver",
        )
        if not response or server_resource not in response:
            raise ResourceNotFound("Game server not found", details={"resource": server_resource})
        return to_game_server(response[server_resource])

    async def _get_list_entry(self, resource: str, player_id: Any) -> Any:
        self._assert_authentication()
        player, override = _split_player(player_id)
        server = self._resolve_server_api_id(override)
        cftools_id = await self._resolve(player)
        return await self._authorized_get(
            f"v1/server/{server.id}/{resource}",
            endpoint=resource,
            params={"cftools_id": cftools_id.id},
        )

    async def _put_list_entry(
        self, resource: str, request: Union[PutPriorityQueueItemRequest, PutWhitelistItemRequest]
    ) -> None:
        self._assert_authentication()
        server = self._resolve_server_api_id(request.server_api_id)
        expires = ""
        if isinstance(request.expires, datetime):
            expires = format_timestamp(request.expires)
        await self.http.request(
            "POST",
            f"v1/server/{server.id}/{resource}",
            endpoint=resource,
            json={
                "cftools_id": request.id.id,
                "comment": request.comment,
                "expires_at": expires,
            },
            headers=await self._authorization_header(),
        )
        self.logger.info("Created list entry", resource=resource, server_api_id=server.id)

    async def _delete_list_entry(self, resource: str, player_id: Any) -> None:
        self._assert_authentication()
        player, override = _split_player(player_id)
        server = self._resolve_server_api_id(override)
        cftools_id = await self._resolve(player)
        await self.http.request(
            "DELETE",
            f"v1/server/{server.id}/{resource}",
            endpoint=resource,
            params={"cftools_id": cftools_id.id},
            headers=await self._authorization_header(),
        )
        self.logger.info("Deleted list entry", resource=resource, server_api_id=server.id)

    async def _authorized_get(self, path: str, *, endpoint: str, params: Dict[str, Any]) -> Any:
        return await self.http.request(
            "GET",
            path,
            endpoint=endpoint,
            params=params,
            headers=await self._authorization_header(),
        )

    async def _authorization_header(self) -> Dict[str, str]:
        token = await self.auth.provide_token()  # type: ignore[union-attr]
        return {"Authorization": f"Bearer {token}"}

    def _assert_authentication(self) -> None:
        if self.auth is None:
            raise AuthenticationRequired()

    def _resolve_server_api_id(self, override: Optional[ServerApiId]) -> ServerApiId:
        if override is not None:
            return override
        if self.server_api_id is not None:
            return self.server_api_id
        raise ServerApiIdRequired()

    async def _resolve(self, player: GenericId) -> CFToolsId:
        """Translate any player identifier into a CFTools id."""
        if isinstance(player, CFToolsId):
            return player

        response = await self.http.request(
            "GET",
            "v1/users/lookup",
            endpoint="users_lookup",
            params={"identifier": player.id},
        )
        if not response or not response.get("cftools_id"):
            raise ResourceNotFound("No CFTools account for identifier", details={"identifier": player.id})
        return CFToolsId.of(response["cftools_id"])


def game_server_resource_id(request: GetGameServerDetailsRequest) -> str:
    """sha1 over game, ip and port, the data API's game server resource id."""
    digest = hashlib.sha1()
    digest.update(Game(request.game).value.encode())
    digest.update(request.ip.encode())
    digest.update(str(request.port).encode())
    return digest.hexdigest()


def _split_player(request: Any) -> Tuple[GenericId, Optional[ServerApiId]]:
    if hasattr(request, "player_id"):
        return request.player_id, request.server_api_id
    return request, None
