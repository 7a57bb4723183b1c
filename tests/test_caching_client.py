"""
Unit tests for CachingCFToolsClient.
"""

import pytest
from unittest.mock import AsyncMock

from cftools_client.caching import CachingCFToolsClient, CacheTTLConfig, InMemoryCache
from cftools_client.domain import (
    BattlEyeGUID,
    CFToolsClient,
    CFToolsId,
    DeletePriorityQueueRequest,
    Game,
    GameServerItem,
    GetGameServerDetailsRequest,
    GetLeaderboardRequest,
    GetPlayerDetailsRequest,
    GetPriorityQueueRequest,
    GetWhitelistRequest,
    LeaderboardItem,
    Player,
    PriorityQueueItem,
    PutPriorityQueueItemRequest,
    PutWhitelistItemRequest,
    ServerApiId,
    Statistic,
    SteamId64,
    WhitelistItem,
)
from shared.errors import ConfigurationError, ExternalServiceError, MalformedRequestError
from shared.metrics import MetricsCollector


class FakeClock:
    """Controllable monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


TTLS = {
    "priorityQueue": 30,
    "playerDetails": 30,
    "gameServerDetails": 30,
    "leaderboard": 30,
}


class TestCachingClient:
    """Test cases for the caching client."""

    @pytest.fixture
    def clock(self):
        return FakeClock()

    @pytest.fixture
    def stub_client(self):
        """Stub satisfying the client contract."""
        return AsyncMock(spec=CFToolsClient)

    @pytest.fixture
    def metrics(self):
        return MetricsCollector()

    @pytest.fixture
    def client(self, clock, stub_client, metrics):
        return CachingCFToolsClient(
            InMemoryCache(clock=clock),
            TTLS,
            stub_client,
            ServerApiId.of("AN_ID"),
            metrics=metrics,
        )

    @pytest.mark.asyncio
    async def test_caches_game_server_details(self, client, stub_client):
        """Repeated game server lookups hit upstream once."""
        stub_client.get_game_server_details.return_value = GameServerItem(name="someName")
        request = GetGameServerDetailsRequest(game=Game.DAYZ, ip="127.0.0.1", port=2302)

        first = await client.get_game_server_details(request)
        second = await client.get_game_server_details(request)

        assert stub_client.get_game_server_details.await_count == 1
        assert first == second

    @pytest.mark.asyncio
    async def test_caches_player_details_across_request_shapes(self, client, stub_client):
        """A request object and a bare identifier share one cache entry."""
        stub_client.get_player_details.return_value = Player(names=["A_NAME"])

        first = await client.get_player_details(GetPlayerDetailsRequest(player_id=SteamId64.of("123456789")))
        second = await client.get_player_details(SteamId64.of("123456789"))

        assert stub_client.get_player_details.await_count == 1
        assert first == second

    @pytest.mark.asyncio
    async def test_caches_priority_queue_across_request_shapes(self, client, stub_client):
        stub_client.get_priority_queue.return_value = PriorityQueueItem(comment="SOME_COMMENT")

        first = await client.get_priority_queue(GetPriorityQueueRequest(player_id=SteamId64.of("123456789")))
        second = await client.get_priority_queue(SteamId64.of("123456789"))

        assert stub_client.get_priority_queue.await_count == 1
        assert first == second

    @pytest.mark.asyncio
    async def test_caches_leaderboard(self, client, stub_client):
        """Same statistic and order twice results in one upstream call."""
        stub_client.get_leaderboard.return_value = [LeaderboardItem(name="A_NAME")]
        request = GetLeaderboardRequest(statistic=Statistic.KILLS, order="DESC")

        first = await client.get_leaderboard(request)
        second = await client.get_leaderboard(request)

        assert stub_client.get_leaderboard.await_count == 1
        assert first == second == [LeaderboardItem(name="A_NAME")]

    @pytest.mark.asyncio
    async def test_mutating_a_result_leaves_cache_intact(self, client, stub_client):
        stub_client.get_leaderboard.return_value = [LeaderboardItem(name="A_NAME")]
        request = GetLeaderboardRequest(statistic=Statistic.KILLS)

        first = await client.get_leaderboard(request)
        first.clear()
        second = await client.get_leaderboard(request)
        second[0].name = "CHANGED"
        third = await client.get_leaderboard(request)

        assert stub_client.get_leaderboard.await_count == 1
        assert second == [LeaderboardItem(name="CHANGED")]
        assert third == [LeaderboardItem(name="A_NAME")]

    @pytest.mark.asyncio
    async def test_leaderboard_order_is_part_of_key(self, client, stub_client):
        stub_client.get_leaderboard.return_value = []

        await client.get_leaderboard(GetLeaderboardRequest(statistic=Statistic.KILLS, order="DESC"))
        await client.get_leaderboard(GetLeaderboardRequest(statistic=Statistic.KILLS, order="ASC"))
        await client.get_leaderboard(GetLeaderboardRequest(statistic=Statistic.DEATHS, order="DESC"))

        assert stub_client.get_leaderboard.await_count == 3

    @pytest.mark.asyncio
    async def test_caches_not_found_priority_queue(self, client, stub_client):
        """A None lookup result is cached like a found entry."""
        stub_client.get_priority_queue.return_value = None

        first = await client.get_priority_queue(SteamId64.of("123456789"))
        second = await client.get_priority_queue(SteamId64.of("123456789"))

        assert first is None
        assert second is None
        assert stub_client.get_priority_queue.await_count == 1

    @pytest.mark.asyncio
    async def test_caches_not_found_whitelist(self, client, stub_client):
        stub_client.get_whitelist.return_value = None

        assert await client.get_whitelist(GetWhitelistRequest(player_id=CFToolsId.of("abc"))) is None
        assert await client.get_whitelist(CFToolsId.of("abc")) is None

        assert stub_client.get_whitelist.await_count == 1

    @pytest.mark.asyncio
    async def test_whitelist_and_priority_queue_do_not_share_entries(self, client, stub_client):
        stub_client.get_priority_queue.return_value = PriorityQueueItem(comment="queue")
        stub_client.get_whitelist.return_value = WhitelistItem(comment="whitelist")

        queue = await client.get_priority_queue(SteamId64.of("1"))
        whitelist = await client.get_whitelist(SteamId64.of("1"))

        assert queue.comment == "queue"
        assert whitelist.comment == "whitelist"

    @pytest.mark.asyncio
    async def test_expired_entry_is_fetched_again(self, client, stub_client, clock):
        stub_client.get_player_details.return_value = Player(names=["A_NAME"])

        await client.get_player_details(SteamId64.of("1"))
        clock.advance(30)
        await client.get_player_details(SteamId64.of("1"))
        assert stub_client.get_player_details.await_count == 1

        clock.advance(1)
        await client.get_player_details(SteamId64.of("1"))
        assert stub_client.get_player_details.await_count == 2

    @pytest.mark.asyncio
    async def test_default_server_matches_explicit_server(self, client, stub_client):
        """Naming the default server explicitly hits the same entry."""
        stub_client.get_player_details.return_value = Player(names=["A_NAME"])

        await client.get_player_details(SteamId64.of("1"))
        await client.get_player_details(
            GetPlayerDetailsRequest(player_id=SteamId64.of("1"), server_api_id=ServerApiId.of("AN_ID"))
        )

        assert stub_client.get_player_details.await_count == 1

    @pytest.mark.asyncio
    async def test_server_override_does_not_collide(self, client, stub_client):
        stub_client.get_player_details.return_value = Player(names=["A_NAME"])

        await client.get_player_details(SteamId64.of("1"))
        await client.get_player_details(
            GetPlayerDetailsRequest(player_id=SteamId64.of("1"), server_api_id=ServerApiId.of("OTHER"))
        )

        assert stub_client.get_player_details.await_count == 2

    @pytest.mark.asyncio
    async def test_identifier_kinds_do_not_collide(self, client, stub_client):
        stub_client.get_player_details.return_value = Player(names=["A_NAME"])

        await client.get_player_details(SteamId64.of("1"))
        await client.get_player_details(BattlEyeGUID.of("1"))

        assert stub_client.get_player_details.await_count == 2

    @pytest.mark.asyncio
    async def test_put_priority_queue_is_not_cached(self, client, stub_client):
        """Identical writes are forwarded every time."""
        request = PutPriorityQueueItemRequest(id=SteamId64.of("123456789"), comment="SOME_TEXT")

        await client.put_priority_queue(request)
        await client.put_priority_queue(request)

        assert stub_client.put_priority_queue.await_count == 2

    @pytest.mark.asyncio
    async def test_delete_priority_queue_is_not_cached(self, client, stub_client):
        await client.delete_priority_queue(SteamId64.of("123456789"))
        await client.delete_priority_queue(DeletePriorityQueueRequest(player_id=SteamId64.of("123456789")))

        assert stub_client.delete_priority_queue.await_count == 2

    @pytest.mark.asyncio
    async def test_whitelist_writes_are_not_cached(self, client, stub_client):
        request = PutWhitelistItemRequest(id=SteamId64.of("1"), comment="SOME_TEXT")

        await client.put_whitelist(request)
        await client.put_whitelist(request)
        await client.delete_whitelist(SteamId64.of("1"))
        await client.delete_whitelist(SteamId64.of("1"))

        assert stub_client.put_whitelist.await_count == 2
        assert stub_client.delete_whitelist.await_count == 2

    @pytest.mark.asyncio
    async def test_writes_do_not_touch_the_cache(self, clock, stub_client):
        cache = InMemoryCache(clock=clock)
        client = CachingCFToolsClient(cache, TTLS, stub_client)

        await client.put_priority_queue(PutPriorityQueueItemRequest(id=SteamId64.of("1"), comment="x"))
        await client.delete_priority_queue(SteamId64.of("1"))

        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_write_returns_wrapped_result(self, client, stub_client):
        stub_client.put_whitelist.return_value = None

        assert await client.put_whitelist(PutWhitelistItemRequest(id=SteamId64.of("1"), comment="x")) is None
        stub_client.put_whitelist.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_upstream_error_is_propagated_and_not_cached(self, client, stub_client):
        stub_client.get_player_details.side_effect = [
            ExternalServiceError(service="cftools", message="boom"),
            Player(names=["A_NAME"]),
        ]

        with pytest.raises(ExternalServiceError):
            await client.get_player_details(SteamId64.of("1"))

        result = await client.get_player_details(SteamId64.of("1"))

        assert result == Player(names=["A_NAME"])
        assert stub_client.get_player_details.await_count == 2

    @pytest.mark.asyncio
    async def test_malformed_request_fails_before_upstream(self, client, stub_client):
        with pytest.raises(MalformedRequestError):
            await client.get_player_details(SteamId64.of(""))

        with pytest.raises(MalformedRequestError):
            await client.get_leaderboard(GetLeaderboardRequest(statistic="not-a-stat"))

        stub_client.get_player_details.assert_not_awaited()
        stub_client.get_leaderboard.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_ttl_disables_caching(self, clock, stub_client):
        """Operations without a positive TTL always reach upstream."""
        cache = InMemoryCache(clock=clock)
        client = CachingCFToolsClient(cache, {"leaderboard": 30}, stub_client)
        stub_client.get_player_details.return_value = Player(names=["A_NAME"])

        await client.get_player_details(SteamId64.of("1"))
        await client.get_player_details(SteamId64.of("1"))

        assert stub_client.get_player_details.await_count == 2
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_whitelist_uses_priority_queue_ttl_by_default(self, clock, stub_client):
        client = CachingCFToolsClient(InMemoryCache(clock=clock), {"priorityQueue": 5}, stub_client)
        stub_client.get_whitelist.return_value = WhitelistItem(comment="x")

        await client.get_whitelist(SteamId64.of("1"))
        await client.get_whitelist(SteamId64.of("1"))
        assert stub_client.get_whitelist.await_count == 1

        clock.advance(6)
        await client.get_whitelist(SteamId64.of("1"))
        assert stub_client.get_whitelist.await_count == 2

    @pytest.mark.asyncio
    async def test_records_hits_and_misses(self, client, stub_client, metrics):
        stub_client.get_leaderboard.return_value = []
        request = GetLeaderboardRequest(statistic=Statistic.KILLS)

        await client.get_leaderboard(request)
        await client.get_leaderboard(request)
        await client.get_leaderboard(request)

        registry = metrics.registry
        assert registry.get_sample_value("cftools_cache_misses_total", {"operation": "leaderboard"}) == 1.0
        assert registry.get_sample_value("cftools_cache_hits_total", {"operation": "leaderboard"}) == 2.0


class TestCacheTTLConfig:
    """Test cases for the TTL configuration."""

    def test_accepts_camel_case_names(self):
        ttls = CacheTTLConfig.parse(TTLS)

        assert ttls.priority_queue == 30
        assert ttls.player_details == 30
        assert ttls.game_server_details == 30
        assert ttls.leaderboard == 30

    def test_accepts_snake_case_names(self):
        ttls = CacheTTLConfig.parse({"player_details": 5})

        assert ttls.ttl_for("playerDetails") == 5
        assert ttls.ttl_for("leaderboard") == 0

    def test_rejects_unknown_fields(self):
        with pytest.raises(ConfigurationError):
            CacheTTLConfig.parse({"playerDetail": 5})

    def test_rejects_negative_ttl(self):
        with pytest.raises(ConfigurationError):
            CacheTTLConfig.parse({"leaderboard": -1})

    @pytest.mark.parametrize("value", [True, "7", 1.5])
    def test_rejects_non_integer_ttl(self, value):
        with pytest.raises(ConfigurationError):
            CacheTTLConfig.parse({"leaderboard": value})

    def test_whitelist_ttl_overrides_priority_queue(self):
        ttls = CacheTTLConfig(priority_queue=20, whitelist=0)

        assert ttls.ttl_for("whitelist") == 0
        assert ttls.ttl_for("priorityQueue") == 20

    def test_unknown_operation(self):
        with pytest.raises(ConfigurationError):
            CacheTTLConfig().ttl_for("nope")

    def test_is_immutable(self):
        ttls = CacheTTLConfig(leaderboard=30)

        with pytest.raises(Exception):
            ttls.leaderboard = 10
