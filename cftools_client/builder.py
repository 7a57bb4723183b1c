"""
Fluent construction of CFTools clients.
"""

from typing import Any, Mapping, Optional, Union

from shared.config import DEFAULT_BASE_URL, CFToolsSettings
from shared.logging import configure_logging, get_logger
from shared.metrics import MetricsCollector
from .adapters.auth_provider import LoginCredentials
from .adapters.http_client import HttpCFToolsClient
from .caching.cache_store import Cache, InMemoryCache
from .caching.caching_client import CachingCFToolsClient
from .caching.ttl_config import DEFAULT_TTLS, CacheTTLConfig
from .domain.contract import CFToolsClient
from .domain.identifiers import ServerApiId


class CFToolsClientBuilder:
    """Builds an HTTP client, optionally fronted by the caching client.

    Example::

        client = (
            CFToolsClientBuilder()
            .with_server_api_id("my-server")
            .with_credentials("app-id", "secret")
            .with_cache()
            .build()
        )
    """

    def __init__(self):
        self._server_api_id: Optional[ServerApiId] = None
        self._credentials: Optional[LoginCredentials] = None
        self._base_url = DEFAULT_BASE_URL
        self._timeout = 10.0
        self._cache_enabled = False
        self._cache: Optional[Cache] = None
        self._ttls: CacheTTLConfig = DEFAULT_TTLS
        self._metrics: Optional[MetricsCollector] = None
        self.logger = get_logger("cftools.builder")

    def with_server_api_id(self, server_api_id: str) -> "CFToolsClientBuilder":
        self._server_api_id = ServerApiId.of(server_api_id)
        return self

    def with_credentials(self, application_id: str, secret: str) -> "CFToolsClientBuilder":
        self._credentials = LoginCredentials.of(application_id, secret)
        return self

    def with_base_url(self, base_url: str) -> "CFToolsClientBuilder":
        self._base_url = base_url
        return self

    def with_timeout(self, timeout: float) -> "CFToolsClientBuilder":
        self._timeout = timeout
        return self

    def with_cache(
        self,
        ttls: Optional[Union[CacheTTLConfig, Mapping[str, Any]]] = None,
        cache: Optional[Cache] = None,
    ) -> "CFToolsClientBuilder":
        """Cache lookups; without ``ttls`` the default TTLs apply."""
        self._cache_enabled = True
        if ttls is not None:
            self._ttls = CacheTTLConfig.parse(ttls)
        self._cache = cache
        return self

    def with_metrics(self, metrics: MetricsCollector) -> "CFToolsClientBuilder":
        self._metrics = metrics
        return self

    def build(self) -> CFToolsClient:
        client = HttpCFToolsClient(
            self._server_api_id,
            self._credentials,
            base_url=self._base_url,
            timeout=self._timeout,
            metrics=self._metrics,
        )
        if not self._cache_enabled:
            return client

        self.logger.debug("Building caching client", ttls=self._ttls.model_dump())
        return CachingCFToolsClient(
            self._cache or InMemoryCache(),
            self._ttls,
            client,
            self._server_api_id,
            metrics=self._metrics,
        )

    @classmethod
    def from_settings(cls, settings: CFToolsSettings) -> "CFToolsClientBuilder":
        """Pre-populate a builder from ``CFToolsSettings`` and configure logging."""
        configure_logging("cftools", log_level=settings.log_level, json_logs=settings.json_logs)
        builder = cls().with_base_url(settings.base_url).with_timeout(settings.request_timeout)
        if settings.server_api_id:
            builder.with_server_api_id(settings.server_api_id)
        if settings.has_credentials:
            builder.with_credentials(settings.application_id, settings.secret)  # type: ignore[arg-type]
        if settings.cache_enabled:
            builder.with_cache(CacheTTLConfig(
                priority_queue=settings.cache_ttl_priority_queue,
                whitelist=settings.cache_ttl_whitelist,
                player_details=settings.cache_ttl_player_details,
                game_server_details=settings.cache_ttl_game_server_details,
                leaderboard=settings.cache_ttl_leaderboard,
            ))
        return builder
