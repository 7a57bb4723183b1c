"""
Per-operation cache TTLs.
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from shared.errors import ConfigurationError
from .cache_keys import GAME_SERVER_DETAILS, LEADERBOARD, PLAYER_DETAILS, PRIORITY_QUEUE, WHITELIST


class CacheTTLConfig(BaseModel):
    """TTL in seconds for each cacheable operation.

    Zero, or a field left out, disables caching for that operation. The
    whitelist lookup uses the priority queue TTL unless set on its own.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True, strict=True)

    priority_queue: int = Field(0, ge=0, alias="priorityQueue")
    player_details: int = Field(0, ge=0, alias="playerDetails")
    game_server_details: int = Field(0, ge=0, alias="gameServerDetails")
    leaderboard: int = Field(0, ge=0)
    whitelist: Optional[int] = Field(None, ge=0)

    def ttl_for(self, operation: str) -> int:
        if operation == PRIORITY_QUEUE:
            return self.priority_queue
        if operation == WHITELIST:
            return self.priority_queue if self.whitelist is None else self.whitelist
        if operation == PLAYER_DETAILS:
            return self.player_details
        if operation == GAME_SERVER_DETAILS:
            return self.game_server_details
        if operation == LEADERBOARD:
            return self.leaderboard
        raise ConfigurationError("Unknown cacheable operation", details={"operation": operation})

    @classmethod
    def parse(cls, ttls: Union["CacheTTLConfig", Mapping[str, Any]]) -> "CacheTTLConfig":
        """Accept a config instance or a mapping keyed by snake_case or camelCase names."""
        if isinstance(ttls, cls):
            return ttls
        try:
            return cls.model_validate(dict(ttls))
        except (TypeError, ValueError, ValidationError) as exc:
            raise ConfigurationError("Invalid cache TTL configuration", details={"error": str(exc)})


DEFAULT_TTLS = CacheTTLConfig(
    priority_queue=20,
    player_details=10,
    game_server_details=10,
    leaderboard=30,
)
