"""
Identifier value types for players and servers.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class SteamId64:
    """64-bit Steam account id."""
    id: str

    @classmethod
    def of(cls, id: str) -> "SteamId64":
        return cls(id)


@dataclass(frozen=True)
class BattlEyeGUID:
    """BattlEye GUID of a player."""
    id: str

    @classmethod
    def of(cls, id: str) -> "BattlEyeGUID":
        return cls(id)


@dataclass(frozen=True)
class BohemiaInteractiveId:
    """Bohemia Interactive account id."""
    id: str

    @classmethod
    def of(cls, id: str) -> "BohemiaInteractiveId":
        return cls(id)


@dataclass(frozen=True)
class CFToolsId:
    """CFTools Cloud account id, the canonical player id of the data API."""
    id: str

    @classmethod
    def of(cls, id: str) -> "CFToolsId":
        return cls(id)


@dataclass(frozen=True)
class ServerApiId:
    """Id of the server context a request targets."""
    id: str

    @classmethod
    def of(cls, id: str) -> "ServerApiId":
        return cls(id)


GenericId = Union[SteamId64, BattlEyeGUID, BohemiaInteractiveId, CFToolsId]

# Stable names used when an identifier takes part in a cache key
IDENTIFIER_KINDS = {
    SteamId64: "steam64",
    BattlEyeGUID: "battleye",
    BohemiaInteractiveId: "bohemia",
    CFToolsId: "cftools",
}
