"""
Result models returned by the client operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Union

from .identifiers import CFToolsId


@dataclass
class HitZones:
    """Hit counts per body zone."""
    head: int = 0
    brain: int = 0
    torso: int = 0
    left_arm: int = 0
    right_arm: int = 0
    left_leg: int = 0
    right_leg: int = 0


@dataclass
class WeaponStatistic:
    damage: float = 0.0
    deaths: int = 0
    hits: int = 0
    kills: int = 0
    longest_kill: float = 0.0
    longest_shot: float = 0.0
    hit_zones: HitZones = field(default_factory=HitZones)


@dataclass
class PlayerStatistics:
    kills: int = 0
    deaths: int = 0
    suicides: int = 0
    environment_deaths: int = 0
    infected_deaths: int = 0
    hits: int = 0
    longest_kill: float = 0.0
    longest_shot: float = 0.0
    kill_death_ratio: float = 0.0
    weapons_breakdown: Dict[str, WeaponStatistic] = field(default_factory=dict)
    hit_zones: HitZones = field(default_factory=HitZones)


@dataclass
class Player:
    names: List[str]
    statistics: PlayerStatistics = field(default_factory=PlayerStatistics)
    playtime: int = 0
    sessions: int = 0


@dataclass
class LeaderboardItem:
    name: str
    rank: int = 0
    id: Optional[CFToolsId] = None
    kills: int = 0
    deaths: int = 0
    suicides: int = 0
    environment_deaths: int = 0
    playtime: int = 0
    hits: Optional[int] = None
    kill_death_ratio: Optional[float] = None
    longest_kill: Optional[float] = None
    longest_shot: Optional[float] = None


@dataclass
class PriorityQueueItem:
    """A priority queue entry; ``expiration`` is a datetime or ``"Permanent"``."""
    comment: str
    created_by: Optional[CFToolsId] = None
    expiration: Union[datetime, str] = "Permanent"
    created: Optional[datetime] = None


@dataclass
class WhitelistItem:
    """A whitelist entry; ``expiration`` is a datetime or ``"Permanent"``."""
    comment: str
    created_by: Optional[CFToolsId] = None
    expiration: Union[datetime, str] = "Permanent"
    created: Optional[datetime] = None


@dataclass
class GameServerStatus:
    slots: int = 0
    online: int = 0
    queue: int = 0


@dataclass
class GameServerSecurity:
    vac: bool = False
    battleye: bool = False
    password: bool = False


@dataclass
class Mod:
    name: str
    file_id: int


@dataclass
class Geolocation:
    timezone: Optional[str] = None
    country: Optional[str] = None
    continent: Optional[str] = None
    city: Optional[str] = None
    available: bool = False


@dataclass
class GameServerEnvironment:
    first_person_perspective: bool = False
    third_person_perspective: bool = False
    time_acceleration: Optional[float] = None
    time: Optional[str] = None


@dataclass
class GameServerAttributes:
    dlc: bool = False
    dlcs: Dict[str, bool] = field(default_factory=dict)
    official: bool = False
    modded: bool = False
    hive: Optional[str] = None
    experimental: bool = False
    whitelist: bool = False


@dataclass
class GameServerHost:
    address: Optional[str] = None
    game_port: Optional[int] = None
    query_port: Optional[int] = None


@dataclass
class GameServerItem:
    name: str
    version: Optional[str] = None
    status: GameServerStatus = field(default_factory=GameServerStatus)
    security: GameServerSecurity = field(default_factory=GameServerSecurity)
    rating: int = 0
    rank: int = 0
    online: bool = False
    map: Optional[str] = None
    mods: List[Mod] = field(default_factory=list)
    geolocation: Geolocation = field(default_factory=Geolocation)
    environment: GameServerEnvironment = field(default_factory=GameServerEnvironment)
    attributes: GameServerAttributes = field(default_factory=GameServerAttributes)
    host: GameServerHost = field(default_factory=GameServerHost)
