"""
Mapping of raw data API payloads onto domain models.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from ..domain.identifiers import CFToolsId
from ..domain.models import (
    GameServerAttributes,
    GameServerEnvironment,
    GameServerHost,
    GameServerItem,
    GameServerSecurity,
    GameServerStatus,
    Geolocation,
    HitZones,
    LeaderboardItem,
    Mod,
    Player,
    PlayerStatistics,
    PriorityQueueItem,
    WeaponStatistic,
    WhitelistItem,
)
from ..domain.requests import PERMANENT

ListEntry = TypeVar("ListEntry", PriorityQueueItem, WhitelistItem)

# Zone names as the data API spells them
_ZONE_FIELDS = {
    "head": "head",
    "brain": "brain",
    "torso": "torso",
    "leftarm": "left_arm",
    "rightarm": "right_arm",
    "leftleg": "left_leg",
    "rightleg": "right_leg",
}


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse ISO timestamps; naive values are taken as UTC."""
    if not value:
        return None
    try:
        if value.endswith("Z"):
            value = value.replace("Z", "+00:00")
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """UTC ISO timestamp with milliseconds and a ``Z`` suffix; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def to_hit_zones(raw: Optional[Dict[str, Any]]) -> HitZones:
    raw = raw or {}
    return HitZones(**{field: raw.get(name) or 0 for name, field in _ZONE_FIELDS.items()})


def to_weapon_breakdown(raw: Optional[Dict[str, Any]]) -> Dict[str, WeaponStatistic]:
    breakdown = {}
    for name, weapon in (raw or {}).items():
        breakdown[name] = WeaponStatistic(
            damage=weapon.get("damage") or 0.0,
            deaths=weapon.get("deaths") or 0,
            hits=weapon.get("hits") or 0,
            kills=weapon.get("kills") or 0,
            longest_kill=weapon.get("longest_kill") or 0.0,
            longest_shot=weapon.get("longest_shot") or 0.0,
            hit_zones=to_hit_zones(weapon.get("zones")),
        )
    return breakdown


def to_player(raw: Dict[str, Any]) -> Player:
    omega = raw.get("omega", {})
    general = raw.get("game", {}).get("general", {})
    return Player(
        names=list(omega.get("name_history", [])),
        statistics=PlayerStatistics(
            kills=general.get("kills") or 0,
            deaths=general.get("deaths") or 0,
            suicides=general.get("suicides") or 0,
            environment_deaths=general.get("environment_deaths") or 0,
            infected_deaths=general.get("infected_deaths") or 0,
            hits=general.get("hits") or 0,
            longest_kill=general.get("longest_kill") or 0.0,
            longest_shot=general.get("longest_shot") or 0.0,
            kill_death_ratio=general.get("kdratio") or 0.0,
            weapons_breakdown=to_weapon_breakdown(general.get("weapons")),
            hit_zones=to_hit_zones(general.get("zones")),
        ),
        playtime=omega.get("playtime") or 0,
        sessions=omega.get("sessions") or 0,
    )


def to_leaderboard(raw: Dict[str, Any]) -> List[LeaderboardItem]:
    return [
        LeaderboardItem(
            name=item.get("latest_name", ""),
            rank=item.get("rank") or 0,
            id=CFToolsId.of(item["cftools_id"]) if item.get("cftools_id") else None,
            kills=item.get("kills") or 0,
            deaths=item.get("deaths") or 0,
            suicides=item.get("suicides") or 0,
            environment_deaths=item.get("environment_deaths") or 0,
            playtime=item.get("playtime") or 0,
            hits=item.get("hits"),
            kill_death_ratio=item.get("kdratio"),
            longest_kill=item.get("longest_kill"),
            longest_shot=item.get("longest_shot"),
        )
        for item in raw.get("leaderboard", [])
    ]


def to_list_entry(raw: Dict[str, Any], model: Type[ListEntry]) -> Optional[ListEntry]:
    """First entry of a priority queue or whitelist response, None when empty."""
    entries = raw.get("entries") or []
    if not entries:
        return None

    entry = entries[0]
    meta = entry.get("meta", {})
    creator = entry.get("creator", {}).get("cftools_id")
    expiration: Union[datetime, str] = PERMANENT
    if meta.get("expiration"):
        expiration = parse_timestamp(meta["expiration"]) or PERMANENT

    return model(
        comment=meta.get("comment", ""),
        created_by=CFToolsId.of(creator) if creator else None,
        expiration=expiration,
        created=parse_timestamp(entry.get("created_at")),
    )


def to_game_server(raw: Dict[str, Any]) -> GameServerItem:
    status = raw.get("status", {})
    security = raw.get("security", {})
    geolocation = raw.get("geolocation", {})
    environment = raw.get("environment", {})
    perspectives = environment.get("perspectives", {})
    attributes = raw.get("attributes", {})
    host = raw.get("host", {})

    return GameServerItem(
        name=raw.get("name", ""),
        version=raw.get("version"),
        status=GameServerStatus(
            slots=status.get("slots") or 0,
            online=status.get("players") or 0,
            queue=(status.get("queue") or {}).get("size") or 0,
        ),
        security=GameServerSecurity(
            vac=bool(security.get("vac")),
            battleye=bool(security.get("battleye")),
            password=bool(security.get("password")),
        ),
        rating=raw.get("rating") or 0,
        rank=raw.get("rank") or 0,
        online=bool(raw.get("online")),
        map=raw.get("map"),
        mods=[Mod(name=mod.get("name", ""), file_id=mod.get("file_id")) for mod in raw.get("mods", [])],
        geolocation=Geolocation(
            timezone=geolocation.get("timezone"),
            country=geolocation.get("country"),
            continent=geolocation.get("continent"),
            city=geolocation.get("city"),
            available=bool(geolocation.get("available")),
        ),
        environment=GameServerEnvironment(
            first_person_perspective=bool(perspectives.get("1rd")),
            third_person_perspective=bool(perspectives.get("3rd")),
            time_acceleration=environment.get("time_acceleration"),
            time=environment.get("time"),
        ),
        attributes=GameServerAttributes(
            dlc=bool(attributes.get("dlc")),
            dlcs=dict(attributes.get("dlcs") or {}),
            official=bool(attributes.get("official")),
            modded=bool(attributes.get("modded")),
            hive=attributes.get("hive"),
            experimental=bool(attributes.get("experimental")),
            whitelist=bool(attributes.get("whitelist")),
        ),
        host=GameServerHost(
            address=host.get("address"),
            game_port=host.get("game_port"),
            query_port=host.get("query_port"),
        ),
    )
