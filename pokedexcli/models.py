"""Data models for PokeAPI responses and a JSON decoder for them."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar


def _as_object(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected a JSON object, got {type(data).__name__}")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r}: expected an integer, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r}: expected a string, got {value!r}")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r}: expected a string or null, got {value!r}")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r}: expected a boolean, got {value!r}")
    return value


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r}: expected an array, got {type(value).__name__}")
    return value


def _object(data: Mapping[str, Any], key: str) -> dict[str, Any]:
    return dict(_as_object(data.get(key), f"field {key!r}"))


class _Decodable(Protocol):
    @classmethod
    def from_dict(cls, data: Any) -> Any: ...


M = TypeVar("M")


def _items(data: Mapping[str, Any], key: str, model: type[_Decodable]) -> tuple[Any, ...]:
    return tuple(model.from_dict(item) for item in _list(data, key))


def _resource(data: Mapping[str, Any], key: str) -> NamedResource:
    return NamedResource.from_dict(data.get(key))


@dataclass(frozen=True)
class NamedResource:
    """A name with the API URL that describes it."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        data = _as_object(data, cls.__name__)
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass(frozen=True)
class LocationPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> LocationPage:
        data = _as_object(data, cls.__name__)
        return cls(
            count=_int(data, "count"),
            next=_optional_str(data, "next"),
            previous=_optional_str(data, "previous"),
            results=_items(data, "results", NamedResource),
        )


@dataclass(frozen=True)
class EncounterDetail:
    """The chance and level range of one way to meet a Pokemon."""

    chance: int = 0
    condition_values: tuple[Any, ...] = ()
    max_level: int = 0
    method: NamedResource = field(default_factory=NamedResource)
    min_level: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> EncounterDetail:
        data = _as_object(data, cls.__name__)
        return cls(
            chance=_int(data, "chance"),
            condition_values=tuple(_list(data, "condition_values")),
            max_level=_int(data, "max_level"),
            method=_resource(data, "method"),
            min_level=_int(data, "min_level"),
        )


@dataclass(frozen=True)
class VersionEncounter:
    """Encounter details for one game version."""

    encounter_details: tuple[EncounterDetail, ...] = ()
    max_chance: int = 0
    version: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> VersionEncounter:
        data = _as_object(data, cls.__name__)
        return cls(
            encounter_details=_items(data, "encounter_details", EncounterDetail),
            max_chance=_int(data, "max_chance"),
            version=_resource(data, "version"),
        )


@dataclass(frozen=True)
class PokemonEncounter:
    """A Pokemon that can be met in a location area."""

    pokemon: NamedResource = field(default_factory=NamedResource)
    version_details: tuple[VersionEncounter, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> PokemonEncounter:
        data = _as_object(data, cls.__name__)
        return cls(
            pokemon=_resource(data, "pokemon"),
            version_details=_items(data, "version_details", VersionEncounter),
        )


@dataclass(frozen=True)
class Location:
    """A location area and the Pokemon that can be met there."""

    encounter_method_rates: tuple[dict[str, Any], ...] = ()
    game_index: int = 0
    id: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    name: str = ""
    names: tuple[dict[str, Any], ...] = ()
    pokemon_encounters: tuple[PokemonEncounter, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Location:
        data = _as_object(data, cls.__name__)
        return cls(
            encounter_method_rates=tuple(
                dict(_as_object(item, "encounter method rate"))
                for item in _list(data, "encounter_method_rates")
            ),
            game_index=_int(data, "game_index"),
            id=_int(data, "id"),
            location=_resource(data, "location"),
            name=_str(data, "name"),
            names=tuple(
                dict(_as_object(item, "localized name")) for item in _list(data, "names")
            ),
            pokemon_encounters=_items(data, "pokemon_encounters", PokemonEncounter),
        )


@dataclass(frozen=True)
class PokemonAbility:
    """An ability a Pokemon may have."""

    ability: NamedResource = field(default_factory=NamedResource)
    is_hidden: bool = False
    slot: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> PokemonAbility:
        data = _as_object(data, cls.__name__)
        return cls(
            ability=_resource(data, "ability"),
            is_hidden=_bool(data, "is_hidden"),
            slot=_int(data, "slot"),
        )


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a Pokemon."""

    base_stat: int = 0
    effort: int = 0
    stat: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        data = _as_object(data, cls.__name__)
        return cls(
            base_stat=_int(data, "base_stat"),
            effort=_int(data, "effort"),
            stat=_resource(data, "stat"),
        )


@dataclass(frozen=True)
class PokemonType:
    """A type a Pokemon belongs to."""

    slot: int = 0
    type: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonType:
        data = _as_object(data, cls.__name__)
        return cls(slot=_int(data, "slot"), type=_resource(data, "type"))


@dataclass(frozen=True)
class Pokemon:
    """A Pokemon as the API describes it."""

    abilities: tuple[PokemonAbility, ...] = ()
    base_experience: int = 0
    forms: tuple[NamedResource, ...] = ()
    game_indices: tuple[dict[str, Any], ...] = ()
    height: int = 0
    held_items: tuple[Any, ...] = ()
    id: int = 0
    is_default: bool = False
    location_area_encounters: str = ""
    moves: tuple[dict[str, Any], ...] = ()
    name: str = ""
    order: int = 0
    past_types: tuple[Any, ...] = ()
    species: NamedResource = field(default_factory=NamedResource)
    sprites: dict[str, Any] = field(default_factory=dict)
    stats: tuple[PokemonStat, ...] = ()
    types: tuple[PokemonType, ...] = ()
    weight: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        data = _as_object(data, cls.__name__)
        return cls(
            abilities=_items(data, "abilities", PokemonAbility),
            base_experience=_int(data, "base_experience"),
            forms=_items(data, "forms", NamedResource),
            game_indices=tuple(
                dict(_as_object(item, "game index")) for item in _list(data, "game_indices")
            ),
            height=_int(data, "height"),
            held_items=tuple(_list(data, "held_items")),
            id=_int(data, "id"),
            is_default=_bool(data, "is_default"),
            location_area_encounters=_str(data, "location_area_encounters"),
            moves=tuple(dict(_as_object(item, "move")) for item in _list(data, "moves")),
            name=_str(data, "name"),
            order=_int(data, "order"),
            past_types=tuple(_list(data, "past_types")),
            species=_resource(data, "species"),
            sprites=_object(data, "sprites"),
            stats=_items(data, "stats", PokemonStat),
            types=_items(data, "types", PokemonType),
            weight=_int(data, "weight"),
        )


def parse_json(payload: str | bytes | bytearray, model: type[M]) -> M:
    """Decode a JSON document into ``model`` via its ``from_dict``.

    Raises ValueError when the payload is not valid JSON or does not fit
    the model.
    """
    data = json.loads(payload)
    return model.from_dict(data)  # type: ignore[attr-defined]