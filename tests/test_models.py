import json

import pytest

from pokedexcli.models import (
    EncounterDetail,
    Location,
    LocationPage,
    NamedResource,
    Pokemon,
    PokemonAbility,
    PokemonEncounter,
    PokemonStat,
    PokemonType,
    VersionEncounter,
    parse_json,
)

BASE = "https://pokeapi.co/api/v2"

PAGE = {
    "count": 1089,
    "next": BASE + "/location-area?offset=20&limit=20",
    "previous": None,
    "results": [
        {"name": "canalave-city-area", "url": BASE + "/location-area/1/"},
        {"name": "eterna-city-area", "url": BASE + "/location-area/2/"},
    ],
}

LOCATION = {
    "encounter_method_rates": [
        {"encounter_method": {"name": "walk", "url": BASE + "/encounter-method/1/"}}
    ],
    "game_index": 1,
    "id": 1,
    "location": {"name": "canalave-city", "url": BASE + "/location/1/"},
    "name": "canalave-city-area",
    "names": [{"language": {"name": "en", "url": BASE + "/language/9/"}, "name": "Canalave City"}],
    "pokemon_encounters": [
        {
            "pokemon": {"name": "tentacool", "url": BASE + "/pokemon/72/"},
            "version_details": [
                {
                    "encounter_details": [
                        {
                            "chance": 60,
                            "condition_values": [],
                            "max_level": 30,
                            "method": {"name": "surf", "url": BASE + "/encounter-method/5/"},
                            "min_level": 20,
                        }
                    ],
                    "max_chance": 60,
                    "version": {"name": "diamond", "url": BASE + "/version/12/"},
                }
            ],
        },
        {"pokemon": {"name": "tentacruel", "url": BASE + "/pokemon/73/"}, "version_details": []},
    ],
}

POKEMON = {
    "abilities": [
        {"ability": {"name": "static", "url": BASE + "/ability/9/"}, "is_hidden": False, "slot": 1},
        {"ability": {"name": "lightning-rod", "url": BASE + "/ability/31/"}, "is_hidden": True, "slot": 3},
    ],
    "base_experience": 112,
    "forms": [{"name": "pikachu", "url": BASE + "/pokemon-form/25/"}],
    "game_indices": [{"game_index": 84, "version": {"name": "red", "url": BASE + "/version/1/"}}],
    "height": 4,
    "held_items": [],
    "id": 25,
    "is_default": True,
    "location_area_encounters": BASE + "/pokemon/25/encounters",
    "moves": [],
    "name": "pikachu",
    "order": 35,
    "past_types": [],
    "species": {"name": "pikachu", "url": BASE + "/pokemon-species/25/"},
    "sprites": {"front_default": "front.png", "back_female": None},
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": BASE + "/stat/1/"}},
        {"base_stat": 90, "effort": 2, "stat": {"name": "speed", "url": BASE + "/stat/6/"}},
    ],
    "types": [{"slot": 1, "type": {"name": "electric", "url": BASE + "/type/13/"}}],
    "weight": 60,
}


def test_location_page_from_dict():
    page = LocationPage.from_dict(PAGE)
    assert page.count == PAGE["count"]
    assert page.next == PAGE["next"]
    assert page.previous is None
    assert [r.name for r in page.results] == ["canalave-city-area", "eterna-city-area"]
    assert page.results[1].url == PAGE["results"][1]["url"]


def test_parse_json_location_page_from_bytes():
    page = parse_json(json.dumps(PAGE).encode(), LocationPage)
    assert page == LocationPage.from_dict(PAGE)


def test_location_from_dict():
    location = Location.from_dict(LOCATION)
    assert location.name == "canalave-city-area"
    assert location.location == NamedResource("canalave-city", BASE + "/location/1/")
    assert [e.pokemon.name for e in location.pokemon_encounters] == ["tentacool", "tentacruel"]
    assert location.names[0]["name"] == "Canalave City"
    assert location.encounter_method_rates[0]["encounter_method"]["name"] == "walk"


def test_location_nested_encounter_details():
    encounter = Location.from_dict(LOCATION).pokemon_encounters[0]
    assert isinstance(encounter, PokemonEncounter)
    version = encounter.version_details[0]
    assert isinstance(version, VersionEncounter)
    assert version.version.name == "diamond"
    assert version.max_chance == 60
    detail = version.encounter_details[0]
    assert isinstance(detail, EncounterDetail)
    assert (detail.min_level, detail.max_level, detail.chance) == (20, 30, 60)
    assert detail.method.name == "surf"


def test_pokemon_from_dict():
    pokemon = Pokemon.from_dict(POKEMON)
    assert pokemon.name == "pikachu"
    assert pokemon.base_experience == 112
    assert (pokemon.height, pokemon.weight) == (4, 60)
    assert pokemon.is_default is True
    assert pokemon.stats[1] == PokemonStat(90, 2, NamedResource("speed", BASE + "/stat/6/"))
    assert pokemon.types == (PokemonType(1, NamedResource("electric", BASE + "/type/13/")),)
    assert pokemon.abilities[1] == PokemonAbility(
        NamedResource("lightning-rod", BASE + "/ability/31/"), True, 3
    )
    assert pokemon.sprites["front_default"] == "front.png"
    assert pokemon.species.url == BASE + "/pokemon-species/25/"


def test_parse_json_pokemon_matches_from_dict():
    assert parse_json(json.dumps(POKEMON), Pokemon) == Pokemon.from_dict(POKEMON)


def test_unknown_fields_are_ignored():
    data = dict(POKEMON, cries={"latest": "cry.ogg"})
    assert Pokemon.from_dict(data) == Pokemon.from_dict(POKEMON)


def test_missing_fields_take_defaults():
    assert Pokemon.from_dict({}) == Pokemon()
    assert Location.from_dict({}) == Location()
    assert LocationPage.from_dict({}) == LocationPage()


def test_null_document_gives_default_model():
    assert parse_json("null", Pokemon) == Pokemon()


def test_null_fields_take_defaults():
    data = dict(POKEMON, stats=None, species=None, height=None)
    pokemon = Pokemon.from_dict(data)
    assert pokemon.stats == ()
    assert pokemon.species == NamedResource()
    assert pokemon.height == Pokemon().height


@pytest.mark.parametrize(
    ("field_name", "bad_value"),
    [
        ("height", "tall"),
        ("height", 4.5),
        ("height", True),
        ("name", 25),
        ("is_default", 1),
        ("stats", {"hp": 35}),
        ("species", ["pikachu"]),
    ],
)
def test_wrong_field_type_raises(field_name, bad_value):
    with pytest.raises(ValueError):
        Pokemon.from_dict(dict(POKEMON, **{field_name: bad_value}))


def test_page_next_must_be_string_or_null():
    with pytest.raises(ValueError):
        LocationPage.from_dict(dict(PAGE, next=20))


def test_array_document_raises():
    with pytest.raises(ValueError):
        parse_json("[1, 2, 3]", Location)


def test_invalid_json_raises():
    with pytest.raises(ValueError):
        parse_json(b"{not json", Pokemon)