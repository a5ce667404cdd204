"""The interactive Pokedex shell and its commands."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

from .client import Client, PokeAPIError
from .models import Pokemon

PROMPT = "Pokedex > "
CATCH_THRESHOLD = 40


class CommandError(Exception):
    """Raised when a command is used wrongly."""


@dataclass
class Config:
    """State shared by the commands of one session."""

    client: Client
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    caught_pokemon: dict[str, Pokemon] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A shell command: how it is shown in help and what it runs."""

    name: str
    description: str
    callback: Callable[..., None]


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words on whitespace."""
    return text.lower().split()


def _single_arg(args: Sequence[str], message: str) -> str:
    if len(args) != 1:
        raise CommandError(message)
    return args[0]


def command_catch(cfg: Config, *args: str) -> None:
    """Throw a Pokeball at a Pokemon; catch it unless it escapes."""
    name = _single_arg(args, "you must provide a pokemon name")
    pokemon = cfg.client.get_pokemon(name)
    if pokemon.base_experience <= 0:
        raise CommandError(f"{pokemon.name} cannot be caught")
    roll = cfg.rng.randrange(pokemon.base_experience)

    print(f"Throwing a Pokeball at {pokemon.name}...")
    if roll > CATCH_THRESHOLD:
        print(f"{pokemon.name} escaped!")
        return

    print(f"{pokemon.name} was caught!")
    print("You may now inspect it with the inspect command.")
    cfg.caught_pokemon[pokemon.name] = pokemon


def command_exit(cfg: Config, *args: str) -> None:
    """Say goodbye and leave the program with status 0."""
    print("Closing the Pokedex... Goodbye!")
    sys.stdout.flush()
    sys.exit(0)


def command_explore(cfg: Config, *args: str) -> None:
    """List the Pokemon that can be met in a location area."""
    name = _single_arg(args, "you must provide a location name")
    location = cfg.client.get_location(name)
    print(f"Exploring {location.name}...")
    print("Found Pokemon: ")
    for encounter in location.pokemon_encounters:
        print(f" - {encounter.pokemon.name}")


def command_help(cfg: Config, *args: str) -> None:
    """Print every command with its description."""
    print()
    print("Welcome to the Pokedex!")
    print("Usage:")
    print()
    for command in get_commands().values():
        print(f"{command.name}: {command.description}")
    print()


def command_inspect(cfg: Config, *args: str) -> None:
    """Show the details of a caught Pokemon."""
    name = _single_arg(args, "you must provide a pokemon name")
    pokemon = cfg.caught_pokemon.get(name)
    if pokemon is None:
        print("you have not caught that pokemon")
        return
    print(f"Name: {pokemon.name}")
    print(f"Height: {pokemon.height}")
    print(f"Weight: {pokemon.weight}")
    print("Stats:")
    for stat in pokemon.stats:
        print(f" - {stat.stat.name}: {stat.base_stat}")
    print("Types:")
    for pokemon_type in pokemon.types:
        print(f" - {pokemon_type.type.name}")


def _show_locations(cfg: Config, page_url: str | None) -> None:
    page = cfg.client.list_locations(page_url)
    cfg.next_locations_url = page.next
    cfg.prev_locations_url = page.previous
    for location in page.results:
        print(location.name)


def command_map_forward(cfg: Config, *args: str) -> None:
    """Show the next page of location areas."""
    _show_locations(cfg, cfg.next_locations_url)


def command_map_back(cfg: Config, *args: str) -> None:
    """Show the previous page of location areas."""
    if cfg.prev_locations_url is None:
        raise CommandError("you're on the first page")
    _show_locations(cfg, cfg.prev_locations_url)


def command_pokedex(cfg: Config, *args: str) -> None:
    """List the caught Pokemon."""
    print("Your Pokedex:")
    for pokemon in cfg.caught_pokemon.values():
        print(f" - {pokemon.name}")


def get_commands() -> dict[str, Command]:
    """Return the shell's commands keyed by the word that runs them."""
    return {
        "catch": Command("catch", "Catch a Pokémon", command_catch),
        "exit": Command("exit", "Exit the Pokedex", command_exit),
        "explore": Command("explore <location_name>", "Explore a location", command_explore),
        "help": Command("help", "Displays a help message", command_help),
        "inspect": Command("inspect", "Inspect a Pokémon", command_inspect),
        "map": Command("map", "Get the next page of locations", command_map_forward),
        "mapb": Command("mapb", "Get the previous page of locations", command_map_back),
        "pokedex": Command(
            "pokedex", "List the Pokemon that have been caught", command_pokedex
        ),
    }


def start_repl(cfg: Config, stream: TextIO | None = None) -> None:
    """Read commands from ``stream`` (stdin by default) until it ends."""
    if stream is None:
        stream = sys.stdin
    commands = get_commands()
    while True:
        print(PROMPT, end="", flush=True)
        line = stream.readline()
        if not line:
            print()
            return
        words = clean_input(line)
        if not words:
            continue
        name, *args = words
        command = commands.get(name)
        if command is None:
            print("Unknown command")
            continue
        try:
            command.callback(cfg, *args)
        except (CommandError, PokeAPIError) as exc:
            print(exc)


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive Pokedex session."""
    parser = argparse.ArgumentParser(
        prog="pokedexcli", description="An interactive Pokedex shell."
    )
    parser.parse_args(argv)
    with Client(timeout=5.0, cache_interval=300.0) as client:
        start_repl(Config(client=client))
    return 0


if __name__ == "__main__":
    sys.exit(main())