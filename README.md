# pokedexcli

An interactive Pokedex for the terminal. It pages through location areas,
explores them for Pokémon, lets you try to catch what you find, and keeps a
Pokedex of your catches for the session. Data comes from the public PokeAPI.
Raw responses are kept in an in-memory cache; a background thread checks every
five minutes and drops entries older than five minutes, so repeated lookups
skip the network in the meantime.

## Installation

```
pip install .
```

Python 3.10 or later is required. The package has no third-party dependencies.

## Usage

Start the shell:

```
pokedexcli
```

The command takes no options other than `--help`. You get a `Pokedex > `
prompt. Input is lower-cased and split on whitespace, so
`EXPLORE  Canalave-City-Area` and `explore canalave-city-area` mean the same.
The shell ends on `exit` or at the end of input (Ctrl-D).

| Command                    | What it does                                      |
|----------------------------|---------------------------------------------------|
| `help`                     | Lists the commands with their descriptions        |
| `map`                      | Shows the next page of location areas             |
| `mapb`                     | Shows the previous page of location areas         |
| `explore <location_name>`  | Lists the Pokémon that can be met in an area      |
| `catch <pokemon_name>`     | Throws a Pokeball at a Pokémon                    |
| `inspect <pokemon_name>`   | Shows name, height, weight, stats and types of a catch |
| `pokedex`                  | Lists the Pokémon that have been caught           |
| `exit`                     | Says goodbye and exits                            |

`mapb` before any page has a previous page reports `you're on the first page`.
`explore`, `catch` and `inspect` each need exactly one name. Failed requests
and wrong usage are reported and the shell carries on; unknown words print
`Unknown command`.

An example session:

```
Pokedex > catch magikarp
Throwing a Pokeball at magikarp...
magikarp was caught!
You may now inspect it with the inspect command.
Pokedex > pokedex
Your Pokedex:
 - magikarp
Pokedex > exit
Closing the Pokedex... Goodbye!
```

A throw draws a random number below the Pokémon's base experience and
succeeds when it is 40 or less, so catches get harder as base experience rises.

## Using it as a library

- `pokedexcli.client.Client(timeout=5.0, cache_interval=300.0, base_url=...)`
  fetches pages of location areas, single location areas and Pokémon with
  `list_locations(page_url=None)`, `get_location(name)` and
  `get_pokemon(name)`. Network failures and responses that cannot be decoded
  raise `PokeAPIError`. Use it as a context manager, or call `close()`, to stop
  its cache's background thread.
- `pokedexcli.cache.Cache(interval)` is a thread-safe store of byte values by
  key. `add(key, value)` stores, `get(key)` returns the value or `None`, and
  `reap(now=None, max_age=None)` removes entries older than `max_age`
  (default: the interval). It also supports `len()`, `in`, `close()` and the
  `with` statement.
- `pokedexcli.models` holds frozen dataclasses built from API responses
  (`Pokemon`, `Location`, `LocationPage`, `NamedResource`, ...), each with a
  `from_dict` class method, and `parse_json(payload, model)`, which raises
  `ValueError` on bad JSON or data that does not fit the model.
- `pokedexcli.repl.start_repl(cfg, stream=None)` runs the command loop over any
  text stream, with a `Config` holding the client and session state;
  `clean_input(text)` and `get_commands()` are available as well.

## Limitations

Caught Pokémon are held in memory only and are lost when the shell exits;
nothing is saved to disk. The cache is in memory too and starts empty each
session.

## Running the tests

```
pip install ".[test]"
pytest
```