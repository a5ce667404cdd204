"""Interactive command-line Pokedex backed by the PokeAPI, with a response cache."""

__version__ = "1.0.0"