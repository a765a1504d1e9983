# encoding: utf8
u"""Keeps a Gen VI save's Pokédex in step with the Pokémon put into it."""

from pkdex.game import GameVersion
from pkdex.importer import import_all, import_pokemon
from pkdex.pokemon import PokemonRecord
