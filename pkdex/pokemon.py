# encoding: utf8
u"""The decoded view of a Pokémon that the importer needs."""

import attr

#: Gen VI language codes; 6 is reserved and never used by retail games
LANGUAGE_CODES = {
    1: 'ja',
    2: 'en',
    3: 'fr',
    4: 'it',
    5: 'de',
    7: 'es',
    8: 'ko',
}
# The Pokédex gives each retail language a slot, in code order
LANGUAGE_INDICES = dict(
    (code, index) for index, code in enumerate(sorted(LANGUAGE_CODES)))


def normalize_language(code):
    """Maps a raw language code onto the Pokédex's 0-6 language index.

    Returns None for codes the Pokédex has no slot for, including the
    reserved code 6.
    """
    return LANGUAGE_INDICES.get(code)


@attr.s(frozen=True)
class PokemonRecord(object):
    u"""One Pokémon being imported, already decrypted and decoded.

    `species` is the national dex number; `gender` is 0 for male, 1 for
    female and 2 for genderless.  `is_native` means the Pokémon was caught or
    hatched in Kalos.
    """
    species = attr.ib()
    form = attr.ib(default=0)
    language = attr.ib(default=2)
    is_shiny = attr.ib(default=False)
    gender = attr.ib(default=0)
    is_native = attr.ib(default=False)

    @property
    def is_female(self):
        return self.gender % 2 == 1

    @property
    def language_index(self):
        return normalize_language(self.language)
