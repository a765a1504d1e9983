# encoding: utf8
u"""Reading and writing the Pokédex flags of a Gen VI save file.

See: http://projectpokemon.org/wiki/ORAS_Save_Structure

The Pokédex region starts at a per-version base and holds, in order: the owned
flags, four blocks of seen flags and four blocks of displayed flags (one per
gender/shininess pair), the form-dex, the per-language flags, the foreign
flags and, in ORAS, the DexNav search counters.

`species` arguments here are 0-based indices, i.e. national dex number - 1.
"""

from pkdex import game
from pkdex.bits import get_bit, set_bit, read_u16, write_u16


class PokedexRegion(object):
    u"""A view over the Pokédex flags inside a save buffer.

    The view doesn't copy anything: reads and writes go straight to `buffer`,
    which must be a mutable buffer holding the whole save image.
    """

    def __init__(self, version, buffer):
        self.version = version
        self.buffer = buffer
        self.base = version.dex_offset

    def __repr__(self):
        return "<{0} {1} at 0x{2:X}>".format(
            type(self).__name__, self.version.identifier, self.base)

    @property
    def end(self):
        return self.base + self.version.region_length

    ### Offsets

    @property
    def owned_offset(self):
        return self.base + game.OWNED_OFFSET

    def seen_offset(self, gender, shiny):
        return (self.base + game.SEEN_OFFSET
            + game.FLAG_BLOCK_LENGTH * (gender % 2)
            + game.FLAG_BLOCK_LENGTH * 2 * int(shiny))

    def displayed_offset(self, gender, shiny):
        return (self.base + game.DISPLAYED_OFFSET
            + game.FLAG_BLOCK_LENGTH * (gender % 2)
            + game.FLAG_BLOCK_LENGTH * 2 * int(shiny))

    def form_seen_offset(self, shiny):
        return (self.base + game.FORM_DEX_OFFSET
            + self.version.form_length * int(shiny))

    def form_displayed_offset(self, shiny):
        return (self.base + game.FORM_DEX_OFFSET
            + self.version.form_length * (int(shiny) + 2))

    @property
    def language_offset(self):
        return self.base + game.LANGUAGE_OFFSET

    @property
    def foreign_offset(self):
        return self.base + game.FOREIGN_OFFSET

    def search_assist_offset(self, species):
        return self.base + game.SEARCH_ASSIST_OFFSET + species * 2

    ### Species flags

    def is_owned(self, species):
        return get_bit(self.buffer, self.owned_offset, species)

    def set_owned(self, species, value=True):
        set_bit(self.buffer, self.owned_offset, species, value)

    def is_seen(self, species, gender, shiny):
        return get_bit(self.buffer, self.seen_offset(gender, shiny), species)

    def set_seen(self, species, gender, shiny, value=True):
        set_bit(self.buffer, self.seen_offset(gender, shiny), species, value)

    def is_displayed(self, species, gender, shiny):
        return get_bit(
            self.buffer, self.displayed_offset(gender, shiny), species)

    def set_displayed(self, species, gender, shiny, value=True):
        set_bit(
            self.buffer, self.displayed_offset(gender, shiny), species, value)

    def any_seen(self, species):
        return any(self.is_seen(species, gender, shiny)
                   for shiny in (False, True) for gender in (0, 1))

    def any_displayed(self, species):
        return any(self.is_displayed(species, gender, shiny)
                   for shiny in (False, True) for gender in (0, 1))

    def has_language(self, species, language):
        return get_bit(self.buffer, self.language_offset,
                       species * game.LANGUAGE_COUNT + language)

    def set_language(self, species, language, value=True):
        set_bit(self.buffer, self.language_offset,
                species * game.LANGUAGE_COUNT + language, value)

    def is_foreign(self, species):
        return get_bit(self.buffer, self.foreign_offset, species)

    def set_foreign(self, species, value=True):
        set_bit(self.buffer, self.foreign_offset, species, value)

    def search_assist(self, species):
        if not self.version.has_search_assist:
            return None
        return read_u16(self.buffer, self.search_assist_offset(species))

    def set_search_assist(self, species, value):
        if not self.version.has_search_assist:
            raise ValueError(
                "{0} has no search counters".format(self.version.identifier))
        write_u16(self.buffer, self.search_assist_offset(species), value)

    ### Form-dex flags; `bit` is an absolute form-dex bit

    def is_form_seen(self, bit, shiny):
        return get_bit(self.buffer, self.form_seen_offset(shiny), bit)

    def set_form_seen(self, bit, shiny, value=True):
        set_bit(self.buffer, self.form_seen_offset(shiny), bit, value)

    def is_form_displayed(self, bit, shiny):
        return get_bit(self.buffer, self.form_displayed_offset(shiny), bit)

    def set_form_displayed(self, bit, shiny, value=True):
        set_bit(self.buffer, self.form_displayed_offset(shiny), bit, value)

    def form_displayed_aliases_language(self, bit, shiny):
        """Whether this displayed-form bit sits in the language flags' bytes.

        Only ORAS, whose form records run past the start of the language
        flags, has such bits.
        """
        return (self.form_displayed_offset(shiny) + bit // 8
                >= self.language_offset)

    def summary(self, species, form_base=None, form_count=0):
        u"""Returns a dict of everything the Pokédex knows about `species`.

        Form flags are only included when `form_base` is given.
        """
        result = {
            'owned': self.is_owned(species),
            'seen': {},
            'displayed': {},
            'languages': [language for language in range(game.LANGUAGE_COUNT)
                          if self.has_language(species, language)],
            'foreign': self.is_foreign(species),
        }
        for shiny in (False, True):
            for gender in (0, 1):
                key = (u'female' if gender else u'male') + (
                    u' shiny' if shiny else u'')
                result['seen'][key] = self.is_seen(species, gender, shiny)
                result['displayed'][key] = self.is_displayed(
                    species, gender, shiny)
        if self.version.has_search_assist:
            result['search assist'] = self.search_assist(species)
        if form_base is not None:
            result['forms'] = [
                dict(
                    seen=[self.is_form_seen(form_base + i, shiny)
                          for shiny in (False, True)],
                    displayed=[self.is_form_displayed(form_base + i, shiny)
                               for shiny in (False, True)],
                )
                for i in range(form_count)
            ]
        return result
