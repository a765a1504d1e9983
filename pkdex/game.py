# encoding: utf8
u"""Gen VI game versions and the layout of their Pokédex save region.

X/Y and Omega Ruby/Alpha Sapphire share one Pokédex layout.  Everything is
addressed from a single per-version base; only the length of a form-dex block
and the presence of the DexNav search counter differ between them.
"""

from enum import Enum

#: Species known to Gen VI
SPECIES_COUNT = 721

#: National dex number of the first species introduced in Kalos
NATIVE_CUTOFF = 650

# Offsets relative to the Pokédex region base
OWNED_OFFSET = 0x8
SEEN_OFFSET = OWNED_OFFSET + 0x60
DISPLAYED_OFFSET = OWNED_OFFSET + 0x60 * 5
FLAG_BLOCK_LENGTH = 0x60
FORM_DEX_OFFSET = 0x368
LANGUAGE_OFFSET = 0x3C8
LANGUAGE_COUNT = 7
FOREIGN_OFFSET = 0x64C
SEARCH_ASSIST_OFFSET = 0x686


def _bit_bytes(bits):
    return (bits + 7) // 8


class GameVersion(Enum):
    """A Gen VI game family, carrying its Pokédex layout constants."""

    XY = ('xy', 0x15000, 0x18, False)
    ORAS = ('oras', 0x15000, 0x26, True)

    def __init__(self, identifier, dex_offset, form_length, has_search_assist):
        self.identifier = identifier
        self.dex_offset = dex_offset
        self.form_length = form_length
        self.has_search_assist = has_search_assist

    @property
    def species_count(self):
        return SPECIES_COUNT

    @property
    def native_cutoff(self):
        return NATIVE_CUTOFF

    @property
    def region_length(self):
        """Number of bytes from the region base that an import may touch."""
        ends = [
            DISPLAYED_OFFSET + FLAG_BLOCK_LENGTH * 4,
            FORM_DEX_OFFSET + self.form_length * 4,
            LANGUAGE_OFFSET + _bit_bytes(SPECIES_COUNT * LANGUAGE_COUNT),
        ]
        if self.has_search_assist:
            ends.append(SEARCH_ASSIST_OFFSET + SPECIES_COUNT * 2)
        else:
            ends.append(FOREIGN_OFFSET + _bit_bytes(SPECIES_COUNT))
        return max(ends)

    @classmethod
    def from_name(cls, name):
        """Looks up a version by identifier or by a single game's name."""
        key = name.strip().lower()
        for version in cls:
            if key == version.identifier:
                return version
        if key in (u'x', u'y'):
            return cls.XY
        if key in (u'or', u'as', u'omega-ruby', u'alpha-sapphire'):
            return cls.ORAS
        raise ValueError('Unknown game version: {0!r}'.format(name))
