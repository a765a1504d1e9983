# encoding: utf8
u"""Localized names of species, moves, items, abilities and natures.

Each table is a UTF-8 text file with one name per line, in index order, at
``<data dir>/<lang>/<kind>_<lang>.txt``.
"""

import io
import os

from pkdex import defaults

LANGUAGES = ('en', 'fr', 'de', 'es')

# kind: (number of entries, whether a bad index gets entry 0 or "(None)")
TABLES = {
    'abilities': (192, True),
    'items': (776, True),
    'moves': (622, True),
    'natures': (25, False),
    'species': (722, False),
}

NONE_NAME = u'(None)'

HIDDEN_POWER_TYPES = (
    u'Fighting', u'Flying', u'Poison', u'Ground',
    u'Rock', u'Bug', u'Ghost', u'Steel', u'Fire', u'Water',
    u'Grass', u'Electric', u'Psychic', u'Ice', u'Dragon', u'Dark',
)


def hidden_power_type(index):
    if 0 <= index < len(HIDDEN_POWER_TYPES):
        return HIDDEN_POWER_TYPES[index]
    return NONE_NAME


class NameTable(object):
    def __init__(self, names, fallback_to_first=False):
        self.names = list(names)
        self.fallback_to_first = fallback_to_first

    def __len__(self):
        return len(self.names)

    def __iter__(self):
        return iter(self.names)

    def __getitem__(self, index):
        if 0 <= index < len(self.names):
            return self.names[index]
        if self.fallback_to_first and self.names:
            return self.names[0]
        return NONE_NAME

    @classmethod
    def from_file(cls, path, count, fallback_to_first=False):
        """Reads the first `count` non-blank lines of a name file.

        Missing lines are filled in with empty names.
        """
        with io.open(path, encoding='utf-8-sig') as f:
            lines = [line.rstrip(u'\r\n') for line in f]
        names = [line for line in lines if line][:count]
        names.extend([u''] * (count - len(names)))
        return cls(names, fallback_to_first)


def name_file_path(kind, lang, data_dir=None):
    if data_dir is None:
        data_dir = defaults.get_default_data_dir()
    return os.path.join(data_dir, lang, '{0}_{1}.txt'.format(kind, lang))


def load_names(kind, lang, data_dir=None):
    """Loads a name table, e.g. ``load_names('species', 'fr')``."""
    if lang not in LANGUAGES:
        raise ValueError('Unsupported language: {0!r}'.format(lang))
    try:
        count, fallback_to_first = TABLES[kind]
    except KeyError:
        raise ValueError('Unknown name table: {0!r}'.format(kind))
    return NameTable.from_file(
        name_file_path(kind, lang, data_dir), count, fallback_to_first)
