# encoding: utf8
u"""Per-species base data ("personal" records), as far as the Pokédex needs it.

The games keep one fixed-size record per species, followed by extra records
for alternate forms that have their own stats.  X/Y records are 0x40 bytes;
ORAS appends a block of tutor flags, for 0x50.
"""

import logging
import os

import attr
from construct import Array, Bytes, Int8ul, Int16ul, Int32ul, Struct

from pkdex import defaults
from pkdex.formdex import table_form_count
from pkdex.game import GameVersion

log = logging.getLogger(__name__)

_common_fields = [
    'stat_hp' / Int8ul,
    'stat_atk' / Int8ul,
    'stat_def' / Int8ul,
    'stat_speed' / Int8ul,
    'stat_spatk' / Int8ul,
    'stat_spdef' / Int8ul,
    'type1' / Int8ul,
    'type2' / Int8ul,
    'capture_rate' / Int8ul,
    'stage' / Int8ul,
    'effort' / Int16ul,
    'held_item1' / Int16ul,
    'held_item2' / Int16ul,
    'held_item3' / Int16ul,
    'gender_rate' / Int8ul,
    'steps_to_hatch' / Int8ul,
    'base_happiness' / Int8ul,
    'growth_rate' / Int8ul,
    'egg_group1' / Int8ul,
    'egg_group2' / Int8ul,
    'ability1' / Int8ul,
    'ability2' / Int8ul,
    'ability_hidden' / Int8ul,
    'safari_escape' / Int8ul,
    'form_species_start' / Int16ul,
    'form_sprite_start' / Int16ul,
    'form_count' / Int8ul,
    'color' / Int8ul,
    'base_exp' / Int16ul,
    'height' / Int16ul,
    'weight' / Int16ul,
    'machines' / Bytes(16),
    'tutors' / Int32ul,
    'mystery1' / Int16ul,
    'mystery2' / Int16ul,
]

personal_struct_xy = Struct(*_common_fields)
personal_struct_oras = Struct(*(_common_fields + [
    'bp_tutors' / Array(4, Int32ul),
]))


def personal_struct(version):
    if version is GameVersion.ORAS:
        return personal_struct_oras
    return personal_struct_xy


@attr.s(frozen=True)
class PersonalInfo(object):
    """The part of a personal record the Pokédex cares about."""
    form_count = attr.ib()
    form_species_start = attr.ib(default=0)

    @classmethod
    def from_record(cls, record):
        # The games count the default form; the Pokédex only cares about
        # alternates
        form_count = record.form_count if record.form_count > 1 else 0
        return cls(form_count, record.form_species_start)


class PersonalTable(object):
    """A parsed personal table, indexed by national dex number."""

    def __init__(self, infos):
        self.infos = list(infos)

    def __len__(self):
        return len(self.infos)

    @classmethod
    def from_bytes(cls, data, version):
        struct = personal_struct(version)
        size = struct.sizeof()
        if not data or len(data) % size:
            raise ValueError(
                "Personal data is {0} bytes, not a multiple of the {1}-byte "
                "{2} record".format(len(data), size, version.identifier))
        records = Array(len(data) // size, struct).parse(data)
        log.debug("Parsed %d personal records", len(records))
        return cls(PersonalInfo.from_record(record) for record in records)

    @classmethod
    def from_file(cls, path, version):
        with open(path, 'rb') as f:
            return cls.from_bytes(f.read(), version)

    def info(self, species, form=0):
        """Returns the PersonalInfo for a species and form.

        Forms past the species' last form fall back to its last form; forms
        without a record of their own share the species' record.
        """
        base = self.infos[species]
        if base.form_count:
            form = min(form, base.form_count - 1)
        else:
            form = 0
        if form and base.form_species_start:
            index = base.form_species_start + form - 1
            if index < len(self.infos):
                return self.infos[index]
        return base

    def form_count(self, species, form=0):
        return self.info(species, form).form_count


class BuiltinPersonal(object):
    """Form counts taken from the form-dex tables, for when no personal table
    is available.
    """

    def __init__(self, version):
        self.version = version

    def form_count(self, species, form=0):
        return table_form_count(self.version, species)


def load_personal(version, path=None):
    """Returns a form count provider for `version`.

    Uses the personal table at `path`, or the configured default one if it
    exists, or the built-in form counts.
    """
    if path is None:
        path, origin = defaults.get_default_personal_path_with_origin(version)
        if origin == 'default' and not os.path.exists(path):
            log.info("No personal table at %s; using built-in form counts",
                     path)
            return BuiltinPersonal(version)
    return PersonalTable.from_file(path, version)
