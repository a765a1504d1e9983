# encoding: utf8
u"""Registers an imported Pokémon in a Gen VI save's Pokédex.

When a Pokémon is put into a save from outside, the game never gets the chance
to mark it in the Pokédex, so we do what the game would have: mark it seen in
its gender/shininess block, pick it as the displayed entry if the species has
none yet, note its language, mark it owned (or foreign), and update the
form-dex for species whose forms are tracked.

Saves that have been through other editors sometimes carry a form marked as
displayed without being seen, which the game itself never produces.  Importing
a Pokémon of that species repairs it.
"""

import logging

from pkdex import formdex
from pkdex.formdex import FormSeenPolicy
from pkdex.game import GameVersion
from pkdex.personal import BuiltinPersonal
from pkdex.savefile import PokedexRegion

log = logging.getLogger(__name__)


def _check_preconditions(version, buffer, pokemon, personal):
    """Returns the form count of `pokemon` once it's known to be importable."""
    if not isinstance(version, GameVersion):
        raise ValueError('Not a game version: {0!r}'.format(version))
    if not 1 <= pokemon.species <= version.species_count:
        raise ValueError('Species {0} is outside 1-{1} in {2}'.format(
            pokemon.species, version.species_count, version.identifier))
    form_count = personal.form_count(pokemon.species, pokemon.form)
    if pokemon.form < 0 or (form_count and pokemon.form >= form_count):
        raise ValueError('Species {0} has no form {1}'.format(
            pokemon.species, pokemon.form))
    required = version.dex_offset + version.region_length
    if buffer is None or len(buffer) < required:
        raise ValueError(
            'Save buffer is too short for {0}: need 0x{1:X} bytes'.format(
                version.identifier, required))
    return form_count


def import_pokemon(version, buffer, pokemon, personal=None):
    u"""Marks `pokemon` in the Pokédex of the save in `buffer`, in place.

    `version` is a GameVersion, `pokemon` a PokemonRecord.  `personal`
    provides form counts via ``form_count(species, form)``; the built-in
    counts are used if it's omitted.

    Raises ValueError, without touching the buffer, if the Pokémon can't
    exist in `version` or the buffer can't hold its Pokédex.
    """
    if personal is None:
        personal = BuiltinPersonal(version)
    form_count = _check_preconditions(version, buffer, pokemon, personal)

    dex = PokedexRegion(version, buffer)
    species = pokemon.species - 1
    form = pokemon.form
    shiny = bool(pokemon.is_shiny)
    gender = 1 if pokemon.is_female else 0
    language = pokemon.language_index

    log.info(u"Adding %03d form %d to the %s Pokédex",
             pokemon.species, form, version.identifier)

    # Must be read before anything below changes them
    already_seen = dex.any_seen(species)
    already_displayed = dex.any_displayed(species)

    if form_count > 0:
        form_base = formdex.resolve(version, pokemon.species)
        if form_base is not None:
            _mark_form_seen(dex, pokemon.species, form_base, form, form_count,
                            shiny)
            if not already_seen and not already_displayed:
                _drop_unseen_form_displays(dex, form_base, form_count)
                log.debug("SH_FORM_DISPLAYED_FLAG")
                dex.set_form_displayed(form_base + form, shiny)
            else:
                _reconcile_form_displayed(dex, form_base, form, form_count,
                                          shiny, already_displayed)

    log.debug("SH_SEEN_FLAG")
    dex.set_seen(species, gender, shiny)

    if not already_displayed:
        log.debug("SH_DISPLAYED_FLAG")
        dex.set_displayed(species, gender, shiny)

    if language is not None:
        log.debug("LANG_FLAG")
        dex.set_language(species, language)

    if (version is GameVersion.XY and not pokemon.is_native
            and pokemon.species < version.native_cutoff):
        log.debug("FOREIGN_FLAG")
        dex.set_foreign(species)
    elif version is GameVersion.ORAS or pokemon.is_native:
        log.debug("OWNED_FLAG")
        dex.set_owned(species)

    if version.has_search_assist and dex.search_assist(species) == 0:
        log.debug("DEXNAV_SET")
        dex.set_search_assist(species, 1)


def _mark_form_seen(dex, species, form_base, form, form_count, shiny):
    policy = formdex.form_policy(species)
    if policy is FormSeenPolicy.COSMETIC:
        bits = [form_base + i for i in range(form_count)]
    elif policy is FormSeenPolicy.SPLIT:
        bits = [form_base, form_base + formdex.SPLIT_VARIANT_BIT]
        if form_base + form not in bits:
            bits.append(form_base + form)
    else:
        bits = [form_base + form]

    for bit in bits:
        log.debug("SH_FORM_SEEN_FLAG")
        dex.set_form_seen(bit, shiny)


def _drop_unseen_form_displays(dex, form_base, form_count):
    """Clears every displayed form of a species whose seen bit isn't set,
    except where the bit overlaps the language flags.

    Returns whether any displayed form is left.
    """
    still_displayed = False
    for i in range(form_count):
        bit = form_base + i
        for tier in (False, True):
            if not dex.is_form_displayed(bit, tier):
                continue
            if dex.form_displayed_aliases_language(bit, tier):
                # Shares its byte with the language flags; not ours to clear
                continue
            if dex.is_form_seen(bit, tier):
                still_displayed = True
            else:
                log.warning("Clearing form-dex bit %d (shiny: %s): displayed "
                            "but never seen", bit, tier)
                dex.set_form_displayed(bit, tier, False)
    return still_displayed


def _reconcile_form_displayed(dex, form_base, form, form_count, shiny,
                              already_displayed):
    """Picks the displayed form for a species the Pokédex already knows.

    The game keeps one displayed form, and only among seen ones.  A displayed
    form that isn't seen is cleared; if that leaves nothing on display for a
    species that isn't displayed either, this form takes over.
    """
    any_displayed = any(dex.is_form_displayed(form_base + i, tier)
                        for i in range(form_count) for tier in (False, True))
    if not any_displayed:
        log.debug("SH_FORM_DISPLAYED_FLAG")
        dex.set_form_displayed(form_base + form, shiny)
        return

    still_displayed = _drop_unseen_form_displays(dex, form_base, form_count)
    if not still_displayed and not already_displayed:
        log.debug("SH_FORM_DISPLAYED_FLAG")
        dex.set_form_displayed(form_base + form, shiny)


def import_all(version, buffer, pokemon_list, personal=None):
    """Imports several Pokémon one after another; returns how many.

    Stops at the first invalid one; those before it stay imported.
    """
    if personal is None:
        personal = BuiltinPersonal(version)
    count = 0
    for pokemon in pokemon_list:
        import_pokemon(version, buffer, pokemon, personal)
        count += 1
    return count
