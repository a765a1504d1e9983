# encoding: utf8
from __future__ import print_function

import argparse
import logging
import os
import sys

from pkdex import defaults, formdex
from pkdex.game import GameVersion
from pkdex.importer import import_pokemon
from pkdex.names import load_names
from pkdex.personal import load_personal
from pkdex.pokemon import PokemonRecord
from pkdex.savefile import PokedexRegion


def main(junk, *argv):
    parser = create_parser()

    if len(argv) <= 0:
        parser.print_help()
        sys.exit()

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s')
    try:
        args.func(parser, args)
    except (ValueError, IOError) as e:
        print("ERROR: {0}".format(e), file=sys.stderr)
        sys.exit(1)


def setuptools_entry():
    main(*sys.argv)


def game_version(name):
    try:
        return GameVersion.from_name(name)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def create_parser():
    """Build and return an ArgumentParser.
    """
    common_parser = argparse.ArgumentParser(add_help=False)
    common_parser.add_argument(
        '-q', '--quiet', dest='verbose', action='store_false',
        help=u'Only print warnings and errors.  This is the default.',
    )
    common_parser.add_argument(
        '-v', '--verbose', dest='verbose', default=False, action='store_true',
        help=u'Log every flag that gets written.',
    )

    save_parser = argparse.ArgumentParser(add_help=False)
    save_parser.add_argument('save', help=u'decrypted save file')
    save_parser.add_argument(
        '-g', '--game', dest='game', type=game_version, required=True,
        help=u'game the save belongs to: xy or oras')
    save_parser.add_argument(
        '-s', '--species', dest='species', type=int, required=True,
        help=u'national dex number')

    parser = argparse.ArgumentParser(
        prog='pkdex', description=u'Gen VI Pokédex registry tool',
        parents=[common_parser],
    )

    cmds = parser.add_subparsers(title='commands', metavar='<command>', help='commands')
    cmd_help = cmds.add_parser(
        'help', help=u'Display this message',
        parents=[common_parser])
    cmd_help.set_defaults(func=command_help)

    cmd_register = cmds.add_parser(
        'register', help=u'Mark a Pokémon in a save\'s Pokédex, as if it had been caught',
        parents=[common_parser, save_parser])
    cmd_register.set_defaults(func=command_register)
    cmd_register.add_argument(
        '-f', '--form', dest='form', type=int, default=0,
        help=u'form index (default: 0)')
    cmd_register.add_argument(
        '-l', '--language', dest='language', type=int, default=2,
        help=u'raw language code, 1-8 (default: 2, English)')
    cmd_register.add_argument(
        '--shiny', dest='shiny', default=False, action='store_true')
    cmd_register.add_argument(
        '--gender', dest='gender', type=int, choices=(0, 1, 2), default=0,
        help=u'0 male, 1 female, 2 genderless (default: 0)')
    cmd_register.add_argument(
        '--native', dest='native', default=False, action='store_true',
        help=u'the Pokémon was caught or hatched in Kalos')
    cmd_register.add_argument(
        '-p', '--personal', dest='personal', default=None,
        help=u'personal table to read form counts from')
    cmd_register.add_argument(
        '-o', '--output', dest='output', default=None,
        help=u'where to write the save (default: overwrite the input)')

    cmd_show = cmds.add_parser(
        'show', help=u'Print the Pokédex flags of one species',
        parents=[common_parser, save_parser])
    cmd_show.set_defaults(func=command_show)
    cmd_show.add_argument(
        '--lang', dest='lang', default=None,
        help=u'language of the species name (default: en)')

    cmd_status = cmds.add_parser(
        'status', help=u'Print which data files would be used for other commands',
        parents=[common_parser])
    cmd_status.set_defaults(func=command_status, verbose=True)

    return parser


def read_save(path):
    with open(path, 'rb') as f:
        return bytearray(f.read())


def write_save(path, buffer):
    with open(path, 'wb') as f:
        f.write(buffer)


def species_name(species, lang):
    """Returns the species' name, or None if there are no name tables."""
    if lang is None:
        lang = defaults.get_default_lang()
    try:
        return load_names('species', lang)[species]
    except IOError:
        return None


### Commands

def command_register(parser, args):
    pokemon = PokemonRecord(
        species=args.species,
        form=args.form,
        language=args.language,
        is_shiny=args.shiny,
        gender=args.gender,
        is_native=args.native,
    )
    personal = load_personal(args.game, args.personal)
    buffer = read_save(args.save)
    import_pokemon(args.game, buffer, pokemon, personal)

    output = args.output or args.save
    write_save(output, buffer)
    print("Registered #{0:03d} form {1} in {2}".format(
        args.species, args.form, output))


def command_show(parser, args):
    version = args.game
    if not 1 <= args.species <= version.species_count:
        raise ValueError('No species #{0} in {1}'.format(
            args.species, version.identifier))
    buffer = read_save(args.save)
    dex = PokedexRegion(version, buffer)
    if len(buffer) < dex.end:
        raise ValueError('{0} is too short to be a {1} save'.format(
            args.save, version.identifier))

    form_base = formdex.resolve(version, args.species)
    form_count = formdex.table_form_count(version, args.species)
    summary = dex.summary(args.species - 1, form_base, form_count)

    name = species_name(args.species, args.lang)
    if name:
        print(u"#{0:03d} {1}".format(args.species, name))
    else:
        print(u"#{0:03d}".format(args.species))

    print(u"  owned:     {0}".format(summary['owned']))
    print(u"  foreign:   {0}".format(summary['foreign']))
    for key in summary['seen']:
        print(u"  {0:<18} seen: {1:<5}  displayed: {2}".format(
            key, summary['seen'][key], summary['displayed'][key]))
    print(u"  languages: {0}".format(
        u', '.join(str(l) for l in summary['languages']) or u'none'))
    if 'search assist' in summary:
        print(u"  search assist: {0}".format(summary['search assist']))
    for i, form in enumerate(summary.get('forms', ())):
        print(u"  form {0:>2}: seen {1}  displayed {2}".format(
            i, form['seen'], form['displayed']))


def command_status(parser, args):
    data_dir, got_from = defaults.get_default_data_dir_with_origin()
    print("Using data directory %(data_dir)s (from %(got_from)s)"
        % dict(data_dir=data_dir, got_from=got_from))
    if os.path.isdir(data_dir):
        print("  - OK!  Directory exists.")
    else:
        print("  - WARNING: No such directory; names won't be shown.")

    for version in GameVersion:
        path, got_from = defaults.get_default_personal_path_with_origin(version)
        print("Using %(game)s personal table %(path)s (from %(got_from)s)"
            % dict(game=version.identifier, path=path, got_from=got_from))
        if os.path.exists(path):
            print("  - OK!  File exists.")
        else:
            print("  - WARNING: No such file; using built-in form counts.")


def command_help(parser, args):
    parser.print_help()


if __name__ == '__main__':
    main(*sys.argv)
