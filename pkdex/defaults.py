""" pkdex.defaults - logic for finding default paths and settings """

import os

_package_dir = os.path.dirname(os.path.abspath(__file__))


def get_default_data_dir_with_origin():
    data_dir = os.environ.get('PKDEX_DATA_DIR', None)
    origin = 'environment'

    if data_dir is None:
        data_dir = os.path.join(_package_dir, 'data')
        origin = 'default'

    return data_dir, origin

def get_default_personal_path_with_origin(version):
    path = os.environ.get(
        'PKDEX_PERSONAL_' + version.identifier.upper(), None)
    origin = 'environment'

    if path is None:
        path = os.path.join(get_default_data_dir(),
                            'personal_{0}'.format(version.identifier))
        origin = 'default'

    return path, origin

def get_default_lang_with_origin():
    lang = os.environ.get('PKDEX_LANG', None)
    origin = 'environment'

    if lang is None:
        lang = 'en'
        origin = 'default'

    return lang, origin


def get_default_data_dir():
    return get_default_data_dir_with_origin()[0]

def get_default_personal_path(version):
    return get_default_personal_path_with_origin(version)[0]

def get_default_lang():
    return get_default_lang_with_origin()[0]
