# Encoding: utf8

import pytest
parametrize = pytest.mark.parametrize

from pkdex.game import GameVersion
from pkdex.main import main
from pkdex.savefile import PokedexRegion

from pkdex.tests import blank_save

@pytest.fixture
def save_path(tmpdir, monkeypatch):
    monkeypatch.setenv('PKDEX_DATA_DIR', str(tmpdir.join('data')))
    for variable in ('PKDEX_PERSONAL_XY', 'PKDEX_PERSONAL_ORAS'):
        monkeypatch.delenv(variable, raising=False)
    path = tmpdir.join('main')
    path.write_binary(bytes(blank_save(GameVersion.ORAS)))
    return path

def test_register_in_place(save_path):
    main('pkdex', 'register', str(save_path), '--game', 'oras',
         '--species', '386', '--form', '2', '--shiny', '--gender', '1')

    dex = PokedexRegion(GameVersion.ORAS, bytearray(save_path.read_binary()))
    assert dex.is_seen(385, 1, True)
    assert dex.is_displayed(385, 1, True)
    assert dex.is_form_seen(30, True)
    assert dex.is_owned(385)
    assert dex.search_assist(385) == 1

def test_register_to_output(save_path, tmpdir):
    original = save_path.read_binary()
    output = tmpdir.join('out')
    main('pkdex', 'register', str(save_path), '-g', 'xy', '-s', '25',
         '-o', str(output))

    assert save_path.read_binary() == original
    dex = PokedexRegion(GameVersion.XY, bytearray(output.read_binary()))
    assert dex.is_foreign(24)

def test_register_bad_species(save_path, capsys):
    original = save_path.read_binary()
    with pytest.raises(SystemExit) as excinfo:
        main('pkdex', 'register', str(save_path), '-g', 'oras', '-s', '800')
    assert excinfo.value.code == 1
    assert 'ERROR' in capsys.readouterr().err
    assert save_path.read_binary() == original

def test_bad_game(save_path):
    with pytest.raises(SystemExit) as excinfo:
        main('pkdex', 'show', str(save_path), '-g', 'gsc', '-s', '1')
    assert excinfo.value.code == 2

def test_show(save_path, capsys):
    main('pkdex', 'register', str(save_path), '-g', 'oras', '-s', '201',
         '-f', '3', '-l', '3')
    capsys.readouterr()
    main('pkdex', 'show', str(save_path), '-g', 'oras', '-s', '201')

    out = capsys.readouterr().out
    assert out.startswith(u'#201\n')
    assert u'owned:     True' in out
    assert u'languages: 2' in out
    assert u'search assist: 1' in out
    assert u'form  3: seen [True, False]  displayed [True, False]' in out

def test_show_with_names(save_path, tmpdir, capsys):
    lang_dir = tmpdir.join('data').ensure('en', dir=True)
    lang_dir.join('species_en.txt').write_binary(
        u'Egg\nBulbasaur\n'.encode('utf-8'))
    main('pkdex', 'show', str(save_path), '-g', 'xy', '-s', '1')
    assert capsys.readouterr().out.startswith(u'#001 Bulbasaur\n')

def test_status(save_path, capsys):
    main('pkdex', 'status')
    out = capsys.readouterr().out
    assert 'from environment' in out
    assert 'built-in form counts' in out
