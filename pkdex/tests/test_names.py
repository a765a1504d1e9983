# Encoding: utf8

import io

import pytest
parametrize = pytest.mark.parametrize

from pkdex.names import (NameTable, hidden_power_type, load_names,
    name_file_path)

def write_names(data_dir, kind, lang, lines, bom=True):
    directory = data_dir.ensure(lang, dir=True)
    path = directory.join('{0}_{1}.txt'.format(kind, lang))
    with io.open(str(path), 'w', encoding='utf-8-sig' if bom else 'utf-8',
                 newline='') as f:
        f.write(u'\n'.join(lines) + u'\n')
    return path

def test_load_species(tmpdir):
    write_names(tmpdir, 'species', 'fr',
                [u'Œuf', u'Bulbizarre', u'', u'Herbizarre'])
    names = load_names('species', 'fr', str(tmpdir))
    assert names[0] == u'Œuf'
    assert names[1] == u'Bulbizarre'
    assert names[2] == u'Herbizarre'
    # Missing lines are blank; bad indices get the placeholder
    assert names[3] == u''
    assert len(names) == 722
    assert names[722] == u'(None)'
    assert names[-1] == u'(None)'

def test_no_bom_and_crlf(tmpdir):
    path = tmpdir.join('names.txt')
    path.write_binary(u'Cadoizo\r\nAnneau Rouge\r\n'.encode('utf-8'))
    names = NameTable.from_file(str(path), 2)
    assert list(names) == [u'Cadoizo', u'Anneau Rouge']

def test_truncated_to_count(tmpdir):
    path = tmpdir.join('names.txt')
    path.write_binary(b'a\nb\nc\nd\n')
    assert list(NameTable.from_file(str(path), 2)) == [u'a', u'b']

def test_fallback_to_first(tmpdir):
    write_names(tmpdir, 'moves', 'en', [u'(No Move)', u'Pound'])
    moves = load_names('moves', 'en', str(tmpdir))
    assert moves[1] == u'Pound'
    assert moves[5000] == u'(No Move)'

def test_unsupported(tmpdir):
    with pytest.raises(ValueError):
        load_names('species', 'ja', str(tmpdir))
    with pytest.raises(ValueError):
        load_names('ribbons', 'en', str(tmpdir))

def test_missing_file(tmpdir):
    with pytest.raises(IOError):
        load_names('species', 'de', str(tmpdir))

def test_name_file_path(monkeypatch, tmpdir):
    monkeypatch.setenv('PKDEX_DATA_DIR', str(tmpdir))
    assert name_file_path('items', 'es') == str(
        tmpdir.join('es').join('items_es.txt'))

@parametrize(('index', 'name'), [
    (0, u'Fighting'),
    (15, u'Dark'),
    (16, u'(None)'),
    (-1, u'(None)'),
])
def test_hidden_power_type(index, name):
    assert hidden_power_type(index) == name
