# Encoding: utf8

import pytest
parametrize = pytest.mark.parametrize

from pkdex.game import GameVersion

@parametrize(('name', 'version'), [
    ('xy', GameVersion.XY),
    ('X', GameVersion.XY),
    ('y', GameVersion.XY),
    ('oras', GameVersion.ORAS),
    (' ORAS ', GameVersion.ORAS),
    ('as', GameVersion.ORAS),
    ('omega-ruby', GameVersion.ORAS),
])
def test_from_name(name, version):
    assert GameVersion.from_name(name) is version

@parametrize('name', ['bw', '', 'sumo'])
def test_from_name_unknown(name):
    with pytest.raises(ValueError):
        GameVersion.from_name(name)

def test_form_lengths():
    assert GameVersion.XY.form_length == 0x18
    assert GameVersion.ORAS.form_length == 0x26

def test_search_assist_only_in_oras():
    assert not GameVersion.XY.has_search_assist
    assert GameVersion.ORAS.has_search_assist

def test_region_length():
    # X/Y ends with the foreign flags, ORAS with the DexNav counters
    assert GameVersion.XY.region_length == 0x64C + 91
    assert GameVersion.ORAS.region_length == 0x686 + 721 * 2
