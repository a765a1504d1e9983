# Configuration for the tests.
# Use `py.test` to run the tests.

# (This file needs to be in or above the directory where py.test is called)

import pytest

def pytest_addoption(parser):
    group = parser.getgroup("pkdex")
    group.addoption("--personal-xy", action="store", default=None,
        help="X/Y personal table to check against (tests needing it are skipped otherwise)")
    group.addoption("--personal-oras", action="store", default=None,
        help="ORAS personal table to check against (tests needing it are skipped otherwise)")
    group.addoption("--all", action="store_true", default=False,
        help="Run all tests, even those that take a lot of time")

def pytest_configure(config):
    config.addinivalue_line("markers", "slow: takes a lot of time; needs --all")

def pytest_runtest_setup(item):
    if 'slow' in item.keywords and not item.config.getvalue('all'):
        pytest.skip("skipping slow tests")

@pytest.fixture(scope="session", params=['xy', 'oras'])
def version(request):
    from pkdex.game import GameVersion
    return GameVersion.from_name(request.param)

@pytest.fixture
def save(version):
    from pkdex.tests import blank_save
    return blank_save(version)

@pytest.fixture(scope="session")
def real_personal(request):
    from pkdex.game import GameVersion
    from pkdex.personal import PersonalTable
    tables = {}
    for version in GameVersion:
        path = request.config.getvalue("personal_" + version.identifier)
        if path:
            tables[version] = PersonalTable.from_file(path, version)
    if not tables:
        raise pytest.skip("Personal tables unavailable")
    return tables
