"""Shared fixtures: the bundled catalog and a small synthetic one."""

import pytest
from material_colors.core.catalog import ColorCatalog, load_bundled_catalog
from material_colors.core.index import build_index

SMALL_CATALOG = {
    'red': {
        '500': {'hex': '#F44336'},
        '700': {'hex': '#d32f2f'},
        '_groups': [
            {'title': 'accent', 'colors': [{'name': 'a100', 'hex': '#ff8a80'}]},
        ],
    },
    'light-blue': {
        '500': {'hex': '#03a9f4', 'name': 'primary'},
        '_selectorLight': '#03a9f4',
    },
    'mono': {
        '_groups': [
            {'colors': [{'name': 'black', 'hex': '#000000'}, {'name': 'white', 'hex': '#ffffff'}]},
            {'title': 'shadow', 'colors': [{'name': 'deep', 'hex': '#000000'}]},
        ],
    },
}


@pytest.fixture(scope='session')
def catalog() -> ColorCatalog:
    return load_bundled_catalog()


@pytest.fixture(scope='session')
def index(catalog):
    return build_index(catalog)


@pytest.fixture
def small_catalog() -> ColorCatalog:
    return ColorCatalog.from_dict(SMALL_CATALOG)


@pytest.fixture
def small_index(small_catalog):
    return build_index(small_catalog)
