"""Tests for the theme catalog."""

import pytest

from themux.catalog import Catalog, Shade, load_catalog
from themux.codec import EXPECTED_THEME_COUNT, CatalogIntegrityError, encode
from themux.color import Rgb
from themux.themes import Theme


def _theme(name: str, background: Rgb) -> Theme:
    return Theme.from_colors(name, [Rgb(0, 0, 0)] * 16 + [background, Rgb(200, 200, 200), Rgb(200, 200, 200)])


DARK = Rgb(20, 20, 20)
LIGHT = Rgb(240, 240, 240)


@pytest.fixture
def small_catalog() -> Catalog:
    return Catalog(
        [
            _theme("zenith", DARK),
            _theme("Alpha", LIGHT),
            _theme("beta", DARK),
            _theme("Beta Light", LIGHT),
        ],
        expected_count=None,
    )


def test_names_sort_case_insensitively(small_catalog: Catalog) -> None:
    assert small_catalog.names() == ["Alpha", "beta", "Beta Light", "zenith"]


def test_get_ignores_case(small_catalog: Catalog) -> None:
    theme = small_catalog.get("BETA")
    assert theme is not None
    assert theme.name == "beta"
    assert small_catalog.get("beta") is theme
    assert small_catalog.get("Beta") is theme


def test_get_is_exact_not_partial(small_catalog: Catalog) -> None:
    assert small_catalog.get("bet") is None
    assert small_catalog.get("Beta Ligh") is None
    assert "alpha" in small_catalog
    assert "gamma" not in small_catalog


def test_list_names_filters_by_background(small_catalog: Catalog) -> None:
    assert small_catalog.list_names(Shade.ALL) == small_catalog.names()
    assert small_catalog.list_names(Shade.DARK) == ["beta", "zenith"]
    assert small_catalog.list_names(Shade.LIGHT) == ["Alpha", "Beta Light"]


def test_duplicate_names_are_rejected() -> None:
    with pytest.raises(CatalogIntegrityError):
        Catalog([_theme("Nord", DARK), _theme("NORD", LIGHT)], expected_count=None)


def test_count_mismatch_is_rejected() -> None:
    with pytest.raises(CatalogIntegrityError):
        Catalog([_theme("Nord", DARK)], expected_count=2)


def test_init_from_blobs() -> None:
    themes = [_theme("b", DARK), _theme("A", LIGHT)]
    catalog = Catalog.init(*encode(themes), expected_count=2)
    assert catalog.names() == ["A", "b"]


def test_builtin_catalog_invariants() -> None:
    catalog = load_catalog()
    names = catalog.names()

    assert len(catalog) == EXPECTED_THEME_COUNT
    assert len({name.lower() for name in names}) == EXPECTED_THEME_COUNT
    assert names == sorted(names, key=str.lower)


def test_builtin_catalog_is_loaded_once() -> None:
    assert load_catalog() is load_catalog()


def test_builtin_lookup_ignores_case() -> None:
    catalog = load_catalog()
    dracula = catalog.get("Dracula")
    assert dracula is not None
    assert catalog.get("DRACULA") is dracula
    assert catalog.get("dracula") is dracula
    assert dracula.background.to_hex() == "#282A36"


def test_builtin_shade_filters_partition_catalog() -> None:
    catalog = load_catalog()
    dark = catalog.list_names(Shade.DARK)
    light = catalog.list_names(Shade.LIGHT)

    assert len(dark) + len(light) == len(catalog)
    assert "Dracula" in dark
    assert "Solarized Light" in light
    assert not set(dark) & set(light)
