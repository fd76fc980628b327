"""The built-in theme catalog — decoded once, looked up by name."""

import enum
import functools
import logging
from collections.abc import Iterable, Iterator

from themux import codec
from themux.codec import EXPECTED_THEME_COUNT, CatalogIntegrityError
from themux.themes import Theme, name_key

logger = logging.getLogger(__name__)


class Shade(enum.Enum):
    """Light/dark filter for listings, judged by a theme's background."""

    ALL = "all"
    DARK = "dark"
    LIGHT = "light"

    def accepts(self, theme: Theme) -> bool:
        if self is Shade.ALL:
            return True
        return theme.is_dark() == (self is Shade.DARK)


class Catalog:
    """Read-only set of themes ordered by case-insensitive name."""

    def __init__(self, themes: Iterable[Theme], expected_count: int | None = EXPECTED_THEME_COUNT) -> None:
        index: dict[str, Theme] = {}
        for theme in themes:
            if theme.key in index:
                raise CatalogIntegrityError(
                    f"Duplicate theme name '{theme.name}' (clashes with '{index[theme.key].name}')"
                )
            index[theme.key] = theme

        if expected_count is not None and len(index) != expected_count:
            raise CatalogIntegrityError(f"Expected {expected_count} themes, found {len(index)}")

        self._index = index
        self._themes: tuple[Theme, ...] = tuple(sorted(index.values(), key=lambda t: t.key))

    @classmethod
    def init(
        cls,
        names_data: bytes,
        colors_data: bytes,
        expected_count: int | None = EXPECTED_THEME_COUNT,
    ) -> "Catalog":
        """Build a catalog from the encoded (names, colors) blobs."""
        return cls(codec.decode(names_data, colors_data, expected_count), expected_count)

    def __len__(self) -> int:
        return len(self._themes)

    def __iter__(self) -> Iterator[Theme]:
        return iter(self._themes)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name_key(name) in self._index

    def get(self, name: str) -> Theme | None:
        """Return the theme called ``name`` (any letter case), or None."""
        return self._index.get(name_key(name))

    def names(self) -> list[str]:
        return [theme.name for theme in self._themes]

    def list_names(self, shade: Shade = Shade.ALL) -> list[str]:
        return [theme.name for theme in self._themes if shade.accepts(theme)]


@functools.cache
def load_catalog() -> Catalog:
    """Decode the embedded catalog; later calls return the same instance."""
    catalog = Catalog.init(*codec.load_embedded())
    logger.debug("Theme catalog ready with %d themes", len(catalog))
    return catalog
