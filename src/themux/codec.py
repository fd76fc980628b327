"""Compact binary storage for the built-in catalog.

Colors are stored as fixed 57-byte records (19 roles x 3 bytes, in ``ROLES``
order), one per theme, concatenated in catalog order. Names live in a
separate ``|``-joined UTF-8 artifact in the same order; record ``i`` belongs
to name ``i``.
"""

import logging
from collections.abc import Iterable
from importlib import resources

from themux.color import Rgb
from themux.themes import ROLES, Theme

logger = logging.getLogger(__name__)

EXPECTED_THEME_COUNT = 247
BYTES_PER_COLOR = 3
BYTES_PER_RECORD = BYTES_PER_COLOR * len(ROLES)  # 57
NAME_DELIMITER = "|"

NAMES_RESOURCE = "theme_names.txt"
COLORS_RESOURCE = "theme_colors.bin"


class CatalogIntegrityError(RuntimeError):
    """The embedded theme data does not match what the code expects."""


class CodecError(CatalogIntegrityError):
    """The binary theme data is malformed."""


def encode(themes: Iterable[Theme]) -> tuple[bytes, bytes]:
    """Encode themes into (names, colors) blobs, preserving iteration order."""
    names: list[str] = []
    records = bytearray()
    for theme in themes:
        if NAME_DELIMITER in theme.name:
            raise CodecError(f"Theme name {theme.name!r} contains '{NAME_DELIMITER}'")
        names.append(theme.name)
        for rgb in theme.colors():
            records += rgb.to_bytes()
    return NAME_DELIMITER.join(names).encode("utf-8"), bytes(records)


def decode_names(data: bytes) -> list[str]:
    """Split the names blob; names are kept exactly as encoded."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CodecError(f"Theme names data is not valid UTF-8: {e}") from e
    # Tolerate a final newline added by editors.
    text = text.removesuffix("\n").removesuffix("\r")
    if not text:
        return []
    return text.split(NAME_DELIMITER)


def decode_colors(data: bytes, expected_count: int | None = EXPECTED_THEME_COUNT) -> list[list[Rgb]]:
    """Split the colors blob into per-theme lists of 19 colors."""
    if len(data) % BYTES_PER_RECORD:
        raise CodecError(
            f"Colors data is {len(data)} bytes, not a multiple of {BYTES_PER_RECORD}"
        )
    if expected_count is not None and len(data) != expected_count * BYTES_PER_RECORD:
        raise CodecError(
            f"Expected {expected_count * BYTES_PER_RECORD} bytes of colors data, got {len(data)}"
        )

    records = []
    for start in range(0, len(data), BYTES_PER_RECORD):
        record = data[start : start + BYTES_PER_RECORD]
        records.append(
            [Rgb.from_bytes(record[i : i + BYTES_PER_COLOR]) for i in range(0, BYTES_PER_RECORD, BYTES_PER_COLOR)]
        )
    return records


def decode(
    names_data: bytes,
    colors_data: bytes,
    expected_count: int | None = EXPECTED_THEME_COUNT,
) -> list[Theme]:
    """Decode both blobs into themes, in stored order.

    Pass ``expected_count=None`` to accept any number of records (tests, tooling).
    """
    names = decode_names(names_data)
    records = decode_colors(colors_data, expected_count)

    if len(names) != len(records):
        raise CodecError(f"Found {len(names)} theme names for {len(records)} color records")
    if expected_count is not None and len(names) != expected_count:
        raise CodecError(f"Expected {expected_count} themes, found {len(names)}")

    return [Theme.from_colors(name, colors) for name, colors in zip(names, records)]


def load_embedded() -> tuple[bytes, bytes]:
    """Read the (names, colors) blobs shipped inside the package."""
    data_dir = resources.files("themux") / "data"
    names = data_dir.joinpath(NAMES_RESOURCE).read_bytes()
    colors = data_dir.joinpath(COLORS_RESOURCE).read_bytes()
    logger.debug("Loaded embedded theme data: %d name bytes, %d color bytes", len(names), len(colors))
    return names, colors
