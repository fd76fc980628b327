"""Encode data/themes.json into the binary catalog shipped in src/themux/data."""

import json
from pathlib import Path

import click

from themux import codec
from themux.catalog import Catalog
from themux.color import Rgb
from themux.themes import Theme

REPO_ROOT = Path(__file__).resolve().parents[1]
SOURCE = REPO_ROOT / "data" / "themes.json"
TARGET_DIR = REPO_ROOT / "src" / "themux" / "data"


def read_source(path: Path) -> list[Theme]:
    """Parse ``{name: ["#RRGGBB", ...19]}`` into themes."""
    with open(path, encoding="utf-8") as f:
        raw: dict[str, list[str]] = json.load(f)
    return [
        Theme.from_colors(name, [Rgb.from_hex(value.removeprefix("#")) for value in values])
        for name, values in raw.items()
    ]


@click.command()
@click.option("--source", default=SOURCE, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Palette JSON to encode.")
@click.option("--out", "out_dir", default=TARGET_DIR, type=click.Path(file_okay=False, path_type=Path), help="Directory for the encoded files.")
def main(source: Path, out_dir: Path) -> None:
    """Rebuild theme_names.txt and theme_colors.bin from the palette JSON."""
    # Catalog enforces the count and name uniqueness, and yields catalog order.
    catalog = Catalog(read_source(source))
    names, colors = codec.encode(catalog)

    out_dir.mkdir(parents=True, exist_ok=True)
    (out_dir / codec.NAMES_RESOURCE).write_bytes(names)
    (out_dir / codec.COLORS_RESOURCE).write_bytes(colors)
    click.echo(f"Wrote {len(catalog)} themes ({len(colors)} color bytes) to {out_dir}")


if __name__ == "__main__":
    main()
