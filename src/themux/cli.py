"""Entry point — click CLI for listing, inspecting and applying themes."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console

from themux import __version__
from themux.catalog import Catalog, Shade, load_catalog
from themux.codec import CatalogIntegrityError
from themux.config import DEFAULTS, ConfigError, load_config, resolve
from themux.listing import group_every, render_list
from themux.selector import select_theme
from themux.settings import SettingsError, apply_theme, current_theme_name
from themux.terminal import clear_screen, list_width, reload_settings
from themux.themes import Theme

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

logger = logging.getLogger(__name__)


def _fail(msg: str, code: int = 1) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {msg}")
    raise SystemExit(code)


def _catalog() -> Catalog:
    """Load the built-in catalog; a mismatch here means a broken build."""
    try:
        return load_catalog()
    except CatalogIntegrityError as e:
        logger.critical("Built-in theme data is corrupt: %s", e)
        _fail(f"Unable to initialize built-in themes data. {e}", code=2)


def _settings_path(ctx: click.Context) -> Path | None:
    value = resolve(None, ctx.obj["config"].get("settings_path"), DEFAULTS["settings_path"])
    return Path(value).expanduser() if value else None


def _lookup(words: tuple[str, ...]) -> Theme:
    name = " ".join(words)
    theme = _catalog().get(name)
    if theme is None:
        _fail(f'No theme by the name "{name}".')
    return theme


@click.group()
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="Path to config file (default: ~/.config/themux/config.toml).")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.version_option(__version__, prog_name="themux")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """Themux — browse and apply Termux color themes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        _fail(str(e))
    ctx.obj = {"config": cfg}


@main.command("list")
@click.option("--light", is_flag=True, help="Only list themes with a light background.")
@click.option("--dark", is_flag=True, help="Only list themes with a dark background.")
@click.option("--grouped", is_flag=True, help="Split the list into groups separated by blank lines.")
@click.pass_context
def list_themes(ctx: click.Context, light: bool, dark: bool, grouped: bool) -> None:
    """List the available themes."""
    if light == dark:
        shade = Shade.ALL
    else:
        shade = Shade.LIGHT if light else Shade.DARK

    names = _catalog().list_names(shade)
    group_start = None
    if grouped:
        size = resolve(None, ctx.obj["config"].get("group_size"), DEFAULTS["group_size"])
        try:
            group_start = group_every(int(size))
        except ValueError as e:
            _fail(f"Invalid group_size in config: {e}")

    text = render_list(names, list_width(), group_start, is_terminal=console.is_terminal)
    console.print(text, soft_wrap=True)


@main.command()
@click.pass_context
def current(ctx: click.Context) -> None:
    """Show the currently applied theme."""
    try:
        name = current_theme_name(_settings_path(ctx))
    except SettingsError as e:
        _fail(str(e))
    if name is None:
        _fail("Unable to determine the current theme.")
    console.print(name, markup=False)


@main.command("print")
@click.argument("name", nargs=-1, required=True)
def print_theme(name: tuple[str, ...]) -> None:
    """Print the color values for a theme NAME."""
    theme = _lookup(name)
    console.print(f"[*] {theme.name}", markup=False)
    console.print(theme.render_human_readable(is_terminal=console.is_terminal), soft_wrap=True, end="")


def _apply(ctx: click.Context, theme: Theme) -> None:
    cfg = ctx.obj["config"]
    try:
        apply_theme(theme, _settings_path(ctx))
        reload_settings(resolve(None, cfg.get("reload_command"), DEFAULTS["reload_command"]))
    except SettingsError as e:
        _fail(str(e))


@main.command()
@click.argument("name", nargs=-1, required=True)
@click.pass_context
def apply(ctx: click.Context, name: tuple[str, ...]) -> None:
    """Apply the theme NAME without the selector."""
    theme = _lookup(name)
    _apply(ctx, theme)
    console.print(f"Applied {theme.name}", markup=False)


@main.command()
@click.pass_context
def run(ctx: click.Context) -> None:
    """Launch the interactive theme selector.

    The selector scrolls with the arrow keys; typing does not filter it.
    Use `themux apply NAME` to choose a theme by name.
    """
    catalog = _catalog()
    names = catalog.names()

    try:
        active = current_theme_name(_settings_path(ctx))
    except SettingsError as e:
        logger.debug("No current theme: %s", e)
        active = None

    index = select_theme(names, active)
    if index is None:
        clear_screen(console)
        return

    theme = catalog.get(names[index])
    if theme is None:
        _fail("Unable to locate the selected theme.")
    _apply(ctx, theme)
    clear_screen(console)
    console.print(f"Applied {theme.name}", markup=False)


if __name__ == "__main__":
    main()
