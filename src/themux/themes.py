"""Theme palettes — 16 ANSI colors plus background, foreground and cursor."""

from collections.abc import Sequence
from dataclasses import dataclass

from rich.text import Text

from themux.color import Rgb

# Canonical role order, shared by the binary records and the settings file.
ROLES: tuple[str, ...] = tuple(f"color{i}" for i in range(16)) + (
    "background",
    "foreground",
    "cursor",
)

# Display order for the color breakdown of a single theme.
DISPLAY_ROLES: tuple[str, ...] = ROLES[:16] + ("cursor", "foreground", "background")

LABEL_WIDTH = 12
LABEL_STYLE = "rgb(0,170,235)"
VALUE_STYLE = "rgb(0,255,255)"

CONFIG_HEADER = """\
#===============================================================
# Color Theme: {name}
#
# Credit: https://github.com/Gogh-Co/Gogh/graphs/contributors
#===============================================================
"""


def name_key(name: str) -> str:
    """Identity of a theme name: names differing only in case are the same theme."""
    return name.lower()


@dataclass(frozen=True)
class Theme:
    """A named terminal palette."""

    name: str
    color0: Rgb  # black
    color1: Rgb  # dim red
    color2: Rgb  # dim green
    color3: Rgb  # dim yellow
    color4: Rgb  # dim blue
    color5: Rgb  # dim purple
    color6: Rgb  # dim cyan
    color7: Rgb  # dim white
    color8: Rgb  # medium gray
    color9: Rgb  # bright red
    color10: Rgb  # bright green
    color11: Rgb  # bright yellow
    color12: Rgb  # light blue
    color13: Rgb  # bright purple
    color14: Rgb  # bright cyan
    color15: Rgb  # bright white
    background: Rgb
    foreground: Rgb
    cursor: Rgb

    @classmethod
    def from_colors(cls, name: str, colors: Sequence[Rgb]) -> "Theme":
        """Build a theme from colors listed in ``ROLES`` order."""
        if len(colors) != len(ROLES):
            raise ValueError(f"Theme '{name}' needs {len(ROLES)} colors, got {len(colors)}")
        return cls(name, *colors)

    @property
    def key(self) -> str:
        return name_key(self.name)

    def colors(self) -> list[Rgb]:
        return [getattr(self, role) for role in ROLES]

    def is_dark(self) -> bool:
        return self.background.is_dark()

    def render_config_block(self, name: str | None = None) -> str:
        """Render the theme in the colors.properties format, titled ``name`` or its own name."""
        lines = [CONFIG_HEADER.format(name=name or self.name)]
        lines.extend(f"{role}={getattr(self, role)}" for role in ROLES)
        return "\n".join(lines) + "\n"

    def render_human_readable(self, is_terminal: bool = False) -> Text:
        """One ``label....#RRGGBB`` line per role; styled with a swatch on a terminal."""
        out = Text()
        for role in DISPLAY_ROLES:
            rgb: Rgb = getattr(self, role)
            dots = "." * (LABEL_WIDTH - len(role))
            if is_terminal:
                out.append(role, style=LABEL_STYLE)
                out.append(dots)
                out.append(rgb.to_hex(), style=VALUE_STYLE)
                out.append(" ")
                out.append("  ", style=f"on rgb({rgb.r},{rgb.g},{rgb.b})")
            else:
                out.append(f"{role}{dots}{rgb.to_hex()}")
            out.append("\n")
        return out
