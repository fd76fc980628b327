"""Comma-separated, width-wrapped listing of theme names."""

from collections.abc import Callable, Sequence

from rich.text import Text

SEPARATOR = ", "
ACCENT_STYLE = "rgb(0,255,255)"

# Predicate deciding whether the label at ``index`` opens a new group.
GroupStart = Callable[[int, str], bool]


def group_every(n: int) -> GroupStart:
    """Start a new group every ``n`` labels."""
    if n < 1:
        raise ValueError(f"Group size must be positive, got {n}")
    return lambda index, _label: index % n == 0


def render_list(
    labels: Sequence[str],
    max_width: int,
    group_start: GroupStart | None = None,
    is_terminal: bool = False,
) -> Text:
    """Lay out ``labels`` as ``a, b, c`` lines no wider than ``max_width``.

    A label goes to a new line when adding it (with its separator) would make
    the line meet or exceed ``max_width``. A label that is wider than
    ``max_width`` on its own still gets a line to itself, untruncated. A
    line that is broken keeps its trailing separator.

    With ``group_start``, each group opens after a blank line and its first
    label is accented when ``is_terminal`` is set. Styling never changes the
    plain layout.
    """
    out = Text()
    line_len = 0
    last = len(labels) - 1

    for index, label in enumerate(labels):
        width = len(label) + len(SEPARATOR)
        starts_group = group_start is not None and group_start(index, label)

        if index > 0 and starts_group:
            out.append("\n\n")
            line_len = 0
        elif line_len and line_len + width >= max_width:
            out.append("\n")
            line_len = 0

        out.append(label, style=ACCENT_STYLE if starts_group and is_terminal else None)
        if index != last:
            out.append(SEPARATOR)
        line_len += width

    return out
