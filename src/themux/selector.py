"""Interactive theme picker."""

from collections.abc import Sequence

from pick import pick

TITLE = "Select a theme:"
HELP = "↑↓ to move, ENTER to select, q or ESC to exit"
NAME_HINT = "Typing does not filter the list; use `themux apply NAME` to choose by name."

KEY_ESCAPE = 27
QUIT_KEYS = (KEY_ESCAPE, ord("q"), ord("Q"))


def select_theme(names: Sequence[str], current: str | None = None) -> int | None:
    """Let the user choose one of ``names``. Returns its index, or None if cancelled."""
    if not names:
        return None

    title = f"{TITLE}\n({HELP})\n{NAME_HINT}"
    default_index = 0
    if current is not None:
        lowered = [name.lower() for name in names]
        if current.lower() in lowered:
            default_index = lowered.index(current.lower())
            title = f"{TITLE} (current: {names[default_index]})\n({HELP})\n{NAME_HINT}"

    try:
        _option, index = pick(
            list(names),
            title,
            indicator=">",
            default_index=default_index,
            quit_keys=QUIT_KEYS,
        )
    except KeyboardInterrupt:
        return None

    if index is None or index < 0:
        return None
    return index
