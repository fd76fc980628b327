"""Tests for the interactive picker wrapper."""

import pytest

from themux import selector


def test_returns_selected_index(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(selector, "pick", lambda options, title, **kwargs: (options[1], 1))
    assert selector.select_theme(["Alpha", "Beta"]) == 1


def test_quit_key_is_cancellation(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(selector, "pick", lambda options, title, **kwargs: (None, -1))
    assert selector.select_theme(["Alpha", "Beta"]) is None


def test_ctrl_c_is_cancellation(monkeypatch: pytest.MonkeyPatch) -> None:
    def _interrupt(options, title, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(selector, "pick", _interrupt)
    assert selector.select_theme(["Alpha"]) is None


def test_empty_list_is_not_shown(monkeypatch: pytest.MonkeyPatch) -> None:
    def _unexpected(*args, **kwargs):
        raise AssertionError("picker should not open")

    monkeypatch.setattr(selector, "pick", _unexpected)
    assert selector.select_theme([]) is None


def test_current_theme_is_preselected(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = {}

    def _pick(options, title, **kwargs):
        seen.update(kwargs, title=title)
        return options[kwargs["default_index"]], kwargs["default_index"]

    monkeypatch.setattr(selector, "pick", _pick)

    assert selector.select_theme(["Alpha", "Beta", "Gamma"], current="gamma") == 2
    assert seen["default_index"] == 2
    assert "current: Gamma" in seen["title"]
    assert selector.KEY_ESCAPE in seen["quit_keys"]


def test_title_points_to_apply_for_choosing_by_name(monkeypatch: pytest.MonkeyPatch) -> None:
    titles = []

    def _pick(options, title, **kwargs):
        titles.append(title)
        return options[0], 0

    monkeypatch.setattr(selector, "pick", _pick)
    selector.select_theme(["Alpha", "Beta"])
    selector.select_theme(["Alpha", "Beta"], current="beta")

    assert all(selector.NAME_HINT in title for title in titles)
    assert "themux apply NAME" in selector.NAME_HINT
