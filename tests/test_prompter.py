"""
Tests for archsetup/prompter.py.

TerminalMenu needs a real TTY, so it is patched in every test; the mock's
show() return value and chosen_accept_key stand in for the user.

Covers:
  - select_many: subset of items only, catalog order, empty selection,
                 escape/Ctrl-C abort, no terminal
  - confirm:     yes/no, default cursor, cancel or no terminal → False
  - ask_text:    value stripped, abort
"""

from io import StringIO
from unittest.mock import MagicMock, patch

import click
import pytest
from rich.console import Console

from archsetup.errors import PromptAborted
from archsetup.prompter import Prompter
from archsetup.ui.theme import ARCHSETUP_THEME


ITEMS = ("bluez", "cups", "hplip", "docker")


# ── Helpers ───────────────────────────────────────────────────────────────────

def _prompter() -> tuple[Prompter, StringIO]:
    buf = StringIO()
    return Prompter(Console(file=buf, highlight=False, no_color=True, theme=ARCHSETUP_THEME)), buf


def _menu(show=None, accept_key="enter", side_effect=None) -> MagicMock:
    menu = MagicMock()
    menu.show.return_value = show
    if side_effect is not None:
        menu.show.side_effect = side_effect
    menu.chosen_accept_key = accept_key
    return menu


# ── select_many ───────────────────────────────────────────────────────────────

class TestSelectMany:
    def test_returns_chosen_items(self):
        prompter, _ = _prompter()
        with patch("archsetup.prompter.TerminalMenu", return_value=_menu(show=(0, 2))):
            assert prompter.select_many("Services?", ITEMS) == ("bluez", "hplip")

    def test_result_is_in_catalog_order(self):
        prompter, _ = _prompter()
        with patch("archsetup.prompter.TerminalMenu", return_value=_menu(show=(3, 1))):
            assert prompter.select_many("Services?", ITEMS) == ("cups", "docker")

    def test_out_of_range_indices_never_leak_foreign_items(self):
        prompter, _ = _prompter()
        with patch("archsetup.prompter.TerminalMenu", return_value=_menu(show=(1, 7, -1))):
            result = prompter.select_many("Services?", ITEMS)
        assert result == ("cups",)
        assert set(result) <= set(ITEMS)

    def test_single_int_result_is_accepted(self):
        prompter, _ = _prompter()
        with patch("archsetup.prompter.TerminalMenu", return_value=_menu(show=2)):
            assert prompter.select_many("Services?", ITEMS) == ("hplip",)

    def test_accepted_empty_selection(self):
        prompter, buf = _prompter()
        with patch("archsetup.prompter.TerminalMenu", return_value=_menu(show=None)):
            assert prompter.select_many("Services?", ITEMS) == ()
        assert "None selected" in buf.getvalue()

    def test_escape_aborts(self):
        prompter, _ = _prompter()
        with patch("archsetup.prompter.TerminalMenu",
                   return_value=_menu(show=None, accept_key=None)):
            with pytest.raises(PromptAborted):
                prompter.select_many("Services?", ITEMS)

    def test_ctrl_c_aborts(self):
        prompter, _ = _prompter()
        with patch("archsetup.prompter.TerminalMenu",
                   return_value=_menu(side_effect=KeyboardInterrupt)):
            with pytest.raises(PromptAborted) as exc:
                prompter.select_many("Services?", ITEMS)
        assert exc.value.prompt == "Services?"

    def test_no_terminal_aborts(self):
        # TerminalMenu opens /dev/tty in its constructor
        prompter, _ = _prompter()
        with patch("archsetup.prompter.TerminalMenu",
                   side_effect=OSError(6, "No such device or address")):
            with pytest.raises(PromptAborted) as exc:
                prompter.select_many("Services?", ITEMS)
        assert exc.value.prompt == "Services?"

    def test_terminal_lost_during_show_aborts(self):
        prompter, _ = _prompter()
        with patch("archsetup.prompter.TerminalMenu",
                   return_value=_menu(side_effect=OSError(5, "Input/output error"))):
            with pytest.raises(PromptAborted):
                prompter.select_many("Services?", ITEMS)

    def test_empty_items_skips_menu(self):
        prompter, _ = _prompter()
        with patch("archsetup.prompter.TerminalMenu") as mock_menu:
            assert prompter.select_many("Fonts?", ()) == ()
        mock_menu.assert_not_called()

    def test_menu_allows_empty_multi_select(self):
        prompter, _ = _prompter()
        with patch("archsetup.prompter.TerminalMenu", return_value=_menu(show=())) as mock_menu:
            prompter.select_many("Services?", ITEMS)
        kwargs = mock_menu.call_args.kwargs
        assert kwargs["multi_select"] is True
        assert kwargs["multi_select_empty_ok"] is True
        assert kwargs["multi_select_select_on_accept"] is False
        assert mock_menu.call_args.args[0] == list(ITEMS)

    def test_prompt_and_selection_are_echoed(self):
        prompter, buf = _prompter()
        with patch("archsetup.prompter.TerminalMenu", return_value=_menu(show=(0,))):
            prompter.select_many("Which services?", ITEMS)
        output = buf.getvalue()
        assert "Which services?" in output
        assert "bluez" in output


# ── confirm ───────────────────────────────────────────────────────────────────

class TestConfirm:
    def test_yes(self):
        prompter, _ = _prompter()
        with patch("archsetup.prompter.TerminalMenu", return_value=_menu(show=0)):
            assert prompter.confirm("Install paru?", default=False) is True

    def test_no(self):
        prompter, _ = _prompter()
        with patch("archsetup.prompter.TerminalMenu", return_value=_menu(show=1)):
            assert prompter.confirm("Install paru?", default=True) is False

    @pytest.mark.parametrize("default", [True, False])
    def test_cancel_is_false_regardless_of_default(self, default):
        prompter, _ = _prompter()
        with patch("archsetup.prompter.TerminalMenu",
                   return_value=_menu(show=None, accept_key=None)):
            assert prompter.confirm("Install paru?", default=default) is False

    @pytest.mark.parametrize("default", [True, False])
    def test_ctrl_c_is_false_regardless_of_default(self, default):
        prompter, _ = _prompter()
        with patch("archsetup.prompter.TerminalMenu",
                   return_value=_menu(side_effect=KeyboardInterrupt)):
            assert prompter.confirm("Install paru?", default=default) is False

    @pytest.mark.parametrize("default", [True, False])
    def test_no_terminal_is_false_regardless_of_default(self, default):
        prompter, buf = _prompter()
        with patch("archsetup.prompter.TerminalMenu",
                   side_effect=OSError(6, "No such device or address")):
            assert prompter.confirm("Install paru?", default=default) is False
        assert "Skipped" in buf.getvalue()

    @pytest.mark.parametrize("default,cursor", [(True, 0), (False, 1)])
    def test_cursor_starts_on_default(self, default, cursor):
        prompter, _ = _prompter()
        with patch("archsetup.prompter.TerminalMenu", return_value=_menu(show=0)) as mock_menu:
            prompter.confirm("Install paru?", default=default)
        assert mock_menu.call_args.kwargs["cursor_index"] == cursor


# ── ask_text ──────────────────────────────────────────────────────────────────

class TestAskText:
    def test_returns_stripped_value(self):
        prompter, _ = _prompter()
        with patch("archsetup.prompter.click.prompt", return_value="  Zolee  "):
            assert prompter.ask_text("Git name") == "Zolee"

    def test_abort_raises_prompt_aborted(self):
        prompter, _ = _prompter()
        with patch("archsetup.prompter.click.prompt", side_effect=click.exceptions.Abort):
            with pytest.raises(PromptAborted):
                prompter.ask_text("Git email")
