"""
Interactive prompts.

Arrow-key menus via simple_term_menu, free text via click.prompt.

  select_many — multi-select over a catalog category; aborting is fatal.
  confirm     — Yes/No menu; aborting answers False whatever the default.
  ask_text    — one line of text; aborting is fatal.
"""

from __future__ import annotations

from typing import Sequence

import click
from rich.console import Console
from simple_term_menu import TerminalMenu

from archsetup.errors import PromptAborted


_MENU_STYLE = dict(
    menu_cursor="› ",
    menu_cursor_style=("fg_cyan", "bold"),
    menu_highlight_style=("fg_cyan", "bold"),
)


class Prompter:
    def __init__(self, console: Console) -> None:
        self.console = console

    def select_many(self, prompt: str, items: Sequence[str]) -> tuple[str, ...]:
        """
        Let the user tick any number of *items*.

        Returns the chosen items in catalog order. Nothing outside *items*
        can be returned. Escape, Ctrl-C or a missing terminal raises
        PromptAborted.
        """
        self.console.print(f"  [bold]{prompt}[/bold]")
        if not items:
            self.console.print("  [dim]Nothing to choose from.[/dim]\n")
            return ()

        try:
            menu = TerminalMenu(
                list(items),
                multi_select=True,
                show_multi_select_hint=True,
                multi_select_select_on_accept=False,
                multi_select_empty_ok=True,
                **_MENU_STYLE,
            )
            chosen = menu.show()
        except (KeyboardInterrupt, OSError):
            # OSError: no controlling terminal (/dev/tty unavailable)
            raise PromptAborted(prompt) from None

        if chosen is None:
            # Empty selection and escape both come back as None; only an
            # accepted menu records the accept key.
            if menu.chosen_accept_key is None:
                raise PromptAborted(prompt)
            chosen = ()
        elif isinstance(chosen, int):
            chosen = (chosen,)

        indices = {i for i in chosen if 0 <= i < len(items)}
        selected = tuple(item for i, item in enumerate(items) if i in indices)

        if selected:
            self.console.print(f"  [dim]{', '.join(selected)}[/dim]\n")
        else:
            self.console.print("  [dim]None selected.[/dim]\n")
        return selected

    def confirm(self, prompt: str, default: bool = True) -> bool:
        """Yes/No menu with the cursor on *default*. Cancelling answers False."""
        self.console.print(f"  [bold]{prompt}[/bold]")
        try:
            menu = TerminalMenu(
                ["Yes", "No"],
                cursor_index=0 if default else 1,
                **_MENU_STYLE,
            )
            choice = menu.show()
        except (KeyboardInterrupt, OSError):
            choice = None

        if choice is None:
            self.console.print("  [dim]Skipped — no.[/dim]\n")
            return False

        answer = choice == 0
        self.console.print(f"  [dim]{'Yes' if answer else 'No'}[/dim]\n")
        return answer

    def ask_text(self, prompt: str) -> str:
        try:
            return click.prompt(f"  {prompt}", type=str).strip()
        except click.exceptions.Abort:
            raise PromptAborted(prompt) from None
