"""Command-line interface for Command History.

Drives a demo text element from a script of actions, one per line::

    text Hello
    color blue
    press change-font-size
    undo
    show
"""

import sys
import argparse
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from command_history import __version__
from command_history.application.commands.styling import (
    Element,
    change_text,
    change_text_color,
    change_font_size,
)
from command_history.application.history import HistoryManager
from command_history.application.triggers import TriggerPanel
from command_history.infrastructure.logging import LOG_LEVELS, get_logger, setup_logging
from command_history.shared.exceptions import CommandHistoryError
from command_history.utils.config import Config

logger = get_logger(__name__)

VALUE_ACTIONS = {
    "text": change_text,
    "color": change_text_color,
    "size": change_font_size,
}

HELP_TEXT = """\
Actions:
  text <value>     change the element text
  color <value>    change the text colour
  size <value>     change the font size
  press <trigger>  fire a preset trigger ({triggers})
  undo / redo      step through history
  show             print the element
  history          print the history log
  clear            forget the history
  quit             stop reading input"""


def build_demo(manager: HistoryManager) -> tuple[Element, TriggerPanel]:
    """Create the demo element and its preset trigger panel."""
    element = Element(text_content="Command pattern demo")
    panel = TriggerPanel(manager)
    panel.bind_command("change-color", change_text_color(element, "blue"))
    panel.bind_command("change-font-size", change_font_size(element, "25px"))
    panel.bind_command("change-text", change_text(element, "TEXT HAS BEEN CHANGED"))
    panel.bind_undo("undo")
    panel.bind_redo("redo")
    return element, panel


class HistoryConsole:
    """Applies action lines to a demo element through a history manager."""

    def __init__(self, manager: HistoryManager):
        self.manager = manager
        self.element, self.panel = build_demo(manager)
        self.errors = 0
        self.finished = False

    def run_lines(self, lines: Iterable[str]) -> int:
        """Process lines until exhausted or ``quit``.

        Returns:
            Number of rejected lines
        """
        for number, raw in enumerate(lines, start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            try:
                self.handle(line)
            except (CommandHistoryError, ValueError) as e:
                self._reject(number, str(e))
            if self.finished:
                break
        return self.errors

    def handle(self, line: str) -> None:
        """Process one action line.

        Raises:
            ValueError: If the action is unknown or malformed
            CommandHistoryError: If a trigger or command rejects it
        """
        action, _, argument = line.partition(" ")
        action = action.lower()
        argument = argument.strip()

        if action in VALUE_ACTIONS:
            if not argument:
                raise ValueError(f"'{action}' needs a value")
            self.manager.execute(VALUE_ACTIONS[action](self.element, argument))
        elif action in ("undo", "redo"):
            self.panel.fire(action)
        elif action == "press":
            if not argument:
                raise ValueError("'press' needs a trigger name")
            self.panel.fire(argument)
        elif action == "show":
            print(self.element.describe())
        elif action == "history":
            self._print_history()
        elif action == "clear":
            self.manager.clear()
        elif action == "help":
            print(HELP_TEXT.format(triggers=", ".join(self.panel.names())))
        elif action == "quit":
            self.finished = True
        else:
            raise ValueError(f"Unknown action: {action!r}")

    def _print_history(self) -> None:
        commands = self.manager.commands
        if not commands:
            print("(empty)")
            return
        for index, command in enumerate(commands):
            marker = ">" if index == self.manager.cursor else " "
            print(f"{marker} {index}: {command.get_description()}")

    def _reject(self, number: int, message: str) -> None:
        self.errors += 1
        print(f"Error on line {number}: {message}", file=sys.stderr)
        logger.warning(f"Rejected line {number}: {message}")


class HistoryCLI:
    """Command-line interface for Command History."""

    def __init__(self):
        """Initialize CLI."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="command-history",
            description="Undo/redo command history demo console",
            epilog="Actions are read one per line; use 'help' for the list",
        )

        parser.add_argument(
            "--version",
            action="version",
            version=f"command-history {__version__}"
        )

        parser.add_argument(
            "--debug",
            type=str,
            choices=LOG_LEVELS,
            help="Log to stderr at this level"
        )

        parser.add_argument(
            "--config",
            type=Path,
            help="Configuration file (default: platform config directory)"
        )

        parser.add_argument(
            "script",
            nargs="?",
            type=Path,
            help="File of actions (default: standard input)"
        )

        return parser

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments.

        Args:
            args: Arguments to parse (default: sys.argv[1:])

        Returns:
            Parsed arguments
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
        """Run the CLI.

        Args:
            args: Arguments to parse
            stdin: Input stream used when no script is given

        Returns:
            Exit code (0 = success, non-zero = error)
        """
        try:
            parsed_args = self.parse_args(args)

            settings = Config(parsed_args.config).settings
            setup_logging(
                level=parsed_args.debug or settings.log_level,
                log_file=settings.log_file,
                console_output=parsed_args.debug is not None,
                json_format=settings.json_logs,
            )

            console = HistoryConsole(HistoryManager.from_config(settings))
            if parsed_args.script:
                with open(parsed_args.script, "r", encoding="utf-8") as f:
                    errors = console.run_lines(f)
            else:
                errors = console.run_lines(stdin if stdin is not None else sys.stdin)

            return 1 if errors else 0

        except KeyboardInterrupt:
            print("\nInterrupted by user", file=sys.stderr)
            return 130  # Standard SIGINT exit code

        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            logger.exception("Unexpected error in CLI")
            return 1


def main() -> None:
    """Main entry point for CLI."""
    cli = HistoryCLI()
    exit_code = cli.run()
    sys.exit(exit_code)


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments (convenience function).

    Args:
        args: Arguments to parse

    Returns:
        Parsed arguments
    """
    cli = HistoryCLI()
    return cli.parse_args(args)


if __name__ == "__main__":
    main()
