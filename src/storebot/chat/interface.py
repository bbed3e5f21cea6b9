#!/usr/bin/env python3
"""
Console chat interface for a storebot session.

Plain input is answered by the session; slash commands teach new
responses and inspect the engine.
"""

from dotenv import load_dotenv
load_dotenv()  # Load .env file before settings are read

import logging
from typing import Optional, Tuple

from storebot.config.settings import settings
from storebot.container import StorebotContainer
from storebot.errors import ValidationError

TEACH_SEPARATOR = "=>"


def parse_teach(args: str) -> Optional[Tuple[str, str]]:
    """Split '/teach' arguments into (input, response); None if malformed."""
    if TEACH_SEPARATOR not in args:
        return None
    input_text, response_text = args.split(TEACH_SEPARATOR, 1)
    return input_text.strip(), response_text.strip()


class ChatInterface:
    """
    Interactive REPL over one ChatSession.

    Commands:
    - /teach <input> => <response> - Teach (or overwrite) a response
    - /why <text> - Show which tier answers <text>
    - /stats - Show engine statistics
    - /help - Show help
    - /exit - Exit

    Example session:
        > hello
        Hi there! How can I help you today?

        > /teach do you ship abroad => Yes, we ship to 40 countries.
        Learned: 'do you ship abroad'
    """

    def __init__(
        self,
        empty: bool = False,
        debug: bool = False,
        container: Optional[StorebotContainer] = None,
    ):
        """
        Initialize chat interface.

        Args:
            empty: Start with no seed responses
            debug: Enable debug logging
            container: Container to build the session from
        """
        logging.basicConfig(
            level=logging.DEBUG if (debug or settings.debug) else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )
        self.container = container or StorebotContainer()
        self.session = self.container.create_session(seed={} if empty else None)
        self.running = False

    def start(self) -> None:
        """Start interactive REPL."""
        print("=" * 60)
        print("  Storebot: Trainable Store Assistant")
        print("=" * 60)
        print()
        print("(Type naturally or use /help for commands)")
        print()

        self.running = True
        while self.running:
            try:
                user_input = input("> ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\nGoodbye!")
                break

            if not user_input:
                continue

            if user_input.startswith("/"):
                self.handle_command(user_input)
            else:
                print(f"\n{self.session.resolve(user_input)}\n")

    def handle_command(self, command: str) -> None:
        """Handle slash commands."""
        parts = command.split(maxsplit=1)
        cmd = parts[0].lower()
        args = parts[1] if len(parts) > 1 else ""

        if cmd == "/help":
            self._show_help()
        elif cmd == "/exit":
            print("Goodbye!")
            self.running = False
        elif cmd == "/teach":
            self._cmd_teach(args)
        elif cmd == "/why":
            self._cmd_why(args)
        elif cmd == "/stats":
            self._cmd_stats()
        else:
            print(f"Unknown command: {cmd}. Use /help for commands.")

    def _show_help(self) -> None:
        """Show help message."""
        print("""
Just type naturally to chat.

Commands:
  /teach <input> => <response>
      Teach a response (overwrites an existing one for the same input)
      Example: /teach do you ship abroad => Yes, we ship to 40 countries.

  /why <text>
      Show which resolution tier answers <text>

  /stats
      Show engine statistics

  /help
      Show this help message

  /exit
      Exit the program
        """)

    def _cmd_teach(self, args: str) -> None:
        """Handle /teach command."""
        pair = parse_teach(args)
        if pair is None:
            print(f"Usage: /teach <input> {TEACH_SEPARATOR} <response>")
            return

        try:
            exemplar = self.session.add_exemplar(*pair)
        except ValidationError as e:
            print(f"Not learned: {e}")
            return
        print(f"Learned: {exemplar.input!r}")

    def _cmd_why(self, args: str) -> None:
        """Handle /why command."""
        resolution = self.session.explain(args)
        print(f"[{resolution.tier}] {resolution.response}")

    def _cmd_stats(self) -> None:
        """Handle /stats command."""
        print()
        for key, value in self.session.get_stats().items():
            print(f"  {key:<18} {value}")
        print()
