#!/usr/bin/env python3
"""Entry point for running the chat interface as a module.

Usage:
    python -m storebot.chat
    python -m storebot.chat --debug
"""

import argparse


def main():
    parser = argparse.ArgumentParser(
        description="Storebot trainable chat interface",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start with the storefront defaults
  python -m storebot.chat

  # Start with an empty response set (everything falls back until taught)
  python -m storebot.chat --empty

  # Show which resolution tier answered each message
  python -m storebot.chat --debug
        """
    )

    parser.add_argument(
        "--empty",
        action="store_true",
        help="Start without the default storefront responses",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    # Import here to avoid circular import warning
    from storebot.chat.interface import ChatInterface
    interface = ChatInterface(empty=args.empty, debug=args.debug)
    interface.start()


if __name__ == "__main__":
    main()
