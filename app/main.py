"""
CHAT CLIENT ENTRY POINT
=======================

Builds the services and runs one interactive chat session in the terminal.
Single-user: each person runs their own copy with their own API key.

STARTUP:
  1. Configure logging (stderr, level from LOG_LEVEL).
  2. Print the banner.
  3. Ask for the API key. The prompt echoes what is typed (it is not masked).
     A blank answer falls back to OPENAI_API_KEY from the environment / .env.
  4. Create the transport, completion client, time service and chat session.
  5. Run the loop until "exit" or end of input. Exit code 0.

USAGE:
  python run.py
  python -m app.main
  chatbot-cli            (console script, after `pip install -e .`)
"""

import logging
import sys
from typing import Callable, Optional

from app.services.chat_session import ChatSession
from app.services.completion_service import CompletionClient
from app.services.time_service import TimeService
from app.services.transport import HttpTransport
from config import CHAT_MODEL, LOG_LEVEL, OPENAI_API_KEY


logger = logging.getLogger("chatbot")

API_KEY_PROMPT = "Enter your OpenAI API key: "


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Send log records to stderr so they stay apart from the conversation on stdout."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr,
    )


def print_title():
    """Print a short banner with the model name."""
    CYAN = "\033[96m"
    DIM = "\033[2m"
    BOLD = "\033[1m"
    RESET = "\033[0m"
    print(f"\n{BOLD}{CYAN}=== Terminal Chat ==={RESET}")
    print(f"{DIM}model: {CHAT_MODEL}{RESET}\n")


def prompt_api_key(input_fn: Callable[[str], str] = input) -> Optional[str]:
    """
    Read the API key from the terminal. Returns None if stdin is closed.
    A blank answer uses OPENAI_API_KEY when it is set.
    """
    try:
        api_key = input_fn(API_KEY_PROMPT).strip()
    except (EOFError, KeyboardInterrupt):
        return None
    if not api_key and OPENAI_API_KEY:
        logger.info("Using OPENAI_API_KEY from the environment")
        api_key = OPENAI_API_KEY
    if not api_key:
        logger.warning("No API key given; chat requests will likely be rejected")
    return api_key


def main(input_fn: Callable[[str], str] = input, output_fn: Callable[[str], None] = print) -> int:
    """Run one chat session and return the process exit code."""
    setup_logging()
    print_title()

    api_key = prompt_api_key(input_fn)
    if api_key is None:
        output_fn("Goodbye!")
        return 0

    transport = HttpTransport()
    session = ChatSession(
        api_key=api_key,
        completion_client=CompletionClient(transport=transport),
        time_service=TimeService(transport=transport),
        input_fn=input_fn,
        output_fn=output_fn,
    )
    session.run()
    return 0


def run():
    """Console script entry point (same as run.py)."""
    sys.exit(main())


if __name__ == "__main__":
    run()
