"""
CHAT SESSION MODULE
===================

The interactive read-evaluate-print loop. One line of input is read, classified
and handled before the next one is accepted; every outbound call blocks until
it is done (retries included).

STATE MACHINE (one pass per line):
  AwaitInput -> Exit        "exit" typed as the whole line (or stdin closed)
             -> RenameUser  "my name is <name>"        no API call, no transcript entry
             -> RenameBot   "Your name is now <name>"  no API call, no transcript entry
             -> TimeQuery   trigger phrase anywhere    time lookup, transcript entry, no stats
             -> ChatTurn    anything else              completion call, stats, transcript entry

Input and output are plain callables (input / print by default) and all state
lives in a SessionState, so the loop runs in tests without a terminal.
"""

import logging
from typing import Callable, Optional

from app.models import CommandKind, SessionState
from app.services.completion_service import CompletionClient
from app.services.time_service import TimeService
from app.utils.response_parser import parse_reply
from config import (
    EXIT_COMMAND,
    MAX_MESSAGE_LENGTH,
    MAX_RETRIES,
    RENAME_BOT_PREFIX,
    RENAME_USER_PREFIX,
    RETRY_DELAY_SECONDS,
    TIME_LOCATION_LABEL,
    TIME_QUERY_TRIGGER,
)

logger = logging.getLogger("chatbot")

EMPTY_INPUT_MESSAGE = "Error: input cannot be empty. Please try again."
TOO_LONG_MESSAGE = f"Error: input too long (max {MAX_MESSAGE_LENGTH} chars)."


def classify(text: str, time_trigger: str = TIME_QUERY_TRIGGER) -> CommandKind:
    """Decide what a validated line of input means. Order matters: exit, renames, time, chat."""
    if text == EXIT_COMMAND:
        return CommandKind.EXIT
    if text.startswith(RENAME_USER_PREFIX):
        return CommandKind.RENAME_USER
    if text.startswith(RENAME_BOT_PREFIX):
        return CommandKind.RENAME_BOT
    if time_trigger and time_trigger in text:
        return CommandKind.TIME_QUERY
    return CommandKind.CHAT


class ChatSession:
    """
    Drives one interactive conversation.

    The API key is held here in memory only and handed to the completion client
    on each chat turn.
    """

    def __init__(
        self,
        api_key: str,
        completion_client: Optional[CompletionClient] = None,
        time_service: Optional[TimeService] = None,
        state: Optional[SessionState] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        max_retries: int = MAX_RETRIES,
        retry_delay: float = RETRY_DELAY_SECONDS,
        time_trigger: str = TIME_QUERY_TRIGGER,
    ):
        self.api_key = api_key
        self.completion_client = completion_client or CompletionClient()
        self.time_service = time_service or TimeService()
        self.state = state if state is not None else SessionState()
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.time_trigger = time_trigger

    # -------------------------------------------------------------------------
    # INPUT
    # -------------------------------------------------------------------------

    def read_input(self) -> Optional[str]:
        """
        Prompt until we get a usable line. Empty or over-long input is rejected
        and the user is asked again; nothing in the session state changes.
        Returns None when stdin is closed or interrupted (treated as exit).
        """
        while True:
            try:
                text = self.input_fn(f"{self.state.user_name}: ")
            except (EOFError, KeyboardInterrupt):
                return None

            if text == EXIT_COMMAND:
                return text
            if not text:
                self.output_fn(EMPTY_INPUT_MESSAGE)
                continue
            if len(text) > MAX_MESSAGE_LENGTH:
                self.output_fn(TOO_LONG_MESSAGE)
                continue
            return text

    # -------------------------------------------------------------------------
    # HANDLERS
    # -------------------------------------------------------------------------

    def handle(self, text: str) -> bool:
        """Handle one validated line. Returns False when the session should end."""
        kind = classify(text, self.time_trigger)
        logger.debug("Input classified as %s", kind.value)

        if kind is CommandKind.EXIT:
            return False
        if kind is CommandKind.RENAME_USER:
            self.rename_user(text[len(RENAME_USER_PREFIX):])
        elif kind is CommandKind.RENAME_BOT:
            self.rename_bot(text[len(RENAME_BOT_PREFIX):])
        elif kind is CommandKind.TIME_QUERY:
            self.answer_time_query(text)
        else:
            self.chat_turn(text)
        return True

    def rename_user(self, name: str) -> None:
        self.state.user_name = name
        self.output_fn(f"{self.state.bot_name}: Nice to meet you, {name}!")

    def rename_bot(self, name: str) -> None:
        self.state.bot_name = name
        self.output_fn(f"{name}: Got it, I'll call myself {name}.")

    def answer_time_query(self, text: str) -> str:
        """Look up the time, show it and record it. Latency statistics are left alone."""
        current_time = self.time_service.get_current_time()
        self.output_fn(f"{self.state.bot_name}: The current time in {TIME_LOCATION_LABEL} is {current_time}")
        self.state.add_turn(text, current_time)
        return current_time

    def chat_turn(self, text: str) -> str:
        """Send the message, update the running statistics, show the reply and the transcript."""
        result = self.completion_client.send_message(
            text,
            self.api_key,
            max_retries=self.max_retries,
            retry_delay=self.retry_delay,
        )
        self.state.record_latency(result.elapsed_ms)
        self.output_fn(
            f"[Response time: {result.elapsed_ms:.2f} ms | "
            f"Avg: {self.state.average_latency_ms:.2f} ms]"
        )

        parsed = parse_reply(result.raw_body)
        if not parsed.ok:
            logger.warning("Showing fallback reply (%s)", parsed.outcome.value)
        self.output_fn(f"{self.state.bot_name}: {parsed.text}")

        self.state.add_turn(text, parsed.text)
        self.output_fn(self.render_transcript())
        return parsed.text

    # -------------------------------------------------------------------------
    # RENDERING
    # -------------------------------------------------------------------------

    def render_transcript(self) -> str:
        """The whole conversation so far, labelled with the current display names."""
        lines = ["", f"--- Conversation (#{self.state.turn_count}) ---"]
        for i, turn in enumerate(self.state.transcript, 1):
            lines.append(f"[{i}] {self.state.user_name}: {turn.user_input}")
            lines.append(f"     {self.state.bot_name}: {turn.reply}")
        lines.append("-" * 29)
        return "\n".join(lines)

    # -------------------------------------------------------------------------
    # MAIN LOOP
    # -------------------------------------------------------------------------

    def run(self) -> None:
        """Read and handle lines until "exit" or end of input, then say goodbye."""
        self.output_fn("Chatbot (type 'exit' to quit):")
        try:
            while True:
                text = self.read_input()
                if text is None or not self.handle(text):
                    break
        except KeyboardInterrupt:
            self.output_fn("")
        self.output_fn("Goodbye!")
