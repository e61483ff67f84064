"""
DATA MODELS MODULE
==================

This file defines the Pydantic models shared by the services and the session
loop. Nothing here does I/O; the models only validate and hold values.

MODELS:
  Turn              - One recorded (user input, assistant reply) pair. Immutable.
  SessionState      - Display names, running statistics and the transcript.
  CompletionRequest - One chat completion call (message, key, retry budget, delay).
  CompletionResult  - Raw response body plus elapsed time of the reported attempt.
  ParseOutcome      - Why the extractor produced its text (ok, malformed, empty).
  ParseResult       - Extracted text or fallback message, plus its outcome.
  CommandKind       - What the session loop decided a line of input means.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from config import DEFAULT_BOT_NAME, DEFAULT_USER_NAME, MAX_MESSAGE_LENGTH

# ==============================================================================
# TRANSCRIPT AND SESSION STATE
# ==============================================================================

class Turn(BaseModel):
    """
    A single exchange in the transcript. Frozen: once appended it never changes.
    Order in the transcript defines chronology.
    """
    model_config = ConfigDict(frozen=True)

    user_input: str  # What the user typed.
    reply: str       # What was shown back (assistant reply or time answer).


class SessionState(BaseModel):
    """
    Everything the session loop mutates between turns.

    - turn_count only counts chat turns; time queries are added to the
      transcript but do not touch the latency statistics.
    - total_latency_ms sums the elapsed time of the final attempt of each chat turn.
    """
    user_name: str = DEFAULT_USER_NAME
    bot_name: str = DEFAULT_BOT_NAME
    turn_count: int = Field(default=0, ge=0)
    total_latency_ms: float = Field(default=0.0, ge=0.0)
    transcript: List[Turn] = Field(default_factory=list)

    @property
    def average_latency_ms(self) -> float:
        """Running mean of the recorded chat-turn latencies (0.0 before the first turn)."""
        if self.turn_count == 0:
            return 0.0
        return self.total_latency_ms / self.turn_count

    def record_latency(self, elapsed_ms: float) -> None:
        self.turn_count += 1
        self.total_latency_ms += elapsed_ms

    def add_turn(self, user_input: str, reply: str) -> Turn:
        turn = Turn(user_input=user_input, reply=reply)
        self.transcript.append(turn)
        return turn

# ==============================================================================
# COMPLETION REQUEST / RESULT
# ==============================================================================

class CompletionRequest(BaseModel):
    """
    Input of one logical chat completion call. Built per call, never stored.

    - message: 1..MAX_MESSAGE_LENGTH characters (the session loop checks first).
    - max_retries: extra attempts after the first failure; 0 means one attempt.
    - retry_delay: seconds to wait between attempts, constant across attempts.
    """
    model_config = ConfigDict(frozen=True)

    message: str = Field(..., min_length=1, max_length=MAX_MESSAGE_LENGTH)
    api_key: str
    max_retries: int = Field(default=3, ge=0)
    retry_delay: float = Field(default=0.5, ge=0.0)


class CompletionResult(BaseModel):
    """
    Raw body of the chat completion call and how long the reported attempt took.
    An empty raw_body means every attempt failed at the transport level.
    """
    raw_body: str
    elapsed_ms: float = Field(..., ge=0.0)

    @property
    def failed(self) -> bool:
        return self.raw_body == ""

# ==============================================================================
# EXTRACTION AND COMMANDS
# ==============================================================================

class ParseOutcome(str, Enum):
    OK = "ok"
    MALFORMED_BODY = "malformed_body"
    EMPTY_BODY = "empty_body"


class ParseResult(BaseModel):
    """Text to show the user; for anything but OK it is a fixed fallback message."""
    outcome: ParseOutcome
    text: str

    @property
    def ok(self) -> bool:
        return self.outcome is ParseOutcome.OK


class CommandKind(str, Enum):
    EXIT = "exit"
    RENAME_USER = "rename_user"
    RENAME_BOT = "rename_bot"
    TIME_QUERY = "time_query"
    CHAT = "chat"
