"""
RUN SCRIPT - Start the chat client
==================================

PURPOSE:
  Single entry point to start an interactive chat session in this terminal.

WHAT IT DOES:
  - Imports main() from app.main.
  - Runs it and exits with its return code (0 after "exit" or end of input).

USAGE:
  python run.py

  You will be asked for your OpenAI API key first, then you can start chatting.
  Type "exit" to quit.

NOTE:
  Endpoints, model and retry settings can be overridden in .env (see config.py).
"""

import sys

from app.main import main

# ------------------------------------------------------------------------------
# ENTRY POINT
# ------------------------------------------------------------------------------
# Only run when this file is executed directly (python run.py),
# not when it is imported by another module.
if __name__ == "__main__":
    sys.exit(main())
