"""
CHAT CLIENT APPLICATION PACKAGE
===============================

Main Python package for the terminal chat client.

  from app.main import main
  from app.models import SessionState, Turn
  from app.services.chat_session import ChatSession

FILE STRUCTURE:
  app/
    __init__.py   - This file; marks 'app' as a package.
    main.py       - CLI entry point: logging, API key prompt, wiring, exit code.
    models.py     - Pydantic models for the transcript, session state and API results.
    services/     - Transport, chat completion with retry, time lookup, session loop.
    utils/        - Helpers: constant-delay retry, JSON response parsing.
"""
