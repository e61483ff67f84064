"""
SERVICES PACKAGE
=================

Everything that talks to the network or drives the conversation lives here.

MODULES:
    transport          - One HTTP request per call over requests (fresh session each time).
    completion_service - Chat completion call with retry and latency measurement.
    time_service       - Current time from WorldTimeAPI.
    chat_session       - The interactive loop: input checks, commands, transcript.
"""
