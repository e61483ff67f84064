"""
UTILITIES PACKAGE
=================

Helpers used by the services (no HTTP, no terminal I/O):

  retry           - with_retry(fn): calls fn(); on failure retries with a fixed delay.
  response_parser - parse_reply / parse_time: raw JSON body -> text plus parse outcome.
"""
