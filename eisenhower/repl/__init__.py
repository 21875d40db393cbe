"""
FILE: eisenhower/repl/__init__.py
PURPOSE: REPL package for interactive triage
EXPORTS:
  - main() (from repl.main)
DEPENDENCIES:
  - prompt_toolkit (REPL interface)
  - rich (formatted output)
  - eisenhower.core (store and drag session)
NOTES:
  - Entry point for interactive mode
  - Provides autocomplete, command history, and multi-step drag and drop
"""

from .main import main

__all__ = ["main"]
