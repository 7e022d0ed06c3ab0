"""termsession -- Session-aware command interpreter for character terminals.

This package implements a small command shell that sits behind a
character-stream terminal surface: raw keystrokes are buffered into
lines, a username/password prompt gates access, and completed lines are
resolved against a registry of named commands.
"""

__version__ = "0.1.0"
