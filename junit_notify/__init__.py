"""Post failing JUnit test cases to a chat webhook."""

from __future__ import annotations

__version__ = "0.1.0"
