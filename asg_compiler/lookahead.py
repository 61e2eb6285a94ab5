"""
Lookahead source for the assignment compiler.

Wraps any character-producing iterable and exposes exactly one character
of lookahead. The translator never rewinds: every branch decision is made
on the current lookahead, and characters are consumed with advance().
"""

from __future__ import annotations
from typing import Iterable, Iterator, Optional


ADDOPS = "+-"
MULOPS = "*/"


class LookaheadSource:
    """One-character lookahead over a character stream."""

    def __init__(self, chars: Iterable[str]):
        self._stream: Iterator[str] = iter(chars)
        self.look: Optional[str] = None
        self.advance()

    def advance(self) -> Optional[str]:
        """Discard the current lookahead and fetch the next character.

        Returns the new lookahead, or None once the stream is exhausted.
        """
        self.look = next(self._stream, None)
        return self.look

    # ── Classification ────────────────────────

    @property
    def at_end(self) -> bool:
        return self.look is None

    def is_alpha(self) -> bool:
        return self.look is not None and self.look.isalpha()

    def is_digit(self) -> bool:
        # str.isdigit() also accepts superscripts; restrict to 0-9
        return self.look is not None and self.look in "0123456789"

    def is_addop(self) -> bool:
        return self.look is not None and self.look in ADDOPS

    def is_mulop(self) -> bool:
        return self.look is not None and self.look in MULOPS

    def __repr__(self):
        return f"LookaheadSource(look={self.look!r})"
