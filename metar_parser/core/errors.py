"""Append-only accumulator for human-readable parse errors.

WHY: A malformed group must not abort the parse. Decoders record what
went wrong and return None; the assembler freezes the messages into
Report.parse_errors at the end.

HOW: ErrorSink wraps a private list. Only add() writes to it; freeze()
hands out an immutable snapshot.

RULES:
- One ErrorSink per parse, never shared between parses
- Messages keep insertion order (decoder order, not severity)
- Decoders may only append; nothing removes or rewrites a message
"""

from __future__ import annotations

from typing import Iterator, List, Tuple


class ErrorSink:
    """Ordered, append-only list of parse error messages."""

    def __init__(self) -> None:
        self._messages: List[str] = []

    def add(self, message: str) -> None:
        self._messages.append(message)

    def freeze(self) -> Tuple[str, ...]:
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __repr__(self) -> str:
        return "ErrorSink({!r})".format(self._messages)
