from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

DEFAULT_TOKEN_TYPE = "word"


@dataclass(frozen=True, slots=True)
class Token:
    """Represents a token and its inclusive-exclusive character offsets."""

    text: str
    start_char: int
    end_char: int
    type: str = DEFAULT_TOKEN_TYPE

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass(slots=True)
class TermBuffer:
    """
    Mutable "current token" state owned by a single stream stage.

    Stages overwrite the same buffer on every ``advance()``, so the contents
    are only valid until the next call. ``chars`` is reused between tokens and
    may hold stale characters past ``length``.
    """

    chars: List[str] = field(default_factory=list)
    length: int = 0
    start_char: int = 0
    end_char: int = 0
    type: str = DEFAULT_TOKEN_TYPE

    @property
    def text(self) -> str:
        return "".join(self.chars[: self.length])

    def set_term(self, chars: Sequence[str], length: int | None = None) -> None:
        """Copy the first ``length`` characters of ``chars`` into the buffer."""
        if length is None:
            length = len(chars)
        if len(self.chars) < length:
            self.chars.extend([""] * (length - len(self.chars)))
        self.chars[:length] = chars[:length]
        self.length = length

    def set_offsets(self, start_char: int, end_char: int) -> None:
        self.start_char = start_char
        self.end_char = end_char

    def clear(self) -> None:
        self.length = 0
        self.start_char = 0
        self.end_char = 0
        self.type = DEFAULT_TOKEN_TYPE

    def snapshot(self) -> Token:
        """Return an immutable copy of the current token."""
        return Token(
            text=self.text,
            start_char=self.start_char,
            end_char=self.end_char,
            type=self.type,
        )
