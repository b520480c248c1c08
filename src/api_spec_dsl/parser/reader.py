"""Tokenizer for the API description DSL.

The source is a sequence of whitespace-separated identifiers and
relaxed-JSON objects. An object starts with `{` and runs up to the first
`}` that is the first character on its line; the text in between is
handed to hjson as-is, so nested braces are fine as long as no inner
line starts with `}`.
"""

import hjson

from .base import Token, TokenKind
from .errors import ObjectDecodeError, UnexpectedEndError
from .position import offset_to_pos

OBJECT_END = "\n}"


class Reader:
    """Read tokens from DSL source text, left to right.

    Usage:
        reader = Reader("api.dsl", text)
        while (token := reader.next_token()) is not None:
            ...
    """

    def __init__(self, source_name: str, text: str):
        self.source_name = source_name
        self.text = text
        self.pos = 0
        self.token_start = 0

    def next_token(self) -> Token | None:
        """Return the next token, or None at the end of the input."""
        self._skip_space()
        self.token_start = self.pos
        if self.pos >= len(self.text):
            return None
        if self.text[self.pos] == "{":
            return self._read_object()

        end = self.pos
        while end < len(self.text) and not self.text[end].isspace():
            end += 1
        ident = self.text[self.pos:end]
        self.pos = end
        return Token(kind=TokenKind.IDENT, value=ident, offset=self.token_start)

    def position(self, offset: int) -> str:
        return offset_to_pos(self.source_name, self.text, offset)

    def _read_object(self) -> Token:
        start = self.pos
        end = self.text.find(OBJECT_END, start)
        if end < 0:
            raise UnexpectedEndError(
                "unexpected end of input in object", self.position(start)
            )
        end += len(OBJECT_END)

        try:
            value = hjson.loads(self.text[start:end], object_pairs_hook=dict)
        except hjson.HjsonDecodeError as e:
            raise ObjectDecodeError(e.msg, self.position(start + e.pos)) from e

        self.pos = end
        return Token(kind=TokenKind.OBJECT, value=value, offset=start)

    def _skip_space(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1
