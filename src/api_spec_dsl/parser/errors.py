"""Errors raised while reading and assembling DSL files.

Every error is fatal to the parse. The position, when known, is a
`<source>:<line>:<column>` string produced by offset_to_pos.
"""


class DslError(Exception):
    """Base class for all DSL parse errors."""

    def __init__(self, message: str, position: str | None = None):
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self) -> str:
        if self.position:
            return f"{self.position}: {self.message}"
        return self.message


class UnexpectedEndError(DslError):
    """The input ended inside an object block."""


class ObjectDecodeError(DslError):
    """The embedded relaxed-JSON object could not be decoded."""


class DslSyntaxError(DslError):
    """A token of the wrong type, or an unknown keyword."""


class ArityError(DslError):
    """A record has the wrong number of arguments for its keyword."""


class RedefinitionError(DslError):
    """A record writes a slot that an earlier record already filled."""


class UnknownMethodError(DslError):
    """A path record names a method outside the allowed set."""
