"""Data models for parsed API description DSL files.

The reader produces Tokens, the assembler groups them into Records,
and every Record ends up in one slot of the Document.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .errors import ArityError, RedefinitionError, UnknownMethodError


class TokenKind(str, Enum):
    IDENT = "identifier"
    OBJECT = "object"


class Keyword(str, Enum):
    """Record keywords accepted at the start of a DSL record."""

    INFO = "info"
    SCHEMA = "schema"
    SECURITY = "security"
    PATH = "path"


class HttpMethod(str, Enum):
    GET = "get"
    POST = "post"
    DELETE = "delete"
    HEAD = "head"


ARG_COUNTS: dict[Keyword, int] = {
    Keyword.INFO: 0,
    Keyword.SCHEMA: 1,
    Keyword.SECURITY: 1,
    Keyword.PATH: 2,
}


class Token(BaseModel):
    """A single identifier or decoded object read from the source."""

    kind: TokenKind
    value: Any
    offset: int  # where the token started in the source text


class Record(BaseModel):
    """One `keyword args... {object}` unit of the DSL."""

    keyword: Keyword
    args: list[str]
    value: Any


class Document(BaseModel):
    """The assembled API description.

    Leaf values are the decoded objects of the records, stored as-is.
    """

    model_config = ConfigDict(populate_by_name=True)

    info: Any = None
    paths: dict[str, dict[str, Any]] = {}  # {path: {method: operation}}
    schemas: dict[str, Any] = {}
    security_schemes: dict[str, Any] = Field(default={}, alias="securitySchemes")

    def add(self, record: Record) -> None:
        """Validate a record and insert its object into the document.

        Raises ArityError, UnknownMethodError or RedefinitionError without
        a position; the caller knows where the record started.
        """
        want = ARG_COUNTS[record.keyword]
        if len(record.args) != want:
            raise ArityError(
                f"unexpected arg count for {record.keyword.value}; "
                f"got {len(record.args)} want {want}"
            )

        if record.keyword is Keyword.INFO:
            if self.info is not None:
                raise RedefinitionError("info redefined")
            self.info = record.value
        elif record.keyword is Keyword.SCHEMA:
            name = record.args[0]
            if name in self.schemas:
                raise RedefinitionError(f"schema {name} redefined")
            self.schemas[name] = record.value
        elif record.keyword is Keyword.SECURITY:
            name = record.args[0]
            if name in self.security_schemes:
                raise RedefinitionError(f"security scheme {name} redefined")
            self.security_schemes[name] = record.value
        elif record.keyword is Keyword.PATH:
            path, method_name = record.args
            try:
                method = HttpMethod(method_name)
            except ValueError:
                raise UnknownMethodError(
                    f"unknown method {method_name!r} for path {path!r}"
                ) from None
            operations = self.paths.setdefault(path, {})
            if method.value in operations:
                raise RedefinitionError(
                    f"redefinition of {method.value} method for path {path!r}"
                )
            operations[method.value] = record.value
        else:
            raise ValueError(f"unhandled keyword {record.keyword!r}")
