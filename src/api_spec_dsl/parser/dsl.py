"""API description DSL parser.

Parses DSL records of the form

    keyword arg... {
    relaxed-JSON object
    }

into a Document. Supported records:

    info {...}
    schema <name> {...}
    security <scheme-name> {...}
    path <path> <method> {...}
"""

import logging
from pathlib import Path

from .base import Document, Keyword, Record, TokenKind
from .errors import DslError, DslSyntaxError
from .reader import Reader

logger = logging.getLogger(__name__)


def parse_dsl(source_name: str, data: bytes | str) -> Document:
    """Parse DSL source into a Document.

    source_name is only used in error positions. Bytes are decoded as UTF-8.
    Raises a DslError subclass on the first problem found.
    """
    text = data.decode("utf-8") if isinstance(data, bytes) else data
    reader = Reader(source_name, text)
    doc = Document()

    while True:
        token = reader.next_token()
        if token is None:
            break
        if token.kind is not TokenKind.IDENT:
            raise DslSyntaxError(
                f"unexpected token type {token.kind.value}", reader.position(token.offset)
            )
        try:
            keyword = Keyword(token.value)
        except ValueError:
            raise DslSyntaxError(
                f"unknown token {token.value!r}", reader.position(token.offset)
            ) from None
        record_start = token.offset

        args: list[str] = []
        token = reader.next_token()
        while token is not None and token.kind is TokenKind.IDENT:
            args.append(token.value)
            token = reader.next_token()
        if token is None:
            logger.warning(
                "%s: %s record has no object; ignored",
                reader.position(record_start),
                keyword.value,
            )
            break

        try:
            doc.add(Record(keyword=keyword, args=args, value=token.value))
        except DslError as e:
            e.position = reader.position(record_start)
            raise

    logger.debug(
        "Parsed %s: %d paths, %d schemas, %d security schemes",
        source_name,
        len(doc.paths),
        len(doc.schemas),
        len(doc.security_schemes),
    )
    return doc


def parse_dsl_file(file_path: Path) -> Document:
    """Parse a DSL file, using its path as the source name."""
    data = file_path.read_bytes()
    return parse_dsl(str(file_path), data)
