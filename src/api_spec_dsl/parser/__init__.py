"""DSL reader, records and document models."""

from .base import Document
from .dsl import parse_dsl, parse_dsl_file
from .errors import DslError

__all__ = ["Document", "DslError", "parse_dsl", "parse_dsl_file"]
