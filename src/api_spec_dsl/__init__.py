"""Compile API description DSL files into OpenAPI documents."""

__version__ = "0.1.0"
