"""Convert a parsed Document into an OpenAPI document and serialize it."""

import json

import yaml

from api_spec_dsl.parser.base import Document

DEFAULT_OPENAPI_VERSION = "3.0.0"


def to_openapi(doc: Document, version: str = DEFAULT_OPENAPI_VERSION) -> dict:
    """Build an OpenAPI document dict from a Document.

    Empty sections are left out, except `components` which is always present.
    Paths, methods, schemas and security schemes are sorted by key.
    """
    result: dict = {"openapi": version}
    if doc.info is not None:
        result["info"] = doc.info
    if doc.paths:
        result["paths"] = {
            path: _sorted(doc.paths[path]) for path in sorted(doc.paths)
        }

    components = {}
    if doc.schemas:
        components["schemas"] = _sorted(doc.schemas)
    if doc.security_schemes:
        components["securitySchemes"] = _sorted(doc.security_schemes)
    result["components"] = components
    return result


def dump_yaml(data: dict) -> str:
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)


def dump_json(data: dict) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def _sorted(mapping: dict) -> dict:
    return {key: mapping[key] for key in sorted(mapping)}
