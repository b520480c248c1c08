"""End-to-end tests: DSL file -> Document -> OpenAPI YAML."""

import logging
from pathlib import Path

import yaml
from click.testing import CliRunner

from api_spec_dsl.cli import main
from api_spec_dsl.emit import dump_yaml, to_openapi
from api_spec_dsl.parser.dsl import parse_dsl, parse_dsl_file

FIXTURES = Path(__file__).parent / "fixtures"

EXPECTED_PETSTORE = {
    "openapi": "3.0.0",
    "info": {"title": "Swagger Petstore", "version": "1.0.0"},
    "paths": {
        "/pets": {
            "get": {
                "summary": "List all pets",
                "parameters": [
                    {
                        "name": "limit",
                        "in": "query",
                        "required": False,
                        "schema": {"type": "integer"},
                    }
                ],
            },
            "post": {
                "summary": "Create a pet",
                "security": [{"bearerAuth": []}],
                "requestBody": {
                    "content": {
                        "application/json": {
                            "schema": {"$ref": "#/components/schemas/Pet"}
                        }
                    }
                },
            },
        },
        "/pets/{petId}": {"get": {"summary": "Info for a specific pet"}},
    },
    "components": {
        "schemas": {
            "Pet": {
                "type": "object",
                "required": ["name"],
                "properties": {
                    "id": {"type": "integer"},
                    "name": {"type": "string"},
                },
            }
        },
        "securitySchemes": {"bearerAuth": {"type": "http", "scheme": "bearer"}},
    },
}


class TestEndToEnd:
    def test_petstore_document(self):
        doc = parse_dsl_file(FIXTURES / "petstore.dsl")
        assert to_openapi(doc) == EXPECTED_PETSTORE

    def test_petstore_yaml_matches_cli(self, tmp_path):
        output_file = tmp_path / "petstore.yaml"
        runner = CliRunner()
        result = runner.invoke(main, [
            "-v", "compile", str(FIXTURES / "petstore.dsl"), "-o", str(output_file),
        ])

        assert result.exit_code == 0
        text = output_file.read_text(encoding="utf-8")
        assert text == dump_yaml(EXPECTED_PETSTORE)
        assert yaml.safe_load(text) == EXPECTED_PETSTORE

    def test_dropped_record_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="api_spec_dsl"):
            doc = parse_dsl("tail.dsl", b"info {\n}\npath /pets get")
        assert doc.paths == {}
        assert "tail.dsl:3:1: path record has no object; ignored" in caplog.text
