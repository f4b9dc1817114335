#!/usr/bin/env python3
"""Generate JSON Schema artifacts for `whodied --json` output."""

from __future__ import annotations

import argparse
import datetime
import json
import sys
import types
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any, Union, get_args, get_origin

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from whodied.models import Entry, ExtractionReport  # noqa: E402

OUTPUT_SCHEMA_NAME = "whodied-output.schema.json"
SCHEMA_DRAFT = "https://json-schema.org/draft/2020-12/schema"


def _with_nullable(schema: dict[str, Any]) -> dict[str, Any]:
    if "$ref" in schema:
        return {"anyOf": [schema, {"type": "null"}]}

    schema_type = schema.get("type")
    if isinstance(schema_type, str):
        schema["type"] = sorted({schema_type, "null"})
        return schema

    if isinstance(schema_type, list):
        schema["type"] = sorted(set(schema_type) | {"null"})
        return schema

    return {"anyOf": [schema, {"type": "null"}]}


def _schema_for_type(annotation: Any, defs: dict[str, dict[str, Any]]) -> dict[str, Any]:
    if annotation in (Any, object):
        return {}

    origin = get_origin(annotation)

    if origin in (Union, types.UnionType):
        args = list(get_args(annotation))
        has_none = any(arg is type(None) for arg in args)
        non_none = [arg for arg in args if arg is not type(None)]

        if has_none and len(non_none) == 1:
            return _with_nullable(_schema_for_type(non_none[0], defs))

        return {"anyOf": [_schema_for_type(arg, defs) for arg in args]}

    if origin is list:
        args = get_args(annotation)
        item_schema = _schema_for_type(args[0], defs) if args else {}
        return {"type": "array", "items": item_schema}

    if annotation is datetime.date:
        return {"type": "string", "format": "date"}

    primitive_map = {
        str: {"type": "string"},
        int: {"type": "integer"},
        float: {"type": "number"},
        bool: {"type": "boolean"},
    }
    if annotation in primitive_map:
        return dict(primitive_map[annotation])

    if is_dataclass(annotation):
        _ensure_dataclass_schema(annotation, defs)
        return {"$ref": f"#/$defs/{annotation.__name__}"}

    return {}


def _ensure_dataclass_schema(dataclass_type: type[Any], defs: dict[str, dict[str, Any]]) -> dict[str, Any]:
    class_name = dataclass_type.__name__
    if class_name in defs:
        return defs[class_name]

    schema: dict[str, Any] = {
        "title": class_name,
        "description": (dataclass_type.__doc__ or "").strip(),
        "type": "object",
        "additionalProperties": False,
        "properties": {},
        "required": [],
    }
    defs[class_name] = schema

    for model_field in fields(dataclass_type):
        field_schema = _schema_for_type(model_field.type, defs)

        field_description = model_field.metadata.get("description")
        if field_description:
            field_schema["description"] = field_description

        field_json_schema = model_field.metadata.get("json_schema")
        if field_json_schema:
            field_schema = {**field_schema, **field_json_schema}

        schema["properties"][model_field.name] = field_schema
        schema["required"].append(model_field.name)

    return schema


def build_output_schema() -> dict[str, Any]:
    defs: dict[str, dict[str, Any]] = {}
    _ensure_dataclass_schema(Entry, defs)
    _ensure_dataclass_schema(ExtractionReport, defs)

    return {
        "$schema": SCHEMA_DRAFT,
        "title": "whodied output",
        "description": "JSON contract emitted by `whodied --json`.",
        "type": "object",
        "additionalProperties": False,
        "properties": {
            "sources": {
                "description": "Extraction report for every page that was loaded, in query order.",
                "type": "array",
                "items": {"$ref": "#/$defs/ExtractionReport"},
            },
            "entries": {
                "description": "Merged entries, newest first.",
                "type": "array",
                "items": {"$ref": "#/$defs/Entry"},
            },
        },
        "required": ["sources", "entries"],
        "$defs": defs,
    }


def render_schemas() -> dict[str, str]:
    schemas = {OUTPUT_SCHEMA_NAME: build_output_schema()}
    return {
        file_name: json.dumps(schema, ensure_ascii=False, indent=2, sort_keys=True) + "\n"
        for file_name, schema in schemas.items()
    }


def write_schemas(out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    for file_name, content in render_schemas().items():
        (out_dir / file_name).write_text(content, encoding="utf-8")


def check_schemas(out_dir: Path) -> bool:
    mismatched: list[str] = []
    for file_name, expected in render_schemas().items():
        output_path = out_dir / file_name
        if not output_path.exists() or output_path.read_text(encoding="utf-8") != expected:
            mismatched.append(file_name)

    if mismatched:
        print(f"Schema artifacts out of date: {', '.join(sorted(mismatched))}")
        print("Regenerate with: python3 scripts/generate_json_schemas.py")
        return False

    print(f"Schema artifacts are up to date in {out_dir}.")
    return True


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate JSON Schema artifacts for whodied output.")
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=REPO_ROOT / "schemas",
        help="Output directory for schema artifacts (default: schemas/).",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Check that existing schema artifacts match generated output.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    out_dir = args.out_dir.resolve()

    if args.check:
        raise SystemExit(0 if check_schemas(out_dir) else 1)

    write_schemas(out_dir)
    print(f"Generated schema artifacts in {out_dir}.")


if __name__ == "__main__":
    main()
