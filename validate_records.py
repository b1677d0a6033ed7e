#!/usr/bin/env python3
"""Validate record files against the schema."""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from jsonschema import validate, ValidationError


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path) as f:
        return yaml.safe_load(f)


def record_location(path) -> str:
    """Format a schema error path as section[index].field, e.g. 'vehicles[0].mileage'."""
    parts = list(path)
    location = str(parts[0])
    for part in parts[1:]:
        location += f"[{part}]" if isinstance(part, int) else f".{part}"
    return location


def validate_record_file(filepath: Path, schema: dict) -> List[str]:
    """Validate a single record file. Returns list of errors."""
    errors = []
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f)
        validate(instance=data if data is not None else {}, schema=schema)
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at record: {record_location(e.path)}")
    except OSError as e:
        errors.append(f"Error: {e}")
    return errors


def find_record_files(directory: Path) -> List[Path]:
    """YAML and JSON files directly inside a directory."""
    return sorted(
        list(directory.glob("*.yaml"))
        + list(directory.glob("*.yml"))
        + list(directory.glob("*.json"))
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Validate the given record files (default: everything in records/)."""
    parser = argparse.ArgumentParser(description="Validate fleet record files")
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Record files or directories (default: records/)",
    )
    args = parser.parse_args(argv)

    schema = load_schema()
    paths = args.paths or [Path(__file__).parent / "records"]

    files: List[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(find_record_files(path))
        elif path.exists():
            files.append(path)
        else:
            print(f"Error: path not found: {path}")
            return 1

    if not files:
        print("Warning: No record files found")
        return 0

    all_valid = True
    for filepath in files:
        errors = validate_record_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath.name}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
