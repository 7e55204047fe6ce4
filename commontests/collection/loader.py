"""
Collection loader for request collections.

This module provides the public API for loading and validating
collection files from disk or YAML strings, and for loading
standalone JSON schema files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .models import Collection
from .parser import CollectionParser
from .validation import CollectionValidation, CollectionValidator


def _validate_data(data: Any, source: str) -> tuple[Collection | None, CollectionValidation]:
    if not isinstance(data, dict):
        result = CollectionValidation()
        result.add_error(
            source,
            "File must contain a YAML object (not a list or scalar)",
            value=type(data).__name__,
        )
        return None, result

    result = CollectionValidator(data).validate()
    if not result.is_valid:
        return None, result

    return CollectionParser(data).parse(), result


def load_collection(path: str | Path) -> tuple[Collection | None, CollectionValidation]:
    """
    Load and validate a collection from a YAML file.

    Args:
        path: Path to the YAML collection file

    Returns:
        Tuple of (Collection or None, CollectionValidation)
        If validation fails, Collection will be None.

    Example:
        collection, result = load_collection("collections/items.yaml")
        if not result.is_valid:
            print(result)
            sys.exit(1)
    """
    path = Path(path)

    if not path.exists():
        result = CollectionValidation()
        result.add_error(
            str(path),
            "File not found",
            suggestion="Check the file path is correct",
        )
        return None, result

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        result = CollectionValidation()
        result.add_error(
            str(path),
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)",
        )
        return None, result

    return _validate_data(data, str(path))


def validate_collection_yaml(yaml_string: str) -> tuple[Collection | None, CollectionValidation]:
    """
    Validate a collection from a YAML string (useful for testing).

    Args:
        yaml_string: YAML content as a string

    Returns:
        Tuple of (Collection or None, CollectionValidation)
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        result = CollectionValidation()
        result.add_error("yaml", f"Invalid YAML syntax: {e}")
        return None, result

    return _validate_data(data, "yaml")


def load_schema_file(path: str | Path) -> dict[str, Any]:
    """
    Load a JSON schema from a YAML or JSON file (JSON is valid YAML).

    Raises:
        FileNotFoundError: The file does not exist
        yaml.YAMLError: The file is not valid YAML/JSON
        ValueError: The file does not contain an object
    """
    with open(path) as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: schema file must contain an object, got {type(data).__name__}")
    return data
