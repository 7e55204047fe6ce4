"""
Request Collections

This package loads YAML files describing a sequence of HTTP requests
and the checks to run against each response.

Usage:
    from commontests.collection import load_collection

    collection, result = load_collection("collections/items.yaml")
    if not result.is_valid:
        print(result)
"""

# Public API
from .loader import load_collection, load_schema_file, validate_collection_yaml

# Models
from .models import (
    Collection,
    Defaults,
    Expectation,
    HALExpectation,
    HTTPMethod,
    RequestItem,
)

# Parsing
from .parser import CollectionParser, interpolate_value

# Validation
from .validation import CollectionError, CollectionValidation, CollectionValidator

__all__ = [
    # Loader functions
    "load_collection",
    "load_schema_file",
    "validate_collection_yaml",
    # Models
    "Collection",
    "Defaults",
    "Expectation",
    "HALExpectation",
    "HTTPMethod",
    "RequestItem",
    # Parsing
    "CollectionParser",
    "interpolate_value",
    # Validation
    "CollectionError",
    "CollectionValidation",
    "CollectionValidator",
]
