"""
commontests - Common Checks for HTTP API Tests

This package provides reusable assertion helpers for API test scripts,
so tests do not repeat the same status code, content type, timing,
JSON schema and Location header boilerplate.

Subpackages:
    - validation: Kind detection and argument checks
    - schemas: Regex patterns and the HAL list schema builder
    - assertions: Single checks, composite checks and helpers
    - reporting: TestRunner host and run reports
    - transport: Captured responses and the HTTP client
    - collection: YAML request collections

Usage:
    from commontests import TestRunner, Response, test_common_and_time, get_schema_hal

    runner = TestRunner("items API")
    test_common_and_time(
        response,
        runner,
        status_code=200,
        time=500,
        content_type="application/json",
        json_schema=get_schema_hal({"type": "object", "required": ["id"]}),
    )

    report = runner.finish()
    print(report.summary())
"""

__version__ = "0.1.0"

# Re-export validation for convenience
from .validation import (
    ArgumentError,
    ArgumentRangeError,
    ArgumentTypeError,
    Kind,
    ValidationResult,
    get_kind,
)

# Re-export schemas for convenience
from .schemas import (
    get_regex_guid,
    get_regex_iso_datetime,
    get_regex_url,
    get_schema_hal,
)

# Re-export assertions for convenience
from .assertions import (
    # Models
    AssertionOutcome,
    AssertionStatus,
    RunDecision,
    # Checks
    ResponseChecks,
    check_content_type,
    check_json_schema,
    check_location,
    check_status_code,
    check_time,
    log_response_body,
    # Composites
    test_common,
    test_common_and_time,
    # Helpers
    convert_time,
    generate_number,
    generate_string,
    get_index_object_in_array,
)

# Re-export reporting for convenience
from .reporting import RunReport, RunStatus, TestRunner

# Re-export transport for convenience
from .transport import HTTPClient, RequestSpec, Response, TransportError

# Re-export collections for convenience
from .collection import Collection, load_collection, validate_collection_yaml

__all__ = [
    # Package info
    "__version__",
    # Validation
    "ArgumentError",
    "ArgumentTypeError",
    "ArgumentRangeError",
    "Kind",
    "ValidationResult",
    "get_kind",
    # Schemas
    "get_regex_guid",
    "get_regex_iso_datetime",
    "get_regex_url",
    "get_schema_hal",
    # Assertions - Models
    "AssertionOutcome",
    "AssertionStatus",
    "RunDecision",
    # Assertions - Checks
    "ResponseChecks",
    "check_status_code",
    "check_content_type",
    "check_time",
    "check_json_schema",
    "check_location",
    "log_response_body",
    # Assertions - Composites
    "test_common",
    "test_common_and_time",
    # Assertions - Helpers
    "convert_time",
    "get_index_object_in_array",
    "generate_number",
    "generate_string",
    # Reporting
    "RunReport",
    "RunStatus",
    "TestRunner",
    # Transport
    "HTTPClient",
    "RequestSpec",
    "Response",
    "TransportError",
    # Collections
    "Collection",
    "load_collection",
    "validate_collection_yaml",
]
