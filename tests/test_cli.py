import json
import textwrap

from typer.testing import CliRunner

from commontests import __version__
from commontests.cli import app

cli = CliRunner()

COLLECTION = textwrap.dedent(
    """
    version: 1
    name: Unreachable API
    requests:
      - id: ping
        url: http://127.0.0.1:9/ping
        timeout_ms: 2000
        expect: {status: 200}
    """
)


def write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content)
    return path


def test_version():
    result = cli.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_hal_schema_default_items():
    result = cli.invoke(app, ["hal-schema"])
    assert result.exit_code == 0
    schema = json.loads(result.output)
    assert schema["required"] == ["_links", "_embedded", "_page"]
    assert schema["properties"]["_embedded"]["properties"]["resourceList"]["items"] == {}


def test_hal_schema_with_items_file(tmp_path):
    items = write(tmp_path, "item.yaml", "type: object\nrequired: [id]\n")
    result = cli.invoke(app, ["hal-schema", "--items", str(items), "--strict-links"])
    assert result.exit_code == 0
    schema = json.loads(result.output)
    links = schema["properties"]["_links"]
    assert "next" in links["required"]
    assert schema["properties"]["_embedded"]["properties"]["resourceList"]["items"]["required"] == ["id"]


def test_hal_schema_bad_first_page():
    result = cli.invoke(app, ["hal-schema", "--first-page", "2"])
    assert result.exit_code == 1


def test_patterns():
    result = cli.invoke(app, ["patterns"])
    assert result.exit_code == 0
    assert "GUID" in result.output
    assert "URL" in result.output


def test_validate_valid_collection(tmp_path):
    path = write(tmp_path, "collection.yaml", COLLECTION)
    result = cli.invoke(app, ["validate", str(path)])
    assert result.exit_code == 0
    assert "Unreachable API" in result.output


def test_validate_invalid_collection(tmp_path):
    path = write(tmp_path, "collection.yaml", "version: 1\nname: x\nrequests: []\n")
    result = cli.invoke(app, ["validate", str(path)])
    assert result.exit_code == 1
    assert "Validation failed" in result.output


def test_run_reports_transport_errors(tmp_path):
    path = write(tmp_path, "collection.yaml", COLLECTION)
    report_dir = tmp_path / "reports"
    result = cli.invoke(
        app, ["run", str(path), "--quiet", "--report-dir", str(report_dir)]
    )
    assert result.exit_code == 1

    reports = list(report_dir.glob("*.json"))
    assert len(reports) == 1
    data = json.loads(reports[0].read_text())
    assert data["status"] == "error"
    assert data["requests"][0]["status"] == "error"


def test_validate_rejects_invalid_schema(tmp_path):
    path = write(
        tmp_path,
        "collection.yaml",
        "version: 1\nname: x\nrequests:\n  - {id: a, url: x, expect: {schema: {type: 5}}}\n",
    )
    result = cli.invoke(app, ["validate", str(path)])
    assert result.exit_code == 1
    assert "requests[0].expect.schema" in result.output
