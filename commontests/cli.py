#!/usr/bin/env python3
"""
commontests CLI - common checks for HTTP APIs

Usage:
    commontests run <collection.yaml> [OPTIONS]
    commontests validate <collection.yaml>
    commontests hal-schema [--items schema.yaml]
    commontests patterns
    commontests --version
"""

import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .assertions import test_common_and_time
from .collection import (
    Collection,
    RequestItem,
    load_collection,
    load_schema_file,
)
from .reporting import TestRunner
from .schemas import get_regex_guid, get_regex_iso_datetime, get_regex_url, get_schema_hal
from .transport import HTTPClient, RequestSpec, TransportError

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="commontests",
    help="commontests - common checks for HTTP APIs",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"commontests v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    log_level: str = typer.Option(
        os.getenv("COMMONTESTS_LOG_LEVEL", "WARNING"), "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    ),
):
    """
    commontests - common checks for HTTP APIs

    Send the requests of a YAML collection and check status code,
    content type, response time, JSON schema and Location header.
    """
    logging.basicConfig(
        stream=sys.stderr,
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


def expected_schema(request: RequestItem) -> dict | None:
    """Get the JSON schema a request's response body is checked against, if any."""
    expect = request.expect
    if expect.hal is not None:
        return get_schema_hal(
            expect.hal.items,
            strict_links=expect.hal.strict_links,
            first_page=expect.hal.first_page,
        )
    return expect.schema


def build_request_spec(request: RequestItem, collection: Collection) -> RequestSpec:
    """Merge a collection request with the collection defaults."""
    return RequestSpec(
        method=request.method.value,
        url=request.url,
        headers={**collection.defaults.headers, **request.headers},
        json=request.json,
        data=request.body,
        timeout_ms=request.timeout_ms or collection.defaults.timeout_ms,
    )


async def run_collection_async(
    collection: Collection,
    verbose: bool = True,
    quiet: bool = False,
) -> TestRunner:
    """Execute a collection and return the runner with results."""
    runner = TestRunner(collection.name)
    logger.info(f"Running collection {collection.name!r} with {len(collection.requests)} request(s)")
    defaults = collection.defaults

    if verbose and not quiet:
        console.print(f"\n{'='*60}")
        console.print(f"  [bold]Running:[/bold] {collection.name}")
        console.print(f"  [bold]Requests:[/bold] {len(collection.requests)}")
        console.print(f"{'='*60}\n")

    async with HTTPClient() as client:
        for request in collection.requests:
            if runner.aborted:
                runner.skip_request(
                    request.id,
                    runner.abort_reason,
                    method=request.method.value,
                    url=request.url,
                )
                if not quiet:
                    console.print(f"⏭  [yellow]Skipped:[/yellow] {request.id}")
                continue

            if verbose and not quiet:
                console.print(f"▶ [bold]Request:[/bold] {request.id} ({request.method.value} {request.url})")

            runner.start_request(request.id, request.method.value, request.url)
            try:
                response = await client.send(build_request_spec(request, collection))
            except TransportError as e:
                runner.error_request(str(e))
                if not quiet:
                    console.print(f"  [red]❌ Error:[/red] {e}")
                continue

            expect = request.expect
            test_common_and_time(
                response,
                runner,
                expect.status,
                expect.time_ms,
                expect.content_type,
                expected_schema(request),
                expect.location,
                gate_on_status=defaults.gate_on_status,
                log_body=defaults.log_body,
            )
            record = runner.finish_request(response)

            if not quiet:
                for outcome in record.outcomes:
                    if outcome.passed:
                        if verbose:
                            console.print(f"  [green]✅ {escape(outcome.description)}[/green]")
                    else:
                        console.print(f"  [red]❌ {escape(outcome.description)}[/red]")
                        if outcome.message:
                            console.print(f"     {escape(outcome.message)}")
            if runner.aborted and not quiet:
                console.print(f"  [red]🛑 Aborting:[/red] {runner.abort_reason}")

            if verbose and not quiet:
                console.print()

    runner.finish()
    return runner


@app.command()
def run(
    collection_file: Path = typer.Argument(
        ...,
        help="Path to the collection YAML file",
        exists=True,
        readable=True,
    ),
    verbose: bool = typer.Option(
        True, "--verbose/--no-verbose", "-V",
        help="Show passing checks too"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only show errors and final status"
    ),
    output: str = typer.Option(
        "text", "--output", "-o",
        help="Output format: text or json"
    ),
    report_dir: Path = typer.Option(
        Path("reports"), "--report-dir", "-r",
        help="Directory to save JSON reports"
    ),
    no_report: bool = typer.Option(
        False, "--no-report",
        help="Don't save a JSON report file"
    ),
):
    """
    Run a request collection.

    Send every request in order, run the common checks on each response
    and generate a run report. Requests queued after an infrastructure
    failure (401, 403, 500, 502, 503 or 504 where another status was
    expected) are skipped.
    """
    if not quiet:
        console.print(f"\n📄 Loading collection: {collection_file}")

    collection, validation = load_collection(collection_file)

    if not validation.is_valid:
        console.print("\n[red]❌ Validation failed:[/red]")
        console.print(str(validation))
        raise typer.Exit(code=1)

    if not quiet:
        console.print(f"   [green]✅ Valid collection:[/green] {collection.name}")

    runner = asyncio.run(run_collection_async(collection, verbose, quiet))
    report = runner.report

    if output == "json":
        console.print_json(data=report.to_dict())
    elif not quiet:
        console.print("\n" + report.summary())

    if not no_report:
        report_path = report_dir / f"{report.run_id}.json"
        runner.save_json(report_path)
        if not quiet:
            console.print(f"\n📁 Report saved: {report_path}")

    if report.status.value == "passed":
        raise typer.Exit(code=0)
    raise typer.Exit(code=1)


@app.command()
def validate(
    collection_file: Path = typer.Argument(
        ...,
        help="Path to the collection YAML file",
        exists=True,
        readable=True,
    ),
):
    """
    Validate a collection YAML file without sending any request.
    """
    console.print(f"\n📄 Validating: {collection_file}")

    collection, validation = load_collection(collection_file)

    if not validation.is_valid:
        console.print("\n[red]❌ Validation failed:[/red]")
        console.print(str(validation))
        raise typer.Exit(code=1)

    console.print(f"\n[green]✅ Valid collection:[/green] {collection.name}")
    console.print(f"   Requests: {len(collection.requests)}")

    table = Table(title="Requests")
    table.add_column("ID", style="cyan")
    table.add_column("Method", style="magenta")
    table.add_column("URL")
    table.add_column("Checks")

    for request in collection.requests:
        expect = request.expect
        checks = [
            name for name, value in (
                (f"status {expect.status}", expect.status),
                ("content type", expect.content_type),
                (f"time < {expect.time_ms}ms", expect.time_ms),
                ("schema", expect.schema),
                ("HAL", expect.hal),
                ("location", expect.location),
            ) if value is not None
        ]
        table.add_row(request.id, request.method.value, request.url, ", ".join(checks))

    console.print()
    console.print(table)


@app.command("hal-schema")
def hal_schema(
    items: Optional[Path] = typer.Option(
        None, "--items", "-i",
        help="YAML or JSON file with the schema of one resource item",
        exists=True,
        readable=True,
    ),
    strict_links: bool = typer.Option(
        False, "--strict-links",
        help="Also require the next and previous links"
    ),
    first_page: int = typer.Option(
        1, "--first-page",
        help="Lowest valid page number (0 or 1)"
    ),
):
    """
    Print the JSON schema of a HAL list response.
    """
    try:
        item_schema = load_schema_file(items) if items else None
        schema = get_schema_hal(item_schema, strict_links=strict_links, first_page=first_page)
    except (ValueError, yaml.YAMLError) as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1)
    typer.echo(json.dumps(schema, indent=2))


@app.command()
def patterns():
    """
    Print the regex patterns for GUIDs, ISO datetimes and URLs.
    """
    table = Table(title="Patterns")
    table.add_column("Name", style="cyan")
    table.add_column("Pattern")
    table.add_row("GUID", get_regex_guid())
    table.add_row("ISO datetime", get_regex_iso_datetime())
    table.add_row("URL", get_regex_url())
    console.print(table)


if __name__ == "__main__":
    app()
