"""CLI entry point."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from contentpurge.core.config import Settings, get_settings
from contentpurge.core.exceptions import ConfigurationError, GatewayError
from contentpurge.core.logging import configure_logging
from contentpurge.core.purge import ContentPurge, RunResult
from contentpurge.engine.policy import PublishPolicy
from contentpurge.gateway.contentful import ContentfulGateway
from contentpurge.http.client import HttpClientError
from contentpurge.prompt import AutoConfirmPrompt, RichConfirmPrompt
from contentpurge.protocols.gateway import RecordGateway
from contentpurge.relations import RelationResolver
from contentpurge.reporter.rich import RichProgressReporter
from contentpurge.selection import RecordFilter, build_filter

app = typer.Typer(
    name="contentpurge",
    help="Bulk-delete entries and content types from a Contentful environment",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


def _build_gateway(space_id: str, token: str, environment: str, settings: Settings) -> RecordGateway:
    return ContentfulGateway(space_id, token, environment, settings=settings)


def _show_version(value: bool) -> None:
    if value:
        from contentpurge import __version__

        console.print(f"contentpurge {__version__}")
        raise typer.Exit()


@app.command()
def purge(
    space_id: str = typer.Option(..., "--space-id", envvar="SPACE_ID", help="Target space"),
    env: str = typer.Option("master", "--env", envvar="ENV", help="Environment inside the space"),
    accesstoken: str = typer.Option(
        ..., "--accesstoken", envvar="ACCESSTOKEN", help="Content Management API token"
    ),
    content_type: str | None = typer.Option(
        None, "--content-type", envvar="CONTENT_TYPE", help="Only delete entries of this content type"
    ),
    batch_size: int | None = typer.Option(
        None, "--batch-size", min=1, envvar="BATCH_SIZE", help="Page size and concurrency bound"
    ),
    content_types: bool = typer.Option(
        False, "--content-types", envvar="CONTENT_TYPES", help="Also delete content types"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", envvar="YES", help="Skip confirmation"),
    verbose: bool = typer.Option(False, "--verbose", "-v", envvar="VERBOSE", help="Log every record"),
    ignorelist: Path | None = typer.Option(
        None,
        "--ignorelist",
        "--whitelist",
        "-i",
        "-w",
        envvar=["IGNORELIST", "WHITELIST"],
        help="File of entry ids to keep",
    ),
    removelist: Path | None = typer.Option(
        None, "--removelist", "-r", envvar="REMOVELIST", help="File of the only entry ids to delete"
    ),
    publish_policy: PublishPolicy = typer.Option(
        PublishPolicy.SKIP_LIVE,
        "--publish-policy",
        envvar="PUBLISH_POLICY",
        help="skip-live leaves published entries alone, unpublish takes them down first",
    ),
    strict: bool = typer.Option(False, "--strict", help="Exit with status 1 if any record failed"),
    version: bool = typer.Option(
        False, "--version", callback=_show_version, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Delete all entries (and optionally content types) of an environment."""
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[red]Invalid settings:[/red] {e}")
        raise typer.Exit(code=2) from e

    configure_logging("DEBUG" if verbose else settings.log_level, settings.log_format, console=console)

    try:
        accept = build_filter(ignorelist, removelist)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=2) from e

    gateway = _build_gateway(space_id, accesstoken, env, settings)
    prompt = AutoConfirmPrompt() if yes else RichConfirmPrompt(console)
    purger = ContentPurge(
        gateway,
        prompt,
        RichProgressReporter(console=console),
        space_id=space_id,
        environment=env,
        resolver=RelationResolver(settings.relation_fields),
        policy=publish_policy,
        verbose=verbose,
    )

    try:
        result = asyncio.run(
            _run(
                gateway,
                purger,
                content_type=content_type,
                batch_size=batch_size or settings.default_batch_size,
                delete_content_types=content_types,
                accept=accept,
            )
        )
    except KeyboardInterrupt:
        console.print("[yellow]Interrupted[/yellow]")
        raise typer.Exit(code=130) from None
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=2) from e
    except (GatewayError, HttpClientError) as e:
        console.print(f"[red]Backend error:[/red] {e}")
        raise typer.Exit(code=1) from e

    if result.summaries:
        _print_summary(result, verbose=verbose)
    if strict and not result.ok:
        raise typer.Exit(code=1)


async def _run(
    gateway: RecordGateway,
    purger: ContentPurge,
    *,
    content_type: str | None,
    batch_size: int,
    delete_content_types: bool,
    accept: RecordFilter,
) -> RunResult:
    try:
        space_name = await gateway.get_space_name()
        console.print(f"Using space [bold]{space_name}[/bold] ({purger.target})")
        return await purger.run(
            content_type=content_type,
            batch_size=batch_size,
            delete_content_types=delete_content_types,
            accept=accept,
        )
    finally:
        await gateway.close()


def _print_summary(result: RunResult, *, verbose: bool = False) -> None:
    table = Table(title="Purge summary")
    table.add_column("Pass", style="bold")
    table.add_column("Total", justify="right")
    table.add_column("Deleted", justify="right", style="green")
    table.add_column("Skipped", justify="right")
    table.add_column("Filtered", justify="right")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Duration", justify="right")

    for summary in result.summaries:
        table.add_row(
            summary.kind,
            str(summary.total),
            str(summary.deleted),
            str(summary.skipped),
            str(summary.filtered),
            str(summary.failed),
            f"{summary.duration_seconds:.1f}s",
        )
    console.print(table)

    failures = [line for summary in result.summaries for line in summary.failures]
    if failures and verbose:
        for line in failures:
            console.print(f"  [red]✗[/red] {line}")
    elif failures:
        console.print(f"[yellow]{len(failures)} record(s) failed; rerun with --verbose for details[/yellow]")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
