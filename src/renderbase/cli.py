"""
Renderbase SDK CLI.

Usage:
    renderbase templates list --type pdf
    renderbase documents generate tmpl_invoice --format pdf --var invoiceNumber=INV-001
    renderbase documents download job_123 -o invoice.pdf
    renderbase webhooks list
"""

from __future__ import annotations

import json
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from renderbase._version import __version__
from renderbase.client import Renderbase
from renderbase.exceptions import RenderbaseError
from renderbase.logging import setup_logging
from renderbase.models import GenerateResult

console = Console()
err_console = Console(stderr=True)


def get_client(ctx: click.Context) -> Renderbase:
    """Build a client from context or environment."""
    api_key = ctx.obj.get("api_key") if ctx.obj else None
    if not api_key:
        api_key = os.getenv("RENDERBASE_API_KEY", "")
    if not api_key:
        err_console.print("[red]Error:[/red] Set RENDERBASE_API_KEY environment variable")
        raise SystemExit(1)
    return Renderbase(api_key=api_key, base_url=ctx.obj.get("base_url"))


@contextmanager
def handle_errors() -> Iterator[None]:
    """Print SDK errors and exit with status 1."""
    try:
        yield
    except RenderbaseError as e:
        detail = f" (HTTP {e.status_code})" if e.status_code else ""
        code = f" [{e.code}]" if e.code else ""
        err_console.print(f"[red]Error:[/red] {escape(e.message + code)}{detail}")
        raise SystemExit(1)


def parse_variables(pairs: tuple[str, ...], vars_file: str | None) -> dict[str, Any]:
    """
    Merge --vars-file and --var KEY=VALUE options.

    Values are decoded as JSON when possible, otherwise kept as strings.
    """
    variables: dict[str, Any] = {}
    if vars_file:
        try:
            loaded = json.loads(Path(vars_file).read_text())
        except ValueError as e:
            raise click.BadParameter(f"invalid JSON: {e}", param_hint="--vars-file") from e
        if not isinstance(loaded, dict):
            raise click.BadParameter("must contain a JSON object", param_hint="--vars-file")
        variables.update(loaded)

    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--var")
        try:
            variables[key] = json.loads(raw)
        except ValueError:
            variables[key] = raw
    return variables


@click.group()
@click.option("--api-key", envvar="RENDERBASE_API_KEY", help="Renderbase API key")
@click.option("--base-url", envvar="RENDERBASE_BASE_URL", help="Override API base URL")
@click.option("--verbose", "-v", is_flag=True, help="Log HTTP requests")
@click.version_option(version=__version__, prog_name="renderbase")
@click.pass_context
def main(
    ctx: click.Context,
    api_key: str | None,
    base_url: str | None,
    verbose: bool,
) -> None:
    """Renderbase SDK command-line interface."""
    ctx.ensure_object(dict)
    ctx.obj["api_key"] = api_key
    ctx.obj["base_url"] = base_url
    if verbose:
        setup_logging(level="DEBUG")


# =============================================================================
# Templates
# =============================================================================


@main.group()
def templates() -> None:
    """Template commands."""
    pass


@templates.command("list")
@click.option("--page", "-p", type=int, help="Page number")
@click.option("--limit", "-n", type=int, help="Items per page")
@click.option("--type", "template_type", type=click.Choice(["pdf", "excel"]), help="Filter by type")
@click.pass_context
def templates_list(
    ctx: click.Context,
    page: int | None,
    limit: int | None,
    template_type: str | None,
) -> None:
    """List templates."""
    with handle_errors(), get_client(ctx) as client:
        response = client.templates.list(page=page, limit=limit, type=template_type)

    if not response.data:
        console.print("[yellow]No templates[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID")
    table.add_column("Short ID")
    table.add_column("Name")
    table.add_column("Type", width=6)
    table.add_column("Variables", justify="right")

    for template in response:
        table.add_row(
            template.id,
            template.short_id or "",
            template.name or "",
            template.type or "",
            str(len(template.variables)),
        )

    console.print(table)
    console.print(f"[dim]Page {response.page}/{response.total_pages or 1}, {response.total} total[/dim]")


@templates.command("get")
@click.argument("template_id")
@click.pass_context
def templates_get(ctx: click.Context, template_id: str) -> None:
    """Show a template by UUID, short ID or slug."""
    with handle_errors(), get_client(ctx) as client:
        template = client.templates.get(template_id)

    console.print(f"[bold]{template.name or template.id}[/bold] [dim]({template.type or 'unknown'})[/dim]")
    console.print(f"[dim]ID:[/dim] {template.id}")
    if template.short_id:
        console.print(f"[dim]Short ID:[/dim] {template.short_id}")
    if template.slug:
        console.print(f"[dim]Slug:[/dim] {template.slug}")

    if template.variables:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Variable")
        table.add_column("Type")
        table.add_column("Required")
        for variable in template.variables:
            table.add_row(
                variable.name,
                variable.type or "",
                "yes" if variable.required else "",
            )
        console.print(table)

    if template.required_variables:
        console.print(f"[dim]Required:[/dim] {', '.join(template.required_variables)}")


# =============================================================================
# Documents
# =============================================================================


@main.group()
def documents() -> None:
    """Document generation commands."""
    pass


def _print_job(result: GenerateResult) -> None:
    colors = {"completed": "green", "failed": "red"}
    color = colors.get(result.status, "yellow")
    console.print(f"[dim]Job:[/dim] {result.job_id}")
    console.print(f"[dim]Status:[/dim] [{color}]{result.status}[/{color}]")
    if result.download_url:
        console.print(f"[dim]Download URL:[/dim] {result.download_url}")
    if result.expires_at:
        console.print(f"[dim]Expires:[/dim] {result.expires_at.isoformat()}")


@documents.command("generate")
@click.argument("template_id")
@click.option("--format", "-f", "output_format", type=click.Choice(["pdf", "excel"]), default="pdf")
@click.option("--var", "variables", multiple=True, help="Template variable as KEY=VALUE")
@click.option("--vars-file", type=click.Path(exists=True, dir_okay=False), help="JSON file with variables")
@click.option("--workspace-id", "-w", help="Workspace ID")
@click.pass_context
def documents_generate(
    ctx: click.Context,
    template_id: str,
    output_format: str,
    variables: tuple[str, ...],
    vars_file: str | None,
    workspace_id: str | None,
) -> None:
    """Generate a document from a template."""
    values = parse_variables(variables, vars_file)
    with handle_errors(), get_client(ctx) as client:
        result = client.documents.generate(
            template_id=template_id,
            format=output_format,
            variables=values,
            workspace_id=workspace_id,
        )
    _print_job(result)


@documents.command("get")
@click.argument("job_id")
@click.pass_context
def documents_get(ctx: click.Context, job_id: str) -> None:
    """Show a generation job."""
    with handle_errors(), get_client(ctx) as client:
        result = client.documents.get(job_id)
    _print_job(result)


@documents.command("list")
@click.option("--page", "-p", type=int, help="Page number")
@click.option("--limit", "-n", type=int, help="Items per page")
@click.option("--template-id", "-t", help="Filter by template")
@click.option("--workspace-id", "-w", help="Filter by workspace")
@click.pass_context
def documents_list(
    ctx: click.Context,
    page: int | None,
    limit: int | None,
    template_id: str | None,
    workspace_id: str | None,
) -> None:
    """List generation jobs."""
    with handle_errors(), get_client(ctx) as client:
        response = client.documents.list(
            page=page,
            limit=limit,
            template_id=template_id,
            workspace_id=workspace_id,
        )

    if not response.data:
        console.print("[yellow]No jobs[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Job")
    table.add_column("Status", width=11)
    table.add_column("Format", width=6)
    table.add_column("Template")

    for job in response:
        table.add_row(job.job_id, job.status, job.format or "", job.template_id or "")

    console.print(table)


@documents.command("delete")
@click.argument("job_id")
@click.pass_context
def documents_delete(ctx: click.Context, job_id: str) -> None:
    """Delete a generated document."""
    with handle_errors(), get_client(ctx) as client:
        client.documents.delete(job_id)
    console.print(f"Deleted [cyan]{job_id}[/cyan]")


@documents.command("download")
@click.argument("job_id")
@click.option("--output", "-o", type=click.Path(dir_okay=False), required=True, help="Output file")
@click.pass_context
def documents_download(ctx: click.Context, job_id: str, output: str) -> None:
    """Download the document produced by a job."""
    with handle_errors(), get_client(ctx) as client:
        result = client.documents.get(job_id)
        if not result.download_url:
            err_console.print(f"[red]Error:[/red] Job {job_id} is {result.status}, no download yet")
            raise SystemExit(1)
        path = client.documents.download_to(result.download_url, output)
    console.print(f"Saved [cyan]{path}[/cyan] ({path.stat().st_size:,} bytes)")


# =============================================================================
# Webhooks
# =============================================================================


@main.group()
def webhooks() -> None:
    """Webhook subscription commands."""
    pass


@webhooks.command("list")
@click.option("--page", "-p", type=int, help="Page number")
@click.option("--limit", "-n", type=int, help="Items per page")
@click.pass_context
def webhooks_list(ctx: click.Context, page: int | None, limit: int | None) -> None:
    """List webhooks."""
    with handle_errors(), get_client(ctx) as client:
        response = client.webhooks.list(page=page, limit=limit)

    if not response.data:
        console.print("[yellow]No webhooks[/yellow]")
        return

    for hook in response:
        icon = "[green]●[/green]" if hook.active else "[red]●[/red]"
        console.print(f"{icon} {hook.id} {hook.url} [dim]{', '.join(hook.events)}[/dim]")


@webhooks.command("create")
@click.argument("url")
@click.option("--event", "-e", "events", multiple=True, required=True, help="Event to subscribe to")
@click.option("--description", "-d", help="Description")
@click.pass_context
def webhooks_create(
    ctx: click.Context,
    url: str,
    events: tuple[str, ...],
    description: str | None,
) -> None:
    """Create a webhook subscription."""
    with handle_errors(), get_client(ctx) as client:
        hook = client.webhooks.create(url=url, events=list(events), description=description)
    console.print(f"Created [cyan]{hook.id}[/cyan]")
    if hook.secret:
        console.print(f"[dim]Signing secret:[/dim] {hook.secret}")


@webhooks.command("delete")
@click.argument("webhook_id")
@click.pass_context
def webhooks_delete(ctx: click.Context, webhook_id: str) -> None:
    """Delete a webhook subscription."""
    with handle_errors(), get_client(ctx) as client:
        client.webhooks.delete(webhook_id)
    console.print(f"Deleted [cyan]{webhook_id}[/cyan]")


# =============================================================================
# Entry Point
# =============================================================================


if __name__ == "__main__":
    main()
