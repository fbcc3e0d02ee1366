"""CLI commands for folio.

Commands:
- validate: Check a profile or project YAML file
- slug: Show the base slug a project name maps to
- template: Print a starter YAML template

The Web API is served separately: uvicorn folio.web.api:app
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from folio.core.errors import InvalidDocumentError, YamlSyntaxError
from folio.core.pipeline import process
from folio.core.schema import DocumentKind
from folio.core.slug import base_slug
from folio.core.templates import render_template

app = typer.Typer(
    name="folio",
    help="Personal pages and project showcases from YAML.",
    no_args_is_help=True,
)

console = Console()


@app.command()
def validate(
    file: str = typer.Argument(..., help="Path to a YAML document"),
    kind: DocumentKind = typer.Option(
        DocumentKind.PROFILE, "--kind", "-k", help="Document kind: profile or project"
    ),
) -> None:
    """Validate a YAML document and list every issue found."""
    file_path = Path(file).expanduser()
    if not file_path.is_file():
        console.print(f"[red]✗ File not found: {file_path}[/red]")
        raise typer.Exit(code=1)

    try:
        document = process(file_path.read_text(encoding="utf-8"), kind)
    except YamlSyntaxError as e:
        console.print(f"[red]✗ {escape(e.message)}[/red]")
        raise typer.Exit(code=1)
    except InvalidDocumentError as e:
        console.print(f"[red]✗ {escape(e.message)}[/red]")
        table = Table("Field", "Issue")
        for issue in e.issues:
            table.add_row(escape(issue.field or "(root)"), escape(issue.issue))
        console.print(table)
        raise typer.Exit(code=1)

    console.print(f"[green]✓ Valid {kind.value} document[/green]")
    console.print(f"  [dim]name:[/dim] {document.name}")


@app.command()
def slug(
    name: str = typer.Argument(..., help="Project display name"),
) -> None:
    """Show the base slug derived from a project name."""
    result = base_slug(name)
    if not result:
        console.print("[yellow]⚠ Name yields an empty slug[/yellow]")
        raise typer.Exit(code=1)
    console.print(result)


@app.command()
def template(
    kind: DocumentKind = typer.Argument(..., help="Document kind: profile or project"),
    output: str | None = typer.Option(None, "--output", "-o", help="Write to file instead of stdout"),
) -> None:
    """Print the starter YAML for a document kind."""
    text = render_template(kind)
    if output is None:
        typer.echo(text, nl=False)
        return

    out_path = Path(output).expanduser()
    out_path.write_text(text, encoding="utf-8")
    console.print(f"[green]✓ Template written to {out_path}[/green]")


if __name__ == "__main__":
    app()
