from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from script_helpers.timing import timed

from .config.settings import settings
from .errors import PathNotFoundError
from .locator import find_orchestration, locate

app = typer.Typer(add_completion=False, help="Find function and workflow declarations in PowerShell scripts")

logger = logging.getLogger(__name__)


@app.callback()
def main(
	verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
) -> None:
	logging.basicConfig(
		level=logging.DEBUG if verbose else settings.LOG_LEVEL,
		format=settings.LOG_FORMAT,
	)


@app.command("locate")
def locate_command(
	root: Path = typer.Argument(..., help="Directory (or single script) to scan"),
	as_json: bool = typer.Option(False, "--json", help="Print the command map as JSON"),
) -> None:
	try:
		with timed(logger, f"scan of {root}"):
			commands = locate(root)
	except PathNotFoundError as exc:
		typer.echo(f"Error: {exc}", err=True)
		raise typer.Exit(code=2)

	if as_json:
		typer.echo(json.dumps(commands.to_dict(), indent=2, sort_keys=True))
		return
	for name in sorted(commands):
		record = commands[name]
		typer.echo(f"{name}\t{record.kind.value}\t{record.source_path}")


@app.command("has-workflow")
def has_workflow_command(
	script: Path = typer.Argument(..., help="Script file to check"),
) -> None:
	try:
		record = find_orchestration(script)
	except PathNotFoundError as exc:
		typer.echo(f"Error: {exc}", err=True)
		raise typer.Exit(code=2)
	except (OSError, UnicodeDecodeError) as exc:
		typer.echo(f"Error: cannot read {script}: {exc}", err=True)
		raise typer.Exit(code=2)

	if record is None:
		typer.echo("false")
		raise typer.Exit(code=1)
	logger.debug(f"Workflow '{record.name}' declared at line {record.line}")
	typer.echo("true")


if __name__ == "__main__":  # pragma: no cover
	app()
