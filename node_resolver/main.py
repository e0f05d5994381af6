"""node-resolve command line interface."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import click
from rich.markup import escape
from rich.table import Table

from .console import console
from .console import error_console
from .errors import ResolverError
from .logging_setup import init_logging
from .resolver import Resolver
from .resolver import find_node_module
from .settings import ResolverSettings
from .ui.error_display import display_resolver_error
from .ui.error_display import format_error_message


@dataclass
class CliState:
    """Options shared by all subcommands."""

    config: Path | None
    overrides: dict[str, Any]
    verbose: bool

    def settings(self) -> ResolverSettings:
        return ResolverSettings.load(self.config)

    def resolver(self) -> Resolver:
        return self.settings().create_resolver(**self.overrides)


def _fail(ctx: click.Context, error: Exception) -> None:
    state: CliState = ctx.obj
    if not display_resolver_error(error_console, error, verbose=state.verbose):
        error_console.print(f"[red]Error:[/red] {escape(format_error_message(error))}", highlight=False)
    ctx.exit(1)


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2))


@click.group()
@click.version_option(package_name="node-resolver")
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (default: .node-resolver/settings.yaml, then ~/.node-resolver/settings.yaml)",
)
@click.option("--extension", "-e", "extensions", multiple=True, help="Extension to try, in order (repeatable)")
@click.option("--platform", "-p", "platforms", multiple=True, help="Platform suffix to try first (repeatable)")
@click.option(
    "--module-directory",
    "-m",
    "module_directories",
    multiple=True,
    help="Module directory name or absolute search root (repeatable)",
)
@click.option("--convention", type=click.Choice(["posix", "win32"]), default=None, help="Path convention")
@click.option("--browser/--no-browser", default=None, help="Prefer the package.json browser field")
@click.option("--verbose", "-v", is_flag=True, help="Log every resolution step")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), default=None, help="JSONL log sink")
@click.pass_context
def cli(ctx, config, extensions, platforms, module_directories, convention, browser, verbose, log_file):
    """Resolve module specifiers the way a Node-style runtime would."""
    init_logging("DEBUG" if verbose else None, log_file, console=error_console)

    overrides: dict[str, Any] = {
        "extensions": list(extensions) or None,
        "platforms": list(platforms) or None,
        "module_directories": list(module_directories) or None,
        "path_convention": convention,
        "browser": browser,
    }
    ctx.obj = CliState(config=config, overrides=overrides, verbose=verbose)


@cli.command("resolve")
@click.argument("from_file")
@click.argument("specifier")
@click.option("--json", "as_json", is_flag=True, help="Machine-readable output")
@click.pass_context
def resolve_cmd(ctx, from_file: str, specifier: str, as_json: bool):
    """Resolve SPECIFIER as required from FROM_FILE."""
    try:
        resolved = ctx.obj.resolver().resolve_module(from_file, specifier)
    except Exception as e:
        _fail(ctx, e)
        return

    if as_json:
        _echo_json({"specifier": specifier, "from": from_file, "resolved": resolved})
    else:
        click.echo(resolved)


@cli.command("paths")
@click.argument("directory")
@click.option("--json", "as_json", is_flag=True, help="Machine-readable output")
@click.pass_context
def paths_cmd(ctx, directory: str, as_json: bool):
    """List the directories searched for bare names from DIRECTORY."""
    try:
        paths = ctx.obj.resolver().get_module_paths(directory)
    except ResolverError as e:
        _fail(ctx, e)
        return

    if as_json:
        _echo_json(paths)
        return

    table = Table(title=f"Module search paths from {escape(directory)}", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Directory", style="green")
    for index, path in enumerate(paths, start=1):
        table.add_row(str(index), escape(path))
    console.print(table)


@cli.command("is-core")
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Machine-readable output")
@click.pass_context
def is_core_cmd(ctx, name: str, as_json: bool):
    """Report whether NAME is a builtin module."""
    try:
        is_core = ctx.obj.resolver().is_core_module(name)
    except ResolverError as e:
        _fail(ctx, e)
        return

    if as_json:
        _echo_json({"name": name, "core": is_core})
    else:
        click.echo("yes" if is_core else "no")


@cli.command("mock")
@click.argument("from_file")
@click.argument("name")
@click.pass_context
def mock_cmd(ctx, from_file: str, name: str):
    """Show the mock registered for NAME, as seen from FROM_FILE."""
    try:
        mock = ctx.obj.resolver().get_mock_module(from_file, name)
    except Exception as e:
        _fail(ctx, e)
        return

    if mock is None:
        console.print(f"[dim]No mock for '{escape(name)}'[/dim]")
        ctx.exit(1)
    click.echo(mock)


@cli.command("find")
@click.argument("specifier")
@click.option("--basedir", "-b", default=".", show_default=True, help="Directory to resolve from")
@click.option("--path", "paths", multiple=True, help="Extra search root appended after NODE_PATH (repeatable)")
@click.pass_context
def find_cmd(ctx, specifier: str, basedir: str, paths: tuple[str, ...]):
    """Resolve SPECIFIER from BASEDIR without a module map."""
    state: CliState = ctx.obj
    try:
        options = state.settings().resolver_options(**state.overrides)
        found = find_node_module(
            specifier,
            {
                "basedir": basedir,
                "browser": options.browser,
                "extensions": options.extensions,
                "platforms": options.platforms,
                "moduleDirectory": options.module_directories,
                "paths": list(options.module_paths) + list(paths),
                "resolver": options.resolver,
                "rootDir": options.root_dir,
                "pathConvention": options.path_convention,
            },
        )
    except Exception as e:
        _fail(ctx, e)
        return

    if found is None:
        error_console.print(f"[red]Cannot find module '{escape(specifier)}' from '{escape(basedir)}'[/red]", highlight=False)
        ctx.exit(1)
    click.echo(found)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
