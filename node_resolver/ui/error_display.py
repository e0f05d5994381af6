"""Clean error display for resolution failures."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..errors import InvalidMappingError
from ..errors import ModuleNotFoundError
from ..errors import PluginLoadError
from ..errors import ResolverError
from ..errors import SettingsError


def format_error_message(e: BaseException, *, include_type: bool = True) -> str:
    """Format an exception into a non-empty display message.

    Examples:
        >>> format_error_message(ValueError("invalid input"))
        'ValueError: invalid input'

        >>> format_error_message(KeyError())
        'KeyError: (no additional details)'
    """
    error_str = str(e)
    error_type = type(e).__name__

    if error_str:
        if include_type and error_type not in error_str:
            return f"{error_type}: {error_str}"
        return error_str

    return f"{error_type}: (no additional details)"


def _details(error: ResolverError) -> list[tuple[str, str]]:
    if isinstance(error, ModuleNotFoundError):
        rows = [("Specifier", error.specifier), ("From", error.from_file)]
        if error.mapped_name is not None:
            rows.append(("Mapped as", error.mapped_name))
        return rows
    if isinstance(error, InvalidMappingError):
        return [("Pattern", error.pattern), ("Template", error.template), ("Problem", error.reason)]
    if isinstance(error, PluginLoadError):
        return [("Plugin", error.reference), ("Problem", error.reason)]
    if isinstance(error, SettingsError):
        return [("File", error.path), ("Problem", error.reason)]
    return []


def _tip(error: ResolverError) -> str:
    if isinstance(error, ModuleNotFoundError):
        if error.mapped_name is not None:
            return "Check the moduleNameMapper rule that produced the mapped name"
        return "Check extensions, moduleDirectories, and that the package is installed"
    if isinstance(error, InvalidMappingError):
        return "Fix the moduleNameMapper entry in your settings"
    if isinstance(error, PluginLoadError):
        return "Make sure the plugin module is importable from the current environment"
    return "Run with --verbose for details"


_TITLES = {
    ModuleNotFoundError: "Module Not Found",
    InvalidMappingError: "Invalid Module Name Mapping",
    PluginLoadError: "Resolver Plugin Not Loaded",
    SettingsError: "Invalid Settings",
}


def display_resolver_error(console: Console, error: Exception, verbose: bool = False) -> bool:
    """Display a ResolverError as a Rich panel.

    Args:
        console: Rich console for output
        error: The error to display
        verbose: If True, also print traceback

    Returns:
        True if the error was rendered, False if it is not a ResolverError
        (caller should handle)
    """
    if not isinstance(error, ResolverError):
        return False

    content = Text(format_error_message(error, include_type=False), style="red")

    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Field", style="dim")
    table.add_column("Value", style="bold cyan")
    for label, value in _details(error):
        table.add_row(label, Text(value))

    title = _TITLES.get(type(error), "Resolution Failed")
    console.print()
    console.print(Panel(content, title=f"[bold red]{title}[/bold red]", border_style="red", padding=(1, 2)))
    if table.row_count:
        console.print(table)
    console.print()
    console.print(f"[dim]Tip: {escape(_tip(error))}[/dim]")

    if verbose:
        console.print("[dim]─── Traceback ───[/dim]")
        console.print_exception()

    return True
