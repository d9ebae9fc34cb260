"""Command-line interface for check_licenses.

Scans the production dependencies of the npm project in the current
directory and prints a summary of their licenses, or the license of every
package with ``--list``.
"""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.text import Text

from check_licenses.models import PackageRecord
from check_licenses.reporters import (
    ListReporter,
    ReportStyle,
    SummaryReporter,
    missing_warning,
)
from check_licenses.resolvers import PackageResolver
from check_licenses.scanners import get_scanner

HELP = """A simple tool to check all the licenses in your dependencies.

Examples:

    $ check-licenses

    $ check-licenses --list | grep GPL
"""

app = typer.Typer(
    name="check-licenses",
    help=HELP,
    add_completion=False,
)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("check_licenses")


async def _scan_and_resolve(root: Path) -> list[PackageRecord]:
    """Enumerate the dependencies of a project and resolve their licenses.

    Args:
        root: Project root directory.

    Returns:
        One PackageRecord per production dependency.

    Raises:
        ManifestError: If the project or its lock file cannot be read.
    """
    scanner = get_scanner(root)
    logger.debug("Using scanner: %s", scanner.source_name)

    specs = scanner.scan()
    if not specs:
        return []

    return await PackageResolver().resolve_batch(specs)


@app.command()
def main(
    list_packages: Annotated[
        bool,
        typer.Option(
            "--list",
            "-l",
            help="Show a list of all of the dependencies instead of the summary",
        ),
    ] = False,
) -> None:
    """Check the licenses of all production dependencies."""
    style = ReportStyle()

    try:
        packages = asyncio.run(_scan_and_resolve(Path.cwd()))
    except Exception as e:
        console.print(
            Text.assemble(("Error:", style.error_style), f" {str(e).strip()}"),
            soft_wrap=True,
        )
        raise typer.Exit(code=1)

    if not packages:
        console.print("No production dependencies! 🥳")
        return

    reporter = ListReporter(style) if list_packages else SummaryReporter(style)
    reporter.write(packages, console)

    warning = missing_warning(packages, style)
    if warning is not None:
        err_console.print(warning, soft_wrap=True)


if __name__ == "__main__":
    app()
