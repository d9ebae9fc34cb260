"""Base interface and styling for terminal reporters.

Reporters turn resolved package records into fixed-width text lines. Lines
are built as ``rich`` Text objects so that the same report can be printed
with colors or rendered as plain text.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.text import Text

from check_licenses.models import PackageRecord


@dataclass(frozen=True)
class ReportStyle:
    """Formatting configuration shared by the reporters.

    Attributes:
        filler: Character padding a title up to the column width.
        ellipsis: Appended to titles that had to be truncated.
        list_width: Column width of package ids in list reports.
        list_title_limit: Longest package id shown untruncated.
        summary_width: Column width of license ids in summary reports.
        summary_title_limit: Longest license id shown untruncated.
        filler_style: Rich style of the padding.
        separator_style: Rich style of the " + " between licenses.
        missing_style: Rich style of the "missing" token in list reports.
        summary_missing_style: Rich style of the "missing" row title.
        warning_style: Rich style of the "Warning" label.
        error_style: Rich style of the "Error:" label.
    """

    filler: str = "—"
    ellipsis: str = "…"
    list_width: int = 40
    list_title_limit: int = 38
    summary_width: int = 20
    summary_title_limit: int = 18
    filler_style: str = "bright_black"
    separator_style: str = "bold magenta"
    missing_style: str = "bright_black"
    summary_missing_style: str = "dim"
    warning_style: str = "yellow"
    error_style: str = "bold red"


def truncate(title: str, limit: int, ellipsis: str = "…") -> str:
    """Shorten ``title`` to ``limit`` characters plus an ellipsis if longer."""
    if len(title) > limit:
        return title[:limit] + ellipsis
    return title


def missing_warning(
    packages: list[PackageRecord], style: Optional[ReportStyle] = None
) -> Optional[Text]:
    """Build the warning about packages without a manifest.

    Args:
        packages: Resolved package records.
        style: Optional formatting configuration.

    Returns:
        The warning line, preceded by a blank line, or None if no package
        is missing.
    """
    style = style or ReportStyle()
    count = sum(1 for package in packages if package.missing)
    if not count:
        return None
    return Text.assemble(
        "\n",
        ("Warning", style.warning_style),
        ": missing package.json from ",
        (f"{count} optional", "bold italic"),
        " packages",
    )


class BaseReporter(ABC):
    """Abstract base class for terminal reporters.

    Attributes:
        style: Formatting configuration used to build the lines.
    """

    def __init__(self, style: Optional[ReportStyle] = None) -> None:
        """Initialize the reporter.

        Args:
            style: Optional formatting configuration. Defaults to ReportStyle().
        """
        self.style = style or ReportStyle()

    @abstractmethod
    def lines(self, packages: list[PackageRecord]) -> list[Text]:
        """Build the styled report lines.

        Args:
            packages: Resolved package records.

        Returns:
            One Text per output line.
        """
        ...

    def render(self, packages: list[PackageRecord]) -> str:
        """Render the report as plain text without any styling.

        Args:
            packages: Resolved package records.

        Returns:
            The report lines joined by newlines.
        """
        return "\n".join(line.plain for line in self.lines(packages))

    def write(self, packages: list[PackageRecord], console: Console) -> None:
        """Print the styled report, one unwrapped line per record.

        Args:
            packages: Resolved package records.
            console: Console to print to.
        """
        for line in self.lines(packages):
            console.print(line, soft_wrap=True)

    def _row(self, title: Text, width: int, value: Text) -> Text:
        filler = self.style.filler * (width - len(title))
        return Text.assemble(title, " ", (filler, self.style.filler_style), " ", value)

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the report format name.

        Returns:
            Format name like "list" or "summary".
        """
        ...
