"""Reporter listing every package with its licenses."""

from rich.text import Text

from check_licenses.models import MISSING, PackageRecord
from check_licenses.reporters.base import BaseReporter, truncate


class ListReporter(BaseReporter):
    """Reporter printing one line per package.

    Each line holds the package id, padded to a fixed column, followed by
    its licenses joined with " + "::

        through@2.3.8 ————————————————— Apache-2.0 + MIT
    """

    def lines(self, packages: list[PackageRecord]) -> list[Text]:
        style = self.style
        separator = Text.assemble((" + ", style.separator_style))

        lines: list[Text] = []
        for package in packages:
            title = truncate(package.id, style.list_title_limit, style.ellipsis)
            licenses = package.all_licenses
            if licenses == [MISSING]:
                value = Text(MISSING, style=style.missing_style)
            else:
                value = separator.join(Text(name) for name in licenses)
            lines.append(self._row(Text(title), style.list_width, value))
        return lines

    @property
    def format_name(self) -> str:
        return "list"
