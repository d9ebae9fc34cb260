"""Reporter summarizing how many packages carry each license."""

from collections import Counter

from rich.text import Text

from check_licenses.models import MISSING, PackageRecord
from check_licenses.reporters.base import BaseReporter, truncate


def count_licenses(packages: list[PackageRecord]) -> list[tuple[str, int]]:
    """Count the packages carrying each license.

    A package with several licenses counts once towards each of them.

    Args:
        packages: Resolved package records.

    Returns:
        (license, count) pairs sorted by descending count. Ties keep the
        order in which the licenses were first seen.
    """
    counts = Counter(name for package in packages for name in package.all_licenses)
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)


class SummaryReporter(BaseReporter):
    """Reporter printing one line per license with its package count::

        MIT ————————————————— 1328
        ISC ————————————————— 113
    """

    def lines(self, packages: list[PackageRecord]) -> list[Text]:
        style = self.style

        lines: list[Text] = []
        for name, count in count_licenses(packages):
            title = Text(truncate(name, style.summary_title_limit, style.ellipsis))
            if title.plain == MISSING:
                title.stylize(style.summary_missing_style)
            lines.append(self._row(title, style.summary_width, Text(str(count))))
        return lines

    @property
    def format_name(self) -> str:
        return "summary"
