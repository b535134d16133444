"""Cumulative population report.

The report is an append-only text file with one line per named animal:

    Shenzi, Hyena, 4, born in spring, brown color, 70, from Friguia Park Tunisia
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from zoointake.animals.models import Animal
from zoointake.utils.text import FILE_ENCODING, FILE_ERRORS

logger = logging.getLogger(__name__)


class ReportWriter:
    """Appends named animals to the population report and reads it back."""

    def __init__(self, report_path: Path) -> None:
        self.report_path = report_path

    def append(self, animals: Iterable[Animal]) -> int:
        """Append one line per animal to the report, creating the file if needed.

        Every animal must already have a name. A report that cannot be opened
        for appending is logged and nothing is written. A write failure part way
        through is logged and the lines handed to the file before it are kept.

        Returns:
            Number of records handed to the report file
        """
        lines = [animal.to_report_line() for animal in animals]
        try:
            f = open(self.report_path, "a", encoding=FILE_ENCODING, errors=FILE_ERRORS)
        except OSError:
            logger.error("Error opening file for writing: %s", self.report_path)
            return 0

        written = 0
        try:
            with f:
                for line in lines:
                    f.write(f"{line}\n")
                    written += 1
        except OSError:
            logger.error(
                "Error writing file: %s after %d of %d records",
                self.report_path,
                written,
                len(lines),
            )

        return written

    def read_lines(self) -> list[str]:
        """Return every report line without its line terminator.

        Raises:
            OSError: If the report cannot be opened
        """
        with open(self.report_path, encoding=FILE_ENCODING, errors=FILE_ERRORS) as f:
            return [line.rstrip("\n") for line in f]
