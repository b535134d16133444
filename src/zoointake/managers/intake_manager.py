"""Intake run orchestration.

One run loads the names catalog and the arrivals, names every arrival,
appends the named arrivals to the population report and echoes the report.
"""

import sys
from dataclasses import dataclass, field
from typing import TextIO

from zoointake.animals.arrivals import ArrivalLoader
from zoointake.animals.models import Animal
from zoointake.naming.assigner import NameAssigner
from zoointake.naming.catalog import NameCatalog, NameCatalogLoader
from zoointake.reporting.report_writer import ReportWriter
from zoointake.system.path_resolver import PathResolver
from zoointake.system.structlog_configurator import get_logger
from zoointake.utils.text import printable

logger = get_logger(__name__)

SUCCESS_BANNER = "Zoo population updated successfully."
REPORT_HEADING = "Updated Zoo Population:"


@dataclass
class IntakeResult:
    """Outcome of one intake run."""

    catalog: NameCatalog = field(default_factory=dict)
    animals: list[Animal] = field(default_factory=list)
    written: int = 0


class IntakeManager:
    """Runs the intake pipeline against the files of a PathResolver."""

    def __init__(
        self,
        path_resolver: PathResolver,
        name_assigner: NameAssigner | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.path_resolver = path_resolver
        self.name_assigner = name_assigner or NameAssigner()
        self.output = output
        self.report_writer = ReportWriter(path_resolver.get_report_path())

    def run(self) -> IntakeResult:
        """Load, name and append the arriving animals.

        Raises:
            ArrivalParseError: If an arrival record has a malformed numeric field.
                Nothing is appended to the report in that case.
        """
        catalog = NameCatalogLoader(self.path_resolver.get_names_path()).load()
        animals = ArrivalLoader(self.path_resolver.get_arrivals_path()).load()

        self.name_assigner.assign_names(animals, catalog)
        written = self.report_writer.append(animals)

        logger.info(
            "Intake run complete",
            catalog_species=len(catalog),
            arrivals=len(animals),
            written=written,
        )
        return IntakeResult(catalog=catalog, animals=animals, written=written)

    def display_report(self) -> None:
        """Print the success banner followed by every line of the report.

        Bytes in the report that are not valid UTF-8 are shown as replacement
        characters; the report file itself is left untouched.

        Raises:
            OSError: If the report cannot be reopened for reading
        """
        out = self.output or sys.stdout
        print(SUCCESS_BANNER, file=out)

        lines = self.report_writer.read_lines()
        print(f"\n{REPORT_HEADING}", file=out)
        for line in lines:
            print(printable(line), file=out)
