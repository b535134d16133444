"""Names file parsing.

The names file groups candidate names under a header per species:

    Hyena Names:
    Shenzi, Banzai, Ed, Zig, Bud

A header is any line ending in ``Names:`` or ``names:``; the text before it is
the species. Every other line lists comma-separated names for the species of
the most recent header.
"""

import logging
from pathlib import Path

from zoointake.utils.text import FILE_ENCODING, FILE_ERRORS, split_fields, trim

logger = logging.getLogger(__name__)

HEADER_SUFFIXES = ("Names:", "names:")
HEADER_SUFFIX_LENGTH = 6

NameCatalog = dict[str, list[str]]


def parse_header(line: str) -> str | None:
    """Return the species of a header line, or None if the line is not a header."""
    if len(line) >= HEADER_SUFFIX_LENGTH and line[-HEADER_SUFFIX_LENGTH:] in HEADER_SUFFIXES:
        return trim(line[:-HEADER_SUFFIX_LENGTH])
    return None


class NameCatalogLoader:
    """Loads the species to candidate names catalog from a names file."""

    def __init__(self, names_path: Path) -> None:
        self.names_path = names_path

    def load(self) -> NameCatalog:
        """Read the names file into a catalog.

        Names keep their file order within a species. A species whose header
        appears twice keeps only the names following its last header. Names
        listed before the first header are ignored.

        Returns:
            Mapping of species to candidate names, empty if the file cannot be opened
        """
        catalog: NameCatalog = {}
        current_species = ""
        try:
            with open(self.names_path, encoding=FILE_ENCODING, errors=FILE_ERRORS) as f:
                for raw_line in f:
                    line = trim(raw_line.rstrip("\n"))
                    if not line:
                        continue

                    species = parse_header(line)
                    if species is not None:
                        current_species = species
                        catalog[current_species] = []
                        continue

                    if not current_species:
                        continue
                    catalog[current_species].extend(name for name in split_fields(line) if name)
        except OSError:
            logger.error("Error opening file: %s", self.names_path)
            return {}

        logger.debug("Loaded names for %d species from %s", len(catalog), self.names_path)
        return catalog
