"""Arrivals file parsing.

Each non-blank line of the arrivals file describes one animal with six
comma-separated fields:

    4 Hyena, born in spring, brown color, 70, from Friguia Park, Tunisia

Field 0 holds the age followed by the species, fields 1 and 2 the birth season
and color, field 3 the weight and fields 4 and 5 the two parts of the origin.
"""

import logging
import re
from pathlib import Path

from zoointake.animals.models import Animal
from zoointake.utils.text import (
    FILE_ENCODING,
    FILE_ERRORS,
    printable,
    split_fields,
    split_leading_token,
    trim,
)

logger = logging.getLogger(__name__)

ARRIVAL_FIELD_COUNT = 6

AGE_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
WEIGHT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class ArrivalParseError(ValueError):
    """A record has the right shape but an age, weight or species that cannot be used."""

    def __init__(self, path: Path, line_number: int, line: str, reason: str) -> None:
        self.path = path
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"{path}:{line_number}: {reason}: {printable(line)}")


class ArrivalLoader:
    """Loads arriving animal records from an arrivals file."""

    def __init__(self, arrivals_path: Path) -> None:
        self.arrivals_path = arrivals_path

    def load(self) -> list[Animal]:
        """Parse every record of the arrivals file, in file order.

        A file that cannot be opened is logged and treated as empty. Lines with
        fewer than six fields are logged and skipped.

        Returns:
            The parsed animals; none of them has a name yet

        Raises:
            ArrivalParseError: If a record's age or weight is not numeric, the age
                is negative or the species is missing
        """
        animals: list[Animal] = []
        try:
            with open(self.arrivals_path, encoding=FILE_ENCODING, errors=FILE_ERRORS) as f:
                for line_number, raw_line in enumerate(f, start=1):
                    line = trim(raw_line.rstrip("\n"))
                    if not line:
                        continue

                    fields = split_fields(line)
                    if len(fields) < ARRIVAL_FIELD_COUNT:
                        logger.error("Invalid record: %s", printable(line))
                        continue

                    animals.append(self._parse_record(fields, line_number, line))
        except OSError:
            logger.error("Error opening file: %s", self.arrivals_path)
            return []

        return animals

    def _parse_record(self, fields: list[str], line_number: int, line: str) -> Animal:
        """Build an Animal from the fields of one record line."""
        age_token, species = split_leading_token(fields[0])

        if not AGE_PATTERN.fullmatch(age_token):
            raise ArrivalParseError(
                self.arrivals_path, line_number, line, f"invalid age {printable(age_token)!r}"
            )
        age = int(age_token)
        if age < 0:
            raise ArrivalParseError(self.arrivals_path, line_number, line, f"negative age {age}")
        if not species:
            raise ArrivalParseError(self.arrivals_path, line_number, line, "missing species")

        if not WEIGHT_PATTERN.fullmatch(fields[3]):
            raise ArrivalParseError(
                self.arrivals_path, line_number, line, f"invalid weight {printable(fields[3])!r}"
            )
        weight = float(fields[3])

        return Animal(
            age=age,
            species=species,
            birth_season=fields[1],
            color=fields[2],
            weight=weight,
            origin=f"{fields[4]} {fields[5]}",
        )
