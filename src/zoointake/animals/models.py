"""Arriving animal record model."""

from dataclasses import dataclass

REPORT_FIELD_SEPARATOR = ", "


def format_weight(weight: float) -> str:
    """Render a weight the way C streams print a double by default.

    Uses six significant digits and drops trailing zeros, so report lines
    written by earlier versions of the intake stay byte-identical.

    Example:
        >>> format_weight(45.5)
        '45.5'
        >>> format_weight(100.0)
        '100'
    """
    return f"{weight:g}"


@dataclass
class Animal:
    """An arriving animal as read from the arrivals file.

    ``name`` stays ``None`` until a name has been assigned.
    """

    age: int  # Whole years, e.g. 4
    species: str  # As written in the arrivals file, e.g. "Hyena"
    birth_season: str  # e.g. "born in spring"
    color: str  # e.g. "brown color"
    weight: float  # e.g. 45.5
    origin: str  # Both origin fields joined by a space, e.g. "from Friguia Park, Tunisia"
    name: str | None = None

    def to_report_line(self) -> str:
        """Format the record as one report line, without the line terminator.

        Raises:
            ValueError: If no name has been assigned yet
        """
        if self.name is None:
            raise ValueError(f"Cannot report {self.species} aged {self.age}: no name assigned")

        return REPORT_FIELD_SEPARATOR.join(
            [
                self.name,
                self.species,
                str(self.age),
                self.birth_season,
                self.color,
                format_weight(self.weight),
                self.origin,
            ]
        )
