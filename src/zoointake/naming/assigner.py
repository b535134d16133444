"""Random name assignment for arriving animals."""

import logging
import random
import time
from collections.abc import Iterable, Mapping, Sequence

from zoointake.animals.models import Animal
from zoointake.utils.text import ascii_lower

logger = logging.getLogger(__name__)

FALLBACK_NAME = "Unnamed"


class NameAssigner:
    """Picks names for animals from a species name catalog.

    The random source is owned by the assigner so tests can pass a seeded
    ``random.Random``. Without one, a generator seeded from the current time in
    whole seconds is created.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random(int(time.time()))

    @staticmethod
    def find_candidates(
        species: str, catalog: Mapping[str, Sequence[str]]
    ) -> Sequence[str] | None:
        """Look up the candidate names for a species.

        An exact key match wins. Otherwise keys are compared with ASCII letters
        folded to lowercase, in sorted key order, and the first match is used.

        Returns:
            The candidate names, or None if no key matches
        """
        if species in catalog:
            return catalog[species]

        species_lower = ascii_lower(species)
        for key in sorted(catalog):
            if ascii_lower(key) == species_lower:
                return catalog[key]
        return None

    def assign_name(self, species: str, catalog: Mapping[str, Sequence[str]]) -> str:
        """Return a random candidate name for the species, or ``"Unnamed"``."""
        candidates = self.find_candidates(species, catalog)
        if not candidates:
            logger.debug("No candidate names for species %r", species)
            return FALLBACK_NAME
        return self.rng.choice(candidates)

    def assign_names(
        self, animals: Iterable[Animal], catalog: Mapping[str, Sequence[str]]
    ) -> None:
        """Assign a name to every animal, in order."""
        for animal in animals:
            animal.name = self.assign_name(animal.species, catalog)
