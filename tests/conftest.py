import random
from pathlib import Path

import pytest

from zoointake.naming.assigner import NameAssigner
from zoointake.system.path_resolver import PathResolver

NAMES_TEXT = """\
Hyena Names:
Shenzi, Banzai, Ed, Zig, Bud

Lion Names:
Scar, Mufasa, Simba, Kiara, King

Bear Names:
Yogi, Smokey, Paddington, Lippy, Bungle
"""

ARRIVALS_TEXT = """\
4 Hyena, born in spring, tan color, 70, from Friguia Park, Tunisia
12 Lion, born in spring, gold color, 205, from Zanzibar, Tanzania
7 Bear, born in fall, brown color, 320, from Yellowstone, USA
"""


@pytest.fixture
def path_resolver(tmp_path: Path) -> PathResolver:
    """Provide a PathResolver rooted in a temporary directory."""
    return PathResolver(base_dir=tmp_path)


@pytest.fixture
def names_file(path_resolver: PathResolver) -> Path:
    """Write the sample names catalog and return its path."""
    path = path_resolver.get_names_path()
    path.write_text(NAMES_TEXT)
    return path


@pytest.fixture
def arrivals_file(path_resolver: PathResolver) -> Path:
    """Write the sample arrivals and return their path."""
    path = path_resolver.get_arrivals_path()
    path.write_text(ARRIVALS_TEXT)
    return path


@pytest.fixture
def rng() -> random.Random:
    """Provide a deterministically seeded random source."""
    return random.Random(1234)


@pytest.fixture
def name_assigner(rng: random.Random) -> NameAssigner:
    """Provide a NameAssigner using the seeded random source."""
    return NameAssigner(rng=rng)
