"""Tests for arrivals file parsing."""

import logging

import pytest

from zoointake.animals.arrivals import ArrivalLoader, ArrivalParseError
from zoointake.animals.models import Animal


@pytest.fixture
def write_arrivals(path_resolver):
    """Write arrivals text and return a loader for it."""

    def _write(text: str) -> ArrivalLoader:
        path = path_resolver.get_arrivals_path()
        path.write_text(text, encoding="utf-8")
        return ArrivalLoader(path)

    return _write


class TestArrivalLoader:
    """Test ArrivalLoader functionality."""

    def test_load_parses_record(self, write_arrivals):
        """Should split age and species and join the origin parts."""
        loader = write_arrivals("4 Hyena, born in spring, brown, 45.5, savanna, east\n")

        animals = loader.load()

        assert animals == [
            Animal(
                age=4,
                species="Hyena",
                birth_season="born in spring",
                color="brown",
                weight=45.5,
                origin="savanna east",
            )
        ]
        assert animals[0].name is None

    def test_load_keeps_file_order(self, arrivals_file):
        """Should return records in file order."""
        animals = ArrivalLoader(arrivals_file).load()

        assert [animal.species for animal in animals] == ["Hyena", "Lion", "Bear"]
        assert [animal.age for animal in animals] == [4, 12, 7]
        assert animals[1].origin == "from Zanzibar Tanzania"

    def test_load_is_repeatable(self, arrivals_file):
        """Should produce equal records when loading the same file twice."""
        loader = ArrivalLoader(arrivals_file)

        assert loader.load() == loader.load()

    def test_load_multi_word_species(self, write_arrivals):
        """Should keep the whole remainder of the first field as species."""
        loader = write_arrivals("10 Grizzly  Bear, born in fall, brown, 300, Alaska, USA")

        animals = loader.load()

        assert animals[0].species == "Grizzly  Bear"
        assert animals[0].age == 10

    def test_load_skips_blank_lines(self, write_arrivals):
        """Should ignore empty and blank-only lines."""
        loader = write_arrivals(
            "\n  \t\n4 Hyena, born in spring, brown, 45.5, savanna, east\n\n"
            "5 Lion, born in fall, gold, 190, plains, west\n"
        )

        assert len(loader.load()) == 2

    @pytest.mark.parametrize(
        "age_token,weight_token,age,weight",
        [
            pytest.param("+4", "45.5", 4, 45.5, id="signed_age"),
            pytest.param("4", "4.55e1", 4, 45.5, id="exponent_weight"),
            pytest.param("4", ".5", 4, 0.5, id="leading_point_weight"),
            pytest.param("4", "70.", 4, 70.0, id="trailing_point_weight"),
            pytest.param("04", "-1", 4, -1.0, id="zero_padded_age_negative_weight"),
        ],
    )
    def test_load_numeric_forms(self, write_arrivals, age_token, weight_token, age, weight):
        """Should accept plain ASCII decimal ages and weights."""
        loader = write_arrivals(
            f"{age_token} Hyena, born in spring, brown, {weight_token}, savanna, east\n"
        )

        animals = loader.load()

        assert animals[0].age == age
        assert animals[0].weight == weight

    def test_load_non_utf8_record(self, path_resolver):
        """Should keep bytes that are not valid UTF-8 in text fields."""
        path = path_resolver.get_arrivals_path()
        path.write_bytes(b"4 Hyena, born in spring, caf\xe9 brown, 45.5, savanna, east\n")

        animals = ArrivalLoader(path).load()

        assert len(animals) == 1
        assert animals[0].color.encode("utf-8", "surrogateescape") == b"caf\xe9 brown"

    def test_load_extra_fields_are_ignored(self, write_arrivals):
        """Should accept records with more than six fields."""
        loader = write_arrivals("4 Hyena, born in spring, brown, 45.5, savanna, east, extra\n")

        animals = loader.load()

        assert len(animals) == 1
        assert animals[0].origin == "savanna east"

    def test_load_drops_short_record(self, write_arrivals, caplog):
        """Should skip a record with fewer than six fields and log it once."""
        loader = write_arrivals(
            "4 Hyena, born in spring, brown, 45.5, savanna, east\n"
            "5 Lion, born in fall, gold, 190\n"
            "7 Bear, born in fall, brown, 320, forest, north\n"
        )

        with caplog.at_level(logging.ERROR):
            animals = loader.load()

        assert [animal.species for animal in animals] == ["Hyena", "Bear"]
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert errors[0].getMessage() == "Invalid record: 5 Lion, born in fall, gold, 190"

    def test_load_trailing_comma_does_not_add_field(self, write_arrivals, caplog):
        """Should treat a trailing comma as ending the record, not as a sixth field."""
        loader = write_arrivals("4 Hyena, born in spring, brown, 45.5, savanna,\n")

        with caplog.at_level(logging.ERROR):
            animals = loader.load()

        assert animals == []
        assert "Invalid record" in caplog.text

    def test_load_missing_file(self, path_resolver, caplog):
        """Should log and return no records when the file cannot be opened."""
        path = path_resolver.get_arrivals_path()

        with caplog.at_level(logging.ERROR):
            animals = ArrivalLoader(path).load()

        assert animals == []
        assert f"Error opening file: {path}" in caplog.text

    @pytest.mark.parametrize(
        "line,reason",
        [
            pytest.param(
                "four Hyena, born in spring, brown, 45.5, savanna, east",
                "invalid age 'four'",
                id="non_numeric_age",
            ),
            pytest.param(
                "4 Hyena, born in spring, brown, heavy, savanna, east",
                "invalid weight 'heavy'",
                id="non_numeric_weight",
            ),
            pytest.param(
                "-2 Hyena, born in spring, brown, 45.5, savanna, east",
                "negative age -2",
                id="negative_age",
            ),
            pytest.param(
                "4, born in spring, brown, 45.5, savanna, east",
                "missing species",
                id="missing_species",
            ),
            pytest.param(
                ", born in spring, brown, 45.5, savanna, east",
                "invalid age ''",
                id="empty_first_field",
            ),
            pytest.param(
                "1_0 Hyena, born in spring, brown, 45.5, savanna, east",
                "invalid age '1_0'",
                id="underscore_age",
            ),
            pytest.param(
                "\u0664 Hyena, born in spring, brown, 45.5, savanna, east",
                "invalid age '\u0664'",
                id="non_ascii_digit_age",
            ),
            pytest.param(
                "4 Hyena, born in spring, brown, 4_5.5, savanna, east",
                "invalid weight '4_5.5'",
                id="underscore_weight",
            ),
            pytest.param(
                "4 Hyena, born in spring, brown, inf, savanna, east",
                "invalid weight 'inf'",
                id="non_finite_weight",
            ),
        ],
    )
    def test_load_malformed_numeric_field(self, write_arrivals, line, reason):
        """Should raise ArrivalParseError naming the line."""
        loader = write_arrivals(f"4 Lion, born in fall, gold, 190, plains, west\n{line}\n")

        with pytest.raises(ArrivalParseError) as exc_info:
            loader.load()

        error = exc_info.value
        assert error.reason == reason
        assert error.line_number == 2
        assert error.line == line
        assert error.path == loader.arrivals_path
        assert isinstance(error, ValueError)
