import pytest

from leaderboard.errors import MalformedRecordError
from leaderboard.parsing import entry_from_mapping, parse_menu_choice, parse_record


def test_parse_record_name_and_power() -> None:
    assert parse_record("Faker 1400") == ("Faker", 1400)
    assert parse_record("  Zeus   1300\n") == ("Zeus", 1300)
    assert parse_record("Low -5") == ("Low", -5)


def test_parse_record_ignores_typed_rank() -> None:
    assert parse_record("Chovi Bronze 1350") == ("Chovi", 1350)


@pytest.mark.parametrize("line", ["", "Faker", "Faker lots", "a b c d", "Faker 12.5"])
def test_parse_record_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(MalformedRecordError) as exc_info:
        parse_record(line)
    assert exc_info.value.user_message == "Invalid input. Try again."


def test_parse_menu_choice() -> None:
    assert parse_menu_choice("3") == 3
    assert parse_menu_choice(" 0 \n") == 0
    assert parse_menu_choice("42") == 42
    assert parse_menu_choice("x") is None
    assert parse_menu_choice("") is None


def test_entry_from_mapping_accepts_aliases() -> None:
    a = entry_from_mapping({"name": "Ian", "score": 1300})
    b = entry_from_mapping({"username": "Keria", "power": "1050"})
    assert (a.name, a.score, a.rank) == ("Ian", 1300, "Grandmaster")
    assert (b.name, b.score, b.rank) == ("Keria", 1050, "Master")


@pytest.mark.parametrize(
    "record",
    [
        {"power": 10},
        {"name": "x"},
        {"name": "x", "power": "ten"},
        {"name": "x", "power": True},
        ["x", 10],
    ],
)
def test_entry_from_mapping_rejects_bad_records(record) -> None:
    with pytest.raises(MalformedRecordError):
        entry_from_mapping(record)
