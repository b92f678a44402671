import pytest

from fizzgrid.chars import to_upper
from fizzgrid.transform import (
    int_to_str,
    iterate_indexed,
    join,
    map_indexed,
    parse_int,
    split,
    substring,
    trim,
)


def test_int_to_str_minimum_int():
    assert int_to_str(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_int_round_trip(n):
    assert parse_int(int_to_str(n)) == n


def test_int_to_str_rejects_non_int():
    with pytest.raises(TypeError):
        int_to_str("12")


def test_parse_int_skips_whitespace():
    assert parse_int("\t\n\v\f\r 123") == parse_int("123")


def test_parse_int_signs():
    assert parse_int("+7") == parse_int("7")
    assert parse_int("-7") == -parse_int("7")


def test_parse_int_plus_minus_is_not_a_number():
    assert parse_int("+-5") == 0


def test_parse_int_stops_at_non_digit():
    assert parse_int("12abc") == parse_int("12")
    assert parse_int("abc") == parse_int("")


def test_split_source_example():
    assert split("hello world!", " ") == ["hello", "world!"]


def test_split_drops_empty_pieces():
    assert split("  a  b ", " ") == ["a", "b"]
    assert split("    ", " ") == []


def test_split_pieces_contain_no_separator():
    words = split(",x,,yy,zzz,", ",")
    assert all("," not in w and w for w in words)
    assert ",".join(words) == "x,yy,zzz"


def test_split_requires_single_character():
    with pytest.raises(ValueError):
        split("a b", "ab")
    with pytest.raises(TypeError):
        split(None, " ")


def test_join():
    assert join("Bur", "ger") == "Burger"
    assert join("", "ger") == "ger"


def test_trim():
    assert trim("xxhixx", "x") == "hi"
    assert trim("xxxx", "x") == ""
    assert trim(" keep ", "") == " keep "
    assert trim("abcmiddlecba", "abc") == "middle"


def test_substring_source_example():
    assert substring("Bonjour le monde !", 11, 5) == "monde"


def test_substring_limits():
    assert substring("abc", 5, 2) == ""
    assert substring("abc", 1, 100) == "bc"
    with pytest.raises(ValueError):
        substring("abc", -1, 2)


def test_map_indexed():
    calls = []

    def upper(i, c):
        calls.append((i, c))
        return to_upper(c)

    assert map_indexed("abc", upper) == "ABC"
    assert calls == list(enumerate("abc"))


def test_iterate_indexed_replacements():
    result = iterate_indexed("abcd", lambda i, c: to_upper(c) if i % 2 else None)
    assert result == "aBcD"


def test_iterate_indexed_keeps_when_none():
    seen = []
    assert iterate_indexed("xyz", lambda i, c: seen.append(i)) == "xyz"
    assert seen == [0, 1, 2]