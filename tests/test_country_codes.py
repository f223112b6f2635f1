import pytest

from postcart.country_codes import ISO2_CODES, ISO3_CODES, lookup_code


@pytest.mark.parametrize(
    ("code", "expected"),
    [("us", "US"), ("usa", "US"), ("gbr", "GB"), ("de", "DE"), ("deu", "DE")],
)
def test_lookup_known_codes(code, expected):
    assert lookup_code(code) == expected


def test_lookup_keeps_table_values():
    assert lookup_code("srb") == "SR"
    assert lookup_code("syc") == "SY"


def test_lookup_unknown_returns_none():
    assert lookup_code("zzz") is None
    assert lookup_code("") is None


def test_lookup_is_case_sensitive():
    assert lookup_code("USA") is None


def test_iso2_keys_are_lowercase_values():
    for key, value in ISO2_CODES.items():
        assert key.upper() == value


def test_iso3_values_are_known_iso2_codes():
    iso2_values = set(ISO2_CODES.values())
    for value in ISO3_CODES.values():
        assert value in iso2_values


def test_every_entry_is_reachable():
    for key, value in {**ISO2_CODES, **ISO3_CODES}.items():
        assert lookup_code(key) == value