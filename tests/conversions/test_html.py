import logging

import pytest

from usefulcolor.conversions.html import (
    InvalidHTMLColorError,
    channel_to_hex,
    format_html,
    hex_digit_value,
    is_valid_html,
    parse_html,
)
from ..samples import samples_html, valid_html, invalid_html


def test_hex_digit_value():
    assert hex_digit_value("0") == 0
    assert hex_digit_value("9") == 9
    assert hex_digit_value("a") == 10
    assert hex_digit_value("F") == 15
    assert hex_digit_value("g") == -1
    assert hex_digit_value("#") == -1
    assert hex_digit_value("") == -1
    assert hex_digit_value("ab") == -1
    # Non-ASCII digits are not hex digits
    assert hex_digit_value("١") == -1


def test_is_valid_html():
    for text in valid_html:
        assert is_valid_html(text), text
    for text in invalid_html:
        assert not is_valid_html(text), text


def test_parse_html_samples():
    for text, expected in samples_html.items():
        channels = parse_html(text)
        assert channels is not None
        for got, exp in zip(channels, expected):
            assert abs(got - exp) < 1e-9, text


def test_shorthand_divides_by_15():
    r, g, b, a = parse_html("#800")
    assert r == 8 / 15
    assert g == 0.0 and b == 0.0 and a == 1.0


def test_parse_html_invalid_returns_none():
    for text in invalid_html:
        assert parse_html(text) is None, text


def test_parse_html_strict_raises():
    with pytest.raises(InvalidHTMLColorError) as excinfo:
        parse_html("#AABBC", strict=True)
    assert excinfo.value.text == "#AABBC"
    assert isinstance(excinfo.value, ValueError)


def test_parse_html_invalid_logs_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="usefulcolor.conversions.html")
    parse_html("not a color")
    assert any("not a color" in record.getMessage() for record in caplog.records)


def test_channel_to_hex():
    assert channel_to_hex(0.0) == "00"
    assert channel_to_hex(1.0) == "ff"
    assert channel_to_hex(0.5) == "7f"
    assert channel_to_hex(10 / 255) == "0a"
    # Clamped to 00..ff
    assert channel_to_hex(2.0) == "ff"
    assert channel_to_hex(-1.0) == "00"


def test_format_html():
    assert format_html((1.0, 1.0, 1.0, 0.5)) == "ffffff7f"
    assert format_html((1.0, 1.0, 1.0, 0.5), with_alpha=False) == "ffffff"
    assert format_html((0.4, 0.2, 0.6, 0.8)) == "663399cc"
