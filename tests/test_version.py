import zlib

import pytest

from goldfish.version import VERSION, get_version, parse_version

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def test_parse_release_version():
    assert parse_version("1.0.0") == (1, 0, 0)


def test_parse_takes_values_from_text():
    assert parse_version("2.5.11") == (2, 5, 11)


def test_parse_ignores_suffix_like_atoi():
    assert parse_version("3.4.5-beta") == (3, 4, 5)


def test_parse_ignores_extra_components():
    assert parse_version("7.8.9.10") == (7, 8, 9)


def test_parse_non_numeric_component_is_zero():
    assert parse_version("x.2.3") == (0, 2, 3)


def test_parse_too_few_components():
    with pytest.raises(ValueError):
        parse_version("1.2")


def test_get_version_numbers_match_string():
    version = get_version()
    assert (version.major, version.minor, version.patch) == parse_version(VERSION)


def test_get_version_full_is_release():
    assert get_version().full == VERSION + " -release"


def test_get_version_zlib():
    assert get_version().zlib == zlib.ZLIB_VERSION


def test_get_version_date_format():
    date = get_version().date
    assert len(date) == 11
    assert date[3] == " "
    assert date[6] == " "
    assert date[:3] in _MONTHS
    assert 1 <= int(date[4:6]) <= 31
    assert date[7:].isdigit()


def test_get_version_thread_model():
    assert get_version().thread in ("POSIX", "Win32")