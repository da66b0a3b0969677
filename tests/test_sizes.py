import pytest

from bbimager.sizes import format_size, matches_search


def test_bytes_below_one_kilobyte():
    assert format_size(0) == "0 B"
    assert format_size(1023) == "1023 B"


def test_exact_units():
    assert format_size(1024) == "1.00 KB"
    assert format_size(1024**2) == "1.00 MB"


@pytest.mark.parametrize(
    "size, unit",
    [
        (1024, "KB"),
        (1024**2 - 1, "KB"),
        (1024**2, "MB"),
        (1024**3 - 1, "MB"),
        (1024**3, "GB"),
        (1024**4 - 1, "GB"),
        (1024**4, "TB"),
        (1024**5, "TB"),
    ],
)
def test_unit_boundaries(size, unit):
    number, suffix = format_size(size).split(" ")
    assert suffix == unit
    assert len(number.split(".")[1]) == 2


@pytest.mark.parametrize("size", [1536, 5 * 1024**2, 7 * 1024**3 + 12345])
def test_value_within_unit_range(size):
    number, _ = format_size(size).split(" ")
    assert 1.0 <= float(number) < 1024.0


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        format_size(-1)


def test_matches_search_case_insensitive():
    assert matches_search("SanDisk Ultra /dev/sdb", "sandisk") is True
    assert matches_search("SanDisk Ultra /dev/sdb", "ULTRA") is True
    assert matches_search("SanDisk Ultra /dev/sdb", "kingston") is False


def test_empty_search_matches_everything():
    assert matches_search("anything", "") is True
    assert matches_search("", "") is True