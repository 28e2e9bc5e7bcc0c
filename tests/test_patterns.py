import pytest

from drillbook.patterns import letter_staircase, number_pyramid, number_rows, star_square


@pytest.mark.parametrize("n", [1, 2, 5, 8])
def test_star_square_shape(n):
    lines = star_square(n)
    assert len(lines) == n
    assert all(line == "*" * n for line in lines)


def test_number_rows():
    assert number_rows(3) == ["111", "222", "333"]


@pytest.mark.parametrize("n", [1, 4, 9])
def test_number_rows_shape(n):
    lines = number_rows(n)
    assert len(lines) == n
    assert all(len(set(line)) == 1 for line in lines)


def test_letter_staircase_matches_documented_pattern():
    assert letter_staircase(4) == ["D", "CD", "BCD", "ABCD"]


@pytest.mark.parametrize("n", [1, 3, 6, 26])
def test_letter_staircase_invariants(n):
    lines = letter_staircase(n)
    last = chr(ord("A") + n - 1)
    assert [len(line) for line in lines] == list(range(1, n + 1))
    assert all(line.endswith(last) for line in lines)
    assert lines[-1].startswith("A")


def test_number_pyramid_small():
    assert number_pyramid(3) == ["  1", " 121", "12321"]


@pytest.mark.parametrize("n", [1, 4, 7])
def test_number_pyramid_invariants(n):
    lines = number_pyramid(n)
    assert len(lines) == n
    for i, line in enumerate(lines, start=1):
        body = line.lstrip(" ")
        assert len(line) == n + i - 1
        assert body == body[::-1]
    assert not lines[-1].startswith(" ")


@pytest.mark.parametrize("build", [star_square, number_rows, letter_staircase, number_pyramid])
def test_zero_gives_nothing(build):
    assert build(0) == []