import pytest

from testkatas.fizzbuzz import fizzbuzz


@pytest.mark.parametrize(
    ("number", "expected"),
    [(15, "fizzbuzz"), (9, "fizz"), (25, "buzz"), (502, "502")],
)
def test_fizzbuzz(number, expected):
    assert fizzbuzz(number) == expected