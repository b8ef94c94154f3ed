import pytest
from wordlekit.engine import letter_accounted_elsewhere, letter_bounds, pattern_from_str


@pytest.mark.parametrize("guess,patt,i,expected", [
    # speed vs abide: e(2) yellow, e(3) gray
    ("speed", "--Y-Y", 3, True),
    ("speed", "--Y-Y", 2, False),
    ("speed", "--Y-Y", 0, False),
    # green twin counts too
    ("geese", "---GG", 1, True),
    ("geese", "---GG", 2, True),
    ("geese", "---GG", 0, False),
    # both copies gray: nothing accounted for
    ("eerie", "-----", 0, False),
    ("eerie", "-----", 4, False),
    # the letter at i itself is ignored even when it is green
    ("crane", "G----", 0, False),
    # three copies, one yellow
    ("eerie", "--Y-Y", 0, True),
    ("eerie", "--Y-Y", 1, True),
])
def test_letter_accounted_elsewhere(guess, patt, i, expected):
    assert letter_accounted_elsewhere(guess, pattern_from_str(patt), i) is expected


def test_letter_bounds_mixed():
    b = letter_bounds("spree", pattern_from_str("Y-YYG"))
    assert b == {"s": (1, None), "p": (0, 0), "r": (1, None), "e": (2, None)}


def test_letter_bounds_capped_duplicate():
    b = letter_bounds("speed", pattern_from_str("--Y-Y"))
    assert b["e"] == (1, 1)
    assert b["d"] == (1, None)
    assert b["s"] == (0, 0)


def test_letter_bounds_all_gray_twin():
    assert letter_bounds("eerie", pattern_from_str("-----"))["e"] == (0, 0)


def test_letter_bounds_preserves_guess_letter_order():
    assert list(letter_bounds("crane", pattern_from_str("-----"))) == list("crane")
