import pytest

from rustdrill.drills.basics import bigger, call_me, foo_if_fizz, is_even, sale_price, square


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"


def test_is_true_when_even():
    assert is_even(2) is True


def test_is_false_when_odd():
    assert is_even(5) is False


def test_sale_price_odd():
    assert sale_price(51) == 48


def test_sale_price_even():
    assert sale_price(50) == 40


def test_square_of_three():
    assert square(3) == 9


def test_square_overflow():
    with pytest.raises(OverflowError):
        square(46341)


def test_call_me_rings(capsys):
    lines = call_me(3)
    assert lines == ["Ring! Call number 1", "Ring! Call number 2", "Ring! Call number 3"]
    assert capsys.readouterr().out == "Ring! Call number 1\nRing! Call number 2\nRing! Call number 3\n"


def test_call_me_zero(capsys):
    assert call_me(0) == []
    assert capsys.readouterr().out == ""