import math

import pytest

from pockit.basics import (
    Color,
    Number,
    Operation,
    Point,
    Rectangle,
    WebEvent,
    add,
    count_to_five,
    describe_number,
    describe_sign,
    fizzbuzz,
    inspect,
    is_big,
    main,
    returning_loop,
    reverse,
    saturating_u8,
    wrap_signed,
    wrap_unsigned,
)


def test_add():
    assert add(1, 2) == 3
    assert add(5, 3) == 8


def test_operations():
    assert Operation.ADD.run(5, 10) == 15
    assert Operation.SUBTRACT.run(10, 5) == 5


def test_color_hex():
    assert Color(0xFF0000) is Color.RED
    assert Color(0x0000FF) is Color.BLUE
    assert format(Color(0xFF0000), "06x") == "ff0000"
    assert format(Color(0x0000FF), "06x") == "0000ff"


@pytest.mark.parametrize(
    "event, expected",
    [
        (WebEvent.page_load(), "page loaded"),
        (WebEvent.page_unload(), "page unloaded"),
        (WebEvent.key_press("x"), "pressed 'x'."),
        (WebEvent.paste("my text"), 'pasted "my text".'),
        (WebEvent.click(20, 80), "clicked at x=20, y=80."),
    ],
)
def test_inspect(event, expected):
    assert inspect(event) == expected


def test_key_press_rejects_long_key():
    with pytest.raises(ValueError):
        WebEvent.key_press("xy")


def test_number_from_int():
    assert Number.from_int(30).value == 30
    assert Number.from_int(5) == Number(5)


def test_rectangle_holds_points():
    rect = Rectangle(Point(5.2, 0.4), Point(10.3, 0.2))
    assert rect.top_left.x == 5.2
    assert rect.bottom_right.y == 0.2


def test_reverse():
    assert reverse((42, True)) == (True, 42)


def test_is_big():
    assert is_big(9) is False
    assert is_big(10) is False
    assert is_big(11) is True


@pytest.mark.parametrize("x, expected", [(5, "positive"), (-3, "negative"), (0, "zero")])
def test_describe_sign(x, expected):
    assert describe_sign(x) == expected


@pytest.mark.parametrize(
    "n, expected",
    [(1, "One!"), (7, "This is a prime"), (13, "A teen"), (19, "A teen"), (20, "Ain't special")],
)
def test_describe_number(n, expected):
    assert describe_number(n) == expected


def test_fizzbuzz():
    assert fizzbuzz(15) == [
        "1", "2", "fizz", "4", "buzz", "fizz", "7", "8", "fizz", "buzz",
        "11", "fizz", "13", "14",
    ]
    assert fizzbuzz(16)[-1] == "fizzbuzz"


def test_count_to_five():
    assert count_to_five() == ["1", "2", "three", "4", "5"]


def test_returning_loop():
    assert returning_loop() == 20


def test_wrap_unsigned():
    assert wrap_unsigned(1000, 16) == 1000
    assert wrap_unsigned(1000, 8) == 232
    assert wrap_unsigned(-1, 8) == 255


def test_wrap_signed():
    assert wrap_signed(1000, 8) == -24
    assert wrap_signed(-1, 8) == -1
    assert wrap_signed(127, 8) == 127


def test_wrap_rejects_bad_width():
    with pytest.raises(ValueError):
        wrap_unsigned(5, 0)


def test_saturating_u8():
    assert saturating_u8(65.4321) == 65
    assert saturating_u8(300.0) == 255
    assert saturating_u8(-100.0) == 0
    assert saturating_u8(math.nan) == 0


def test_main_prints_tour(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Hello, world!" in out
    assert "Add Result: 8" in out
    assert "1000 as a i8 is: -24" in out
    assert "roses are #ff0000" in out
    assert "violets are #0000ff" in out