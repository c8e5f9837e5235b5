"""Small showcase of core language features: enums, records, loops and integer casts."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Literal

LANGUAGE = "Python"
THRESHOLD = 10

_EventKind = Literal["page_load", "page_unload", "key_press", "paste", "click"]

# Bit widths of the fixed-size integer kinds shown in the primitives section.
_INTEGER_WIDTHS = (8, 16, 32, 64, 128, 64)


def add(a: int, b: int) -> int:
    """Sum of two integers."""
    return a + b


class Operation(Enum):
    """Binary arithmetic operations."""

    ADD = "add"
    SUBTRACT = "subtract"

    def run(self, x: int, y: int) -> int:
        if self is Operation.ADD:
            return x + y
        return x - y


class Color(IntEnum):
    """Colours with their 24-bit RGB values."""

    RED = 0xFF0000
    GREEN = 0x00FF00
    BLUE = 0x0000FF


@dataclass(frozen=True)
class WebEvent:
    """A browser event; build one with the classmethod constructors."""

    kind: _EventKind
    key: str | None = None
    text: str | None = None
    x: int = 0
    y: int = 0

    @classmethod
    def page_load(cls) -> WebEvent:
        return cls("page_load")

    @classmethod
    def page_unload(cls) -> WebEvent:
        return cls("page_unload")

    @classmethod
    def key_press(cls, key: str) -> WebEvent:
        if len(key) != 1:
            raise ValueError("a key press carries exactly one character")
        return cls("key_press", key=key)

    @classmethod
    def paste(cls, text: str) -> WebEvent:
        return cls("paste", text=text)

    @classmethod
    def click(cls, x: int, y: int) -> WebEvent:
        return cls("click", x=x, y=y)


def inspect(event: WebEvent) -> str:
    """Describe what happened in ``event``."""
    match event.kind:
        case "page_load":
            return "page loaded"
        case "page_unload":
            return "page unloaded"
        case "key_press":
            return f"pressed '{event.key}'."
        case "paste":
            return f'pasted "{event.text}".'
        case "click":
            return f"clicked at x={event.x}, y={event.y}."
    raise ValueError(f"unknown event kind {event.kind!r}")


@dataclass(frozen=True)
class Number:
    """An integer wrapped in a record."""

    value: int

    @classmethod
    def from_int(cls, value: int) -> Number:
        return cls(value)


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rectangle:
    top_left: Point
    bottom_right: Point


def reverse(pair: tuple[int, bool]) -> tuple[bool, int]:
    """Swap the two members of a pair."""
    first, second = pair
    return second, first


def is_big(x: int) -> bool:
    """Whether ``x`` exceeds :data:`THRESHOLD`."""
    return x > THRESHOLD


def describe_sign(x: int) -> str:
    """``"positive"``, ``"negative"`` or ``"zero"``."""
    if x > 0:
        return "positive"
    if x < 0:
        return "negative"
    return "zero"


def describe_number(n: int) -> str:
    """Classify ``n`` as one, a small prime, a teen or nothing special."""
    match n:
        case 1:
            return "One!"
        case 2 | 3 | 5 | 7 | 11:
            return "This is a prime"
        case _ if 13 <= n <= 19:
            return "A teen"
        case _:
            return "Ain't special"


def fizzbuzz(limit: int) -> list[str]:
    """Fizzbuzz words for every number from 1 up to, not including, ``limit``."""

    def word(n: int) -> str:
        if n % 15 == 0:
            return "fizzbuzz"
        if n % 3 == 0:
            return "fizz"
        if n % 5 == 0:
            return "buzz"
        return str(n)

    return [word(n) for n in range(1, limit)]


def count_to_five() -> list[str]:
    """Count from one to five, saying three as a word."""
    return ["three" if n == 3 else str(n) for n in range(1, 6)]


def returning_loop() -> int:
    """Count to ten and give back twice the final count."""
    counter = 0
    while True:
        counter += 1
        if counter == 10:
            return counter * 2


def _check_bits(bits: int) -> None:
    if bits <= 0:
        raise ValueError("bit width must be positive")


def wrap_unsigned(value: int, bits: int) -> int:
    """Truncate ``value`` to an unsigned integer of ``bits`` bits."""
    _check_bits(bits)
    return value % (1 << bits)


def wrap_signed(value: int, bits: int) -> int:
    """Truncate ``value`` to a two's-complement integer of ``bits`` bits."""
    unsigned = wrap_unsigned(value, bits)
    return unsigned - (1 << bits) if unsigned >= 1 << (bits - 1) else unsigned


def saturating_u8(value: float) -> int:
    """Convert a float to 0..255, truncating toward zero; NaN becomes 0."""
    if math.isnan(value):
        return 0
    if value <= 0:
        return 0
    if value >= 255:
        return 255
    return int(value)


def _lower(flag: bool) -> str:
    return str(flag).lower()


def _labelled(values: Sequence[object]) -> str:
    return ", ".join(f"{name}: {value}" for name, value in zip("abcdef", values))


def _primitives() -> Iterator[str]:
    yield "Primitives demo!"
    signed_max = [(1 << (bits - 1)) - 1 for bits in _INTEGER_WIDTHS]
    yield f"Signed integers {_labelled(signed_max)}"
    unsigned_max = [(1 << bits) - 1 for bits in _INTEGER_WIDTHS]
    yield f"Unsigned integers {_labelled(unsigned_max)}"
    yield f"Floating-point numbers a: {3.14}, b: {math.pi}"
    characters = ["a", "\u03b1", "\U0001f600", "\U00010348", "\u221e"]
    yield f"Characters {_labelled(characters)}"
    yield f"Booleans {_labelled([_lower(True), _lower(False)])}"
    greeting = "Hello!"
    yield f"Strings {_labelled([greeting, str(greeting)])}"
    yield f"Arrays a: {[1, 2, 3]}, b: {[3.14, 2.718]}"
    yield f"Tuple a: {(42, 3.14, 'a')}"


def _operators() -> Iterator[str]:
    yield "\nOperators demo!"
    x, y = 5, 3
    arithmetic = (
        ("Addition", "+", x + y),
        ("Subtraction", "-", x - y),
        ("Multiplication", "*", x * y),
        ("Division", "/", x // y),
        ("Remainder", "%", x % y),
        ("Exponentiation", "^", x**y),
    )
    for name, symbol, result in arithmetic:
        yield f"{name} [{x} {symbol} {y}]: {result}"
    yield f"true AND false is {_lower(True and False)}"
    yield f"true OR false is {_lower(True or False)}"
    yield f"NOT true is {_lower(not True)}"
    left, right = 0b0011, 0b0101
    for name, result in (("AND", left & right), ("OR", left | right), ("XOR", left ^ right)):
        yield f"{left:04b} {name} {right:04b} is {result:04b}"
    yield f"1 << 5 is {1 << 5}"
    yield f"0x80 >> 2 is 0x{0x80 >> 2:x}"


def _tuples() -> Iterator[str]:
    yield "\nTuples demo!"
    pair = (42, True)
    yield f"Original pair: {pair}"
    yield f"Reversed pair: {reverse(pair)}"
    a, b, c, d = (1, "hello", 4.5, True)
    yield f"destructured values: {a!r}, {b!r}, {c!r}, {d!r}"


def _structs() -> Iterator[str]:
    yield "\nStructs demo!"
    point = Point(5.2, 0.4)
    bottom_right = replace(Point(10.3, 0.2), x=10.3)
    yield f"point coordinates: ({point.x}, {point.y})"
    yield f"second point: ({bottom_right.x}, {bottom_right.y})"
    yield f"rectangle {Rectangle(point, bottom_right)}"


def _enums() -> Iterator[str]:
    yield "\nEnums demo"
    events = [
        WebEvent.page_load(),
        WebEvent.key_press("x"),
        WebEvent.paste("my text"),
        WebEvent.click(20, 80),
        WebEvent.page_unload(),
    ]
    yield from (inspect(event) for event in events)
    yield f"Result add 5 and 10: {Operation.ADD.run(5, 10)}"
    yield f"Result subtract 10 and 5: {Operation.SUBTRACT.run(10, 5)}"
    yield f"roses are #{Color.RED:06x}"
    yield f"violets are #{Color.BLUE:06x}"


def _constants(n: int = 9) -> Iterator[str]:
    yield "\nConstants demo"
    yield f"This is {LANGUAGE}"
    relation = "bigger" if is_big(n) else "smaller"
    yield f"The threshold is {THRESHOLD} and {n} is {relation} than the threshold"


def _casting() -> Iterator[str]:
    yield "\nCasting demo"
    decimal = 65.4321
    integer = saturating_u8(decimal)
    yield f"Casting: {decimal} -> {integer} -> {chr(integer)}"
    yield f"1000 as a u16 is: {wrap_unsigned(1000, 16)}"
    yield f"1000 as a u8 is: {wrap_unsigned(1000, 8)}"
    yield f"1000 as a i8 is: {wrap_signed(1000, 8)}"
    yield f"1000 mod 256 is : {1000 % 256}"
    yield f"-1 as a u8 is: {wrap_unsigned(-1, 8)}"
    yield f" 300.0 as u8 is : {saturating_u8(300.0)}"
    yield f"-100.0 as u8 is : {saturating_u8(-100.0)}"
    yield f"nan as u8 is : {saturating_u8(math.nan)}"


def _literals() -> Iterator[str]:
    yield "\nLiterals demo"
    for name, fmt in (("x", "B"), ("y", "I"), ("z", "f"), ("i", "i"), ("f", "d")):
        yield f"size of `{name}` in bytes: {struct.calcsize(fmt)}"


def _conversions() -> Iterator[str]:
    num = Number.from_int(30)
    yield f"from: My number is {num}, value is {num.value}"
    num = Number.from_int(5)
    yield f"into: My number is {num}, value is {num.value}"


def _control_flow() -> Iterator[str]:
    x = 5
    yield "\nIf-else demo!"
    yield f"x is {describe_sign(x)}"
    yield f"Is x even? {_lower(x % 2 == 0)}"

    yield "\nInfinite Loop demo!"
    yield from count_to_five()
    yield "OK, that's enough"
    yield f"The result of the loop is {returning_loop()}"

    yield "\nWhile Loop demo!"
    yield from fizzbuzz(15)

    yield "\nFor Loops demo!"
    for element in (10, 20, 30, 40, 50):
        yield f"the value is: {element}"
    for number in reversed(range(1, 4)):
        yield f"number reversed and exclusive: {number}"
    for number in range(1, 6):
        yield f"number and inclusive: {number}"

    number = 13
    yield "\nPattern Matcher demo!"
    yield f"Tell me about {number}"
    yield describe_number(number)
    yield f"true -> {int(True)}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the whole feature tour."""
    print("Hello, world!")
    print(f"Add Result: {add(5, 3)}")
    sections = (
        _primitives,
        _operators,
        _tuples,
        _structs,
        _enums,
        _constants,
        _casting,
        _literals,
        _conversions,
        _control_flow,
    )
    for section in sections:
        for line in section():
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())