"""A minimal last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """LIFO container; :meth:`pop` on an empty stack gives ``None``."""

    def __init__(self) -> None:
        self._elements: list[T] = []

    def push(self, value: T) -> None:
        self._elements.append(value)

    def pop(self) -> T | None:
        """Remove and return the top element, or ``None`` when empty."""
        return self._elements.pop() if self._elements else None

    def is_empty(self) -> bool:
        return not self._elements

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"Stack({self._elements!r})"


def main(argv: Sequence[str] | None = None) -> int:
    """Push a few numbers, then pop them all, reporting each step."""
    print("Stack demo")

    stack: Stack[int] = Stack()
    print("Pushing...")
    for value in (10, 20, 30):
        stack.push(value)

    print(stack)
    print(f"Stack Length: {len(stack)}")

    print(f"Pop: {stack.pop()}")
    print(f"After pop: {stack}")

    while not stack.is_empty():
        print(f"Popped: {stack.pop()}")

    print(f"Stack Length: {len(stack)}")
    print(f"Empty: {str(stack.is_empty()).lower()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())