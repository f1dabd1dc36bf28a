"""Numeral systems used to write integer leaves as text."""

from dataclasses import dataclass
from typing import Any, Union

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


@dataclass(frozen=True)
class NumeralBase:
    """
    A radix between 2 and 36 for integer leaves.

    Base 10 writes plain JSON numbers; every other base writes signed strings
    such as ``"-ff"``. Reading accepts either form. The reader has no way to
    tell which base produced a string, so write and read must be configured
    with the same base.
    """

    radix: int = 10

    def __post_init__(self):
        if isinstance(self.radix, bool) or not isinstance(self.radix, int):
            raise TypeError(f"radix must be an int, got {type(self.radix).__name__}")
        if not 2 <= self.radix <= 36:
            raise ValueError(f"radix must be between 2 and 36, got {self.radix}")

    def signed(self, value: int) -> str:
        """Render ``value`` in this radix with a leading ``-`` when negative."""
        if value == 0:
            return "0"
        magnitude = -value if value < 0 else value
        digits = []
        while magnitude:
            magnitude, remainder = divmod(magnitude, self.radix)
            digits.append(DIGITS[remainder])
        if value < 0:
            digits.append("-")
        return "".join(reversed(digits))

    def emit(self, value: int) -> Union[int, str]:
        """Node for an integer leaf."""
        if self.radix == 10:
            return value
        return self.signed(value)

    def read_int(self, node: Any) -> int:
        """
        Parse an integer leaf.

        Raises:
            ValueError: If the node is neither an integer nor a string in this radix
        """
        if isinstance(node, bool):
            raise ValueError(f"Boolean {node!r} is not an integer leaf")
        if isinstance(node, int):
            return node
        if isinstance(node, float) and node.is_integer():
            return int(node)
        if isinstance(node, str):
            text = node.strip()
            if text.startswith("+"):
                raise ValueError(f"Unexpected sign in integer leaf {node!r}")
            return int(text, self.radix)
        raise ValueError(f"Cannot read an integer from {type(node).__name__} leaf")


BASE2 = NumeralBase(2)
BASE8 = NumeralBase(8)
BASE10 = NumeralBase(10)
BASE16 = NumeralBase(16)
BASE36 = NumeralBase(36)
