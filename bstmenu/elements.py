"""Element types: how values held in a tree are parsed, ordered and printed."""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from typing import Any, Callable

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"""\s*(
        (?P<hex>[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?)
      | (?P<special>[+-]?(?:inf(?:inity)?|nan))
      | (?P<dec>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
    )""",
    re.VERBOSE | re.IGNORECASE,
)


def inc1(x: int) -> int:
    """Return ``x + 1``."""
    return x + 1


def inc2(x: int) -> int:
    """Return ``x + 2``."""
    return x + 2


def inc3(x: int) -> int:
    """Return ``x + 3``."""
    return x + 3


_FUNCTIONS: dict[str, Callable[[int], int]] = {"inc1": inc1, "inc2": inc2, "inc3": inc3}


def _parse_int(text: str) -> int:
    """Parse the leading integer of ``text``; trailing characters are ignored."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    """Parse the leading floating-point number of ``text``."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    if match.group("hex") is not None:
        value = float.fromhex(match.group("hex"))
    else:
        value = float(match.group(1))
    if math.isinf(value) and match.group("special") is None:
        raise ValueError(f"number out of range: {text!r}")
    return value


class ElementType(ABC):
    """How a tree parses, orders and prints its values."""

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Build a value from its textual form."""

    def compare(self, a: Any, b: Any) -> int:
        """Return -1, 0 or +1 as ``a`` orders before, with or after ``b``."""
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    @abstractmethod
    def format(self, value: Any) -> str:
        """Return the printed form of ``value``."""


class IntType(ElementType):
    """32-bit signed integers."""

    def parse(self, text: str) -> int:
        return _parse_int(text)

    def format(self, value: int) -> str:
        return str(value)


class DoubleType(ElementType):
    """Floating-point numbers, printed with six significant digits."""

    def parse(self, text: str) -> float:
        return _parse_float(text)

    def format(self, value: float) -> str:
        return format(value, "g")


class ComplexType(ElementType):
    """Complex numbers written as ``a+bi``, ordered by modulus, then parts."""

    def parse(self, text: str) -> complex:
        compact = "".join(text.split())
        if not compact:
            raise ValueError("bad complex")
        if not compact.endswith("i"):
            return complex(_parse_float(compact), 0.0)
        compact = compact[:-1]
        pos = max(compact.rfind("+"), compact.rfind("-"))
        if pos <= 0:
            return complex(0.0, _parse_float(compact))
        return complex(_parse_float(compact[:pos]), _parse_float(compact[pos:]))

    def compare(self, a: complex, b: complex) -> int:
        norm_a = a.real * a.real + a.imag * a.imag
        norm_b = b.real * b.real + b.imag * b.imag
        for x, y in ((norm_a, norm_b), (a.real, b.real), (a.imag, b.imag)):
            if x != y:
                return -1 if x < y else 1
        return 0

    def format(self, value: complex) -> str:
        sign = "+" if value.imag >= 0 else ""
        return f"{value.real:g}{sign}{value.imag:g}i"


class StringType(ElementType):
    """Strings in dictionary order."""

    def parse(self, text: str) -> str:
        return text

    def format(self, value: str) -> str:
        return value


class FunctionType(ElementType):
    """The named functions ``inc1``, ``inc2`` and ``inc3``, ordered by identity."""

    def parse(self, text: str) -> Callable[[int], int]:
        try:
            return _FUNCTIONS[text]
        except KeyError:
            raise ValueError("bad func") from None

    def compare(self, a: Callable[[int], int], b: Callable[[int], int]) -> int:
        return super().compare(id(a), id(b))

    def format(self, value: Callable[[int], int]) -> str:
        return f"Func@{id(value):x}"


class PersonType(ElementType):
    """Person names, ordered alphabetically."""

    def parse(self, text: str) -> str:
        return text

    def format(self, value: str) -> str:
        return value


_TYPES: dict[str, type[ElementType]] = {
    "INT": IntType,
    "DOUBLE": DoubleType,
    "COMPLEX": ComplexType,
    "STRING": StringType,
    "FUNCTION": FunctionType,
    "PERSON": PersonType,
}


def element_type_for(name: str) -> ElementType:
    """Return a new element type for a name such as ``INT`` or ``COMPLEX``."""
    try:
        return _TYPES[name]()
    except KeyError:
        raise ValueError(f"unknown type: {name}") from None