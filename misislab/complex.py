"""Complex numbers with approximate equality and brace notation."""

from __future__ import annotations

import re as _re
import sys
from numbers import Real

_TOLERANCE = 2 * sys.float_info.epsilon
_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_PATTERN = _re.compile(rf"\s*\{{\s*({_NUMBER})\s*,\s*({_NUMBER})\s*\}}\s*")


class Complex:
    """A complex number written as ``{re,im}``."""

    LEFT_BRACE = "{"
    SEPARATOR = ","
    RIGHT_BRACE = "}"

    __slots__ = ("re", "im")

    def __init__(self, re: float = 0.0, im: float = 0.0) -> None:
        self.re = float(re)
        self.im = float(im)

    @staticmethod
    def _coerce(value: object) -> Complex | None:
        if isinstance(value, Complex):
            return value
        if isinstance(value, Real):
            return Complex(float(value))
        return None

    def __add__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.re + rhs.re, self.im + rhs.im)

    def __radd__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self + (-rhs)

    def __rsub__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(
            self.re * rhs.re - self.im * rhs.im,
            self.im * rhs.re + self.re * rhs.im,
        )

    def __rmul__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __truediv__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        denominator = rhs.re**2 + rhs.im**2
        if denominator == 0:
            raise ZeroDivisionError("complex division by zero")
        return Complex(
            (self.re * rhs.re + self.im * rhs.im) / denominator,
            (self.im * rhs.re - self.re * rhs.im) / denominator,
        )

    def __rtruediv__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __neg__(self) -> Complex:
        return Complex(-self.re, -self.im)

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return abs(self.re - rhs.re) < _TOLERANCE and abs(self.im - rhs.im) < _TOLERANCE

    __hash__ = None  # equality is approximate

    def __str__(self) -> str:
        return f"{self.LEFT_BRACE}{self.re:g}{self.SEPARATOR}{self.im:g}{self.RIGHT_BRACE}"

    def __repr__(self) -> str:
        return f"Complex({self.re!r}, {self.im!r})"

    @classmethod
    def parse(cls, text: str) -> Complex:
        """Read a number in ``{re,im}`` form; raise ValueError otherwise."""
        match = _PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"invalid complex literal: {text!r}")
        return cls(float(match.group(1)), float(match.group(2)))