"""CPF value type — parsing, check digits, and conversions.

A CPF is stored as the integer formed by its 11 digits. Leading zeros are
implicit and restored by zero-padding whenever the canonical form is rendered.

Construction goes through two validating factories only:

- ``Cpf.parse(text)``: ``"98484485439"`` or ``"984.844.854-39"``.
- ``Cpf.try_from(number)``: ``98484485439`` or ``1678346063`` (zero-padded).

INVARIANT: every ``Cpf`` instance holds 11 digits, not all identical, whose
last two digits are the verifier digits of the first nine.
"""

from __future__ import annotations

import functools
from collections.abc import Sequence
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from bras.domain.errors import ParseCpfError

CPF_LENGTH = 11
PUNCTUATED_LENGTH = 14

# index -> separator required in the punctuated form
SEPARATORS: dict[int, str] = {3: ".", 7: ".", 11: "-"}

FIRST_DIGIT_WEIGHTS: tuple[int, ...] = (10, 9, 8, 7, 6, 5, 4, 3, 2)
SECOND_DIGIT_WEIGHTS: tuple[int, ...] = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2)

_DIGITS = "0123456789"
_FACTORY = object()


def _reduce(total: int) -> int:
    """Map a weighted sum to a verifier digit (10 becomes 0)."""
    digit = total * 10 % 11
    return 0 if digit == 10 else digit


def _weighted_digit(weights: Sequence[int], digits: Sequence[int]) -> int:
    return _reduce(sum(w * d for w, d in zip(weights, digits)))


def verifier_digits(digits: Sequence[int]) -> tuple[int, int]:
    """Compute both verifier digits from the first nine digits of a CPF.

    Only the first nine entries of *digits* are read, so a full 11-digit
    sequence can be passed as well.

    Examples:
        >>> verifier_digits([9, 8, 4, 8, 4, 4, 8, 5, 4])
        (3, 9)
        >>> verifier_digits([0, 1, 6, 7, 8, 3, 4, 6, 0])
        (6, 3)
    """
    if len(digits) < 9:
        msg = f"Need at least 9 digits, got {len(digits)}"
        raise ValueError(msg)
    base = list(digits[:9])
    first = _weighted_digit(FIRST_DIGIT_WEIGHTS, base)
    second = _weighted_digit(SECOND_DIGIT_WEIGHTS, [*base, first])
    return first, second


def _extract_digits(text: str) -> list[int]:
    """Validate the shape of *text* and return its 11 digits.

    Raises:
        ParseCpfError: On a wrong length, misplaced separators, or a digit
            count other than 11.
    """
    if len(text) not in (CPF_LENGTH, PUNCTUATED_LENGTH):
        raise ParseCpfError(text)
    if len(text) == PUNCTUATED_LENGTH:
        for index, separator in SEPARATORS.items():
            if text[index] != separator:
                raise ParseCpfError(text)
    # Digits are collected from the whole string, not just between separators.
    digits = [int(ch) for ch in text if ch in _DIGITS]
    if len(digits) != CPF_LENGTH:
        raise ParseCpfError(text)
    return digits


@functools.total_ordering
class Cpf:
    """A validated CPF number.

    Immutable, hashable and ordered by its numeric value, so instances work
    as dict keys and inside sorted collections. Build one with
    :meth:`parse` or :meth:`try_from`; calling ``Cpf(...)`` directly raises
    ``TypeError``.

    Examples:
        >>> cpf = Cpf.parse("98484485439")
        >>> cpf.to_display_string()
        '984.844.854-39'
        >>> cpf.to_digit_string()
        '98484485439'
        >>> cpf.to_int()
        98484485439
        >>> str(Cpf.try_from(1678346063))
        '016.783.460-63'
    """

    __slots__ = ("_value",)

    _value: int

    def __init__(self, value: int, *, _key: object = None) -> None:
        if _key is not _FACTORY:
            msg = "Use Cpf.parse() or Cpf.try_from() to build a Cpf"
            raise TypeError(msg)
        object.__setattr__(self, "_value", value)

    # --- Factories ---

    @classmethod
    def parse(cls, text: str) -> Cpf:
        """Parse a plain (``DDDDDDDDDDD``) or punctuated (``DDD.DDD.DDD-DD``) CPF.

        Raises:
            ParseCpfError: If the text is malformed or the check digits do
                not match.
            TypeError: If *text* is not a ``str``.
        """
        if not isinstance(text, str):
            msg = f"Cpf.parse() expects str, got {type(text).__name__}"
            raise TypeError(msg)

        digits = _extract_digits(text)
        if len(set(digits)) == 1:
            raise ParseCpfError(text)
        if verifier_digits(digits) != (digits[9], digits[10]):
            raise ParseCpfError(text)

        value = 0
        for digit in digits:
            value = value * 10 + digit
        return cls(value, _key=_FACTORY)

    @classmethod
    def try_from(cls, number: int) -> Cpf:
        """Build a CPF from its numeric value.

        Numbers shorter than 11 digits are zero-padded; longer ones are
        rejected.

        Raises:
            ParseCpfError: If the padded number is not a valid CPF.
            TypeError: If *number* is not an ``int``.
        """
        if isinstance(number, bool) or not isinstance(number, int):
            msg = f"Cpf.try_from() expects int, got {type(number).__name__}"
            raise TypeError(msg)
        try:
            return cls.parse(f"{number:011d}")
        except ParseCpfError:
            raise ParseCpfError(number) from None

    @classmethod
    def is_valid(cls, text: str) -> bool:
        """Return True if *text* parses as a CPF."""
        try:
            cls.parse(text)
        except ParseCpfError:
            return False
        return True

    # --- Conversions ---

    def to_display_string(self) -> str:
        """Canonical ``AAA.BBB.CCC-DD`` form, always 14 characters."""
        padded = f"{self._value:011d}"
        return f"{padded[0:3]}.{padded[3:6]}.{padded[6:9]}-{padded[9:]}"

    def to_digit_string(self) -> str:
        """The stored number in decimal, without zero-padding."""
        return str(self._value)

    def to_int(self) -> int:
        return self._value

    # --- Value semantics ---

    def __setattr__(self, name: str, value: Any) -> None:
        msg = "Cpf is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = "Cpf is immutable"
        raise AttributeError(msg)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cpf):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Cpf):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((Cpf, self._value))

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"Cpf({self.to_display_string()!r})"

    def __copy__(self) -> Cpf:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Cpf:
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        return (Cpf.try_from, (self._value,))

    # --- Pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Accept ``Cpf``, ``str`` or ``int`` input; serialize to the canonical form."""
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_display_string
            ),
        )

    @classmethod
    def _coerce(cls, value: Any) -> Cpf:
        if isinstance(value, Cpf):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.try_from(value)
        msg = f"Expected a CPF string or number, got {type(value).__name__}"
        raise ValueError(msg)
