"""Errors raised while building domain values.

INVARIANT: ``ParseCpfErrorKind`` is open. New members may be added in a
minor release, so code matching on ``error.kind`` must keep a default branch.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ParseCpfErrorKind(StrEnum):
    """Why a CPF was rejected.

    Structural and checksum failures share ``INVALID`` today.
    """

    INVALID = "invalid"


class ParseCpfError(ValueError):
    """Raised by :meth:`Cpf.parse` and :meth:`Cpf.try_from`.

    Attributes:
        kind: Failure category. Treat unknown members as a generic failure.
        value: The rejected input, exactly as the caller passed it.
    """

    def __init__(self, value: Any, kind: ParseCpfErrorKind = ParseCpfErrorKind.INVALID) -> None:
        self.value = value
        self.kind = kind
        super().__init__(f"Invalid CPF: {value!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseCpfError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.value, self.kind))
