"""CpfService — parse, convert, and batch-check CPFs for the CLI."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from bras.domain.cpf import Cpf
from bras.domain.errors import ParseCpfError
from bras.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

INVALID_CPF = "INVALID_CPF"


def _payload(cpf: Cpf) -> dict[str, Any]:
    return {
        "cpf": cpf.to_display_string(),
        "digits": cpf.to_digit_string(),
        "number": cpf.to_int(),
    }


def _invalid(op: str, exc: ParseCpfError) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code=INVALID_CPF,
            message=str(exc),
            detail={"input": exc.value, "kind": str(exc.kind)},
        ),
    )


class CpfService:
    """Stateless wrapper turning domain errors into ServiceResult payloads."""

    def parse(self, text: str) -> ServiceResult:
        """Validate *text* and describe the resulting CPF."""
        op = "parse_cpf"
        try:
            cpf = Cpf.parse(text)
        except ParseCpfError as exc:
            logger.debug("Rejected CPF input %r", text)
            return _invalid(op, exc)
        logger.debug("Parsed CPF %s", cpf)
        return ServiceResult(ok=True, op=op, data=_payload(cpf))

    def from_number(self, number: int) -> ServiceResult:
        """Build a CPF from its numeric value (zero-padded to 11 digits)."""
        op = "cpf_from_number"
        try:
            cpf = Cpf.try_from(number)
        except ParseCpfError as exc:
            logger.debug("Rejected CPF number %d", number)
            return _invalid(op, exc)
        logger.debug("Built CPF %s from %d", cpf, number)
        return ServiceResult(ok=True, op=op, data=_payload(cpf))

    def check(self, values: Iterable[str]) -> ServiceResult:
        """Validate every value, reporting each one.

        The result fails if any value is invalid; the per-value report is
        kept in ``error.detail`` so nothing is lost.
        """
        op = "check_cpfs"
        items: list[dict[str, Any]] = []
        for value in values:
            try:
                cpf = Cpf.parse(value)
            except ParseCpfError:
                items.append({"input": value, "valid": False, "cpf": None})
            else:
                items.append({"input": value, "valid": True, "cpf": cpf.to_display_string()})

        invalid = [item["input"] for item in items if not item["valid"]]
        data = {"items": items, "valid": len(items) - len(invalid), "invalid": len(invalid)}
        logger.debug("Checked %d CPF(s), %d invalid", len(items), len(invalid))

        if invalid:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=INVALID_CPF,
                    message=f"{len(invalid)} of {len(items)} value(s) are not valid CPFs",
                    detail=data,
                ),
            )
        return ServiceResult(ok=True, op=op, data=data)
