"""bras — Brazilian CPF parsing, validation, and formatting."""

from bras.domain.cpf import Cpf
from bras.domain.errors import ParseCpfError, ParseCpfErrorKind

__version__ = "0.1.0"

__all__ = ["Cpf", "ParseCpfError", "ParseCpfErrorKind", "__version__"]
