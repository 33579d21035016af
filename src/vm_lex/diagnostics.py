'''
clase Diagnostic, taxonomía de errores (ErrorKind) y helpers
'''

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Literal, Iterable

# Severidad de los diagnósticos (en español)
Severity = Literal["error", "advertencia", "nota"]

_SEV_TO_LABEL = {
    "error": "ERROR",
    "advertencia": "ADVERTENCIA",
    "nota": "NOTA",
}

class ErrorKind(Enum):
    """Clase de problema detectado al tokenizar una línea."""
    UNKNOWN_COMMAND = "comando-desconocido"
    MISSING_ARGUMENT = "falta-argumento"
    INVALID_SEGMENT = "segmento-invalido"
    WRITE_TO_CONSTANT = "escritura-en-constant"
    NUMBER_PARSE = "numero-invalido"
    NUMBER_OUT_OF_RANGE = "numero-fuera-de-rango"
    EXTRA_ARGUMENT = "argumento-sobrante"

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    Abarca errores, advertencias y notas, con ubicación opcional (archivo, línea y columna),
    un mensaje de ayuda (pista) y la clase de error (``code``) para quien necesite
    distinguirlos sin leer el mensaje.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    col: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None
    code: Optional[ErrorKind] = None

    @property
    def is_error(self) -> bool:
        return self.severity == "error"

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}"
            if self.col is not None:
                loc += f":{self.col}"
        if loc:
            loc += ": "
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def error(message: str, *, line: int | None = None, col: int | None = None,
          file: str | None = None, hint: str | None = None,
          code: ErrorKind | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, col, hint, file, code)

def warning(message: str, *, line: int | None = None, col: int | None = None,
            file: str | None = None, hint: str | None = None,
            code: ErrorKind | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo advertencia."""
    return Diagnostic("advertencia", message, line, col, hint, file, code)

def note(message: str, *, line: int | None = None, col: int | None = None,
         file: str | None = None, hint: str | None = None,
         code: ErrorKind | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo nota."""
    return Diagnostic("nota", message, line, col, hint, file, code)

def has_errors(diags: Iterable[Diagnostic]) -> bool:
    """True si algún diagnóstico tiene severidad de error."""
    return any(d.is_error for d in diags)
