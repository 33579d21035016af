'''
utilidades numéricas (decimal estricto, rango de 64 bits, comprobaciones n-bit)
'''

from __future__ import annotations
import re

DEC_RE = re.compile(r"^[+-]?[0-9]+$")

# Rango de un entero con signo de 64 bits (lo que acepta strtoll)
I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1

def parse_decimal(token: str) -> int:
    """Convierte un token decimal con signo opcional a int.

    Lanza ValueError si el token no es decimal o si no cabe en 64 bits con signo.
    """
    t = token.strip()
    if not DEC_RE.match(t):
        raise ValueError(f"no es un número decimal: '{token}'")
    v = int(t, 10)
    if not (I64_MIN <= v <= I64_MAX):
        raise ValueError(f"desbordamiento al leer '{token}'")
    return v

def is_unsigned_nbit(x: int, n: int) -> bool:
    """Devuelve True si x está en [0, 2^n) (sin signo de n bits)."""
    if n <= 0:
        raise ValueError("n debe ser positivo")
    return 0 <= x < (1 << n)
