'''
segmentos de memoria: tabla nombre->segmento, validaciones y límites de índice
'''

from __future__ import annotations
from enum import Enum
from typing import Dict

from .utils import is_unsigned_nbit

class MemorySegment(Enum):
    ARGUMENT = "argument"
    LOCAL = "local"
    STATIC = "static"
    CONSTANT = "constant"
    THIS = "this"
    THAT = "that"
    POINTER = "pointer"
    TEMP = "temp"

# Nombre en el código fuente -> segmento
SEGMENTS: Dict[str, MemorySegment] = {s.value: s for s in MemorySegment}

# Segmentos que no admiten pop
READ_ONLY = frozenset({MemorySegment.CONSTANT})

# Ancho en bits del índice: temp 0..7, el resto 0..32767
_INDEX_BITS: Dict[MemorySegment, int] = {MemorySegment.TEMP: 3}
_DEFAULT_INDEX_BITS = 15

def is_segment(token: str) -> bool:
    """Indica si el token nombra un segmento válido."""
    try:
        normalize_segment(token)
        return True
    except ValueError:
        return False

def normalize_segment(token: str) -> MemorySegment:
    """Devuelve el segmento para el token (coincidencia exacta) o lanza ValueError."""
    seg = SEGMENTS.get(token)
    if seg is None:
        raise ValueError(f"Segmento de memoria inválido: '{token}'")
    return seg

def is_writable(seg: MemorySegment) -> bool:
    return seg not in READ_ONLY

def _index_bits(seg: MemorySegment | None) -> int:
    if seg is None:
        return _DEFAULT_INDEX_BITS
    return _INDEX_BITS.get(seg, _DEFAULT_INDEX_BITS)

def index_limit(seg: MemorySegment | None) -> int:
    """Mayor índice admitido por push/pop sobre el segmento.

    Sin segmento resuelto se aplica el límite general.
    """
    return (1 << _index_bits(seg)) - 1

def index_in_range(seg: MemorySegment | None, index: int) -> bool:
    return is_unsigned_nbit(index, _index_bits(seg))
