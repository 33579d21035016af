'''
dataclases de la salida del tokenizador (Instruction y valores de argumento)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union, Optional

from .commands import CommandKind, Operation, ArgumentKind, shape
from .segments import MemorySegment, is_writable, index_in_range, index_limit

# ---- Valores de argumento (unión etiquetada) ----

@dataclass(frozen=True)
class Op:
    """Operación aritmética/lógica, resuelta desde el propio mnemónico."""
    op: Operation

    @property
    def kind(self) -> ArgumentKind:
        return ArgumentKind.OPERATION

@dataclass(frozen=True)
class Seg:
    """Segmento de memoria de push/pop."""
    segment: MemorySegment

    @property
    def kind(self) -> ArgumentKind:
        return ArgumentKind.SEGMENT

@dataclass(frozen=True)
class Num:
    """Número decimal (índice de segmento o contador de function/call)."""
    value: int

    @property
    def kind(self) -> ArgumentKind:
        return ArgumentKind.NUMBER

@dataclass(frozen=True)
class Name:
    """Nombre de etiqueta o de función, copiado tal cual."""
    name: str

    @property
    def kind(self) -> ArgumentKind:
        return ArgumentKind.NAME

ArgumentValue = Union[Op, Seg, Num, Name]

# ---- Instrucción ----

@dataclass(frozen=True)
class Instruction:
    """Instrucción validada: tipo de comando y argumentos tipados.

    Al construirse comprueba que el número de argumentos y el tipo de cada hueco
    coinciden con la forma del comando, y que push/pop respetan el segmento
    (pop nunca sobre constant, índice dentro del rango del segmento).
    """
    kind: CommandKind
    args: Tuple[ArgumentValue, ...]
    line: Optional[int] = None
    col: Optional[int] = None

    def __post_init__(self):
        if self.kind is CommandKind.NONE:
            raise ValueError("No se puede construir una instrucción de tipo NONE")
        object.__setattr__(self, "args", tuple(self.args))
        fmt = shape(self.kind)
        expected = fmt.kinds[1:] if fmt.skips_command else fmt.kinds
        got = tuple(a.kind for a in self.args)
        if got != expected:
            raise ValueError(
                f"Argumentos de {self.kind.value} no coinciden con su forma: "
                f"{[k.value for k in got]} != {[k.value for k in expected]}")
        if self.kind in (CommandKind.PUSH, CommandKind.POP):
            seg, num = self.args[0].segment, self.args[1].value
            if self.kind is CommandKind.POP and not is_writable(seg):
                raise ValueError(f"No se puede hacer pop sobre el segmento '{seg.value}'")
            if not index_in_range(seg, num):
                raise ValueError(f"Índice {num} del segmento {seg.value} fuera de rango "
                                 f"(0..{index_limit(seg)})")

    @property
    def argc(self) -> int:
        return len(self.args)

    @property
    def operation(self) -> Optional[Operation]:
        a = self.args[0] if self.args else None
        return a.op if isinstance(a, Op) else None

    @property
    def segment(self) -> Optional[MemorySegment]:
        for a in self.args:
            if isinstance(a, Seg):
                return a.segment
        return None

    @property
    def number(self) -> Optional[int]:
        for a in self.args:
            if isinstance(a, Num):
                return a.value
        return None

    @property
    def name(self) -> Optional[str]:
        for a in self.args:
            if isinstance(a, Name):
                return a.name
        return None
