from __future__ import annotations
from typing import Iterable, List
from .ast import Instruction, Op, Seg, Num, Name, ArgumentValue
from .commands import CommandKind

def _arg_text(a: ArgumentValue) -> str:
    if isinstance(a, Seg):
        return a.segment.value
    if isinstance(a, Num):
        return str(a.value)
    if isinstance(a, Name):
        return a.name
    if isinstance(a, Op):
        return a.op.value
    raise TypeError(f"Valor de argumento desconocido: {a!r}")

def format_instruction(instr: Instruction) -> str:
    """Texto canónico de la instrucción (el mismo que aceptaría el tokenizador)."""
    if instr.kind is CommandKind.ARITHMETIC:
        return _arg_text(instr.args[0])
    return " ".join([instr.kind.value] + [_arg_text(a) for a in instr.args])

def to_listing_lines(instrs: Iterable[Instruction]) -> List[str]:
    return [f"{(i.line if i.line is not None else '-'):>5}  {format_instruction(i)}" for i in instrs]
