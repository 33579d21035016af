# src/vm_lex/parser.py
from __future__ import annotations
import io
from dataclasses import dataclass
from typing import List, Optional, TextIO, Tuple

from .lexer import read_lines, SourceLine
from .commands import CommandKind, ArgumentKind, classify, operation, shape
from .segments import MemorySegment, normalize_segment, is_writable, index_in_range, index_limit
from .ast import Instruction, ArgumentValue, Op, Seg, Num, Name
from .instrlist import InstructionList
from .diagnostics import Diagnostic, ErrorKind, error, warning, has_errors
from .utils import parse_decimal

_KIND_LABEL = {
    ArgumentKind.SEGMENT: "segmento",
    ArgumentKind.NUMBER: "número",
    ArgumentKind.NAME: "nombre",
}

@dataclass(frozen=True)
class ScanResult:
    """Resultado de tokenizar un fuente completo.

    Si ``failed`` es True, ``instructions`` es None: nunca se entrega una lista parcial.
    """
    instructions: Optional[InstructionList]
    diagnostics: List[Diagnostic]
    failed: bool

class ScanError(Exception):
    """El fuente tiene errores; la lista de instrucciones no es utilizable."""

    def __init__(self, diagnostics: List[Diagnostic]):
        self.diagnostics = list(diagnostics)
        n = sum(1 for d in self.diagnostics if d.is_error)
        super().__init__(f"Fallo al compilar: {n} error(es)")

def parse_line(src: SourceLine, *, filename: Optional[str] = None,
               strict: bool = False) -> Tuple[Optional[Instruction], List[Diagnostic]]:
    """
    Tokeniza una línea lógica ya clasificable. Devuelve (instrucción, diagnostics);
    la instrucción es None si la línea tiene algún error.

    Reglas:
      - El comando se clasifica por coincidencia exacta; si no existe se reporta
        como advertencia (error si strict) y la línea se descarta.
      - Cada hueco de la forma consume la siguiente palabra; si falta, se reporta
        y se siguen revisando los huecos restantes.
      - push/pop validan el índice según el segmento leído antes en la misma línea.
      - Palabras sobrantes: advertencia.
    """
    diags: List[Diagnostic] = []
    lineno = src.lineno

    if not src.words:
        return None, diags

    cmd = src.words[0]
    kind = classify(cmd.text)

    if kind is CommandKind.NONE:
        report = error if strict else warning
        diags.append(report(f"Comando desconocido '{cmd.text}'", line=lineno, col=cmd.col,
                            file=filename, code=ErrorKind.UNKNOWN_COMMAND))
        return None, diags

    fmt = shape(kind)
    args: List[ArgumentValue] = []

    if not fmt.skips_command:
        # ARITHMETIC: el hueco 0 es la operación, tomada del propio mnemónico
        args.append(Op(operation(cmd.text)))

    rest = src.words[1:]
    seg: Optional[MemorySegment] = None
    for i, akind in enumerate(fmt.kinds[1:]):
        if i >= len(rest):
            diags.append(error(
                f"Falta {_KIND_LABEL.get(akind, akind.value)} en la línea '{src.text}'",
                line=lineno, file=filename,
                code=ErrorKind.MISSING_ARGUMENT))
            continue
        w = rest[i]

        if akind is ArgumentKind.SEGMENT:
            try:
                seg = normalize_segment(w.text)
            except ValueError as ex:
                diags.append(error(str(ex), line=lineno, col=w.col, file=filename,
                                   code=ErrorKind.INVALID_SEGMENT))
                continue
            if kind is CommandKind.POP and not is_writable(seg):
                diags.append(error(f"No se puede hacer pop sobre el segmento '{seg.value}'",
                                   line=lineno, col=w.col, file=filename,
                                   hint="constant es de solo lectura",
                                   code=ErrorKind.WRITE_TO_CONSTANT))
                continue
            args.append(Seg(seg))

        elif akind is ArgumentKind.NUMBER:
            try:
                num = parse_decimal(w.text)
            except ValueError:
                diags.append(error(f"No se pudo leer el número '{w.text}' en la línea '{src.text}'",
                                   line=lineno, col=w.col, file=filename,
                                   code=ErrorKind.NUMBER_PARSE))
                continue
            if kind in (CommandKind.PUSH, CommandKind.POP) and not index_in_range(seg, num):
                name = seg.value if seg is not None else "de memoria"
                diags.append(error(f"Índice {num} del segmento {name} fuera de rango",
                                   line=lineno, col=w.col, file=filename,
                                   hint=f"debe estar entre 0 y {index_limit(seg)}",
                                   code=ErrorKind.NUMBER_OUT_OF_RANGE))
                continue
            args.append(Num(num))

        elif akind is ArgumentKind.NAME:
            args.append(Name(w.text))

    extra = rest[fmt.arity - 1:]
    if extra:
        diags.append(warning(f"Argumentos sobrantes en '{src.text}': "
                             + " ".join(w.text for w in extra),
                             line=lineno, col=extra[0].col, file=filename,
                             code=ErrorKind.EXTRA_ARGUMENT))

    if has_errors(diags):
        return None, diags
    return Instruction(kind=kind, args=tuple(args), line=lineno, col=cmd.col), diags

def scan_stream(stream: TextIO, *, filename: Optional[str] = None,
                strict: bool = False) -> ScanResult:
    """Tokeniza todo el flujo. Los errores por línea no detienen el recorrido;
    se acumulan en un único veredicto. MemoryError no se captura."""
    instrs = InstructionList()
    diags: List[Diagnostic] = []
    failed = False

    for src in read_lines(stream):
        instr, line_diags = parse_line(src, filename=filename, strict=strict)
        diags.extend(line_diags)
        if instr is None:
            failed |= has_errors(line_diags)
            continue
        instrs.append(instr)

    if failed:
        instrs.destroy()
        return ScanResult(instructions=None, diagnostics=diags, failed=True)
    return ScanResult(instructions=instrs, diagnostics=diags, failed=False)

def scan_text(text: str, *, filename: Optional[str] = None, strict: bool = False) -> ScanResult:
    return scan_stream(io.StringIO(text), filename=filename, strict=strict)

def tokenize(stream: TextIO, *, filename: Optional[str] = None,
             strict: bool = False) -> InstructionList:
    """Como scan_stream, pero lanza ScanError si hubo algún error."""
    res = scan_stream(stream, filename=filename, strict=strict)
    if res.failed or res.instructions is None:
        raise ScanError(res.diagnostics)
    return res.instructions
