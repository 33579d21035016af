'''
tablas del lenguaje VM (comandos, operaciones aritméticas, forma de argumentos)
'''

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

class CommandKind(Enum):
    PUSH = "push"
    POP = "pop"
    LABEL = "label"
    GOTO = "goto"
    IF_GOTO = "if-goto"
    FUNCTION = "function"
    RETURN = "return"
    CALL = "call"
    ARITHMETIC = "arithmetic"
    NONE = "none"          # comando no reconocido; nunca llega a la salida

class Operation(Enum):
    ADD = "add"
    SUB = "sub"
    NEG = "neg"
    EQ = "eq"
    GT = "gt"
    LT = "lt"
    AND = "and"
    OR = "or"
    NOT = "not"

class ArgumentKind(Enum):
    NONE = "none"            # hueco del propio comando
    OPERATION = "operation"
    SEGMENT = "segment"
    NUMBER = "number"
    NAME = "name"

@dataclass(frozen=True)
class ArgumentShape:
    """Forma de los argumentos de un comando.

    - arity: número total de huecos, incluido el del propio comando
    - kinds: tipo de cada hueco, en orden
    """
    arity: int
    kinds: Tuple[ArgumentKind, ...]

    @property
    def skips_command(self) -> bool:
        """True si el hueco 0 es el comando y no aparece en la instrucción."""
        return bool(self.kinds) and self.kinds[0] is ArgumentKind.NONE

    @property
    def argc(self) -> int:
        """Número de argumentos que lleva la instrucción construida."""
        return self.arity - 1 if self.skips_command else self.arity

# Palabra en el código fuente -> tipo de comando
COMMANDS: Dict[str, CommandKind] = {
    "push": CommandKind.PUSH,
    "pop": CommandKind.POP,
    "label": CommandKind.LABEL,
    "goto": CommandKind.GOTO,
    "if-goto": CommandKind.IF_GOTO,
    "function": CommandKind.FUNCTION,
    "return": CommandKind.RETURN,
    "call": CommandKind.CALL,
}

# Mnemónico aritmético -> operación (todos comparten CommandKind.ARITHMETIC)
OPERATIONS: Dict[str, Operation] = {op.value: op for op in Operation}

for _mn in OPERATIONS:
    COMMANDS[_mn] = CommandKind.ARITHMETIC

SHAPES: Dict[CommandKind, ArgumentShape] = {}

def _add(kind: CommandKind, *kinds: ArgumentKind):
    SHAPES[kind] = ArgumentShape(arity=len(kinds), kinds=tuple(kinds))

_N = ArgumentKind.NONE

_add(CommandKind.NONE)
_add(CommandKind.ARITHMETIC, ArgumentKind.OPERATION)
_add(CommandKind.PUSH,       _N, ArgumentKind.SEGMENT, ArgumentKind.NUMBER)
_add(CommandKind.POP,        _N, ArgumentKind.SEGMENT, ArgumentKind.NUMBER)
_add(CommandKind.LABEL,      _N, ArgumentKind.NAME)
_add(CommandKind.GOTO,       _N, ArgumentKind.NAME)
_add(CommandKind.IF_GOTO,    _N, ArgumentKind.NAME)
_add(CommandKind.FUNCTION,   _N, ArgumentKind.NAME, ArgumentKind.NUMBER)
_add(CommandKind.CALL,       _N, ArgumentKind.NAME, ArgumentKind.NUMBER)
_add(CommandKind.RETURN,     _N)

def classify(word: str) -> CommandKind:
    """Tipo de comando para la palabra (coincidencia exacta); NONE si no existe."""
    if not word:
        return CommandKind.NONE
    return COMMANDS.get(word, CommandKind.NONE)

def operation(mnemonic: str) -> Operation:
    """Devuelve la operación de un mnemónico aritmético o lanza KeyError."""
    if mnemonic not in OPERATIONS:
        raise KeyError(f"Operación aritmética desconocida: {mnemonic}")
    return OPERATIONS[mnemonic]

def shape(kind: CommandKind) -> ArgumentShape:
    """Forma de argumentos de un tipo de comando."""
    return SHAPES[kind]
