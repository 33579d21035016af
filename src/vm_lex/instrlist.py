'''
lista de instrucciones: inserción al final, recorrido en orden y liberación iterativa
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .ast import Instruction, Name

@dataclass(frozen=True)
class Released:
    """Recuento de lo liberado por InstructionList.destroy()."""
    nodes: int
    names: int

class InstructionList:
    """Secuencia ordenada de instrucciones validadas.

    El orden de inserción es el de las líneas del fuente. Los nodos se guardan en
    una lista de Python (arena por índice), de modo que destroy() recorre los
    huecos en un bucle y no depende de la longitud para el uso de pila.
    """

    def __init__(self) -> None:
        self._nodes: List[Optional[Instruction]] = []
        self._closed = False

    def append(self, instr: Instruction) -> None:
        if self._closed:
            raise RuntimeError("La lista de instrucciones ya fue liberada")
        if not isinstance(instr, Instruction):
            raise TypeError(f"Se esperaba Instruction, obtuve {instr!r}")
        self._nodes.append(instr)

    def __iter__(self) -> Iterator[Instruction]:
        for n in self._nodes:
            if n is not None:
                yield n

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, i: int) -> Instruction:
        n = self._nodes[i]
        if n is None:
            raise IndexError(f"Instrucción {i} ya liberada")
        return n

    def __bool__(self) -> bool:
        return bool(self._nodes)

    @property
    def closed(self) -> bool:
        return self._closed

    def names(self) -> Iterator[str]:
        """Nombres (etiquetas/funciones) propiedad de las instrucciones de la lista."""
        for instr in self:
            for a in instr.args:
                if isinstance(a, Name):
                    yield a.name

    def destroy(self) -> Released:
        """Libera cada nodo y cada nombre una sola vez.

        Una segunda llamada no libera nada y devuelve Released(0, 0).
        """
        nodes = names = 0
        for i, n in enumerate(self._nodes):
            if n is None:
                continue
            names += sum(1 for a in n.args if isinstance(a, Name))
            self._nodes[i] = None
            nodes += 1
        self._nodes.clear()
        self._closed = True
        return Released(nodes=nodes, names=names)

    def __repr__(self) -> str:
        return f"InstructionList({len(self)} instrucciones)"
