from __future__ import annotations
import argparse, sys

from .parser import scan_stream, ScanResult
from .diagnostics import note
from .writers import to_listing_lines

def scan_file(path: str, *, strict: bool = False) -> ScanResult:
    """Abre el fuente y lo tokeniza completo."""
    with open(path, "r", encoding="utf-8-sig") as f:
        return scan_stream(f, filename=path, strict=strict)

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="VM language tokenizer/validator")
    ap.add_argument("source", help="archivo .vm de entrada")
    ap.add_argument("--strict", action="store_true",
                    help="tratar los comandos desconocidos como error")
    ap.add_argument("--listing", action="store_true",
                    help="imprimir las instrucciones tokenizadas en stdout")
    args = ap.parse_args(argv)

    try:
        res = scan_file(args.source, strict=args.strict)
    except MemoryError:
        print("ERROR: memoria agotada", file=sys.stderr)
        return 3
    except (OSError, UnicodeDecodeError) as ex:
        print(f"ERROR: no pude leer {args.source}: {ex}", file=sys.stderr)
        return 2

    # imprimimos todo; si hubo error, devolvemos código 1
    for d in res.diagnostics:
        print(d, file=sys.stderr)

    if res.failed or res.instructions is None:
        print(note("fallo al compilar; no se generó la lista de instrucciones", file=args.source),
              file=sys.stderr)
        return 1

    if args.listing:
        for line in to_listing_lines(res.instructions):
            print(line)

    print(f"OK: {len(res.instructions)} instrucciones en {args.source}", file=sys.stderr)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
