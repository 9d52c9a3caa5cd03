#!/usr/bin/env python3
"""Build a static index.html listing the HTML documents of a folder.

Usage:
  mkindex --path ./docs --output ./indice
  mkindex -p ./html -o .

Each document is listed by its first <h1> and the first <p> after it,
sorted by title.
"""
from __future__ import annotations
import argparse, logging, pathlib, sys
from typing import Optional, Sequence

from catalog.builder import build_catalog
from catalog.renderer import write_index
from core.config import settings

__version__ = "1.0.0"

EPILOG = """Ejemplos:
  mkindex --path ./docs --output ./indice
  mkindex -p ./html -o .
"""

class ArgumentParser(argparse.ArgumentParser):
    """argparse that reports usage errors with exit code 1."""

    def error(self, message: str):
        print(f"Error: {message}", file=sys.stderr)
        self.print_help(sys.stderr)
        raise SystemExit(1)

def build_parser() -> ArgumentParser:
    ap = ArgumentParser(
        prog="mkindex",
        description="Genera un índice de documentos exacto con títulos y descripciones.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    ap.add_argument("-p", "--path", metavar="RUTA", help="Directorio con archivos HTML")
    ap.add_argument("-o", "--output", metavar="RUTA", default=".", help="Directorio de salida para index.html")
    ap.add_argument("-v", "--verbose", action="store_true", help="Muestra el progreso en stderr")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap

VALUE_FLAGS = ("-p", "--path", "-o", "--output")

def check_tokens(ap: ArgumentParser, argv: Sequence[str]) -> None:
    """Only whole option names are valid; `-pDIR` and `--path=DIR` are not."""
    known = {opt for action in ap._actions for opt in action.option_strings}
    tokens = iter(argv)
    for tok in tokens:
        if tok in VALUE_FLAGS:
            next(tokens, None)
        elif tok not in known:
            ap.error(f"Argumento desconocido {tok}")

def resolve_output(output: str) -> pathlib.Path:
    if output in (".", "./"):
        return pathlib.Path.cwd()
    return pathlib.Path(output)

def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    ap = build_parser()
    if not argv:
        ap.print_help()
        return 1
    check_tokens(ap, argv)
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler()],
    )

    if not args.path:
        print("Error: Debes especificar una ruta con --path", file=sys.stderr)
        ap.print_help(sys.stderr)
        return 1
    src = pathlib.Path(args.path)
    if not src.is_dir():
        print(f"Error: El directorio no existe: {args.path}", file=sys.stderr)
        return 1

    try:
        entries = build_catalog(src)
        out_file = write_index(entries, resolve_output(args.output))
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Índice generado exitosamente en: {out_file}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
