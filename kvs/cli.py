#!/usr/bin/env python3
"""
kvs - CLI que ejecuta órdenes set/get/rm sobre un KvStore en memoria.
El almacén no persiste: cada invocación empieza con uno vacío y ejecuta el
script completo (--script o stdin) sobre él.
Solo usa la biblioteca estándar de Python.
"""

from __future__ import annotations

import argparse
import json
import shlex
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Callable, Iterable, TextIO

from kvs import __version__
from kvs.store import KvStore

# Mensaje de `get` en salida text cuando la clave no existe
KEY_NOT_FOUND = "Key not found"


class CommandError(ValueError):
    """Línea de script mal formada."""

    def __init__(self, lineno: int, message: str) -> None:
        super().__init__(f"línea {lineno}: {message}")
        self.lineno = lineno


@dataclass
class Command:
    """Orden ya parseada de una línea del script."""
    lineno: int
    name: str
    args: tuple[str, ...]


@dataclass
class GetResult:
    """Resultado de una orden get."""
    lineno: int
    key: str
    value: str | None
    found: bool


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos del CLI."""
    parser = argparse.ArgumentParser(
        prog="kvs",
        description="Ejecuta órdenes set/get/rm sobre un almacén clave-valor en memoria.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--script",
        type=Path,
        default=None,
        metavar="PATH",
        help="Fichero con una orden por línea (default: stdin)",
    )
    parser.add_argument(
        "--out",
        choices=("json", "text"),
        default="json",
        help="Formato de salida: json o text (default: json)",
    )
    return parser.parse_args(argv)


# Número de argumentos que espera cada orden
ARITY = {"set": 2, "get": 1, "rm": 1}


def parse_line(lineno: int, line: str) -> Command | None:
    """Parsea una línea; devuelve None para líneas vacías o comentarios."""
    # '#' sólo abre comentario al inicio de línea
    if line.lstrip().startswith("#"):
        return None
    try:
        tokens = shlex.split(line)
    except ValueError as exc:
        raise CommandError(lineno, str(exc)) from exc
    if not tokens:
        return None
    name, args = tokens[0], tuple(tokens[1:])
    if name not in ARITY:
        raise CommandError(lineno, f"orden desconocida '{name}'")
    if len(args) != ARITY[name]:
        raise CommandError(
            lineno, f"'{name}' espera {ARITY[name]} argumento(s), recibió {len(args)}"
        )
    return Command(lineno, name, args)


def parse_script(lines: Iterable[str]) -> list[Command]:
    """Parsea todas las líneas antes de ejecutar nada."""
    commands: list[Command] = []
    for lineno, line in enumerate(lines, start=1):
        cmd = parse_line(lineno, line)
        if cmd is not None:
            commands.append(cmd)
    return commands


def run_commands(store: KvStore, commands: list[Command]) -> list[GetResult]:
    """Ejecuta las órdenes en orden y devuelve los resultados de cada get."""
    results: list[GetResult] = []
    handlers: dict[str, Callable[[Command], None]] = {
        "set": lambda c: store.set(c.args[0], c.args[1]),
        "rm": lambda c: store.remove(c.args[0]),
        "get": lambda c: results.append(_get(store, c)),
    }
    for cmd in commands:
        handlers[cmd.name](cmd)
    return results


def _get(store: KvStore, cmd: Command) -> GetResult:
    key = cmd.args[0]
    value = store.get(key)
    return GetResult(cmd.lineno, key, value, value is not None)


def build_report(store: KvStore, commands: list[Command], results: list[GetResult]) -> dict:
    """Construye el reporte para salida JSON."""
    return {
        "version": __version__,
        "commands": len(commands),
        "entries": len(store),
        "results": [asdict(r) for r in results],
    }


def output_json(report: dict) -> None:
    """Imprime el reporte en JSON."""
    print(json.dumps(report, indent=2, ensure_ascii=False))


def output_text(report: dict) -> None:
    """Imprime una línea por cada get: el valor o KEY_NOT_FOUND."""
    for r in report["results"]:
        print(r["value"] if r["found"] else KEY_NOT_FOUND)


def read_script(path: Path | None, stdin: TextIO) -> list[str]:
    """Lee las líneas del script o de stdin."""
    if path is None:
        return stdin.read().splitlines()
    return path.read_text(encoding="utf-8").splitlines()


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada."""
    args = parse_args(argv)

    if args.script is not None:
        if not args.script.exists():
            print("Error: el script no existe.", file=sys.stderr)
            return 1
        if not args.script.is_file():
            print("Error: el script no es un fichero.", file=sys.stderr)
            return 1

    try:
        lines = read_script(args.script, sys.stdin)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: no se pudo leer el script: {exc}", file=sys.stderr)
        return 1

    try:
        commands = parse_script(lines)
    except CommandError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    store = KvStore()
    results = run_commands(store, commands)
    report = build_report(store, commands, results)

    if args.out == "text":
        output_text(report)
    else:
        output_json(report)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
