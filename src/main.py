"""Script de ejecución de la CLI desde `src/` (`python main.py ...`)."""

from __future__ import annotations

import sys

# Terminales Windows con cp1252 no pueden imprimir los símbolos de moneda.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
