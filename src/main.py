"""Script de ejecución.

- Permite ejecutar la CLI con `python -m main` desde `src/`.
- Mantiene un entrypoint simple además del script `rescue-dogs`.
"""

from __future__ import annotations

import sys

# Windows terminals default to cp1252; Rich output needs utf-8.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
