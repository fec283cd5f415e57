"""Script de ejecución.

Por qué existe:
- Permite ejecutar la CLI con `python -m main` desde `src/` durante desarrollo.
- El entrypoint instalado es el script `quotecard` (ver pyproject.toml).
"""

from __future__ import annotations

import sys

# Windows terminals default to cp1252; the quote card uses typographic quotes.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
