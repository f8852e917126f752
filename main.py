"""Entry point de desarrollo (sin instalar el paquete).

Permite ejecutar la CLI con `python main.py ...` o `python -m main ...`.
El código vive en `src/` (layout tipo "src"), así que sin un
`pip install -e .` Python no encuentra `cli`, `core` ni `adapters`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
