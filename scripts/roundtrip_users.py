#!/usr/bin/env python3
"""
Grava a lista fixa de usuarios em backend/users.json, le o arquivo de volta e
imprime o resultado.

Uso (a partir da raiz do repositorio):
  python scripts/roundtrip_users.py
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Garantir que o pacote backend seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.core.log import configure_logging  # noqa: E402
from backend.services.roundtrip_service import round_trip  # noqa: E402


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(
        description="Write backend/users.json, read it back and print the records"
    )
    ap.parse_args(argv)

    configure_logging()
    round_trip()


if __name__ == "__main__":
    main()
