"""
Forza Stat Builder - Main Entry Point

Atalho para a CLI de análise em cli/analyze.py.

Usage:
    # Estatísticas do carro
    uv run python main.py --log log.csv

    # Melhor volta e setores
    uv run python main.py --log log.csv --race

    # Todas as opções
    uv run python cli/analyze.py --help
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "cli"))

from analyze import main


if __name__ == "__main__":
    sys.exit(main())
