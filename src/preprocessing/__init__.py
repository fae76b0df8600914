"""
Módulo de pré-processamento do log de telemetria.

Localiza as colunas pelo nome e transforma as células de texto em séries
numéricas já convertidas para as unidades de saída (mph, hp, ft·lb, s).
"""

from .columns import resolve_columns, find_column
from .series import extract_series

__all__ = [
    "resolve_columns",
    "find_column",
    "extract_series",
]
