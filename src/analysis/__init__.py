"""
Módulo de análise de telemetria.

Calcula intervalos de aceleração e frenagem, tempos de setor e as linhas de
estatísticas gravadas no leaderboard.
"""

from .intervals import duration_between
from .sectors import compute_sector_splits, best_lap_time
from .stats import calculate_stats
from .race_stats import calculate_race_stats
from .ordinals import get_ordinal_number, get_all_ordinal_numbers
from .leaderboard import (
    parse_car_catalog,
    lookup_car,
    build_leaderboard_row,
    build_ordinal_rows,
)

__all__ = [
    # Intervalos de velocidade
    "duration_between",
    # Setores e volta
    "compute_sector_splits",
    "best_lap_time",
    # Agregadores
    "calculate_stats",
    "calculate_race_stats",
    # Ordinais
    "get_ordinal_number",
    "get_all_ordinal_numbers",
    # Leaderboard
    "parse_car_catalog",
    "lookup_car",
    "build_leaderboard_row",
    "build_ordinal_rows",
]
