"""
Modelos Pydantic das estatísticas de telemetria e do catálogo de carros.
"""

from .course import CourseLayout
from .stats import (
    IntervalResult,
    StatLine,
    SectorSplits,
    RaceStats,
)
from .car import CarInfo

__all__ = [
    # Traçado do circuito
    "CourseLayout",
    # Estatísticas calculadas
    "IntervalResult",
    "StatLine",
    "SectorSplits",
    "RaceStats",
    # Catálogo de carros
    "CarInfo",
]
