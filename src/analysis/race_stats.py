"""
Estatísticas de corrida: melhor volta, velocidade máxima na pista e setores.
"""

import logging

from src.extraction.log_loader import TelemetryLog
from src.models.course import CourseLayout
from src.models.stats import RaceStats
from src.preprocessing.columns import RACE_COLUMNS, resolve_columns
from src.preprocessing.series import extract_series
from src.analysis.sectors import best_lap_time, compute_sector_splits
from src.utils.config import get_config

logger = logging.getLogger(__name__)


def calculate_race_stats(log: TelemetryLog, course: CourseLayout | None = None) -> RaceStats:
    """
    Calcula as estatísticas de uma corrida gravada no log.

    Args:
        log: Log de telemetria da corrida
        course: Traçado do circuito (padrão: o configurado em config.yaml)

    Returns:
        RaceStats com melhor volta, velocidade máxima e tempos de setor

    Raises:
        EmptyInputError: Se o log não tem linhas de dados
        MissingColumnError: Se faltar alguma coluna de corrida
        MalformedDataError: Se alguma célula não for numérica
    """
    if course is None:
        course = get_config().get_course_layout()

    log.require_data()

    columns = resolve_columns(log.header, RACE_COLUMNS)
    series = extract_series(log, columns, RACE_COLUMNS)

    distance = series["DistanceTraveled"]
    lap_number = series["LapNumber"]
    lap_time = series["CurrentLap"]

    best_lap = best_lap_time(series["BestLap"], distance, lap_number, lap_time, course)
    sectors = compute_sector_splits(distance, lap_number, lap_time, best_lap, course)
    top_speed = float(series["Speed"].max())

    logger.info(
        "%s: melhor volta %.3fs, velocidade máxima %.2f mph (%d pontos)",
        course.name,
        best_lap,
        top_speed,
        len(log),
    )

    return RaceStats(best_lap=best_lap, top_speed=top_speed, sectors=sectors)
