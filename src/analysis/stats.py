"""
Agregador das estatísticas gerais do carro.

Orquestra resolução de colunas, extração de séries e cálculo de intervalos
para montar a StatLine de um teste de aceleração e frenagem. Falhas em um
intervalo individual viram placeholder; qualquer outro erro aborta o cálculo.
"""

import logging

import numpy as np

from src.analysis.intervals import duration_between
from src.extraction.log_loader import TelemetryLog
from src.models.stats import IntervalResult, StatLine
from src.preprocessing.columns import STATS_COLUMNS, resolve_columns
from src.preprocessing.series import extract_series
from src.utils.config import get_config
from src.utils.errors import IntervalError, MalformedDataError

logger = logging.getLogger(__name__)

DRIVETRAIN_LABELS = {0: "FWD", 1: "RWD", 2: "AWD"}

BASE_INTERVALS = ((0, 60), (0, 100))
BRAKING_INTERVALS = ((60, 0), (100, 0))

# Intervalos extras por classe: D e C | B e A | S1, S2 e X
CLASS_INTERVALS = {
    "0": ((25, 75), (50, 100)),
    "1": ((25, 75), (50, 100)),
    "2": ((50, 100), (60, 150)),
    "3": ((50, 100), (60, 150)),
}
TOP_CLASS_INTERVALS = ((60, 150), (100, 200))

# Séries numéricas do teste (CarPerformanceIndex, DrivetrainType e CarClass são categóricos)
NUMERIC_FIELDS = ["TimestampMS", "Speed", "Power", "Torque", "Boost", "Gear"]


def class_intervals(car_class: str) -> tuple[tuple[float, float], ...]:
    """Intervalos de aceleração específicos da classe de performance."""
    return CLASS_INTERVALS.get(car_class.strip(), TOP_CLASS_INTERVALS)


def drivetrain_label(cell: str) -> str:
    """
    Converte o código de tração do jogo em rótulo.

    Raises:
        MalformedDataError: Se o código não for inteiro
    """
    try:
        code = int(cell.strip())
    except ValueError as exc:
        raise MalformedDataError("DrivetrainType", 1, cell) from exc
    return DRIVETRAIN_LABELS.get(code, "")


def peak_horsepower(power: np.ndarray, gear: np.ndarray) -> float:
    """
    Potência máxima desconsiderando a 1ª marcha.

    Na largada, batendo no limitador em 1ª, o jogo reporta potência acima da
    real. Carros de marcha única (ex: elétricos) usam todas as amostras.
    """
    if len(np.unique(gear)) == 1:
        return float(power.max())

    return float(power[gear != 1].max())


def measure_interval(
    start_speed: float,
    end_speed: float,
    times: np.ndarray,
    speeds: np.ndarray,
    margin: float,
) -> IntervalResult:
    """Calcula um intervalo, convertendo falhas recuperáveis em resultado vazio."""
    try:
        seconds = duration_between(start_speed, end_speed, times, speeds, margin=margin)
    except IntervalError as exc:
        logger.warning("Intervalo %g-%g mph falhou: %s", start_speed, end_speed, exc)
        return IntervalResult(start_speed=start_speed, end_speed=end_speed, error=str(exc))

    return IntervalResult(start_speed=start_speed, end_speed=end_speed, seconds=seconds)


def calculate_stats(log: TelemetryLog, margin: float | None = None) -> StatLine:
    """
    Calcula as estatísticas gerais do carro a partir do log.

    Args:
        log: Log de telemetria do teste
        margin: Folga dos limiares de velocidade (padrão: config.yaml)

    Returns:
        StatLine com potência, torque, boost, velocidades e intervalos

    Raises:
        EmptyInputError: Se o log não tem linhas de dados
        MissingColumnError: Se faltar alguma coluna de estatísticas
        MalformedDataError: Se alguma célula não for numérica

    Example:
        >>> stats = calculate_stats(load_log("log.csv"))
        >>> stats.to_row()
        ['800', 'AWD', '612', '540', '2.871', ...]
    """
    if margin is None:
        margin = get_config().get_threshold_margin()

    log.require_data()

    columns = resolve_columns(log.header, STATS_COLUMNS)
    series = extract_series(log, columns, NUMERIC_FIELDS)

    times = series["TimestampMS"]
    speeds = series["Speed"]

    performance_index = log.first_row_cell(columns["CarPerformanceIndex"])
    car_class = log.first_row_cell(columns["CarClass"])
    drivetrain = drivetrain_label(log.first_row_cell(columns["DrivetrainType"]))

    acceleration = [
        measure_interval(start, end, times, speeds, margin)
        for start, end in BASE_INTERVALS + class_intervals(car_class)
    ]
    braking = [
        measure_interval(start, end, times, speeds, margin)
        for start, end in BRAKING_INTERVALS
    ]

    stat_line = StatLine(
        performance_index=performance_index,
        car_class=car_class,
        drivetrain=drivetrain,
        peak_hp=peak_horsepower(series["Power"], series["Gear"]),
        peak_torque=float(series["Torque"].max()),
        peak_boost=float(series["Boost"].max()),
        top_speed=float(speeds.max()),
        average_speed=float(speeds.mean()),
        acceleration=acceleration,
        braking=braking,
    )

    failed = [i.label for i in acceleration + braking if i.failed]
    logger.info(
        "Estatísticas calculadas: %d pontos, PI %s, %d intervalos com falha%s",
        len(log),
        performance_index,
        len(failed),
        f" ({', '.join(failed)})" if failed else "",
    )

    return stat_line
