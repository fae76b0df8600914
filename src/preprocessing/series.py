"""
Extração de séries numéricas tipadas a partir das células do log.

Cada campo semântico vira um array NumPy de floats, na ordem original das
linhas, com a conversão de unidade aplicada durante a extração:
- Speed: m/s → mph
- Power: W → hp mecânico
- Torque: N·m → ft·lb
- TimestampMS: ms → s

Todas as séries extraídas de um mesmo log têm o mesmo tamanho; o índice i
refere-se ao mesmo ponto de telemetria em todas elas.
"""

from typing import Callable, Iterable, Mapping

import numpy as np
import pandas as pd

from src.extraction.log_loader import TelemetryLog
from src.utils.errors import MalformedDataError

MPH_PER_MPS = 2.237
HP_PER_WATT = 0.0013410220888
FTLB_PER_NM = 0.7375621493
MS_PER_SECOND = 1000.0


def mps_to_mph(values):
    return values * MPH_PER_MPS


def mph_to_mps(values):
    return values / MPH_PER_MPS


def watts_to_hp(values):
    return values * HP_PER_WATT


def hp_to_watts(values):
    return values / HP_PER_WATT


def nm_to_ftlb(values):
    return values * FTLB_PER_NM


def ftlb_to_nm(values):
    return values / FTLB_PER_NM


def ms_to_seconds(values):
    return values / MS_PER_SECOND


# Conversões aplicadas na extração; campos fora do mapa ficam na unidade nativa
UNIT_CONVERSIONS: dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "Speed": mps_to_mph,
    "Power": watts_to_hp,
    "Torque": nm_to_ftlb,
    "TimestampMS": ms_to_seconds,
}


def parse_numeric_cells(cells: pd.Series, field: str) -> np.ndarray:
    """
    Converte células de texto em floats, falhando na primeira célula inválida.

    Args:
        cells: Células brutas de uma coluna
        field: Nome do campo (usado na mensagem de erro)

    Returns:
        Array float64 com um valor por linha

    Raises:
        MalformedDataError: Se alguma célula não for um número finito
    """
    values = pd.to_numeric(cells.str.strip(), errors="coerce").to_numpy(dtype=float)

    invalid = ~np.isfinite(values)
    if invalid.any():
        position = int(np.argmax(invalid))
        raise MalformedDataError(field, position + 1, str(cells.iloc[position]))

    return values


def extract_series(
    log: TelemetryLog,
    columns: Mapping[str, int],
    fields: Iterable[str],
) -> dict[str, np.ndarray]:
    """
    Extrai uma série numérica por campo semântico.

    Args:
        log: Log de telemetria carregado
        columns: Mapa {campo: índice} produzido por resolve_columns
        fields: Campos a extrair

    Returns:
        Dicionário {campo: array} já nas unidades de saída

    Raises:
        MalformedDataError: Na primeira célula não numérica (sem resultados parciais)

    Example:
        >>> cols = resolve_columns(log.header, ["Speed"])
        >>> series = extract_series(log, cols, ["Speed"])
        >>> series["Speed"].max()  # mph
    """
    series = {}

    for field in fields:
        values = parse_numeric_cells(log.column_cells(columns[field]), field)

        convert = UNIT_CONVERSIONS.get(field)
        if convert is not None:
            values = convert(values)

        series[field] = values

    return series
