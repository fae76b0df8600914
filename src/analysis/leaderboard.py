"""
Montagem das linhas gravadas na planilha do leaderboard.

A planilha tem duas abas relevantes:
- "Ordinal Data": catálogo de carros (ordinal + 12 colunas descritivas)
- "Stat Builder": uma linha por carro testado, combinando o catálogo com as
  estatísticas calculadas do log

Este módulo só transforma dados; o envio para a planilha fica fora daqui.
"""

import logging
from typing import Iterable, Mapping, Sequence

from src.models.car import CarInfo
from src.models.stats import StatLine
from src.utils.errors import CarNotRegisteredError

logger = logging.getLogger(__name__)

CATALOG_FIELDS = [
    "ordinal",
    "manufacturer",
    "model",
    "year",
    "country",
    "designation",
    "car_type",
    "drivetrain",
    "setup",
    "engine",
    "aspiration",
    "litreage",
    "value",
]


def parse_car_catalog(rows: Iterable[Sequence]) -> dict[str, CarInfo]:
    """
    Converte as linhas da aba de ordinais em um catálogo {ordinal: CarInfo}.

    Linhas incompletas (menos de 13 células) são ignoradas. Se um ordinal se
    repete, vale a última linha.
    """
    catalog = {}
    skipped = 0

    for row in rows:
        if len(row) < len(CATALOG_FIELDS):
            skipped += 1
            continue
        values = {field: str(cell) for field, cell in zip(CATALOG_FIELDS, row)}
        catalog[values["ordinal"]] = CarInfo(**values)

    logger.info("Catálogo de carros: %d carros (%d linhas incompletas ignoradas)", len(catalog), skipped)
    return catalog


def lookup_car(ordinal: str, catalog: Mapping[str, CarInfo]) -> CarInfo:
    """
    Busca um carro no catálogo.

    Raises:
        CarNotRegisteredError: Se o ordinal não está no catálogo
    """
    try:
        return catalog[ordinal]
    except KeyError:
        raise CarNotRegisteredError(ordinal) from None


def build_leaderboard_row(
    stat_line: StatLine,
    car: CarInfo,
    placeholder: str = "Failed!",
) -> list[str]:
    """
    Monta a linha do leaderboard na ordem das colunas da planilha.

    Campos que o log não fornece (melhor volta, bandeira, peso, potência por
    peso, velocidade na pista, força G lateral) ficam em branco.
    """
    stats = stat_line.to_row(placeholder)
    (
        performance_index,
        drivetrain,
        peak_hp,
        peak_torque,
        zero_to_60,
        zero_to_100,
        class_interval_1,
        class_interval_2,
        sixty_to_zero,
        hundred_to_zero,
        top_speed,
        peak_boost,
    ) = stats

    return [
        car.full_name,
        "",  # melhor volta
        car.year,
        car.country,
        "",  # bandeira
        performance_index,
        car.designation,
        car.car_type,
        drivetrain,
        car.setup,
        car.litreage,
        car.engine,
        car.aspiration,
        peak_boost,
        peak_hp,
        peak_torque,
        "",  # peso
        "",  # potência/peso
        zero_to_60,
        zero_to_100,
        class_interval_1,
        class_interval_2,
        top_speed,
        "",  # velocidade máxima na pista
        sixty_to_zero,
        hundred_to_zero,
        "",  # G lateral a 60 mph
        "",  # G lateral a 120 mph
        car.value,
    ]


def build_ordinal_rows(ordinals: Iterable[str]) -> list[list[str]]:
    """Uma linha de uma célula por ordinal, para anexar à aba de ordinais."""
    return [[ordinal] for ordinal in ordinals]
