"""
Resolução de colunas do log por nome semântico.

O cabeçalho do log pode vir em qualquer ordem; as colunas são localizadas
pelo nome exato (sensível a maiúsculas). Uma coluna ausente é sempre um erro
explícito, nunca um índice 0 silencioso.
"""

from typing import Iterable, Sequence

from src.utils.errors import MissingColumnError

# Colunas usadas nas estatísticas gerais do carro
STATS_COLUMNS = [
    "Speed",
    "Boost",
    "CarPerformanceIndex",
    "DrivetrainType",
    "Power",
    "Torque",
    "TimestampMS",
    "Gear",
    "CarClass",
]

# Colunas usadas nas estatísticas de corrida (volta e setores)
RACE_COLUMNS = [
    "BestLap",
    "CurrentLap",
    "DistanceTraveled",
    "LapNumber",
    "Speed",
]

ORDINAL_COLUMN = "CarOrdinal"


def find_column(header: Sequence[str], name: str) -> int | None:
    """
    Localiza a posição de uma coluna no cabeçalho.

    Se o nome aparecer mais de uma vez, vale a última ocorrência.

    Returns:
        Índice da coluna ou None se ela não existir
    """
    position = None
    for index, column in enumerate(header):
        if column == name:
            position = index
    return position


def resolve_columns(header: Sequence[str], names: Iterable[str]) -> dict[str, int]:
    """
    Mapeia nomes semânticos para índices posicionais.

    Args:
        header: Linha de cabeçalho do log
        names: Nomes das colunas necessárias

    Returns:
        Dicionário {nome: índice}

    Raises:
        MissingColumnError: Se qualquer coluna pedida não estiver no cabeçalho

    Example:
        >>> resolve_columns(["Gear", "Speed"], ["Speed"])
        {'Speed': 1}
    """
    resolved = {}
    missing = []

    for name in dict.fromkeys(names):
        position = find_column(header, name)
        if position is None:
            missing.append(name)
        else:
            resolved[name] = position

    if missing:
        raise MissingColumnError(missing)

    return resolved
