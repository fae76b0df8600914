"""
Leitura dos ordinais de carro (identificador do modelo no jogo) a partir do log.
"""

from src.extraction.log_loader import TelemetryLog
from src.preprocessing.columns import ORDINAL_COLUMN, resolve_columns


def get_ordinal_number(log: TelemetryLog) -> str:
    """
    Ordinal do carro da primeira linha de dados (o carro do teste).

    Raises:
        EmptyInputError: Se o log não tem linhas de dados
        MissingColumnError: Se o log não tem a coluna CarOrdinal
    """
    log.require_data()
    columns = resolve_columns(log.header, [ORDINAL_COLUMN])
    return log.first_row_cell(columns[ORDINAL_COLUMN]).strip()


def get_all_ordinal_numbers(log: TelemetryLog) -> list[str]:
    """
    Todos os ordinais do log, na ordem em que aparecem.

    Repetições consecutivas (o mesmo carro em várias amostras) contam uma vez;
    um carro que volta depois de outro aparece de novo.

    Example:
        >>> get_all_ordinal_numbers(log)  # CarOrdinal: 12, 12, 40, 40, 12
        ['12', '40', '12']
    """
    log.require_data()
    columns = resolve_columns(log.header, [ORDINAL_COLUMN])

    ordinals = []
    for cell in log.column_cells(columns[ORDINAL_COLUMN]):
        ordinal = str(cell).strip()
        if not ordinals or ordinals[-1] != ordinal:
            ordinals.append(ordinal)

    return ordinals
