"""
Carregamento do log de telemetria gravado pelo jogo.

O log é uma tabela CSV orientada por cabeçalho: a linha 0 traz os nomes das
colunas e cada linha seguinte é um ponto de telemetria, em ordem cronológica.
As células são mantidas como texto bruto; a conversão numérica fica a cargo
do extrator de séries.
"""

import logging
from pathlib import Path
from typing import Sequence

import pandas as pd

from src.utils.errors import EmptyInputError, LogFileError

logger = logging.getLogger(__name__)


class TelemetryLog:
    """
    Log de telemetria em memória: cabeçalho + linhas de dados.

    Attributes:
        header: Nomes das colunas na ordem do arquivo (duplicatas preservadas)
        data: DataFrame de strings com colunas posicionais (0..n-1),
              uma linha por ponto de telemetria
    """

    def __init__(self, header: Sequence[str], data: pd.DataFrame):
        self.header = [str(name) for name in header]
        self.data = data.reset_index(drop=True)
        self.data.columns = range(self.data.shape[1])

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence]) -> "TelemetryLog":
        """
        Constrói um log a partir de linhas em memória (linha 0 = cabeçalho).

        Linhas mais curtas que o cabeçalho são completadas com células vazias;
        células excedentes são descartadas.

        Example:
            >>> log = TelemetryLog.from_rows([["Speed", "Gear"], ["10.5", "2"]])
            >>> len(log)
            1
        """
        if len(rows) == 0:
            return cls([], pd.DataFrame())

        header = [str(name) for name in rows[0]]
        width = len(header)

        body = [
            [str(cell) for cell in row[:width]] + [""] * (width - len(row))
            for row in rows[1:]
        ]
        data = pd.DataFrame(body, columns=range(width), dtype=str)
        return cls(header, data)

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"TelemetryLog(columns={len(self.header)}, points={len(self)})"

    @property
    def is_empty(self) -> bool:
        return len(self.data) == 0

    def require_data(self) -> None:
        """Levanta EmptyInputError se o log não tiver linhas de dados."""
        if self.is_empty:
            raise EmptyInputError("Log de telemetria vazio: nenhuma linha de dados")

    def column_cells(self, index: int) -> pd.Series:
        """Retorna as células brutas (texto) de uma coluna posicional."""
        return self.data[index]

    def first_row_cell(self, index: int) -> str:
        """Retorna a célula bruta da primeira linha de dados."""
        self.require_data()
        return str(self.data.iat[0, index])


def load_log(path: str | Path) -> TelemetryLog:
    """
    Lê o log CSV inteiro para memória.

    Args:
        path: Caminho do arquivo CSV (separador vírgula)

    Returns:
        TelemetryLog com cabeçalho e células em texto bruto

    Raises:
        LogFileError: Se o arquivo não existe ou não pode ser interpretado
    """
    path = Path(path)

    try:
        raw = pd.read_csv(
            path,
            header=None,
            dtype=str,
            keep_default_na=False,
            sep=",",
        )
    except pd.errors.EmptyDataError:
        logger.warning("Log vazio: %s", path)
        return TelemetryLog([], pd.DataFrame())
    except (OSError, pd.errors.ParserError) as exc:
        raise LogFileError(f"Não foi possível ler o log '{path}': {exc}") from exc

    # Linhas curtas chegam com NaN nas colunas faltantes
    raw = raw.fillna("")

    header = raw.iloc[0].tolist()
    log = TelemetryLog(header, raw.iloc[1:])

    logger.info("Log carregado: %s (%d pontos de telemetria)", path, len(log))
    return log
