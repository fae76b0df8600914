"""
Hierarquia de erros da análise de telemetria.

Erros fatais (log vazio, célula inválida, coluna ausente) abortam a análise
inteira. Erros de intervalo (IntervalError) são recuperáveis: o agregador de
estatísticas os converte em um placeholder e segue em frente.
"""


class TelemetryAnalysisError(ValueError):
    """Erro base de toda a análise de telemetria."""


class LogFileError(TelemetryAnalysisError):
    """O arquivo de log não pôde ser aberto ou lido."""


class EmptyInputError(TelemetryAnalysisError):
    """O log não contém nenhuma linha de dados além do cabeçalho."""


class MissingColumnError(TelemetryAnalysisError):
    """Uma ou mais colunas obrigatórias não existem no cabeçalho."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(
            f"Colunas obrigatórias ausentes no cabeçalho do log: {', '.join(self.missing)}"
        )


class MalformedDataError(TelemetryAnalysisError):
    """Uma célula do log não pôde ser convertida para número."""

    def __init__(self, field: str, row: int, cell: str):
        self.field = field
        self.row = row
        self.cell = cell
        super().__init__(
            f"Valor inválido na coluna '{field}', linha de dados {row}: {cell!r}"
        )


class LengthMismatchError(TelemetryAnalysisError):
    """Séries paralelas com tamanhos diferentes."""


class IntervalError(TelemetryAnalysisError):
    """Erro recuperável no cálculo de um intervalo de velocidade."""


class OutOfRangeError(IntervalError):
    """Limiar de velocidade fora do intervalo observado nos dados."""


class NegativeDurationError(IntervalError):
    """Tempo final calculado anterior ao tempo inicial."""


class CarNotRegisteredError(TelemetryAnalysisError):
    """Ordinal do carro não encontrado no catálogo de carros."""

    def __init__(self, ordinal: str):
        self.ordinal = ordinal
        super().__init__(
            f"Carro com ordinal {ordinal!r} não está no catálogo. "
            "Adicione as informações do carro e execute novamente."
        )
