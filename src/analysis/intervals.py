"""
Tempo entre dois limiares de velocidade (ex: 0-60 mph, 100-0 mph).

Assume um teste simples: o carro parte do repouso, acelera até a velocidade
máxima e depois freia até parar. Aceleração usa o primeiro cruzamento de cada
limiar; desaceleração usa o último. Perfis com vários picos de velocidade no
mesmo log não são tratados.
"""

import numpy as np

from src.utils.errors import LengthMismatchError, NegativeDurationError, OutOfRangeError

# Folga (mph) contra ruído de amostragem em torno do limiar exato
THRESHOLD_MARGIN = 0.1


def duration_between(
    start_speed: float,
    end_speed: float,
    times,
    speeds,
    margin: float = THRESHOLD_MARGIN,
) -> float:
    """
    Calcula em quantos segundos o carro foi de start_speed até end_speed.

    Se start_speed > end_speed o intervalo é de desaceleração (ex: 60-0),
    caso contrário é de aceleração (ex: 0-60).

    Args:
        start_speed: Velocidade inicial (mesma unidade de speeds)
        end_speed: Velocidade final
        times: Série de tempos em segundos, crescente
        speeds: Série de velocidades alinhada a times
        margin: Folga somada aos limiares na detecção de cruzamento

    Returns:
        Duração em segundos (>= 0)

    Raises:
        LengthMismatchError: Se as séries têm tamanhos diferentes
        OutOfRangeError: Se algum limiar nunca foi observado nos dados
        NegativeDurationError: Se o tempo final é anterior ao inicial

    Example:
        >>> duration_between(0, 60, [0, 1, 2, 3, 4], [0, 30, 59, 61, 0])
        2.0
    """
    times = np.asarray(times, dtype=float)
    speeds = np.asarray(speeds, dtype=float)

    if len(times) != len(speeds):
        raise LengthMismatchError(
            f"Séries de tempo ({len(times)}) e velocidade ({len(speeds)}) com tamanhos diferentes"
        )
    if len(speeds) == 0:
        raise OutOfRangeError("Séries de tempo e velocidade vazias")

    min_speed = speeds.min()
    max_speed = speeds.max()

    # Sem amostra parada, limiares abaixo da mínima são inalcançáveis
    if (
        start_speed > max_speed + margin
        or end_speed > max_speed + margin
        or (min_speed > margin and (start_speed < min_speed or end_speed < min_speed))
    ):
        raise OutOfRangeError(
            f"Intervalo {start_speed:g}-{end_speed:g} fora dos dados "
            f"(velocidade observada entre {min_speed:.2f} e {max_speed:.2f})"
        )

    if start_speed > end_speed:
        start_time = _last_time_above(start_speed + margin, times, speeds)
        end_time = _last_time_above(end_speed + margin, times, speeds)
    else:
        start_time = _time_before_first_reach(start_speed + margin, times, speeds)
        end_time = _time_before_first_reach(end_speed + margin, times, speeds)

    if start_time > end_time:
        raise NegativeDurationError(
            f"Duração negativa no intervalo {start_speed:g}-{end_speed:g} "
            f"(início {start_time:.3f}s, fim {end_time:.3f}s)"
        )

    return float(end_time - start_time)


def _last_time_above(threshold: float, times: np.ndarray, speeds: np.ndarray) -> float:
    """Tempo da última amostra com velocidade acima do limiar."""
    above = np.flatnonzero(speeds > threshold)
    if len(above) == 0:
        raise OutOfRangeError(f"Velocidade nunca passou de {threshold:.2f}")
    return times[above[-1]]


def _time_before_first_reach(threshold: float, times: np.ndarray, speeds: np.ndarray) -> float:
    """Tempo da última amostra antes de a velocidade atingir o limiar pela primeira vez."""
    reached = np.flatnonzero(speeds >= threshold)
    if len(reached) == 0:
        raise OutOfRangeError(f"Velocidade nunca atingiu {threshold:.2f}")

    first = reached[0]
    if first == 0:
        # O log já começa acima do limiar: o cruzamento não foi gravado
        raise OutOfRangeError(f"Log já começa acima de {threshold:.2f}")
    return times[first - 1]
