"""
Tempos de setor da melhor volta a partir de distância, volta e tempo de volta.

Uma única passada pelas amostras, em ordem cronológica, carregando um pequeno
registro de estado (_FoldState). A cada troca de número de volta o estado da
volta é reiniciado; a distância percorrida dentro da volta é comparada com as
janelas de detecção dos limites de setor do circuito. Na última amostra da
volta os quatro setores são fechados, e só uma volta completa cujo tempo final
não passa da melhor volta conhecida é mantida (se houver mais de uma, vale a
última). Uma volta é completa se outra volta começa depois dela ou, para a
última volta do log, se a distância já passou da linha de chegada.

Quando nenhuma amostra cai na janela de um limite, o cruzamento é interpolado
entre as duas amostras vizinhas (se habilitado no CourseLayout); sem
interpolação, o setor fica desconhecido (None), nunca com valor de outra volta.
"""

import logging
from functools import partial, reduce
from typing import NamedTuple

import numpy as np

from src.models.course import CourseLayout
from src.models.stats import SectorSplits
from src.utils.errors import EmptyInputError, LengthMismatchError

logger = logging.getLogger(__name__)


class _Sample(NamedTuple):
    distance: float
    lap_number: float
    lap_time: float
    is_lap_end: bool
    lap_completed: bool


class _LapState(NamedTuple):
    lap_number: float
    start_distance: float
    crossings: tuple[float | None, float | None, float | None]
    prev_distance: float | None = None
    prev_time: float | None = None


class _FoldState(NamedTuple):
    lap: _LapState | None = None
    best: SectorSplits | None = None


def compute_sector_splits(
    distance,
    lap_number,
    lap_time,
    best_lap: float,
    course: CourseLayout | None = None,
) -> SectorSplits:
    """
    Calcula os quatro tempos de setor da melhor volta.

    Args:
        distance: Distância total percorrida por amostra (m)
        lap_number: Número da volta por amostra
        lap_time: Tempo da volta atual por amostra (s, zera a cada volta)
        best_lap: Tempo da melhor volta (s), referência para escolher a volta
        course: Traçado do circuito (padrão: La Selva)

    Returns:
        SectorSplits da última volta qualificada; todos None se nenhuma volta
        terminou dentro do tempo da melhor volta

    Raises:
        LengthMismatchError: Se as séries têm tamanhos diferentes
        EmptyInputError: Se as séries estão vazias
    """
    course = course or CourseLayout()

    distance = np.asarray(distance, dtype=float)
    lap_number = np.asarray(lap_number, dtype=float)
    lap_time = np.asarray(lap_time, dtype=float)

    if not len(distance) == len(lap_number) == len(lap_time):
        raise LengthMismatchError(
            f"Séries de distância ({len(distance)}), volta ({len(lap_number)}) "
            f"e tempo ({len(lap_time)}) com tamanhos diferentes"
        )
    if len(distance) == 0:
        raise EmptyInputError("Sem amostras para calcular os setores")

    # A amostra é a última da volta se a próxima muda de volta ou se é a última do log
    lap_change = lap_number[1:] != lap_number[:-1]
    is_lap_end = np.append(lap_change, True)
    lap_completed = np.append(lap_change, _past_finish_line(distance, lap_number, course))

    samples = map(_Sample, distance, lap_number, lap_time, is_lap_end, lap_completed)
    step = partial(_step, course=course, best_lap=best_lap)
    final = reduce(step, samples, _FoldState())

    if final.best is None:
        logger.warning("Nenhuma volta terminou dentro da melhor volta (%.3fs)", best_lap)
        return SectorSplits()

    return final.best


def _step(state: _FoldState, sample: _Sample, course: CourseLayout, best_lap: float) -> _FoldState:
    """Processa uma amostra e devolve o novo estado."""
    lap = state.lap
    if lap is None or sample.lap_number != lap.lap_number:
        lap = _LapState(
            lap_number=sample.lap_number,
            start_distance=sample.distance,
            crossings=(None, None, None),
        )

    in_lap = sample.distance - lap.start_distance
    crossings = tuple(
        _update_crossing(
            crossing,
            course.window(sector),
            in_lap,
            sample.lap_time,
            lap,
            course.interpolate_missed_boundaries,
        )
        for sector, crossing in enumerate(lap.crossings, start=1)
    )
    lap = lap._replace(crossings=crossings, prev_distance=in_lap, prev_time=sample.lap_time)

    best = state.best
    if sample.is_lap_end:
        splits = _close_lap(lap, sample.lap_time, course.finish_offset)
        logger.debug("Volta %d: setores %s", int(lap.lap_number), splits)
        if not sample.lap_completed:
            logger.debug("Volta %d incompleta: ignorada", int(lap.lap_number))
        elif sample.lap_time <= best_lap:
            best = SectorSplits(lap_number=int(lap.lap_number), times=splits)

    return _FoldState(lap=lap, best=best)


def _update_crossing(
    crossing: float | None,
    window: tuple[float, float],
    in_lap: float,
    lap_time: float,
    lap: _LapState,
    interpolate: bool,
) -> float | None:
    """Atualiza o tempo de cruzamento de um limite com a amostra atual."""
    low, high = window

    # Várias amostras na janela: vale a última
    if low < in_lap < high:
        return lap_time

    if (
        interpolate
        and crossing is None
        and lap.prev_distance is not None
        and lap.prev_distance <= low
        and in_lap >= high
    ):
        # A janela foi pulada entre duas amostras consecutivas
        return float(
            np.interp(low, [lap.prev_distance, in_lap], [lap.prev_time, lap_time])
        )

    return crossing


def _close_lap(lap: _LapState, end_time: float, finish_offset: float) -> list[float | None]:
    """Fecha os quatro setores de uma volta a partir dos cruzamentos."""
    s1_end, s2_end, s3_end = lap.crossings

    if None in lap.crossings:
        logger.warning(
            "Volta %d: limite de setor sem cruzamento conhecido (cruzamentos=%s)",
            int(lap.lap_number),
            lap.crossings,
        )

    return [
        s1_end,
        _difference(s2_end, s1_end),
        _difference(s3_end, s2_end),
        None if s3_end is None else (end_time - s3_end) + finish_offset,
    ]


def _difference(end: float | None, start: float | None) -> float | None:
    if end is None or start is None:
        return None
    return end - start


def best_lap_time(
    best_lap,
    distance,
    lap_number,
    lap_time,
    course: CourseLayout | None = None,
) -> float:
    """
    Determina o tempo da melhor volta.

    Parte do último valor de BestLap gravado pelo jogo. Se o log termina depois
    da linha de chegada da última volta, essa volta ainda não entrou no BestLap
    do jogo: ela é considerada com o tempo extra de chegada.

    Returns:
        Melhor volta em segundos
    """
    course = course or CourseLayout()

    best = float(best_lap[-1])
    final_lap = float(lap_time[-1]) + course.finish_offset

    if _past_finish_line(distance, lap_number, course) and final_lap < best:
        best = final_lap

    return best


def _past_finish_line(distance, lap_number, course: CourseLayout) -> bool:
    """Indica se a última amostra do log já passou da linha de chegada da volta atual."""
    return bool(distance[-1] - course.track_length * lap_number[-1] > course.track_length)
