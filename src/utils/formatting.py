"""
Formatação de números e tempos para a planilha de estatísticas.
"""

import math


def format_number(value: float, decimals: int) -> str:
    """Formata um valor com precisão fixa (ex: 2 casas para velocidade máxima)."""
    return f"{value:.{decimals}f}"


def _split_minutes(seconds: float) -> tuple[int, float]:
    """Divide uma duração em (minutos, segundos), arredondada ao milissegundo."""
    total_ms = int(round(seconds * 1000))
    minutes, remainder_ms = divmod(total_ms, 60_000)
    return minutes, remainder_ms / 1000


def format_lap_time(seconds: float) -> str:
    """
    Formata um tempo de volta como mm:ss.sss.

    Example:
        >>> format_lap_time(95.4321)
        '01:35.432'
    """
    if not math.isfinite(seconds):
        raise ValueError(f"Tempo de volta inválido: {seconds}")
    minutes, secs = _split_minutes(seconds)
    return f"{minutes:02d}:{secs:06.3f}"


def format_sector_time(seconds: float) -> str:
    """
    Formata a duração de um setor como 00:mm:ss.sss (formato de duração da planilha).

    Example:
        >>> format_sector_time(27.5)
        '00:00:27.500'
    """
    if not math.isfinite(seconds):
        raise ValueError(f"Tempo de setor inválido: {seconds}")
    minutes, secs = _split_minutes(seconds)
    return f"00:{minutes:02d}:{secs:06.3f}"
