#!/usr/bin/env python3
"""
Forza Stat Builder - CLI de análise do log de telemetria.

Lê o log CSV gravado pelo coletor de telemetria e calcula as estatísticas
que vão para a planilha do leaderboard.

Exemplos de uso:
    # Estatísticas do carro (potência, torque, 0-60, 60-0, velocidade máxima...)
    uv run python cli/analyze.py --log log.csv

    # Linha completa do leaderboard, usando o catálogo de carros exportado
    uv run python cli/analyze.py --log log.csv --catalog ordinal_data.csv

    # Modo corrida: melhor volta, velocidade na pista e tempos de setor
    uv run python cli/analyze.py --log log.csv --race

    # Coleta de ordinais: todos os carros presentes no log
    uv run python cli/analyze.py --log log.csv --ordinals

    # Saída em JSON
    uv run python cli/analyze.py --log log.csv --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import pandas as pd

# Adicionar diretório raiz ao path para imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.extraction.log_loader import load_log
from src.analysis.stats import calculate_stats
from src.analysis.race_stats import calculate_race_stats
from src.analysis.ordinals import get_all_ordinal_numbers, get_ordinal_number
from src.analysis.leaderboard import (
    build_leaderboard_row,
    build_ordinal_rows,
    lookup_car,
    parse_car_catalog,
)
from src.utils.config import get_config
from src.utils.errors import LogFileError, TelemetryAnalysisError

from reporting import Reporter


def load_catalog_rows(path: str) -> list[list[str]]:
    """Lê o catálogo de carros exportado da aba de ordinais (CSV sem cabeçalho)."""
    try:
        table = pd.read_csv(path, header=None, dtype=str, keep_default_na=False)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise LogFileError(f"Não foi possível ler o catálogo '{path}': {exc}") from exc
    return table.values.tolist()


def compute_stats(log, catalog_path: str | None) -> dict:
    """Estatísticas do carro (e linha do leaderboard, se houver catálogo)."""
    placeholder = get_config().get_failure_placeholder()

    stat_line = calculate_stats(log)

    leaderboard_row = None
    if catalog_path:
        catalog = parse_car_catalog(load_catalog_rows(catalog_path))
        car = lookup_car(get_ordinal_number(log), catalog)
        leaderboard_row = build_leaderboard_row(stat_line, car, placeholder)

    return {
        "stat_line": stat_line,
        "stats": stat_line.to_row(placeholder),
        "leaderboard": leaderboard_row,
    }


def print_stats(result: dict, reporter: Reporter):
    stat_line = result["stat_line"]
    row = result["stats"]
    placeholder = get_config().get_failure_placeholder()

    reporter.info("Estatísticas do carro:")
    reporter.metric("PI", stat_line.performance_index)
    reporter.metric("Tração", stat_line.drivetrain or "desconhecida")
    reporter.metric("Potência máxima (hp)", row[2])
    reporter.metric("Torque máximo (ft·lb)", row[3])
    for interval in stat_line.acceleration + stat_line.braking:
        reporter.metric(f"{interval.label} mph (s)", interval.render(placeholder))
    reporter.metric("Velocidade máxima (mph)", row[10])
    reporter.metric("Boost máximo", row[11])

    if result["leaderboard"] is not None:
        reporter.divider()
        reporter.info("Linha do leaderboard:")
        print("   " + " | ".join(result["leaderboard"]))


def compute_race(log) -> list:
    """Melhor volta, velocidade máxima na pista e setores."""
    cfg = get_config()
    race = calculate_race_stats(log, cfg.get_course_layout())
    return race.to_row(cfg.get_unknown_sector_placeholder())


def print_race(row: list, reporter: Reporter):
    best_lap, top_speed, sectors = row

    reporter.info(f"Corrida em {get_config().get_course_layout().name}:")
    reporter.metric("Melhor volta", best_lap)
    reporter.metric("Velocidade máxima (mph)", top_speed)
    for number, sector in enumerate(sectors, start=1):
        reporter.metric(f"Setor {number}", sector)


def print_ordinals(rows: list, reporter: Reporter):
    reporter.info(f"{len(rows)} ordinais encontrados:")
    for row in rows:
        reporter.metric("Ordinal", row[0])


def main() -> int:
    cfg = get_config()

    parser = argparse.ArgumentParser(
        description="Forza Stat Builder - Análise do log de telemetria",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--log",
        type=str,
        default=cfg.get_log_file(),
        help=f"Log CSV de telemetria (padrão: {cfg.get_log_file()})",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--race",
        action="store_true",
        help="Modo corrida: melhor volta, velocidade na pista e setores",
    )
    mode.add_argument(
        "--ordinals",
        action="store_true",
        help="Modo coleta de ordinais: lista os carros do log",
    )

    parser.add_argument(
        "--catalog",
        type=str,
        help="Catálogo de carros (CSV da aba de ordinais) para montar a linha do leaderboard",
    )
    parser.add_argument("--json", action="store_true", help="Imprimir o resultado em JSON")
    parser.add_argument("--verbose", action="store_true", help="Mostrar logs detalhados")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    reporter = Reporter("FORZA STAT BUILDER")

    # Tudo é calculado antes de qualquer saída: em caso de erro, nada parcial é impresso
    try:
        log = load_log(args.log)
        log.require_data()

        if args.race:
            result = compute_race(log)
        elif args.ordinals:
            result = build_ordinal_rows(get_all_ordinal_numbers(log))
        else:
            result = compute_stats(log, args.catalog)

    except TelemetryAnalysisError as exc:
        reporter.failure(str(exc))
        return 1

    if args.json:
        # stdout fica só com o JSON; a contagem de pontos vai para stderr
        print(f"Processados {len(log)} pontos de dados", file=sys.stderr)
        if isinstance(result, dict):
            result = {"stats": result["stats"], "leaderboard": result["leaderboard"]}
        print(json.dumps(result, ensure_ascii=False))
        return 0

    reporter.header(args.log)
    reporter.success(f"Processados {len(log)} pontos de dados")

    if args.race:
        print_race(result, reporter)
    elif args.ordinals:
        print_ordinals(result, reporter)
    else:
        print_stats(result, reporter)

    return 0


if __name__ == "__main__":
    sys.exit(main())
