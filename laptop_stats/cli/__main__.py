from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from laptop_stats.config.loader import ConfigError, StatsConfig, load_config, resolve_config_path
from laptop_stats.logging.init import log_summary, set_debug, setup_logging
from laptop_stats.models.processing_result import ProcessingResult
from laptop_stats.services.aggregation import build_report, records_to_frame
from laptop_stats.services.currency import CurrencyFormatter
from laptop_stats.services.orchestrator import ProcessingError, process_files, scan_csv_files
from laptop_stats.services.report import render_report_lines
from laptop_stats.services.summary import render_summary_line
from laptop_stats.table.parser import TableReadError, read_csv_file

"""CLI entrypoint.

Flow:
- Load .env (may point LAPTOP_STATS_CONFIG at a config file) and the config
- Collect CSV files (positional paths, or scan source_directory)
- Parse each file, print its aggregate report, then the SUMMARY line
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="laptop-stats", description="Laptop listing CSV statistics")
    p.add_argument("paths", nargs="*", help="CSV files (default: scan source_directory)")
    p.add_argument("--config", help="Path to YAML config")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print column mapping & first rows then exit")
    return p.parse_args(argv)


def _inspect_data(paths: list[Path], cfg: StatsConfig) -> int:
    if not paths:
        print("inspect: no .csv files")
        return EXIT_SUCCESS_ALL
    for f in paths:
        print(f"FILE: {f.name}")
        try:
            report = read_csv_file(f, encoding=cfg.encoding)
        except TableReadError as e:
            print(f"  read_error: {e}")
            continue
        mapped = {k: v for k, v in report.column_map.items() if v is not None}
        print(f"  columns={mapped} format_error={report.format_error}")
        sample = records_to_frame(report.records[:3])
        if not sample.empty:
            print(sample.to_string(index=False))
    return EXIT_SUCCESS_ALL


def _print_reports(result: ProcessingResult, cfg: StatsConfig) -> None:
    formatter = CurrencyFormatter(symbol=cfg.currency.symbol, grouping=cfg.currency.grouping)
    for stat in result.file_stats or []:
        if stat.status != "success" or stat.report is None:
            continue
        print(f"== {stat.file_name}")
        for line in render_report_lines(build_report(stat.report.records), formatter, cfg.top_companies):
            print(line)


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # only read sys.argv when no explicit list is given (tests pass [])
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    load_dotenv(dotenv_path=Path(".env"), override=False)

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    config_path, required = resolve_config_path(args.config)
    try:
        cfg = load_config(config_path, required=required)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.paths:
        paths = [Path(p) for p in args.paths]
    else:
        directory = Path(cfg.source_directory)
        try:
            paths = scan_csv_files(directory)
        except ProcessingError as e:
            logger.error(str(e))
            return EXIT_FATAL
        logger.info(f"Processing files from: {directory}")

    if args.inspect_data:
        return _inspect_data(paths, cfg)

    result = process_files(paths, cfg)
    _print_reports(result, cfg)

    total_files = result.success_files + result.failed_files
    summary_line = render_summary_line(total_files, result)
    # log_summary adds the "SUMMARY " label
    log_summary(summary_line.removeprefix("SUMMARY "))

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
