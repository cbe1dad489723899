#!/usr/bin/env python3
"""
Reportes de Salidas de Materiales
Main entry point for the application
"""

import sys
import logging
import argparse
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

# Add project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_NO_DATA = 2


def setup_logging(level: str = "INFO"):
    """
    Configure logging for the application.

    Sets up console output with pretty formatting.
    Suppresses noisy third-party loggers.
    """
    # Create formatter with timestamp, level, module name
    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    console_handler.set_name("console")

    # Root logger (replace console handler from a previous call)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        if handler.get_name() == "console":
            root_logger.removeHandler(handler)
    root_logger.addHandler(console_handler)

    # Suppress noisy third-party loggers
    logging.getLogger('openpyxl').setLevel(logging.WARNING)

    logging.debug(f"Logging initialized - Level: {level}")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    from config.constants import APP_NAME, APP_VERSION

    parser = argparse.ArgumentParser(
        prog="salidas-reportes",
        description=f"{APP_NAME}: genera reportes Excel por rango de fechas y tipo.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument(
        "--source",
        type=Path,
        help="Archivo JSON con las salidas (default: SALIDAS_SOURCE_PATH)",
    )
    parser.add_argument("--from", dest="date_from", help="Desde (AAAA-MM-DD)")
    parser.add_argument("--to", dest="date_to", help="Hasta (AAAA-MM-DD)")
    parser.add_argument(
        "--category",
        action="append",
        help="all/todas, ERSA o UNBW; repetible (default: todas las categorías)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directorio de salida (default: SALIDAS_OUTPUT_DIR)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Mostrar resumen y vista previa sin generar archivos",
    )
    return parser


def print_summary(records, window, preview_limit: int):
    """Print exit counts and a preview of the filtered exits."""
    from config.constants import SUCCESS_MESSAGES
    from operations import (
        filter_exits_by_date,
        categorize_exits,
        get_category_summary,
        build_exit_preview,
    )

    filtered = filter_exits_by_date(records, window)
    summary = get_category_summary(categorize_exits(filtered.records))

    print(f"Rango: {window.date_from or '-'} .. {window.date_to or '-'}")
    print(SUCCESS_MESSAGES["summary"].format(total=summary.total, ersa=summary.ersa, unbw=summary.unbw))

    if summary.total == 0:
        print("Sin registros: no hay salidas de materiales en el rango de fechas seleccionado.")
        return

    preview = build_exit_preview(filtered.records, limit=preview_limit)
    for row in preview.rows:
        print(f"  {row.fecha} | {row.tipo} | {row.material} | {row.cantidad} | {row.persona} | {row.area}")
    if preview.has_more:
        print(f"  ...y {preview.remaining} salidas más")


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    from config.constants import ERROR_MESSAGES, SUCCESS_MESSAGES
    from config.settings import get_settings
    from config.app_context import create_app_context
    from data import create_record_store
    from domain.exceptions import RecordStoreError, ReportesBaseException, ValidationError
    from domain.models import DateWindow, ReportCategory
    from operations import load_exits, produce_artifact

    args = build_parser().parse_args(argv)
    settings = get_settings()

    # Setup logging FIRST
    setup_logging(settings.log_level)

    source = args.source or settings.source_path
    if source is None:
        print("❌ Indique el archivo de salidas con --source o SALIDAS_SOURCE_PATH")
        return EXIT_NO_DATA

    if args.output_dir:
        settings = replace(settings, output_dir=args.output_dir)

    ctx = create_app_context(record_store=create_record_store("json", path=source), settings=settings)

    try:
        if args.date_from is None and args.date_to is None:
            ctx = ctx.with_default_window()
        else:
            ctx = ctx.with_window(DateWindow(args.date_from or "", args.date_to or ""))
        categories = [ReportCategory.from_value(c) for c in (args.category or [c.value for c in ReportCategory])]
    except ValidationError as e:
        print(f"❌ {e}")
        return EXIT_FAILED

    try:
        records = load_exits(ctx.record_store)
    except RecordStoreError as e:
        logging.getLogger(__name__).error(f"Retrieval failed: {e}")
        print(f"❌ {ERROR_MESSAGES['no_data']}: {e.message}")
        return EXIT_NO_DATA

    if args.summary:
        print_summary(records, ctx.window, settings.preview_limit)
        return EXIT_OK

    exit_code = EXIT_OK
    file_service = ctx.file_service
    for category in categories:
        result = produce_artifact(records, ctx.window, category)
        if result.ok:
            try:
                path = file_service.save_report(result.content, result.file_name)
            except ReportesBaseException as e:
                print(f"❌ {result.sheet_label}: {e}")
                exit_code = EXIT_FAILED
                continue
            print(f"✓ {SUCCESS_MESSAGES['report_generated'].format(path=path, rows=result.row_count)}")
        elif result.is_empty:
            print(f"- {result.sheet_label}: {result.message}")
        else:
            print(f"❌ {result.sheet_label}: {result.message}")
            exit_code = EXIT_FAILED

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
