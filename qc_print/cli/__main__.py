from __future__ import annotations

import argparse
import dataclasses
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from qc_print.config.loader import DEFAULT_CONFIG_PATH, ConfigError, default_config, load_config
from qc_print.excel.reader import DecodeFailure
from qc_print.logging.init import log_summary, set_debug, setup_logging
from qc_print.models.config_models import PrintConfig
from qc_print.services.pipeline import ProcessingError, process, process_all, scan_excel_files
from qc_print.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env, then the YAML config (or built-in defaults)
- Process the given files, or every spreadsheet in ``source_directory``
- Write one print HTML per file and finish with the SUMMARY line
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1

ENV_CONFIG_PATH = "QC_PRINT_CONFIG"


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env using python-dotenv. Failure only warns."""
    try:
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
    except OSError as e:  # pragma: no cover
        print(f"WARNING: failed to load .env via python-dotenv: {e}")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Spreadsheet -> QC print pages")
    p.add_argument("files", nargs="*", type=Path, help="Spreadsheets to process (default: source_directory)")
    p.add_argument("--config", type=Path, default=None, help=f"Config file (default: {DEFAULT_CONFIG_PATH})")
    p.add_argument("--output-dir", type=Path, default=None, help="Directory for generated print HTML")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print ranked sample records then exit")
    return p.parse_args(argv)


def _resolve_config(config_arg: Path | None) -> PrintConfig:
    """Explicit path (argument or env) must exist; the default path is optional."""
    explicit = config_arg or (Path(os.environ[ENV_CONFIG_PATH]) if os.getenv(ENV_CONFIG_PATH) else None)
    if explicit is not None:
        return load_config(explicit)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return default_config()


def _inspect_data(cfg: PrintConfig, files: list[Path]) -> int:
    for f in files:
        print(f"FILE: {f.name}")
        try:
            pages = process(f, cfg.layout)
        except DecodeFailure as e:
            print(f"  read_error: {e}")
            continue
        records = [r for page in pages for r in page.records()]
        print(f"  records={len(records)} pages={len(pages)}")
        for r in records[:5]:
            print(f"    {r.sequence_number:>5}  {r.column_b!r}  {r.column_c!r}")
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None のときのみシステム引数を読む (テストで main([]) を呼ぶため)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    try:
        cfg = _resolve_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.output_dir is not None:
        cfg = dataclasses.replace(cfg, output_directory=str(args.output_dir))

    files: list[Path] | None = list(args.files) or None
    if files is None:
        directory = Path(cfg.source_directory)
        if not directory.exists():
            logger.error(f"directory not found: {directory}")
            return EXIT_FATAL
        logger.info(f"Processing files from: {directory}")

    if args.inspect_data:
        try:
            targets = files if files is not None else scan_excel_files(Path(cfg.source_directory))
        except ProcessingError as e:
            logger.error(f"inspect: {e}")
            return EXIT_FATAL
        return _inspect_data(cfg, targets)

    try:
        result = process_all(cfg, paths=files)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    total_files = result.success_files + result.failed_files
    summary_line = render_summary_line(total_files, result)
    # log_summary adds the "SUMMARY " prefix itself
    log_summary(summary_line[len("SUMMARY "):])

    if result.failed_files > 0:
        if result.success_files == 0:
            logger.error("no file could be processed; check that the files are valid spreadsheets")
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
