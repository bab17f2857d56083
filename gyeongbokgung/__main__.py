#!/usr/bin/env python3
"""
Secret of Gyeongbokgung Palace
Play the adventure in a terminal UI or a plain console.
"""
import sys
import logging
from pathlib import Path
from datetime import datetime

import click

from gyeongbokgung import config


def setup_logging(debug: bool = False, log_dir: Path | None = None) -> Path:
    """Configure logging to both console and file.

    The file always gets DEBUG. The console only gets errors unless
    debug is on, so log output never interferes with the game.

    Returns:
        Path to the log file
    """
    logs_dir = log_dir if log_dir is not None else config.get_log_dir()
    logs_dir.mkdir(parents=True, exist_ok=True)

    # Create timestamped log file
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    log_file = logs_dir / f"game_{timestamp}.log"

    # File handler - always verbose
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    file_handler.setFormatter(file_formatter)

    # Console handler - respects debug flag
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.ERROR)
    console_formatter = logging.Formatter('%(levelname)s: %(message)s')
    console_handler.setFormatter(console_formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    return log_file


@click.command()
@click.option('--ui', type=click.Choice(config.UI_MODES), default=None,
              help='Host to play in (default: GYEONGBOKGUNG_UI or tui)')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--log-dir', type=click.Path(file_okay=False, path_type=Path),
              default=None, help='Directory for log files')
def main(ui: str | None, debug: bool, log_dir: Path | None):
    """Play the Secret of Gyeongbokgung Palace."""
    debug = debug or config.get_debug()
    ui = ui or config.get_ui_mode()
    log_file = setup_logging(debug=debug and ui == "console", log_dir=log_dir)

    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info("Gyeongbokgung starting")
    logger.info(f"UI: {ui}")
    logger.info(f"Debug mode: {debug}")
    logger.info(f"Log file: {log_file}")
    logger.info("=" * 60)

    try:
        if ui == "console":
            from gyeongbokgung.hosts.console import run_console

            run_console()
        else:
            from gyeongbokgung.tui.app import PalaceApp

            PalaceApp().run()
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        raise
    finally:
        logger.info("Gyeongbokgung shutdown")


if __name__ == "__main__":
    main()
