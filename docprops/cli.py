import argparse
import sys
from typing import Optional, Sequence

from docprops.config import ExtractionConfig, load_config
from docprops.exceptions import ConfigError, StreamUnreadable
from docprops.logging import add_log_file, get_logger, set_log_level
from docprops.property_extractor import PropertyExtractor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docprops", description="Print document properties as key : value lines")
    parser.add_argument("path", nargs="?", help="input file (defaults to the configured sample path)")
    parser.add_argument("--config", help="YAML config file with a top-level 'docprops' section")
    parser.add_argument("--log-level", help="override the configured log level")
    parser.add_argument("--no-wait", action="store_true", help="exit without waiting for Enter")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """entry point for the command line"""
    args = build_parser().parse_args(argv)
    logger = get_logger("cli")

    try:
        cfg = load_config(args.config) if args.config else ExtractionConfig()
        if args.log_level:
            cfg = ExtractionConfig(**{**cfg.model_dump(), "log_level": args.log_level})
    except (ConfigError, ValueError) as e:
        logger.error(str(e))
        return 1

    set_log_level(cfg.log_level)
    if cfg.log_file:
        add_log_file(cfg.log_file, level=cfg.log_level)

    path = args.path or cfg.default_input
    try:
        properties = PropertyExtractor(cfg).parse(path)
    except StreamUnreadable as e:
        logger.error(str(e))
        return 1

    for key, value in properties.items():
        print(f"{key} : {value}")

    if cfg.wait_for_keypress and not args.no_wait:
        try:
            input()
        except EOFError:
            pass
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
