"""CLI entry point: extract candidate profiles from résumé files."""

import argparse
import json
import logging
import sys

from cv_extractor.config import AppConfig, apply_env_overrides, load_config, validate_config
from cv_extractor.profile.documents import DocumentDecodeError
from cv_extractor.profile.resume_parser import parse_resume
from cv_extractor.utils.logging_config import setup_logging

logger = logging.getLogger("cv_extractor")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cv-extract",
        description="Extract candidate fields (name, contact, seniority, role) from résumé files",
    )
    parser.add_argument("files", nargs="+", help="Résumé files (.pdf, .docx, .txt, .md)")
    parser.add_argument(
        "--config", default=None,
        help="Path to YAML config file (defaults are used when omitted)",
    )
    parser.add_argument(
        "--api-format", action="store_true",
        help="Print the backend payload keys (nome, telefone, senioridade, ...)",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args.config) if args.config else AppConfig()
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    config = apply_env_overrides(config)

    level = logging.DEBUG if args.verbose else logging.getLevelName(config.logging.level)
    if not isinstance(level, int):
        level = logging.INFO
    setup_logging(config.logging.log_dir, level)

    for warning in validate_config(config):
        logger.warning("Config: %s", warning)

    failures = 0
    for file_path in args.files:
        try:
            profile = parse_resume(file_path, config.documents)
        except (FileNotFoundError, ValueError, DocumentDecodeError) as e:
            logger.error("Could not process %s: %s", file_path, e)
            failures += 1
            continue

        payload = profile.to_api_dict() if args.api_format else profile.to_dict()
        print(json.dumps({"file": file_path, **payload}, ensure_ascii=False))

    if failures:
        logger.error("%d of %d file(s) failed", failures, len(args.files))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
