"""
kinometa - Command Line Entry Point

Normalizes a saved catalog payload and prints the canonical record as JSON.

Usage:
    python main.py movie film.json
    python main.py staff staff.json --log-level DEBUG
"""

import argparse
import json
import sys
from pathlib import Path

import structlog
from pydantic import BaseModel

from kinometa.config import get_settings
from kinometa.core.exceptions import KinometaError
from kinometa.logging_config import configure_logging
from kinometa.normalization import build_default_pipeline

logger = structlog.get_logger(__name__)


def to_jsonable(result):
    """Convert canonical output (record, list of records or None) to plain data."""
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json")
    if isinstance(result, list):
        return [to_jsonable(item) for item in result]
    return result


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the normalizer CLI."""
    settings = get_settings()
    pipeline = build_default_pipeline(settings)

    parser = argparse.ArgumentParser(description="Normalize a catalog payload")
    parser.add_argument("kind", choices=pipeline.list_kinds(), help="Record kind of the payload")
    parser.add_argument("path", type=Path, help="JSON file with the raw payload")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override KINOMETA_LOG_LEVEL",
    )
    args = parser.parse_args(argv)

    if args.log_level:
        settings = settings.model_copy(update={"log_level": args.log_level})
    configure_logging(settings)

    try:
        raw_data = json.loads(args.path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error("payload_unreadable", path=str(args.path), error=str(e))
        return 1

    try:
        result = pipeline.normalize(args.kind, raw_data)
    except KinometaError as e:
        logger.error("normalization_failed", kind=args.kind, error=str(e))
        return 1

    print(json.dumps(to_jsonable(result), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
