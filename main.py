"""CLI entry that refreshes the generated visa matrix in every rules module."""

import argparse
import logging
import sys
from pathlib import Path

from visa_guide import run_generation
from visa_guide.config import get_settings


logger = logging.getLogger("visa_guide.cli")


def main() -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Regenerate per-destination visa matrices from the passport-index dataset."
    )
    parser.add_argument("--data-url", default=settings.dataset_url, help="CSV dataset URL")
    parser.add_argument(
        "--rules-root",
        type=Path,
        default=settings.rules_root,
        help="Directory holding one sub-directory per destination code",
    )
    parser.add_argument("--timeout", type=float, default=settings.http_timeout)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        summary = run_generation(args.data_url, args.rules_root, timeout=args.timeout)
    except Exception:
        logger.exception("Visa matrix generation failed")
        return 1

    print(f"Updated {summary.updated}/{summary.total} destination rule files.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
