#!/usr/bin/env python3
"""
Design Pattern Demo Runner

Usage:
    python scripts/run_demos.py
    python scripts/run_demos.py --pattern builder --pattern singleton
    python scripts/run_demos.py --list
    python scripts/run_demos.py --list --json
    python scripts/run_demos.py --info

Features:
- 카탈로그 순서대로 모든 데모 실행
- --pattern 으로 일부만 실행
- --info 로 패턴 설명 패널 함께 출력
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.cli.catalogue_view import CatalogueView
from src.core.settings import get_settings
from src.demos.registry import demo_keys, get_demo, list_demos, run_demo
from src.utils.logger import default_logger, setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Design Pattern Catalogue Demos",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--pattern",
        action="append",
        choices=demo_keys(),
        default=None,
        help="Demo to run (repeatable, default: all)"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Show the catalogue and exit"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="With --list, print one JSON object per pattern instead of a table"
    )
    parser.add_argument(
        "--info",
        action="store_true",
        help="Show pattern notes before each demo"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the selected demos"""
    args = build_parser().parse_args(argv)
    logger = default_logger

    try:
        settings = get_settings()
        logger = setup_logger(
            log_level=settings.log_level,
            log_dir=str(settings.logs_path) if settings.log_to_file else None
        )
        view = CatalogueView()

        if args.list:
            patterns = [entry.info for entry in list_demos()]
            if args.json:
                for info in patterns:
                    print(info.to_json())
            else:
                view.display_catalogue(patterns)
            return 0

        keys = args.pattern or demo_keys()
        show_info = args.info or settings.show_pattern_info

        for key in keys:
            entry = get_demo(key)

            view.display_banner(entry.info)
            if show_info:
                view.display_pattern(entry.info)

            run_demo(key)

        logger.info(f"{len(keys)} demo(s) complete")
        return 0

    except KeyboardInterrupt:
        print("\n\n⚠️ Interrupted by user. Exiting...")
        return 0

    except Exception as e:
        logger.error(f"Demo run failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
