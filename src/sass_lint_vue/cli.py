from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_config
from .engine import DEFAULT_STYLELINT, StylelintEngine
from .errors import ConfigError, EngineError
from .reporter import report
from .runner import run

FATAL_EXIT_CODE = 2


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Lint Sass and SCSS style blocks in Vue components.")
    parser.add_argument("paths", nargs="*", default=["."], help="Files or directories to lint.")
    parser.add_argument(
        "-c",
        "--config",
        help="Path to a sass-lint config file. Defaults to the nearest .sass-lint.yml or .sasslintrc.",
    )
    parser.add_argument(
        "--stylelint",
        default=DEFAULT_STYLELINT,
        help="stylelint executable used to lint extracted blocks.",
    )
    parser.add_argument(
        "--max-warnings",
        type=int,
        help="Fail when more than this many warnings are reported.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    base_dir = Path.cwd()
    config_path = Path(args.config) if args.config else None
    if config_path is not None and not config_path.is_absolute():
        config_path = base_dir / config_path

    try:
        config = load_config(config_path, base_dir)
        engine = StylelintEngine(executable=args.stylelint, config_file=config.stylelint_config)
        batches = run([Path(value) for value in args.paths], engine, config)
    except (ConfigError, EngineError) as exc:
        print(f"sass-lint-vue: {exc}", file=sys.stderr)
        return FATAL_EXIT_CODE

    return report(batches, base_dir, args.max_warnings)
