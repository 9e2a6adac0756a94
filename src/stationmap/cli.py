from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .pipeline import run_pipeline
from .render.context import RenderContext


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a Citi Bike station status map to an HTML file."
    )
    parser.add_argument("--output", type=Path, default=None, help="HTML file to write")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    station_map = run_pipeline(RenderContext.from_env())
    if station_map is None:
        return 1

    output = args.output or Path(config.map_output_path())
    output.parent.mkdir(parents=True, exist_ok=True)
    station_map.save(str(output))
    logging.getLogger(__name__).info("Map written to %s", output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
