"""CLI entrypoint for the formula demonstrations."""

from __future__ import annotations

import argparse
import logging

import pydantic

from src.core.math.preconditions import ValidationError
from src.demos.drivers import DEMOS
from src.demos.tables import TableFormat

logger = logging.getLogger(__name__)


def _parse_value(raw: str) -> object:
    if ";" in raw:
        return [[item.strip() for item in row.split(",") if item.strip()] for row in raw.split(";")]
    if "," in raw:
        return [item.strip() for item in raw.split(",") if item.strip()]
    return raw


def _parse_params(raw_params: list[str] | None) -> dict[str, object]:
    params: dict[str, object] = {}
    for raw in raw_params or []:
        key, sep, value = raw.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Parameter must look like key=value, got {raw!r}")
        params[key.strip()] = _parse_value(value.strip())
    return params


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Statistics formula demonstrations")
    parser.add_argument("demo", choices=[*DEMOS, "all"], help="Demo to run")
    parser.add_argument(
        "--param",
        action="append",
        metavar="KEY=VALUE",
        help="Scenario override (repeatable); lists are comma-separated, table rows ';'-separated",
    )
    parser.add_argument("--precision", type=int, default=6, help="Digits after the decimal point")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser


def run(demo: str, params: dict[str, object], fmt: TableFormat) -> list[str]:
    """Run one demo (or all of them) and return the lines to print."""
    names = list(DEMOS) if demo == "all" else [demo]
    lines: list[str] = []
    for name in names:
        driver, scenario_cls = DEMOS[name]
        scenario = scenario_cls.model_validate(params)
        logger.debug("Running demo %s with %s", name, scenario)
        if demo == "all":
            lines += [f"== {name} ==", ""]
        lines += driver(scenario, fmt)
        if demo == "all":
            lines.append("")
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    try:
        params = _parse_params(args.param)
    except ValueError as exc:
        parser.error(str(exc))
    if args.demo == "all" and params:
        parser.error("--param cannot be combined with 'all'")

    try:
        lines = run(args.demo, params, TableFormat(precision=args.precision))
    except pydantic.ValidationError as exc:
        logger.error("Invalid scenario for %s: %s", args.demo, exc)
        return 1
    except ValidationError as exc:
        logger.error("Demo %s aborted: %s", args.demo, exc)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
