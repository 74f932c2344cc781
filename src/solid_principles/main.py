"""CLI entrypoint for the SOLID samples."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from solid_principles import __version__
from solid_principles.config import SolidSettings
from solid_principles.logging import configure_logging
from solid_principles.registry import default_registry
from solid_principles.samples import SAMPLES, get_sample

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_CHECK_FAILED = 4


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solid-samples",
        description="Runnable samples of the SOLID design principles",
    )
    parser.add_argument(
        "--version", action="version", version=f"solid-principles-samples {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List the available samples")

    run = subparsers.add_parser("run", help="Run a sample and print its output")
    run.add_argument(
        "sample",
        help="Sample slug or acronym (e.g. 'open-closed' or 'ocp'), or 'all'",
    )

    subparsers.add_parser(
        "contracts",
        help="List every contract with its operations and registered variants",
    )

    subparsers.add_parser(
        "check",
        help="Re-verify that every registered variant still satisfies its contracts",
    )

    return parser


def _print_samples() -> None:
    for sample in SAMPLES.values():
        contracts = ", ".join(c.name for c in sample.contracts)
        print(f"{sample.slug} ({sample.acronym}): {sample.summary} [{contracts}]")


def _print_contracts() -> None:
    for contract in default_registry.contracts():
        header = contract.name
        if contract.extends:
            header += f" (extends {', '.join(contract.extends)})"
        print(header)
        for op in contract.operations:
            print(f"  {op.describe()}")
        variants = default_registry.variants_of(contract)
        if variants:
            print(f"  variants: {', '.join(cls.__qualname__ for cls in variants)}")


def _run_samples(key: str) -> int:
    if key.strip().lower() == "all":
        selected = list(SAMPLES.values())
    else:
        try:
            selected = [get_sample(key)]
        except KeyError:
            print(f"Unknown sample: {key!r}", file=sys.stderr)
            return EXIT_USAGE

    for sample in selected:
        logger.info("Running sample", extra={"sample": sample.slug})
        print(f"== {sample.principle} ==")
        for line in sample.run():
            print(line)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = SolidSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return EXIT_USAGE

    configure_logging(settings.log_level, settings.log_format)

    try:
        if args.command == "list":
            _print_samples()
            return EXIT_OK

        if args.command == "run":
            return _run_samples(args.sample)

        if args.command == "contracts":
            _print_contracts()
            return EXIT_OK

        if args.command == "check":
            failures = default_registry.verify(strict=settings.strict_signatures)
            for failure in failures:
                logger.error(
                    str(failure),
                    extra={"contract": failure.contract, "missing": list(failure.missing)},
                )
                print(str(failure), file=sys.stderr)
            if failures:
                return EXIT_CHECK_FAILED
            print(f"All variants satisfy their contracts ({len(default_registry.contracts())})")
            return EXIT_OK

        logger.error("Unknown command", extra={"command": args.command})
        return EXIT_USAGE

    except Exception:
        logger.exception("Command failed")
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
