from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .errors import ActiongenError
from .generation import NamingConventions, generate_actions
from .generator import PartFileSpec, generate_part_file
from .loader import load_unit


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="actiongen", description="Generate Redux action classes from declarations.")
    parser.add_argument("model", type=Path, help="Path to the declaration dump (JSON/YAML)")
    parser.add_argument("-o", "--output-dir", type=Path, default=Path("."), help="Output directory")
    parser.add_argument("--stdout", action="store_true", help="Print generated code instead of writing a part file")
    parser.add_argument("--container-marker", default="ReduxActions", help="Supertype marking action containers")
    parser.add_argument("--dispatcher-marker", default="ActionDispatcher", help="Type marking dispatchable actions")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log generation progress")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format="%(levelname)s: %(message)s")

    conventions = NamingConventions(
        container_marker=args.container_marker,
        dispatcher_marker=args.dispatcher_marker,
    )
    try:
        unit = load_unit(args.model)
        if args.stdout:
            sys.stdout.write(generate_actions(unit, conventions).code)
        else:
            path = generate_part_file(PartFileSpec(output_dir=args.output_dir), unit, conventions)
            if path is None:
                logging.getLogger(__name__).info("No action containers found in %s", unit.name)
    except ActiongenError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
