from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import load_config
from .engine import run_port_type_generation
from .errors import GenerationError
from .ir import Operation, PortType
from .loading import load_definition
from .registry import build_default_registry


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m wsdlgen",
        description="Build a WSDL port type from the messages of a definition.",
    )
    parser.add_argument("--definition", help="JSON file describing the definition's messages.")
    parser.add_argument("--port-type-name", help="Local name of the generated port type.")
    parser.add_argument("--strategy", help="Message classification strategy (default: suffix).")
    parser.add_argument(
        "--config",
        help="Optional JSON config file providing port type options.",
    )
    parser.add_argument(
        "--option",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override or add a single port type option (may be repeated).",
    )
    parser.add_argument("--out", help="Write the JSON report here instead of stdout.")
    parser.add_argument(
        "--list-strategies",
        action="store_true",
        help="List available strategies and exit.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def _operation_report(operation: Operation) -> dict:
    def role(r) -> dict | None:
        if r is None:
            return None
        return {"name": r.name, "message": str(r.message.qname) if r.message else None}

    return {
        "name": operation.name,
        "style": operation.style.value if operation.style else None,
        "input": role(operation.input),
        "output": role(operation.output),
        "faults": [role(f) for f in operation.faults],
    }


def _port_type_report(port_type: PortType) -> dict:
    return {
        "port_type": str(port_type.qname),
        "operations": [_operation_report(op) for op in port_type.operations.values()],
    }


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    registry = build_default_registry()

    if args.list_strategies:
        names = registry.names()
        if names:
            print("Available strategies:")
            for name in names:
                print(f"  - {name}")
        else:
            print("No strategies are currently registered.")
        return 0

    if not args.definition:
        raise SystemExit("Error: --definition is required unless --list-strategies is used.")

    try:
        config = load_config(
            args.config,
            args.option,
            port_type_name=args.port_type_name,
            strategy=args.strategy,
        )
        definition = load_definition(args.definition)
        result = run_port_type_generation(
            registry=registry,
            definition=definition,
            config=config,
        )
    except GenerationError as exc:
        print(f"Generation failed: {exc}", file=sys.stderr)
        return 1

    payload = json.dumps(_port_type_report(result.port_type), indent=2)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(payload + "\n", encoding="utf-8")
        print(f"Wrote port type report: {out_path}")
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
