#!/usr/bin/env python3
"""Demo: run every analysis pass over a hand-built program with dead code.

Usage:
    poetry run python scripts/demo_dead_code.py
    poetry run python scripts/demo_dead_code.py --mermaid
    poetry run python scripts/demo_dead_code.py --verbose
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure repo root is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from declang.api import analyze, dump_cfg
from declang.ast import Block
from declang.builders import NodeBuilder
from declang.run_types import AnalysisConfig


def _build_program(builder: NodeBuilder) -> Block:
    """{ x := 5; y := 10; { z := (x + y) ** 2 }; return x // 7; w := x % 0 }"""
    b = builder
    outer = b.block(
        [
            b.assignment(b.variable("x"), b.literal(5)),
            b.assignment(b.variable("y"), b.literal(10)),
        ]
    )
    outer.add_statement(
        b.block(
            [
                b.assignment(
                    b.variable("z"),
                    b.exponentiation(
                        b.plus(b.variable("x"), b.variable("y")), b.literal(2)
                    ),
                )
            ],
            outer,
        )
    )
    outer.add_statement(b.return_(b.int_div(b.variable("x"), b.literal(7))))
    outer.add_statement(
        b.assignment(b.variable("w"), b.modulus(b.variable("x"), b.literal(0)))
    )
    return outer


def _print_header(title: str):
    width = 60
    print(f"\n{'=' * width}")
    print(f"  {title}")
    print(f"{'=' * width}\n")


def main():
    parser = argparse.ArgumentParser(description="Dead-code analysis demo")
    parser.add_argument(
        "--mermaid",
        "-m",
        action="store_true",
        help="Include a Mermaid flowchart of the CFG",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging and builder tracing",
    )
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    program = _build_program(NodeBuilder(trace=args.verbose))
    report = analyze(
        program,
        config=AnalysisConfig(include_mermaid=args.mermaid, verbose=args.verbose),
    )

    _print_header("Source")
    print(report.source)

    _print_header("CFG")
    print(dump_cfg(program))

    _print_header("Report")
    print(json.dumps(report.model_dump(exclude={"source", "mermaid"}), indent=2))

    if report.mermaid:
        _print_header("Mermaid")
        print(report.mermaid)


if __name__ == "__main__":
    main()
