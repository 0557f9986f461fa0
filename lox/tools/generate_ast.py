#!/usr/bin/env python3
"""
AST node generator (development tool)

Turns a small grammar description, one variant per line in the form

    Name : Type field, Type field, ...

into Python source for a visitor base class, an abstract node base class and
one frozen dataclass per variant. Used to regenerate the expression node set
when the grammar changes; nothing imports it at runtime.

Usage:
    python -m lox.tools.generate_ast OUTPUT_DIR
"""

import argparse
import logging
import os
import re
import sys
from typing import Iterable, List, Optional, Tuple

from ..parser.ast_nodes import EXPR_GRAMMAR

logger = logging.getLogger(__name__)

# Exit status for command line usage errors (sysexits.h EX_USAGE)
EX_USAGE = 64

Variant = Tuple[str, List[Tuple[str, str]]]

INDENT = "    "


def parse_grammar(grammar: Iterable[str]) -> List[Variant]:
    """
    Parse grammar lines into (name, [(type, field), ...]) pairs.

    Blank lines and lines starting with '#' are skipped.

    Raises:
        ValueError: If a line is not of the form ``Name : Type field, ...``,
            a variant or a field within a variant is repeated, or the grammar
            has no variants at all
    """
    variants: List[Variant] = []
    seen_names = set()

    for line_number, raw_line in enumerate(grammar, start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        name, separator, fields_text = line.partition(":")
        name = name.strip()
        if not separator or not name.isidentifier():
            raise ValueError(f"line {line_number}: expected 'Name : Type field, ...', got {line!r}")
        if name in seen_names:
            raise ValueError(f"line {line_number}: duplicate variant {name!r}")
        seen_names.add(name)

        fields = []
        for field_text in fields_text.split(","):
            parts = field_text.split()
            if len(parts) != 2 or not parts[1].isidentifier():
                raise ValueError(f"line {line_number}: malformed field {field_text.strip()!r}")
            if parts[1] in (field for _, field in fields):
                raise ValueError(f"line {line_number}: duplicate field {parts[1]!r} in {name}")
            fields.append((parts[0], parts[1]))

        variants.append((name, fields))

    if not variants:
        raise ValueError("grammar defines no variants")

    return variants


def _snake_case(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def _visit_method(base_name: str, variant_name: str) -> str:
    return f"visit_{_snake_case(variant_name)}_{base_name.lower()}"


def define_ast(base_name: str, grammar: Iterable[str],
               token_module: str = "lox.lexer.tokens") -> str:
    """
    Generate the node module source for ``grammar``.

    Args:
        base_name: Name of the abstract node base class, e.g. "Expr"
        grammar: Grammar description lines
        token_module: Module the generated code imports ``Token`` from

    Returns:
        Python source text
    """
    variants = parse_grammar(grammar)
    visitor_name = f"{base_name}Visitor"
    lines: List[str] = []

    lines.append('"""Generated by lox.tools.generate_ast. Do not edit by hand."""')
    lines.append("")
    lines.append("from abc import ABC, abstractmethod")
    lines.append("from dataclasses import dataclass")
    lines.append("from typing import Any, Generic, TypeVar")
    lines.append("")
    lines.append(f"from {token_module} import Token")
    lines.append("")
    lines.append('R = TypeVar("R")')
    lines.append("")

    # Visitor interface
    lines.append("")
    lines.append(f"class {visitor_name}(ABC, Generic[R]):")
    for name, _ in variants:
        lines.append("")
        lines.append(f"{INDENT}@abstractmethod")
        lines.append(f'{INDENT}def {_visit_method(base_name, name)}(self, {base_name.lower()}: "{name}") -> R:')
        lines.append(f"{INDENT * 2}pass")

    # Base class
    lines.append("")
    lines.append("")
    lines.append(f"class {base_name}(ABC):")
    lines.append("")
    lines.append(f"{INDENT}@abstractmethod")
    lines.append(f"{INDENT}def accept(self, visitor: {visitor_name}[R]) -> R:")
    lines.append(f"{INDENT * 2}pass")

    # One dataclass per variant
    for name, fields in variants:
        lines.append("")
        lines.append("")
        lines.append("@dataclass(frozen=True)")
        lines.append(f"class {name}({base_name}):")
        for field_type, field_name in fields:
            lines.append(f"{INDENT}{field_name}: {field_type}")
        lines.append("")
        lines.append(f"{INDENT}def accept(self, visitor: {visitor_name}[R]) -> R:")
        lines.append(f"{INDENT * 2}return visitor.{_visit_method(base_name, name)}(self)")

    return "\n".join(lines) + "\n"


class _UsageParser(argparse.ArgumentParser):
    """ArgumentParser that exits with EX_USAGE instead of 2 on bad arguments."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EX_USAGE, f"{self.prog}: error: {message}\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point: write the generated expression module to OUTPUT_DIR."""
    parser = _UsageParser(
        prog="generate_ast",
        description="Generate the Lox expression node module",
    )
    parser.add_argument("output_dir", help="Directory to write the generated module into")
    parser.add_argument("--token-module", default="lox.lexer.tokens",
                        help="Module the generated code imports Token from")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if not os.path.isdir(args.output_dir):
        parser.error(f"not a directory: {args.output_dir}")

    source = define_ast("Expr", EXPR_GRAMMAR, args.token_module)
    path = os.path.join(args.output_dir, "expr.py")
    with open(path, "w", encoding="utf-8") as f:
        f.write(source)

    logger.info("wrote %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
