#!/usr/bin/env python3
"""
Demo: Generate Graphviz DOT diagrams from an expression tree.

Shows both visualization modes (SIMPLE, DETAILED).
"""

from truthtable.examples import EXAMPLE_EXPRESSIONS
from truthtable.parser import parse_expression
from truthtable.backends import generate_dot, save_dot_file, DotMode


def main():
    expr = parse_expression(EXAMPLE_EXPRESSIONS["modus_ponens"])

    print("=" * 80)
    print("DOT GENERATOR DEMO")
    print("=" * 80)

    for mode in [DotMode.SIMPLE, DotMode.DETAILED]:
        print(f"\n{mode.value.upper()} MODE:")
        print("-" * 80)

        print(generate_dot(expr, mode=mode))

        filename = f"expression_{mode.value}.dot"
        save_dot_file(expr, filename, mode=mode)
        print(f"\nSaved to: {filename}")

    print("\n" + "=" * 80)
    print("To visualize the diagrams:")
    print("  dot -Tpng expression_simple.dot -o expression_simple.png")
    print("  dot -Tpng expression_detailed.dot -o expression_detailed.png")
    print("=" * 80)


if __name__ == "__main__":
    main()
