#!/usr/bin/env python3
"""
Complete Pipeline Demo: Text → AST → Variables → Truth Table → Analysis

Shows the full workflow:
1. Parse an expression
2. Extract its variables
3. Compute the truth table, with and without fixed values
4. Analyze and simplify the expression
"""

import sys

from truthtable.analyzer import analyze_expression
from truthtable.errors import TruthTableError
from truthtable.formatting import expression_to_string, format_table, format_tree
from truthtable.parser import parse_expression
from truthtable.serialization import table_to_json
from truthtable.simplifier import simplify
from truthtable.table import generate_table
from truthtable.variables import collect_variables


def main(expression: str = "(rain | sprinkler) & !covered -> wet_grass"):
    print("=" * 80)
    print("COMPLETE PIPELINE DEMO: Text → AST → Truth Table → Analysis")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Parse
    # =========================================================================
    print("\n1. PARSING...")
    try:
        expr = parse_expression(expression)
    except TruthTableError as e:
        print(f"   ✗ {e}")
        return 1
    print(f"   ✓ Input:     {expression}")
    print(f"   ✓ Canonical: {expression_to_string(expr)}")
    for line in format_tree(expr).splitlines():
        print(f"      {line}")

    # =========================================================================
    # STEP 2: Variables
    # =========================================================================
    print("\n2. VARIABLES...")
    variables = collect_variables(expr)
    print(f"   ✓ {len(variables)} variables: {', '.join(variables)}")

    # =========================================================================
    # STEP 3: Truth Tables
    # =========================================================================
    print("\n3. FULL TRUTH TABLE:")
    print("-" * 80)
    rows = generate_table(expr)
    print(format_table(rows))

    if variables:
        fixed = {variables[0]: True}
        print(f"\n   With {variables[0]} fixed to true:")
        print("-" * 80)
        print(format_table(generate_table(expr, fixed)))

    # =========================================================================
    # STEP 4: Analysis
    # =========================================================================
    print("\n4. ANALYZING...")
    report = analyze_expression(expr)
    print(f"   ✓ Depth: {report.depth}, nodes: {report.node_count}")
    print(f"   ✓ Operators: {report.operator_counts}")
    if report.classification is not None:
        print(f"   ✓ Classification: {report.classification.value} "
              f"({report.true_rows}/{report.total_rows} rows true)")

    if report.warnings:
        print(f"\n   Warnings ({len(report.warnings)}):")
        for warning in report.warnings:
            print(f"      - {warning}")

    # =========================================================================
    # STEP 5: Simplification
    # =========================================================================
    print("\n5. SIMPLIFYING...")
    result = simplify(expr)
    for application in result.applications:
        print(f"   {application.rule}: {application.before}  ⇒  {application.after}")
    print(f"   ✓ Result: {expression_to_string(result.expression)}")

    # =========================================================================
    # STEP 6: Wire format sample
    # =========================================================================
    print("\n6. FIRST ROW AS JSON:")
    print(f"   {table_to_json(rows[:1])}")

    print("\n" + "=" * 80)
    print("PIPELINE COMPLETE!")
    print("=" * 80)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
