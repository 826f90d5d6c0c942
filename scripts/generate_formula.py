#!/usr/bin/env python3
# scripts/generate_formula.py

"""
Generate large formulas for timing the solver.

Two shapes are supported:
  chain   a & ~b & c & ~d ...  one literal per letter, every second one
          negated. Satisfiable; the witness needs every literal decided.
  random  random clauses of ORed literals joined by &. Each clause is
          bracketed, so left-to-right chaining gives the usual CNF reading.
"""

import argparse
import random
import string
from typing import List, Optional


def literal_names(count: int) -> List[str]:
    """
    Letters first (a..z), then v27, v28, ...
    """
    letters = string.ascii_lowercase
    return [letters[i] if i < len(letters) else f"v{i + 1}" for i in range(count)]


def generate_chain(count: int) -> str:
    parts = []
    for i, name in enumerate(literal_names(count)):
        parts.append(f"~{name}" if i % 2 else name)
    return " & ".join(parts)


def generate_random(
    count: int, clauses: int, width: int, seed: Optional[int] = None
) -> str:
    rng = random.Random(seed)
    names = literal_names(count)
    width = min(width, count)

    rendered = []
    for _ in range(clauses):
        picked = rng.sample(names, width)
        lits = [f"~{n}" if rng.random() < 0.5 else n for n in picked]
        rendered.append("(" + " | ".join(lits) + ")")
    return " & ".join(rendered)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Generate a formula for timing the solver.")
    parser.add_argument("kind", choices=["chain", "random"], help="Shape of the formula.")
    parser.add_argument(
        "-n", "--literals", type=int, required=True, help="Number of distinct literals."
    )
    parser.add_argument(
        "-c", "--clauses", type=int, default=20, help="Number of clauses (random only)."
    )
    parser.add_argument(
        "-w", "--width", type=int, default=3, help="Literals per clause (random only)."
    )
    parser.add_argument("--seed", type=int, help="Random seed (random only).")
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Path to the output file. If not specified, prints to stdout.",
    )
    args = parser.parse_args()

    if args.literals <= 0:
        print("Error: Number of literals must be a positive integer.")
    else:
        if args.kind == "chain":
            formula = generate_chain(args.literals)
        else:
            formula = generate_random(args.literals, args.clauses, args.width, args.seed)

        if args.output:
            try:
                with open(args.output, "w") as f:
                    f.write(formula + "\n")
                print(f"Formula successfully written to {args.output}")
            except IOError as e:
                print(f"Error writing to file {args.output}: {e}")
        else:
            print(formula)
