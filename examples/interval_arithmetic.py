#!/usr/bin/env python3
"""
Example: Interval Arithmetic.

This demonstrates intervals as spelled values: sums land on the right
quality (M3 + m3 = P5), subtraction can go below the starting note, and
transposed notes keep their letters (C4 up a minor third is Eb4, not D#4).

Usage:
    python examples/interval_arithmetic.py
"""

import tempfile
from pathlib import Path

from chuk_mcp_intervals.catalog import IntervalCatalog
from chuk_mcp_intervals.constants import TritoneQuality
from chuk_mcp_intervals.core import (
    IntervalUnderflowError,
    SimpleInterval,
    parse_interval,
    parse_signed_interval,
    parse_simple_interval,
)
from chuk_mcp_intervals.notes import Note


def main() -> None:
    """Demonstrate interval arithmetic."""
    print("CHUK Intervals Demo")
    print("=" * 40)
    print()

    # Simple interval sums wrap at the octave
    print("Stacking thirds:")
    for a, b in [("M3", "m3"), ("m3", "M3"), ("m3", "m3"), ("M3", "M3")]:
        total = parse_signed_interval(a) + parse_signed_interval(b)
        print(f"  {a} + {b} = {total} ({total.half_steps} half steps)")
    print()

    # Inversions
    print("Inversions:")
    for text in ["P5", "M3", "A4", "m7"]:
        interval = parse_simple_interval(text)
        print(f"  {interval} <-> {interval.inversion()}")
    print()

    # Unsigned subtraction can underflow; signed subtraction cannot
    print("Subtraction:")
    try:
        parse_interval("M6") - parse_interval("M9")
    except IntervalUnderflowError as e:
        print(f"  M6 - M9 as unsigned intervals: {e}")
    difference = parse_signed_interval("M6") - parse_signed_interval("M9")
    print(f"  M6 - M9 as signed intervals: {difference}")
    print()

    # Six half steps needs a spelling choice
    print("Tritone:")
    print(f"  try_simplest_with_half_steps(6) = {SimpleInterval.try_simplest_with_half_steps(6)}")
    for tritone in TritoneQuality:
        print(f"  {tritone.value}: {SimpleInterval.simplest_with_half_steps(6, tritone)}")
    print()

    # Spelled transposition
    print("Transposing from C4:")
    start = Note.parse("C4")
    for text in ["m3", "A2", "P5", "-M2", "M10"]:
        result = start + parse_signed_interval(text)
        print(f"  C4 {text:>4} -> {str(result):<4} (MIDI {result.midi_number})")
    print()

    # Named intervals, with a project override
    library_path = Path(__file__).parent.parent / "src/chuk_mcp_intervals/catalog/library"
    with tempfile.TemporaryDirectory() as tmp:
        project = Path(tmp)
        (project / "jazz.yaml").write_text(
            "intervals:\n  - name: sharp eleven\n    notation: A11\n    aliases: ['#11']\n"
        )
        catalog = IntervalCatalog(library_path=library_path, project_path=project)

        print("Named intervals:")
        for name in ["tritone", "half step", "#11", "double octave"]:
            print(f"  {name}: {catalog.resolve(name)}")


if __name__ == "__main__":
    main()
