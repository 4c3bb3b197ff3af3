"""Demonstration runs of the fixed-point type."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from fixed8.fixed import Fixed


def raw_bits_demo() -> list[str]:
    """Copy zero-valued numbers around and report their raw bits."""
    a = Fixed()
    b = Fixed(a)
    c = Fixed()
    c = b
    return [str(value.raw) for value in (a, b, c)]


def conversion_demo() -> list[str]:
    """Show values built from integers and floats, as floats and as integers."""
    b = Fixed(10)
    c = Fixed(42.42)
    d = Fixed(b)
    a = Fixed(1234.4321)
    named = (("a", a), ("b", b), ("c", c), ("d", d))
    return [f"{name} is {value}" for name, value in named] + [
        f"{name} is {value.to_int()} as integer" for name, value in named
    ]


def arithmetic_demo() -> list[str]:
    """Exercise stepping, arithmetic, comparison and min/max."""
    lines: list[str] = []
    a = Fixed()
    b = Fixed(5.05) * Fixed(2)

    lines.append(str(a))
    a = a.increment()
    lines.append(str(a))
    lines.append(str(a))
    lines.append(str(a))
    a = a.increment()
    lines.append(str(a))
    lines.append(str(b))
    lines.append(str(Fixed.max(a, b)))

    lines.append("")
    lines.append("Other tests:")

    num1 = Fixed(0.123456)
    num2 = Fixed(4242.4242)
    num3 = Fixed(654321)
    lines.extend(str(n) for n in (num1, num2, num3))
    if num1 < num2:
        lines.append(f"{num2} is bigger than {num1}")
    else:
        lines.append(f"{num1} is bigger than {num2}")
    result = num1 * num2
    lines.append(str(result))
    lines.append(str(Fixed.min(result, num3)))
    return lines


_DEMOS: dict[str, Callable[[], list[str]]] = {
    "raw": raw_bits_demo,
    "conversion": conversion_demo,
    "arithmetic": arithmetic_demo,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run fixed-point demonstrations.")
    parser.add_argument(
        "demo",
        nargs="?",
        default="all",
        choices=[*_DEMOS, "all"],
        help="which demonstration to run (default: all)",
    )
    args = parser.parse_args(argv)
    selected = list(_DEMOS.values()) if args.demo == "all" else [_DEMOS[args.demo]]
    for index, demo in enumerate(selected):
        if index:
            print()
        for line in demo():
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())