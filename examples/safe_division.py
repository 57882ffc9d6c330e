"""
Safe division: chaining optional computations and defaulting absent results.

Run: python examples/safe_division.py
"""
from optionpy import Option, some, nothing


def divide(x: float, y: float) -> Option[float]:
    return nothing() if y == 0 else some(x / y)


def parse_int(s: str) -> Option[int]:
    return some(int(s)) if s.strip().lstrip("-").isdigit() else nothing()


def main():
    for a, b in [("10", "2"), ("1", "0"), ("x", "3")]:
        result = parse_int(a).and_then(lambda x: parse_int(b).and_then(lambda y: divide(x, y)))
        print(f"{a} / {b} =>", result.map_or("n/a", lambda v: f"{v:g}"))   # 5, n/a, n/a

    # Report why a lookup failed instead of just that it did
    checked = parse_int("7").ok_or("not a number").and_then(
        lambda n: divide(1, n).ok_or("division by zero")
    )
    print("checked =>", checked)

    nested = some(some(4.0))
    print("flatten =>", nested.flatten())                                    # Some(4.0)
    print("filter  =>", divide(9, 3).filter(lambda v: v > 1).unwrap_or(-1))  # 3.0


if __name__ == "__main__":
    main()
