from __future__ import annotations

from datetime import date
import argparse

import calrep


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian date of 1 Vendémiaire for every Republican year."
    )
    p.add_argument("--from-year", type=int, default=1)
    p.add_argument("--to-year", type=int, default=14)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format in table columns (default: iso).",
    )
    args = p.parse_args(argv)

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Roman", "New year", "Last day", "Days", "Leap"]
    colw = [5, 6, 11, 11, 5, 5]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        b = calrep.year_bounds(Y)
        row = [
            str(Y),
            calrep.format_date(calrep.make_date(Y, 1, 1), "yyyy"),
            fmt(b["first_date"]),
            fmt(b["last_date"]),
            str(b["days"]),
            "yes" if b["is_leap"] else "",
        ]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
