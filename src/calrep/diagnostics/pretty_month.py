from __future__ import annotations

import argparse

import calrep
from calrep.format.names import DAY_NAMES, MONTH_NAMES


def decade_header() -> str:
    return " ".join(name[:6].ljust(6) for name in DAY_NAMES)


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, rows: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(decade_header())
    print("-" * len(decade_header()))
    for row in rows:
        print(" ".join(c[0] for c in row))
        print(" ".join(c[1] for c in row))
    print()


def republican_month_calendar(Y: int, M: int) -> None:
    """One row per décade; the complementary days form a single short row."""
    n = calrep.days_in_month(Y, M)

    rows: list[list[tuple[str, str]]] = []
    row: list[tuple[str, str]] = []
    for D in range(1, n + 1):
        g = calrep.to_gregorian(calrep.make_date(Y, M, D)).date()
        row.append(cell(f"{D:2d}", f"{g.month:02d}-{g.day:02d}"))
        if len(row) == 10:
            rows.append(row)
            row = []
    if row:
        rows.append(row)

    first = calrep.to_gregorian(calrep.make_date(Y, M, 1)).date()
    last = calrep.to_gregorian(calrep.make_date(Y, M, n)).date()
    name = MONTH_NAMES[M - 1] if M <= 12 else "Sansculottides"
    year = calrep.format_date(calrep.make_date(Y, M, 1), "yyyy")
    title = f"{name} an {year}  Y={Y}  M={M}   ({first} .. {last})"
    print_grid(title, rows)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Republican month as décade rows with Gregorian labels."
    )
    p.add_argument("--month", nargs=2, type=int, metavar=("Y", "M"),
                   help="Republican month to print: Y M (e.g. 8 2)")
    args = p.parse_args(argv)

    if not args.month:
        # Brumaire VIII
        republican_month_calendar(8, 2)
        return 0

    Y, M = args.month
    republican_month_calendar(Y, M)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
