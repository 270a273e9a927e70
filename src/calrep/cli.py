from __future__ import annotations

import argparse
from datetime import datetime
import sys
import re
import importlib
import inspect

from calrep.core.errors import CalrepError


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}([T ][\d:.]+)?$")


def _parse_instant(s: str) -> datetime:
    """YYYY-MM-DD with an optional THH:MM[:SS[.fff]] time part."""
    try:
        return datetime.fromisoformat(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date/time {s!r} (expected YYYY-MM-DD[THH:MM:SS])") from e


def _parse_hms(s: str) -> tuple[int, int, int, int]:
    parts = s.split(":")
    if not 1 <= len(parts) <= 3:
        raise argparse.ArgumentTypeError(f"invalid time {s!r} (expected HH[:MM[:SS[.fff]]])")
    h = int(parts[0])
    m = int(parts[1]) if len(parts) > 1 else 0
    sec, ms = 0, 0
    if len(parts) > 2:
        whole, _, frac = parts[2].partition(".")
        sec = int(whole)
        ms = int((frac + "000")[:3]) if frac else 0
    return h, m, sec, ms


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _print_pair(greg: datetime, rep) -> None:
    import calrep

    print(f"gregorian:  {greg.isoformat(sep=' ', timespec='milliseconds')}")
    print(f"republican: {rep.year}-{rep.month:02d}-{rep.day:02d} "
          f"{rep.hour:02d}:{rep.minute:02d}:{rep.second:02d}.{rep.millisecond:03d}")
    print(f"text:       {calrep.format_date(rep, 'D')}")


def cmd_day(argv: list[str]) -> int:
    import calrep

    p = argparse.ArgumentParser(prog="calrep day", description="Gregorian -> Republican date")
    p.add_argument("date", type=_parse_instant, help="YYYY-MM-DD[THH:MM[:SS[.fff]]]")
    p.add_argument("--pattern", default=None, help='Print only the formatted text, e.g. "d. MMM. yyyy"')
    args = p.parse_args(argv)

    rep = calrep.to_republican(args.date)
    if args.pattern:
        print(calrep.format_date(rep, args.pattern))
        return 0

    _print_pair(args.date, rep)
    return 0


def cmd_gregorian(argv: list[str]) -> int:
    import calrep

    p = argparse.ArgumentParser(prog="calrep gregorian", description="Republican -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, help="1..12, or 13 for the complementary days")
    p.add_argument("day", type=int)
    p.add_argument("--time", type=_parse_hms, default=(0, 0, 0, 0), help="HH[:MM[:SS[.fff]]]")
    args = p.parse_args(argv)

    rep = calrep.make_date(args.year, args.month, args.day, *args.time)
    _print_pair(calrep.to_gregorian(rep), rep)
    return 0


def cmd_add(argv: list[str]) -> int:
    import calrep

    ops = {
        "years": calrep.add_years,
        "months": calrep.add_months,
        "weeks": calrep.add_weeks,
        "days": calrep.add_days,
    }

    p = argparse.ArgumentParser(prog="calrep add", description="Republican calendar arithmetic on a Gregorian date")
    p.add_argument("unit", choices=sorted(ops))
    p.add_argument("n", type=int, help="signed amount")
    p.add_argument("date", type=_parse_instant, help="YYYY-MM-DD[THH:MM[:SS[.fff]]]")
    args = p.parse_args(argv)

    rep = ops[args.unit](calrep.to_republican(args.date), args.n)
    _print_pair(calrep.to_gregorian(rep), rep)
    return 0


def cmd_year(argv: list[str]) -> int:
    import calrep

    p = argparse.ArgumentParser(prog="calrep year", description="Structure of a Republican year")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    b = calrep.year_bounds(args.year)
    roman_year = calrep.format_date(calrep.make_date(args.year, 1, 1), "yyyy")
    print(f"Year {args.year} (an {roman_year})")
    print(f"  leap year : {'yes' if b['is_leap'] else 'no'}")
    print(f"  months    : {b['months']}")
    print(f"  days      : {b['days']}")
    print(f"  first day : {b['first_date']}")
    print(f"  last day  : {b['last_date']}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        return _dispatch(argv)
    except CalrepError as e:
        raise SystemExit(f"calrep: {e}") from e


def _dispatch(argv: list[str]) -> int:
    # Shorthand: `calrep YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="calrep", description="French Republican calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Republican date", add_help=False)
    sub.add_parser("gregorian", help="Republican -> Gregorian date", add_help=False)
    sub.add_parser("add", help="Add years/months/weeks/days to a date", add_help=False)
    sub.add_parser("year", help="Structure of a Republican year", add_help=False)

    # diagnostics
    sub.add_parser("pretty-month", help="Print a Republican month as décade rows (diagnostics)", add_help=False)
    sub.add_parser("new-years", help="Print the New Year table (diagnostics)", add_help=False)
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "new-year-drift"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    commands = {
        "day": cmd_day,
        "gregorian": cmd_gregorian,
        "add": cmd_add,
        "year": cmd_year,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    if args.cmd == "pretty-month":
        return _run_module_main("calrep.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("calrep.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "calrep.diagnostics.round_trip",
            "new-year-drift": "calrep.diagnostics.new_year_drift",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
