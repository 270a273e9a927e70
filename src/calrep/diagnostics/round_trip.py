from __future__ import annotations

import argparse
import random
from datetime import datetime, timedelta

import calrep
from calrep.core.time import MAX_SUPPORTED, MIN_SUPPORTED


def random_instant(start: datetime, end: datetime) -> datetime:
    """Random instant in [start, end] with millisecond resolution."""
    span_ms = (end - start) // timedelta(milliseconds=1)
    return start + timedelta(milliseconds=random.randint(0, span_ms))


def random_republican() -> calrep.RepublicanDate:
    year = random.randint(1, 14)
    month = random.randint(1, calrep.months_in_year(year))
    day = random.randint(1, calrep.days_in_month(year, month))
    return calrep.make_date(
        year, month, day,
        random.randint(0, 23), random.randint(0, 59), random.randint(0, 59), random.randint(0, 999),
    )


def roundtrip_test(N: int, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        t0 = random_instant(MIN_SUPPORTED, MAX_SUPPORTED)
        rep = calrep.to_republican(t0)
        back = calrep.to_gregorian(rep)
        if back != t0:
            failures += 1
            print("\nFAIL (gregorian -> republican -> gregorian)")
            print("t0:", t0)
            print("rep:", rep)
            print("back:", back)
            if failures >= max_failures:
                return failures

        a0 = random_republican()
        greg = calrep.to_gregorian(a0)
        again = calrep.to_republican(greg)
        if again != a0:
            failures += 1
            print("\nFAIL (republican -> gregorian -> republican)")
            print("a0:", a0)
            print("greg:", greg)
            print("again:", again)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian <-> republican.")
    p.add_argument("--N", type=int, default=5000, help="Trials per direction.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    failures = roundtrip_test(N=args.N, seed=args.seed, max_failures=args.max_failures)

    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
