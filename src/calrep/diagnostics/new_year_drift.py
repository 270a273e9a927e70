#!/usr/bin/env python3
from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

import argparse

import calrep


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calrep[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calrep[diagnostics]"') from e


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def build_series(np) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """Republican years, Gregorian year of 1 Vendémiaire, and its day-of-year."""
    years = np.arange(1, 15, dtype=int)
    greg_years = np.empty_like(years)
    doy = np.empty_like(years, dtype=float)

    for i, Y in enumerate(years):
        d = calrep.new_year_day(int(Y))
        greg_years[i] = d.year
        doy[i] = float(day_of_year(d))

    return years, greg_years, doy


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of the Gregorian date of each Republican new year.")
    p.add_argument("--outbase", default="new_year_drift", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    years, greg_years, doy = build_series(np)
    leap = np.array([calrep.is_leap_year(int(Y)) for Y in years])

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
    })

    fig, ax = plt.subplots(figsize=(7.2, 4.0), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day-of-year of 1 Vendémiaire (Jan 1 = 1)")
    ax.set_title("Republican new year in the Gregorian calendar")

    # a new year follows a leap year when the previous year carried a sixth complementary day
    after_leap = np.concatenate(([False], leap[:-1]))
    ax.scatter(greg_years[~after_leap], doy[~after_leap], s=24, c="tab:blue", label="after common year")
    ax.scatter(greg_years[after_leap], doy[after_leap], s=24, c="tab:red", marker="s", label="after leap year")
    for Y, x, y in zip(years, greg_years, doy):
        ax.annotate(calrep.format_date(calrep.make_date(int(Y), 1, 1), "yyyy"), (x, y),
                    textcoords="offset points", xytext=(0, 6), ha="center", fontsize=8)

    ax.legend(loc="upper left", frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=200)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
