#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import calcal


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calcal[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    marker: str
    size: float
    hollow: bool
    color: str = "0.15"
    lw: float = 1.2
    alpha: float = 0.95


DEFAULT_STYLES: Dict[str, Style] = {
    "gregorian": Style(marker="o", size=40, hollow=False),
    "julian": Style(marker="o", size=60, hollow=True),
    "islamic": Style(marker="s", size=45, hollow=True),
    "hebrew": Style(marker="^", size=55, hollow=False),
    "french": Style(marker="D", size=40, hollow=True),
    "oldHinduLunar": Style(marker="v", size=55, hollow=True),
}


def parse_calendars(s: str) -> List[str]:
    out = [x.strip() for x in s.split(",") if x.strip()]
    for c in out:
        if c not in DEFAULT_STYLES:
            raise SystemExit(f"Calendar '{c}' has no leap years to plot. Known: {list(DEFAULT_STYLES)}")
    return out


def leap_year_starts(calendar: str, start_year: int, end_year: int) -> List[int]:
    """
    Gregorian years in [start_year, end_year] in which a leap year of `calendar`
    begins. A Gregorian year appears twice when two leap years begin in it.
    """
    conv = calcal.get_calendar(calendar)
    lo = calcal.to_canonical_from_gregorian(start_year, 1, 1)
    hi = calcal.to_canonical_from_gregorian(end_year, 12, 31)
    out = []
    prev = conv.from_canonical(lo - 1).year
    for day in range(lo, hi + 1):
        year = conv.from_canonical(day).year
        if year != prev and conv.is_leap_year(year):
            out.append(calcal.from_canonical("gregorian", day).year)
        prev = year
    return out


def build_points(np, calendars: List[str], start_year: int, end_year: int) -> Dict[str, Tuple["np.ndarray", "np.ndarray"]]:
    points = {}
    for row, cal in enumerate(calendars, start=1):
        xs = leap_year_starts(cal, start_year, end_year)
        points[cal] = (np.array(xs, dtype=int), np.full(len(xs), row, dtype=int))
    return points


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Leap-year barcode diagram across calendars, on a Gregorian year axis."
    )
    p.add_argument("--start-year", type=int, default=1960)
    p.add_argument("--end-year", type=int, default=2030)
    p.add_argument("--out", default="leapyear_barcode.png")
    p.add_argument("--title", default="Leap years across calendars")
    p.add_argument(
        "--calendars",
        default="gregorian,julian,islamic,hebrew,french,oldHinduLunar",
        help="Comma list of calendars to plot, one row each.",
    )
    p.add_argument("--year-step", type=int, default=5, help="Label every k years (default: 5).")
    p.add_argument("--cell-edge", default="0.88", help="Cell border color (matplotlib gray string).")
    p.add_argument("--cell-lw", type=float, default=0.6, help="Cell border line width.")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()
    from matplotlib.colors import ListedColormap

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    calendars = parse_calendars(args.calendars)
    n = len(calendars)

    fig, ax = plt.subplots(figsize=(16, 0.6 * n + 1.8))

    x_edges = np.arange(start_year - 0.5, end_year + 1.5, 1.0)
    y_edges = np.arange(0.5, n + 1.5, 1.0)
    Z = np.zeros((n, end_year - start_year + 1), dtype=float)

    ax.pcolormesh(
        x_edges,
        y_edges,
        Z,
        shading="flat",
        cmap=ListedColormap(["white"]),
        vmin=0, vmax=1,
        edgecolors=args.cell_edge,
        linewidth=float(args.cell_lw),
        antialiased=True,
        zorder=0,
    )

    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(n + 0.5, 0.5)
    ax.grid(False)
    ax.tick_params(axis="both", which="both", length=0)

    step = max(1, int(args.year_step))
    xt = list(range(start_year, end_year + 1, step))
    ax.set_xticks(xt)
    ax.set_xticklabels([str(y) for y in xt])
    ax.set_xlabel("Gregorian year in which the leap year begins")
    ax.set_yticks(list(range(1, n + 1)))
    ax.set_yticklabels([calcal.calendar_info(c)["label"] for c in calendars])

    for cal, (x, y) in build_points(np, calendars, start_year, end_year).items():
        st = DEFAULT_STYLES[cal]
        if st.hollow:
            ax.scatter(x, y, s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, linewidths=st.lw, alpha=st.alpha, zorder=5)
        else:
            ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color,
                       linewidths=0.0, alpha=st.alpha, zorder=5)

    ax.set_title(args.title)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
