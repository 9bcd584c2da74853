from __future__ import annotations

import argparse
import random
from typing import List

import calcal

# Ten thousand mean Gregorian years, in days.
TEN_MILLENNIA = 3652425


def parse_calendars(s: str) -> List[str]:
    # "hebrew,islamic" -> ["hebrew", "islamic"]; "all" -> every invertible calendar
    out = [x.strip() for x in s.split(",") if x.strip()]
    if out == ["all"]:
        return [c for c in calcal.list_calendars() if calcal.calendar_info(c)["invertible"]]
    return out


def roundtrip_test(
    calendar: str,
    N: int,
    lo: int,
    hi: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    rng = random.Random(seed)
    failures = 0

    for _ in range(N):
        d0 = rng.randint(lo, hi)
        x = calcal.from_canonical(calendar, d0)
        back = calcal.to_canonical(calendar, x)
        if back != d0:
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar)
            print("d0:", d0, calcal.format_from_canonical("gregorian", d0))
            print("date:", x)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: canonical day -> calendar -> canonical day.")
    p.add_argument("--calendars", type=str, default="all",
                   help="Comma-separated calendar list (default: every invertible calendar).")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start", type=str, default=None, help="Start date [-]YYYY-MM-DD (default: -9999-01-01).")
    p.add_argument("--end", type=str, default=None, help="End date [-]YYYY-MM-DD (default: 9999-12-31).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars)
    lo = -TEN_MILLENNIA if args.start is None else calcal.canonical_from_text(args.start)
    hi = TEN_MILLENNIA if args.end is None else calcal.canonical_from_text(args.end)

    if hi < lo:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for cal in calendars:
        print(f"Testing {cal} ...")
        f = roundtrip_test(cal, N=args.N, lo=lo, hi=hi, seed=args.seed, max_failures=args.max_failures)
        total_fail += f

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
