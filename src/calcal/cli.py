from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys


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


_BCE_DATE_RE = re.compile(r"^-\d{4}-")


def _attach_bce_dates(argv: list[str]) -> list[str]:
    # argparse reads "-0001-12-31" as an option unless it is glued to its flag.
    out = []
    i = 0
    while i < len(argv):
        a = argv[i]
        if a in ("-d", "--date") and i + 1 < len(argv) and _BCE_DATE_RE.match(argv[i + 1]):
            out.append(f"--date={argv[i + 1]}")
            i += 2
            continue
        out.append(a)
        i += 1
    return out


def _unique(items: list[str]) -> list[str]:
    seen = set()
    out = []
    for s in items:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def _selected_calendars(spec: str, known: list[str]) -> list[str]:
    """Comma list -> known ids in request order; 'all' anywhere selects every calendar."""
    requested = _unique([s.strip() for s in spec.split(",") if s.strip()])
    if not requested or "all" in requested:
        return list(known)
    return [s for s in requested if s in known]


def _calendar_help(known: list[str]) -> str:
    import calcal

    rows = [f"{'all':<16}all calendars listed below (default)"]
    for cid in known:
        rows.append(f"{cid:<16}{calcal.calendar_info(cid)['label']} calendar")
    return "comma-separated list of calendars:\n" + "\n".join(rows)


def cmd_convert(argv: list[str]) -> int:
    import calcal

    known = calcal.list_calendars()
    p = argparse.ArgumentParser(
        prog="calcal",
        description="Convert a Gregorian date to other calendars.",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="Run 'calcal diag {round-trip,leap-years} --help' for diagnostics.",
    )
    p.add_argument("-d", "--date", default=None, help="date as [-]yyyy-mm-dd (default: today)")
    p.add_argument("-c", "--calendars", default="all", help=_calendar_help(known))
    p.add_argument("-v", "--verbose", action="store_true", help="log debug records to stderr")
    args = p.parse_args(_attach_bce_dates(argv))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.date is None:
        day = calcal.today()
    else:
        try:
            day = calcal.canonical_from_text(args.date)
        except calcal.InvalidDate:
            print("Invalid date. Specify date as yyyy-mm-dd.", file=sys.stderr)
            return 1

    selected = _selected_calendars(args.calendars, known)

    notes = calcal.caveats(selected)
    if notes:
        print("Please note:")
        for note in notes:
            print(f"- {note}")
        print()

    for cid, text in calcal.convert(day, selected).items():
        print(f"{calcal.calendar_info(cid)['label']:<16}\t{text:<32}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Plain `calcal -d ... -c ...` is the conversion command.
    if not argv or argv[0] != "diag":
        return cmd_convert(argv)

    p = argparse.ArgumentParser(prog="calcal diag", description="Diagnostics tools")
    p.add_argument(
        "tool",
        choices=["round-trip", "leap-years"],
        help="Which diagnostic to run",
    )
    args, rest = p.parse_known_args(argv[1:])

    tool_map = {
        "round-trip": "calcal.diagnostics.round_trip",
        "leap-years": "calcal.diagnostics.leap_years",
    }
    return _run_module_main(tool_map[args.tool], rest)


if __name__ == "__main__":
    raise SystemExit(main())
