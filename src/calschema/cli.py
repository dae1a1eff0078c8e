from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from calschema.core.errors import CalschemaError

_DATE_RE = re.compile(r"^(-?\d+)-(\d+)-(\d+)$")
_ORDINAL_RE = re.compile(r"^(-?\d+)-(\d+)$")

DIAG_TOOLS = {
    "round-trip": "calschema.diagnostics.round_trip",
    "month-table": "calschema.diagnostics.month_table",
    "year-lengths": "calschema.diagnostics.year_lengths",
}


def _parse_ymd(s: str) -> tuple[int, int, int]:
    """Y-M-D with an optional leading minus on the year (e.g. -44-03-15)."""
    match = _DATE_RE.match(s)
    if match is None:
        raise argparse.ArgumentTypeError(f"expected Y-M-D, got {s!r}")
    y, m, d = map(int, match.groups())
    return y, m, d


def _parse_ordinal(s: str) -> tuple[int, int]:
    match = _ORDINAL_RE.match(s)
    if match is None:
        raise argparse.ArgumentTypeError(f"expected Y-DOY, got {s!r}")
    y, doy = map(int, match.groups())
    return y, doy


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


# ---------------------------------------------------------
# Subcommands
# ---------------------------------------------------------

def cmd_list(args: argparse.Namespace) -> int:
    import calschema

    for name in calschema.list_schemas():
        info = calschema.schema_info(name)
        months = info["months_in_year"] if info["regular"] else "var"
        print(f"{name:<22} {info['profile']:<10} months={months}")
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    import calschema

    for key, value in calschema.schema_info(args.name).items():
        print(f"{key:<18} {value}")
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    import calschema

    if args.days is not None:
        dse = args.days
        parts = calschema.date_parts(dse, schema=args.name)
    elif args.date is not None:
        parts = calschema.DateParts(*args.date)
        dse = calschema.days_since_epoch(*parts, schema=args.name)
    else:
        parts = calschema.date_from_ordinal(*args.ordinal, schema=args.name)
        dse = calschema.days_since_epoch(*parts, schema=args.name)
    ordinal = calschema.ordinal_parts(*parts, schema=args.name)

    print(f"days_since_epoch = {dse}")
    print(f"date             = {parts}")
    print(f"ordinal          = {ordinal}")
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    import calschema

    y, m, d = args.date
    result = calschema.AdditionResult(calschema.DateParts(y, m, d))
    if args.years:
        result = calschema.add_years(*result.parts, args.years, schema=args.name)
    if args.months:
        step = calschema.add_months(*result.parts, args.months, schema=args.name)
        result = calschema.AdditionResult(step.parts, result.roundoff + step.roundoff)

    print(f"result   = {result.parts}")
    print(f"roundoff = {result.roundoff}")
    return 0


def cmd_diff(args: argparse.Namespace) -> int:
    import calschema

    diff = calschema.subtract(args.start, args.end, schema=args.name)
    print(f"years  = {diff.years}")
    print(f"months = {diff.months}")
    print(f"days   = {diff.days}")
    print(f"total months = {calschema.months_between(args.start, args.end, schema=args.name)}")
    return 0


def cmd_month(args: argparse.Namespace) -> int:
    import calschema

    print(f"{'month':>5} {'days':>5} {'start':>10}")
    for rec in calschema.month_layout(args.year, schema=args.name):
        flag = " *" if rec["intercalary"] else ""
        print(f"{rec['month']:>5} {rec['days']:>5} {rec['start']:>10}{flag}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="calschema", description="Calendrical schema toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_list = sub.add_parser("list", help="List registered schemas")
    p_list.set_defaults(func=cmd_list)

    p_info = sub.add_parser("info", help="Print the facts of one schema")
    p_info.add_argument("name")
    p_info.set_defaults(func=cmd_info)

    p_conv = sub.add_parser("convert", help="Convert between day counts, dates and ordinal dates")
    p_conv.add_argument("name")
    what = p_conv.add_mutually_exclusive_group(required=True)
    what.add_argument("--days", type=int, help="days since the epoch")
    what.add_argument("--date", type=_parse_ymd, help="Y-M-D")
    what.add_argument("--ordinal", type=_parse_ordinal, help="Y-DOY")
    p_conv.set_defaults(func=cmd_convert)

    p_add = sub.add_parser("add", help="Add years, then months, truncating the day")
    p_add.add_argument("name")
    p_add.add_argument("date", type=_parse_ymd, help="Y-M-D")
    p_add.add_argument("--years", type=int, default=0)
    p_add.add_argument("--months", type=int, default=0)
    p_add.set_defaults(func=cmd_add)

    p_diff = sub.add_parser("diff", help="Years, months and days between two dates")
    p_diff.add_argument("name")
    p_diff.add_argument("start", type=_parse_ymd, help="Y-M-D")
    p_diff.add_argument("end", type=_parse_ymd, help="Y-M-D")
    p_diff.set_defaults(func=cmd_diff)

    p_month = sub.add_parser("month", help="Month layout of a year")
    p_month.add_argument("name")
    p_month.add_argument("year", type=int)
    p_month.set_defaults(func=cmd_month)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=sorted(DIAG_TOOLS), help="Which diagnostic to run")

    return p


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = _build_parser()
    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "diag":
        return _run_module_main(DIAG_TOOLS[args.tool], rest)

    if rest:
        p.error(f"unrecognized arguments: {' '.join(rest)}")

    try:
        return args.func(args)
    except (CalschemaError, KeyError) as e:
        msg = e.args[0] if isinstance(e, KeyError) and e.args else e
        print(f"calschema: error: {msg}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
