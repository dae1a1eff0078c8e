from __future__ import annotations

import argparse
import random
from typing import List

import calschema
from calschema.core.types import Range


def parse_schemas(s: str) -> List[str]:
    # "gregorian,julian" -> ["gregorian", "julian"]
    if s == "all":
        return calschema.list_schemas()
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(name: str, N: int, years: Range, seed: int, *, max_failures: int) -> int:
    """
    Random day counts inside `years` (clipped to the schema window) must
    survive day -> (y, m, d) -> day and day -> (y, doy) -> day, and each day
    must fit inside its own month.
    """
    random.seed(seed)
    sch = calschema.get_schema(name)
    window = sch.supported_years
    lo, hi = max(years.min, window.min), min(years.max, window.max)
    if hi < lo:
        print(f"  {name}: no overlap between {years} and {window}, skipped")
        return 0

    first, last = sch.get_start_of_year(lo), sch.get_end_of_year(hi)
    failures = 0

    for _ in range(N):
        dse = random.randint(first, last)
        y, m, d = sch.get_date_parts(dse)
        y2, doy = sch.get_year_and_day_of_year(dse)

        problems = []
        if sch.count_days_since_epoch(y, m, d) != dse:
            problems.append("date round-trip")
        if sch.count_days_since_epoch_ordinal(y2, doy) != dse or y2 != y:
            problems.append("ordinal round-trip")
        if d > sch.count_days_in_month(y, m):
            problems.append("closure")
        if sch.get_start_of_year(y) >= sch.get_start_of_year(y + 1):
            problems.append("monotonicity")

        if problems:
            failures += 1
            print("\nFAIL", ", ".join(problems))
            print("schema:", name)
            print("days_since_epoch:", dse)
            print("date:", (y, m, d), "ordinal:", (y2, doy))
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: day count -> parts -> day count.")
    p.add_argument("--schemas", type=str, default="all", help="Comma-separated schema list, or 'all'.")
    p.add_argument("--N", type=int, default=2000, help="Trials per schema.")
    p.add_argument("--from-year", type=int, default=-2000)
    p.add_argument("--to-year", type=int, default=4000)
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per schema.")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")
    years = Range(args.from_year, args.to_year)

    total_fail = 0
    for name in parse_schemas(args.schemas):
        print(f"Testing {name} ...")
        total_fail += roundtrip_test(name, N=args.N, years=years, seed=args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
