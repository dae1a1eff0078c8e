from __future__ import annotations

import argparse

import calschema


def render(name: str, from_year: int, to_year: int) -> str:
    """One row per year, one column per month, cells are month lengths."""
    rows = []
    width = 0
    for y in range(from_year, to_year + 1):
        layout = calschema.month_layout(y, schema=name)
        width = max(width, len(layout))
        cells = [f"{r['days']:>3}{'*' if r['intercalary'] else ' '}" for r in layout]
        total = sum(r["days"] for r in layout)
        rows.append((y, cells, total))

    header = "year  " + "".join(f"{m:>3} " for m in range(1, width + 1)) + "| days"
    lines = [f"{name}", header, "-" * len(header)]
    for y, cells, total in rows:
        pad = "    " * (width - len(cells))
        lines.append(f"{y:>5} " + "".join(cells) + pad + f"| {total}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print the month lengths of a range of years.")
    p.add_argument("--schema", default="gregorian")
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2010)
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    print(render(args.schema, args.from_year, args.to_year))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
