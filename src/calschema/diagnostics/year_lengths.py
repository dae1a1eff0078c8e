#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

import calschema

# Mean tropical year (days), J2000.
TROPICAL_YEAR = 365.24219
# Mean synodic month (days), J2000.
SYNODIC_MONTH = 29.530589


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calschema[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calschema[diagnostics]"') from e


def year_lengths(np, name: str, from_year: int, to_year: int):
    sch = calschema.get_schema(name)
    ys = np.arange(from_year, to_year + 1, dtype=np.int64)
    lengths = np.array([sch.count_days_in_year(int(y)) for y in ys], dtype=np.int64)
    return ys, lengths


def drift_days(np, lengths, reference: float):
    """Cumulative drift against a reference year length, in days."""
    return np.cumsum(lengths.astype(float) - reference)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Mean year length and drift of one or more schemas.")
    p.add_argument("--schemas", default="gregorian,julian,persian2820,tabular_islamic")
    p.add_argument("--from-year", type=int, default=1)
    p.add_argument("--to-year", type=int, default=2820)
    p.add_argument(
        "--reference",
        type=float,
        default=None,
        help=f"Reference year length in days (default: {TROPICAL_YEAR}, or 12 synodic months for lunar schemas).",
    )
    p.add_argument("--plot", default=None, help="Write a drift plot to this file (needs matplotlib).")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    np = _need_numpy()
    names = [x.strip() for x in args.schemas.split(",") if x.strip()]

    series = []
    print(f"{'schema':<22} {'mean':>12} {'min':>5} {'max':>5} {'drift':>10}")
    for name in names:
        ref = args.reference
        if ref is None:
            lunar = calschema.schema_info(name)["profile"] == "LUNAR"
            ref = 12 * SYNODIC_MONTH if lunar else TROPICAL_YEAR
        ys, lengths = year_lengths(np, name, args.from_year, args.to_year)
        drift = drift_days(np, lengths, ref)
        series.append((name, ys, drift))
        print(f"{name:<22} {lengths.mean():>12.6f} {lengths.min():>5} {lengths.max():>5} {drift[-1]:>10.3f}")

    if args.plot:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(10, 5))
        for name, ys, drift in series:
            ax.plot(ys, drift, lw=1.0, label=name)
        ax.axhline(0.0, color="0.5", lw=0.8)
        ax.set_xlabel("year")
        ax.set_ylabel("cumulative drift (days)")
        ax.legend()
        fig.tight_layout()
        fig.savefig(args.plot, dpi=150)
        print(f"wrote {args.plot}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
