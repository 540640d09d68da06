#!/usr/bin/env python3
from __future__ import annotations

import argparse


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "jdkit[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "jdkit[diagnostics]"') from e


def sample_delta_t(y0: float, y1: float, step: float, *, apply_correction_c: bool = False):
    """
    Evaluate ΔT on a regular decimal-year grid.

    Returns (years, seconds) numpy arrays; years without an estimate
    (y < -1999) are NaN.
    """
    np = _need_numpy()
    from jdkit.reference import deltat as dt

    ys = np.arange(float(y0), float(y1) + 1e-12, float(step), dtype=float)
    vals = []
    for y in ys:
        r = dt.delta_t_for_year(float(y), apply_correction_c=apply_correction_c)
        vals.append(r.seconds if r else np.nan)
    return ys, np.array(vals, dtype=float)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Plot Delta T (TT-UT) using jdkit.reference.deltat.")
    p.add_argument("--y0", type=int, default=1600, help="start year")
    p.add_argument("--y1", type=int, default=2100, help="end year")
    p.add_argument("--step", type=float, default=0.25, help="sampling step in years (e.g., 0.1, 0.25, 1.0)")
    p.add_argument("--out", default="deltat.png", help="output image filename")
    p.add_argument("--show-correction", action="store_true",
                   help="also plot the curve with the lunar secular acceleration correction")
    p.add_argument("--show-branches", action="store_true", help="mark the piecewise branch boundaries")
    args = p.parse_args(argv)

    if args.y1 < args.y0:
        raise SystemExit("--y1 must be >= --y0")
    if args.step <= 0:
        raise SystemExit("--step must be positive")

    plt = _need_matplotlib()
    from jdkit.reference.deltat import DELTA_T_BRANCHES

    ys, vals = sample_delta_t(args.y0, args.y1, args.step)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(ys, vals, linewidth=2, label="Espenak–Meeus")

    if args.show_correction:
        _, corr = sample_delta_t(args.y0, args.y1, args.step, apply_correction_c=True)
        ax.plot(ys, corr, linewidth=1.5, linestyle="--", label="with correction c")

    if args.show_branches:
        for br in DELTA_T_BRANCHES:
            if args.y0 < br.upper < args.y1:
                ax.axvline(br.upper, color="grey", alpha=0.4, linewidth=0.8)

    ax.set_title("Delta T = TT − UT (seconds)")
    ax.set_xlabel("Year")
    ax.set_ylabel("ΔT (s)")
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
