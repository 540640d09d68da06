from __future__ import annotations

import argparse
import logging
import random
from typing import List, Tuple

from jdkit.core.time import GREGORIAN_CUTOVER_JDN, datetime_to_jd, jd_to_datetime, jdn_to_jd

logger = logging.getLogger(__name__)

ONE_SECOND_DAYS = 1.0 / 86400.0


def in_cutover_window(jd: float) -> bool:
    """
    JDs from 2299160.5 up to one second past 2299161.0 decode to a Gregorian
    1582-10-15 at or before noon (after second truncation), which the forward
    conversion still reads as Julian.
    """
    lo = jdn_to_jd(GREGORIAN_CUTOVER_JDN)
    return lo <= jd < lo + 0.5 + ONE_SECOND_DAYS


def roundtrip_test(
    N: int,
    jd_min: float,
    jd_max: float,
    seed: int,
    *,
    max_failures: int,
    tol: float = ONE_SECOND_DAYS,
) -> Tuple[int, float]:
    """
    Random JD -> civil datetime -> JD sweep.

    Returns (failures, worst absolute error in days). JDs inside the cutover
    window are skipped.
    """
    rng = random.Random(seed)
    failures = 0
    worst = 0.0

    for _ in range(N):
        jd0 = rng.uniform(jd_min, jd_max)
        if in_cutover_window(jd0):
            continue

        civil = jd_to_datetime(jd0)
        jd1 = datetime_to_jd(civil)
        err = abs(jd1 - jd0)
        worst = max(worst, err)
        if err > tol:
            failures += 1
            print("\nFAIL")
            print("jd0:", repr(jd0))
            print("civil:", civil)
            print("jd1:", repr(jd1))
            print(f"error: {err * 86400.0:.6f} s")
            if failures >= max_failures:
                break

    logger.debug("round trip: N=%d failures=%d worst=%.3e d", N, failures, worst)
    return failures, worst


def parse_ranges(s: str) -> List[Tuple[float, float]]:
    # "0:2299160,2299161.5:2500000" -> [(0.0, 2299160.0), ...]
    out: List[Tuple[float, float]] = []
    for part in s.split(","):
        part = part.strip()
        if not part:
            continue
        a, b = part.split(":")
        out.append((float(a), float(b)))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: JD -> civil datetime -> JD.")
    p.add_argument("--ranges", type=str, default="0:2299160,2299161.5:2816787.5",
                   help="Comma-separated JD ranges lo:hi.")
    p.add_argument("--N", type=int, default=20000, help="Trials per range.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per range.")
    args = p.parse_args(argv)

    ranges = parse_ranges(args.ranges)
    if not ranges:
        raise SystemExit("--ranges must name at least one lo:hi range")

    total_fail = 0
    for lo, hi in ranges:
        if hi < lo:
            raise SystemExit(f"range {lo}:{hi} has hi < lo")
        print(f"Testing JD {lo} .. {hi} ...")
        f, worst = roundtrip_test(args.N, lo, hi, args.seed, max_failures=args.max_failures)
        print(f"  worst error: {worst * 86400.0:.6f} s")
        total_fail += f

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
