from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import os
import sys

from jdkit.core.errors import CalendarFieldError, CalendarRangeError
from jdkit.core.types import CivilDatetime

logger = logging.getLogger("jdkit")


def _parse_civil(s: str) -> CivilDatetime:
    try:
        return CivilDatetime.from_iso(s)
    except CalendarRangeError as e:
        raise SystemExit(str(e)) from e


def _configure_logging(level: str | None) -> None:
    name = (level or os.environ.get("JDKIT_LOG_LEVEL", "") or "WARNING").upper()
    numeric = getattr(logging, name, None)
    if not isinstance(numeric, int):
        raise SystemExit(f"Unknown log level '{name}'")
    logging.basicConfig(level=numeric, format="%(levelname)s %(name)s: %(message)s")


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


def cmd_jd(argv: list[str]) -> int:
    from jdkit.core import time as jt
    from jdkit.validation import checked_datetime_to_jd

    p = argparse.ArgumentParser(prog="jdkit jd", description="Civil datetime (UTC) -> Julian Date and T.")
    p.add_argument("datetime", help="[-]YYYY-MM-DD[THH:MM[:SS]]")
    p.add_argument("--strict", action="store_true", help="reject out-of-range calendar fields")
    args = p.parse_args(argv)

    dt = _parse_civil(args.datetime)
    try:
        jd = checked_datetime_to_jd(dt) if args.strict else jt.datetime_to_jd(dt)
    except CalendarFieldError as e:
        raise SystemExit(str(e)) from e

    print(f"UTC = {dt}")
    print(f"JD  = {jd:.6f}")
    print(f"T (Julian centuries from J2000.0) = {jt.jd_to_T(jd):.12f}")
    return 0


def cmd_date(argv: list[str]) -> int:
    from jdkit.core import time as jt

    p = argparse.ArgumentParser(prog="jdkit date", description="Julian Date -> civil datetime (UTC).")
    p.add_argument("jd", type=float, help="Julian Date")
    args = p.parse_args(argv)

    print(jt.jd_to_datetime(args.jd))
    return 0


def cmd_deltat(argv: list[str]) -> int:
    from jdkit.reference import deltat as dt

    p = argparse.ArgumentParser(prog="jdkit deltat", description="ΔT = TT - UT (Espenak–Meeus) for a civil datetime.")
    p.add_argument("datetime", help="[-]YYYY-MM-DD[THH:MM[:SS]]")
    p.add_argument("--correction-c", action="store_true",
                   help="apply the lunar secular acceleration correction outside 1955..2005")
    args = p.parse_args(argv)

    civil = _parse_civil(args.datetime)
    r = dt.delta_t(civil, apply_correction_c=args.correction_c)
    if not r:
        print(f"ΔT undefined (y = {r.year_decimal:.4f})")
        return 1

    print(f"y      = {r.year_decimal:.4f}")
    print(f"branch = {r.branch}")
    print(f"ΔT     = {r.seconds:.3f} s")
    return 0


def cmd_k(argv: list[str]) -> int:
    from jdkit.reference import lunation

    p = argparse.ArgumentParser(prog="jdkit k", description="Approximate lunation index k since 2000-01-06.")
    p.add_argument("datetime", help="[-]YYYY-MM-DD[THH:MM[:SS]]")
    args = p.parse_args(argv)

    k = lunation.approx_k(_parse_civil(args.datetime))
    print(f"k ~= {k:.4f}")
    print(f"T(k) = {lunation.k_to_T(k):.12f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="jdkit", description="Julian Date, T, ΔT and lunation toolkit CLI.")
    p.add_argument("--log-level", default=None, help="logging level (default: $JDKIT_LOG_LEVEL or WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("jd", help="Civil datetime -> JD and T")
    sub.add_parser("date", help="JD -> civil datetime")
    sub.add_parser("deltat", help="ΔT for a civil datetime")
    sub.add_parser("k", help="Approximate lunation index")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    sub.add_parser("plot-deltat", help="Plot ΔT over a year range (needs numpy, matplotlib)")

    args, rest = p.parse_known_args(argv)
    _configure_logging(args.log_level)
    logger.debug("cmd=%s rest=%s", args.cmd, rest)

    if args.cmd == "jd":
        return cmd_jd(rest)

    if args.cmd == "date":
        return cmd_date(rest)

    if args.cmd == "deltat":
        return cmd_deltat(rest)

    if args.cmd == "k":
        return cmd_k(rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "jdkit.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "plot-deltat":
        return _run_module_main("jdkit.diagnostics.plot_deltat", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
