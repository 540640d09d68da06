"""Diagnostics (round-trip sweeps, ΔT plots). Plotting needs the [diagnostics] extras."""
