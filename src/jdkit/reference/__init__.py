"""Reference astronomical time models: ΔT and lunation seeds."""
