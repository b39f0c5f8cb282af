"""Index vectors, index ranges, tiled index iteration and related helpers for data-parallel work."""

__version__ = "0.1.0"

__all__ = [
    "atomic",
    "cvec",
    "device",
    "idxrange",
    "memory",
    "threadspace",
    "tiled",
    "uniqueid",
    "utility",
    "vec",
    "vecops",
]