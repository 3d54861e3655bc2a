"""Byte count formatting for size impact reports."""

from typing import Callable, Literal

Units = Literal["decimal", "binary"]

# format_size(size, diff=False) -> str
SizeFormatter = Callable[..., str]

_DECIMAL_UNITS = (("GB", 1000**3), ("MB", 1000**2), ("kB", 1000))
_BINARY_UNITS = (("GiB", 1024**3), ("MiB", 1024**2), ("KiB", 1024))


def _human_bytes(n: int, units) -> str:
    n_abs = abs(n)
    for suffix, factor in units:
        if n_abs >= factor:
            value = f"{n_abs / factor:.2f}".rstrip("0").rstrip(".")
            return f"{value} {suffix}"
    return f"{n_abs} B"


def make_size_formatter(units: Units = "decimal") -> SizeFormatter:
    """Return a ``format_size(size, diff=False)`` function for ``units``.

    Negative values always carry a ``-``.  With ``diff=True`` positive values
    carry a ``+`` so deltas read as deltas.
    """
    if units == "decimal":
        table = _DECIMAL_UNITS
    elif units == "binary":
        table = _BINARY_UNITS
    else:
        raise ValueError(f"Unknown units: {units!r}. Choose from: binary, decimal")

    def format_size(size: int, diff: bool = False) -> str:
        if size < 0:
            sign = "-"
        elif diff and size > 0:
            sign = "+"
        else:
            sign = ""
        return f"{sign}{_human_bytes(size, table)}"

    return format_size


format_size = make_size_formatter("decimal")
