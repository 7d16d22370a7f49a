PRESENTATIONS = ("g", "f", "d")


def halfint(h, format_spec: str = "") -> str:
    """
    Format a :class:`~am.halfint.HalfInt` for one of the presentation types

    ``g`` (default)
        integer if integral, else ``"n/2"``
    ``f``
        fixed point with one decimal place
    ``d``
        integer only; half-integers raise :class:`ValueError`
    """
    presentation = format_spec or "g"
    if presentation not in PRESENTATIONS:
        raise ValueError(f"invalid format specifier {format_spec!r} for HalfInt")

    if presentation == "f":
        return f"{float(h):.1f}"

    if presentation == "d":
        if not h.is_integer():
            raise ValueError(f"non-integer value {h} cannot be formatted with 'd'")
        return f"{int(h):d}"

    if h.is_integer():
        return f"{int(h):d}"
    return f"{h.twice_value:d}/2"


def angular_momentum_range(r) -> str:
    """Format a ``(lower, upper)`` range without spaces, as ``"(1/2,7/2)"``."""
    lower, upper = r
    return f"({lower},{upper})"
