"""Library version reporting and comparison."""

MAJOR_VERSION = 2
MINOR_VERSION = 14
MICRO_VERSION = 1

VERSION = f"{MAJOR_VERSION}.{MINOR_VERSION}.{MICRO_VERSION}"


def version_str() -> str:
    """Return the library version as a ``major.minor.micro`` string."""
    return VERSION


def version_cmp(major: int, minor: int, micro: int) -> int:
    """Compare the library version with the given one.

    Returns a positive number if the library is newer than the given
    version, zero if they are equal and a negative number if it is older.
    The magnitude is the difference at the first component that differs.
    """
    for ours, theirs in (
        (MAJOR_VERSION, major),
        (MINOR_VERSION, minor),
        (MICRO_VERSION, micro),
    ):
        diff = ours - theirs
        if diff:
            return diff
    return 0