"""
Ordering of part names.

Names are grouped by their root (the name without a trailing /revN), so that all revisions of
a part are adjacent. Within a root, the unversioned name comes first, followed by the revisions
with the highest revision number first.
"""

import functools
import os

from partsource.names import REV_PREFIX, ends_with_rev


def _split_rev(name: str) -> tuple[str, tuple[int, str] | None]:
    """Split name into its root and a comparable revision key (number of digits, digits)"""
    rev = ends_with_rev(name, "/")
    if rev is None:
        return name, None
    # compared as digit strings, so revision numbers of any length work and rev01 == rev1
    digits = rev[len(REV_PREFIX) :].lstrip("0")
    return name[: -len(rev) - 1], (len(digits), digits)


def _root_bytes(root: str) -> bytes:
    """The root as file system bytes, so that undecodable file names sort as their raw bytes"""
    try:
        return os.fsencode(root)
    except UnicodeEncodeError:
        return root.encode("utf-8", "surrogatepass")


def compare_part_names(s1: str, s2: str) -> int:
    """Return a negative number if s1 sorts before s2, a positive number if after, 0 if equal"""
    root1, rev1 = _split_rev(s1)
    root2, rev2 = _split_rev(s2)

    # byte order: on a common prefix the shorter root comes first
    if root1 != root2:
        b1, b2 = _root_bytes(root1), _root_bytes(root2)
        if b1 != b2:
            return -1 if b1 < b2 else 1
        return -1 if root1 < root2 else 1

    if (rev1 is None) != (rev2 is None):
        return -1 if rev1 is None else 1
    if rev1 is None or rev2 is None:
        return 0
    # higher revision is "less", i.e. newest first
    return (rev1 < rev2) - (rev1 > rev2)


by_rev = functools.cmp_to_key(compare_part_names)
