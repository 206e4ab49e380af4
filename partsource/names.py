"""
Conversion between part names and part file names.

Part files have the general form ``partname.part[.revN]``, part names have the form
``[category/]partname[/revN]``. The mapping between the two is reversible.
"""

import string

from partsource.errors import PartSourceIOError

PART_EXT = ".part"
REV_PREFIX = "rev"

# characters that may not occur in a category (directory) name
CATEGORY_EXCLUDED = ".:/"


def ends_with_rev(segment: str, separator: str, start: int = 0) -> str | None:
    """
    Return the trailing "revN" of segment[start:] if it ends with separator + "rev" + digits,
    or None otherwise. The separator is '/' for part names and '.' for file names.
    """
    tail = len(segment)
    while tail > start and segment[tail - 1] in string.digits:
        tail -= 1
    if tail == len(segment):
        return None
    # tail is now on the first digit, "rev" and the separator must precede it
    sep = tail - len(REV_PREFIX) - 1
    if sep < start or segment[sep] != separator or segment[sep + 1 : tail] != REV_PREFIX:
        return None
    return segment[sep + 1 :]


def make_part_name(entry: str, category: str, use_versioning: bool) -> str | None:
    """
    Convert a directory entry (a file name without directory) into a part name, or return None
    if the entry is not a part file.

    The last occurrence of ".part" is taken as the extension, and the base name before it may
    not be empty. With versioning, the extension must be followed by exactly ".revN" and the
    resulting part name carries "/revN". Without versioning, the entry must end in ".part".
    """
    cp = entry.rfind(PART_EXT)
    if cp <= 0:
        return None
    prefix = f"{category}/" if category else ""
    rest = entry[cp + len(PART_EXT) :]
    if use_versioning:
        rev = ends_with_rev(rest, ".")
        if rev is None or rest != "." + rev:
            return None
        return f"{prefix}{entry[:cp]}/{rev}"
    if rest:
        return None
    name = prefix + entry[:cp]
    # e.g. Category/rev3.part would read back as revision 3 of Category
    if ends_with_rev(name, "/") is not None:
        return None
    return name


def make_file_name(root_path: str, part_name: str) -> str:
    """Create the file name for a part name, the inverse of make_part_name"""
    rev = ends_with_rev(part_name, "/")
    if rev:
        base = part_name[: -len(rev) - 1]
        return f"{root_path}/{base}{PART_EXT}.{rev}"
    return f"{root_path}/{part_name}{PART_EXT}"


def is_category_name(name: str) -> bool:
    return bool(name) and not any(c in CATEGORY_EXCLUDED for c in name)


def split_part_name(part_name: str) -> tuple[str, str, int | None]:
    """
    Split a part name into category, base name and revision number.
    Category is the empty string for uncategorized parts, revision is None for unversioned names.
    """
    rev = ends_with_rev(part_name, "/")
    root = part_name[: -len(rev) - 1] if rev else part_name
    category, _, basename = root.rpartition("/")
    if not rev:
        return category, basename, None
    try:
        revision = int(rev[len(REV_PREFIX) :])
    except ValueError as e:
        # more digits than int() will convert
        raise PartSourceIOError(f"Revision number of {part_name[:40]}... is too long") from e
    return category, basename, revision
