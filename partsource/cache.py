"""
In-memory index of the categories and part names found under a repository root.

The index is filled by a single scan of at most two directory levels: the root itself and the
category directories directly below it. Anything deeper is never looked at.
"""

import bisect
import logging
import os
import stat

from partsource.errors import PartSourceIOError
from partsource.names import is_category_name, make_part_name
from partsource.ordering import by_rev

logger = logging.getLogger(__name__)


class PartNameSet:
    """A set of part names, kept sorted in revision order"""

    def __init__(self):
        self._names: list[str] = []
        self._keys: list = []

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self):
        return iter(self._names)

    def clear(self):
        self._names.clear()
        self._keys.clear()

    def find(self, name: str) -> str | None:
        """Return the stored name that compares equal to name, or None"""
        key = by_rev(name)
        i = bisect.bisect_left(self._keys, key)
        if i < len(self._keys) and self._keys[i] == key:
            return self._names[i]
        return None

    def add(self, name: str) -> bool:
        """Insert name, returning False (and leaving the set unchanged) if it was already present"""
        key = by_rev(name)
        i = bisect.bisect_left(self._keys, key)
        if i < len(self._keys) and self._keys[i] == key:
            return False
        self._keys.insert(i, key)
        self._names.insert(i, name)
        return True

    def range(self, lower: str, upper: str) -> list[str]:
        """Return the names n with lower <= n < upper"""
        start = bisect.bisect_left(self._keys, by_rev(lower))
        end = bisect.bisect_left(self._keys, by_rev(upper))
        return self._names[start:end]


class DirectoryCache:
    def __init__(self, root_path: str, use_versioning: bool):
        self.root_path = root_path
        self.use_versioning = use_versioning
        self.categories: list[str] = []
        self.part_names = PartNameSet()

    def build(self):
        self.categories.clear()
        self.part_names.clear()
        self._scan(self.root_path, "")
        self.categories.sort()
        logger.info(
            f"Scanned {self.root_path}: {len(self.categories)} categories, {len(self.part_names)} parts"
        )

    def _scan(self, directory: str, category: str):
        try:
            with os.scandir(directory) as entries:
                # materialize so that a read error is raised while the directory is open
                entries = list(entries)
        except OSError as e:
            raise PartSourceIOError(f"{e.strerror}; scanning directory {directory}") from e

        for entry in entries:
            path = f"{directory}/{entry.name}"
            try:
                mode = os.stat(path).st_mode
            except OSError:
                logger.debug(f"Ignoring {path}: cannot stat")
                continue

            if stat.S_ISREG(mode):
                part_name = make_part_name(entry.name, category, self.use_versioning)
                if part_name is None:
                    logger.debug(f"Ignoring {path}: not a part file")
                    continue
                if not self.part_names.add(part_name):
                    raise PartSourceIOError(f"{part_name} has already been encountered")
            elif stat.S_ISDIR(mode) and not category and is_category_name(entry.name):
                self.categories.append(entry.name)
                self._scan(path, entry.name)
            else:
                logger.debug(f"Ignoring {path}")
