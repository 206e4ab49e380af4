"""
A part source backed by a directory on the local file system.

The directory holds part files directly, or in category directories one level below it::

    root/name.part                 (uncategorized, unversioned)
    root/Category/name.part        (categorized, unversioned)
    root/Category/name.part.rev3   (categorized, revision 3)

All categories and part names are read into memory when the source is created. The source is
not refreshed afterwards: create a new DirLibSource to pick up changes on disk.
"""

import logging
import os

from partsource.cache import DirectoryCache
from partsource.errors import PartNotFound, PartSourceIOError
from partsource.names import make_file_name

logger = logging.getLogger(__name__)

#: Largest part file that will be read, in bytes
MAX_PART_SIZE = 1024 * 1024

#: Option token that enables versioned mode
USE_VERSIONING = "useVersioning"


class DirLibSource:
    """
    Read-only access to the parts in a directory.

    The cache is immutable after construction and every read uses its own buffer,
    so one instance can be shared between threads.
    """

    def __init__(self, directory_path: str, options: str = "", max_part_size: int = MAX_PART_SIZE):
        if not directory_path:
            raise PartSourceIOError("directory_path cannot be empty")
        if directory_path[-1] in "/\\" and len(directory_path) > 1:
            directory_path = directory_path[:-1]
        self._source_uri = directory_path
        self._use_versioning = USE_VERSIONING in (options or "")
        self.max_part_size = max_part_size

        self._cache = DirectoryCache(self._source_uri, self._use_versioning)
        self._cache.build()

    @property
    def source_uri(self) -> str:
        return self._source_uri

    @property
    def source_type(self) -> str:
        return "dir"

    @property
    def use_versioning(self) -> bool:
        return self._use_versioning

    def get_categories(self) -> list[str]:
        return list(self._cache.categories)

    def get_categorical_part_names(self, category: str = "") -> list[str]:
        """
        Return the part names in the given category, or all part names if category is empty.
        Names are in revision order: grouped per part, newest revision first.
        """
        if not category:
            return list(self._cache.part_names)
        # '0' is the character after '/', so this range holds exactly the names in the category
        return self._cache.part_names.range(f"{category}/", f"{category}0")

    def read_part(self, part_name: str, rev: str = "") -> bytes:
        """
        Read the contents of a part.

        :param part_name: the part name without revision
        :param rev: optional revision ("revN"); in a versioned source a part can only be read by revision
        """
        name = f"{part_name}/{rev}" if rev else part_name
        found = self._cache.part_names.find(name)
        if found is None:
            raise PartNotFound(f"{name} not found.")
        # the file name comes from the cached name, i.e. including any revision given in rev
        return self._read_file(make_file_name(self._source_uri, found))

    def read_parts(self, part_names: list[str]) -> list[bytes]:
        """Read a list of parts, in order. The first part that cannot be read aborts the whole list"""
        return [self.read_part(name) for name in part_names]

    def _read_file(self, file_name: str) -> bytes:
        try:
            with open(file_name, "rb") as f:
                size = os.fstat(f.fileno()).st_size
                if size > self.max_part_size:
                    raise PartSourceIOError(f"File '{file_name}' is too big")
                # read one byte more than expected to notice a file that grew
                payload = f.read(size + 1)
        except OSError as e:
            raise PartSourceIOError(f"{e.strerror}; cannot read file '{file_name}'") from e
        if len(payload) != size:
            raise PartSourceIOError(f"Expected {size} bytes from '{file_name}', read {len(payload)}")
        logger.debug(f"Read {size} bytes from {file_name}")
        return payload

    def show(self) -> str:
        lines = ["Show categories:"]
        lines += [f" '{c}'" for c in self._cache.categories]
        lines += ["", "Show parts:"]
        lines += [f" '{p}'" for p in self._cache.part_names]
        return "\n".join(lines)
