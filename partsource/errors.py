class PartSourceIOError(Exception):
    """Raised for every failure of a part source: scanning, lookup and reading."""


class PartNotFound(PartSourceIOError):
    pass
