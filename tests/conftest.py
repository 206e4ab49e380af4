import pytest
from fastapi.testclient import TestClient

from partsource import api
from partsource.api.parts import get_source
from partsource.source import DirLibSource
from tests.tools import write_parts


@pytest.fixture()
def plain_dir(tmp_path):
    """An unversioned part directory with two categories"""
    return write_parts(
        tmp_path / "plain",
        {
            "a.part": "(part a)",
            "z.part": "(part z)",
            "notes.txt": "not a part",
            "Foo/b.part": "(part Foo/b)",
            "Foo/c.part": "(part Foo/c)",
            "Foobar/d.part": "(part Foobar/d)",
            "Foo/nested/e.part": "(too deep)",
            ".hidden/f.part": "(hidden category)",
        },
    )


@pytest.fixture()
def versioned_dir(tmp_path):
    return write_parts(
        tmp_path / "versioned",
        {
            "a.part.rev1": "a1",
            "a.part.rev2": "a2",
            "a.part.rev10": "a10",
            "b.part": "unversioned",
            "Cat/x.part.rev3": "x3",
            "Cat/x.part.revision": "not a revision",
        },
    )


@pytest.fixture()
def plain_source(plain_dir):
    return DirLibSource(str(plain_dir))


@pytest.fixture()
def versioned_source(versioned_dir):
    return DirLibSource(str(versioned_dir), "useVersioning")


@pytest.fixture()
def client(plain_source):
    api.app.dependency_overrides[get_source] = lambda: plain_source
    try:
        yield TestClient(api.app)
    finally:
        api.app.dependency_overrides.clear()
