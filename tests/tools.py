from fastapi.testclient import TestClient


def write_parts(root, files: dict[str, bytes | str]):
    """Create the given files (relative path -> content) below root"""
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
    return root


def get_json(client: TestClient, url, expected=200, **kargs):
    """Get the given URL and return the result as parsed json"""
    response = client.get(url, **kargs)
    content = response.json() if response.content else None
    assert response.status_code == expected, f"GET {url} returned {response.status_code}, expected {expected}, {content}"
    return content


def post_json(client: TestClient, url, expected=200, **kargs):
    response = client.post(url, **kargs)
    assert response.status_code == expected, (
        f"POST {url} returned {response.status_code}, expected {expected}\n{response.json()}"
    )
    if expected != 204:
        return response.json()
