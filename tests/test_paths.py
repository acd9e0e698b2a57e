import pytest

from prismview.core.paths import (
    create_absolute_path,
    is_absolute,
    is_below,
    normalize_path,
    relative_to,
    to_unix,
)


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/a/b/c", "/a/b/c"),
        ("/a//b///c/", "/a/b/c"),
        ("/a/./b/../c", "/a/c"),
        ("/", "/"),
        ("", "."),
        ("a/b/..", "a"),
        ("C:\\Users\\hafner\\..\\jenkins", "C:/Users/jenkins"),
        ("c:/workspace/", "C:/workspace"),
        ("c:", "C:/"),
        ("  /padded  ", "/padded"),
    ],
)
def test_normalize_path(path: str, expected: str) -> None:
    assert normalize_path(path) == expected


@pytest.mark.parametrize(
    ("path", "absolute"),
    [
        ("/a", True),
        ("\\a", True),
        ("C:\\a", True),
        ("d:/a", True),
        ("C:", True),
        ("C:relative", False),
        ("relative/path", False),
        ("", False),
    ],
)
def test_is_absolute(path: str, absolute: bool) -> None:
    assert is_absolute(path) is absolute


def test_to_unix() -> None:
    assert to_unix("C:\\a\\b") == "C:/a/b"


@pytest.mark.parametrize(
    ("base", "relative", "expected"),
    [
        ("/workspace", "src/main/java", "/workspace/src/main/java"),
        ("/workspace/", "./src", "/workspace/src"),
        ("/workspace", "../other", "/other"),
        ("/workspace", "/absolute", "/absolute"),
        ("C:\\workspace", "src\\main", "C:/workspace/src/main"),
    ],
)
def test_create_absolute_path(base: str, relative: str, expected: str) -> None:
    assert create_absolute_path(base, relative) == expected


@pytest.mark.parametrize(
    ("path", "base", "below"),
    [
        ("/a/b/c", "/a/b", True),
        ("/a/b", "/a/b", False),
        ("/a/b/", "/a/b", False),
        ("/a/bc", "/a/b", False),
        ("/a", "/a/b", False),
        ("/a", "/", True),
        ("C:\\ws\\src", "c:/ws", True),
    ],
)
def test_is_below(path: str, base: str, below: bool) -> None:
    assert is_below(path, base) is below


def test_relative_to() -> None:
    assert relative_to("/a/b/c/d", "/a/b") == "c/d"
    assert relative_to("C:\\ws\\src", "C:/ws/") == "src"


def test_relative_to_rejects_outside_paths() -> None:
    with pytest.raises(ValueError, match="is not located below"):
        relative_to("/other", "/a/b")
