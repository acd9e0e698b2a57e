from __future__ import annotations

from pathlib import Path

import pytest

from prismview.core.printer import SourcePrinter


JAVA_SOURCE = """\
package edu.hm.hafner;

import java.util.List;

public class Example {
    public static void main(final String[] args) {
        System.out.println("Hello <World> & 'friends'");
    }
}"""

CPP_SOURCE = """\
#include <iostream>

int main(int argc, char**argv) {

  int b = std::move(argc);

  std::cout << "Hello, World!" << argc << std::endl;
  return 0;
}"""

JELLY_SOURCE = """\
<l:main-panel>Before<script>execute</script> Text</l:main-panel>
<l:main-panel>Warning<script>execute</script> Text</l:main-panel>
<l:main-panel>After<script>execute</script> Text</l:main-panel>"""


class StubResolver:
    """Image resolver returning a fixed URL and remembering the requests."""

    def __init__(self, url: str = "/path/to/icon") -> None:
        self.url = url
        self.requests: list[str] = []

    def image_path(self, reference: str) -> str:
        self.requests.append(reference)
        return self.url


@pytest.fixture
def printer() -> SourcePrinter:
    return SourcePrinter()


@pytest.fixture
def resolver() -> StubResolver:
    return StubResolver()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def other_folder(tmp_path: Path) -> Path:
    root = tmp_path / "other"
    root.mkdir()
    return root


@pytest.fixture
def java_source() -> str:
    return JAVA_SOURCE


@pytest.fixture
def cpp_source() -> str:
    return CPP_SOURCE


@pytest.fixture
def jelly_source() -> str:
    return JELLY_SOURCE
