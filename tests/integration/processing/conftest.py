from pathlib import Path

import pytest


@pytest.fixture(scope="module")
def text_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test input files once per module."""
    dir_path: Path = tmp_path_factory.mktemp("inputs")

    (dir_path / "all_blocks.txt").write_text(
        "pre-block line 1\n"
        "pre-block line 2\n"
        "*pre*\n"
        "central-block line 1\n"
        "*post*\n"
        "post-block line 1\n",
        encoding="utf-8",
    )
    (dir_path / "pre_only.txt").write_text(
        "Only pre-block content\nMore pre_block\n", encoding="utf-8"
    )
    (dir_path / "default_sentinels.txt").write_text(
        "intro\n--- PRE ---\nbody\n--- POST ---\noutro", encoding="utf-8"
    )
    (dir_path / "crlf.txt").write_bytes(b"a\r\n*pre*\r\nb\r\n*post*\r\nc\r\n")
    (dir_path / "lone_cr.txt").write_bytes(b"a\rb\nx\r*pre*\ny\n")
    (dir_path / "trailing_cr.txt").write_bytes(b"a\r\r\n*pre*\nb\r")
    (dir_path / "unicode.txt").write_text(
        "café\n*pre*\nüber\n", encoding="utf-8"
    )
    (dir_path / "latin1.txt").write_bytes("café\n".encode("latin-1"))

    return dir_path
