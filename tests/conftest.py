import os
from pathlib import Path

import pytest

# Start coverage in subprocesses spawned by the CLI tests
if os.getenv("COVERAGE_PROCESS_START"):
    import coverage

    coverage.process_startup()


SAMPLE_PROGRAM = """\
int x;
int y;
x = 10;
y = x + 2 - 1;
if { x == y - 1 } { x = x + 1; }
"""


@pytest.fixture
def sample_program() -> str:
    return SAMPLE_PROGRAM


@pytest.fixture
def program_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.toy"
    path.write_text(SAMPLE_PROGRAM, encoding="utf-8")
    return path
