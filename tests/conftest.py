"""Shared fixtures: small JUnit XML documents."""

import pytest


SMOKE_PASSING = b"""<?xml version="1.0" encoding="UTF-8"?>
<testsuites time="1.5" timestamp="2024-05-01T10:00:00Z">
  <testsuite name="smoke">
    <testcase name="boot" time="0.5"></testcase>
  </testsuite>
</testsuites>
"""

SMOKE_FAILING = b"""<?xml version="1.0" encoding="UTF-8"?>
<testsuites time="1.5" timestamp="2024-05-01T10:00:00Z">
  <testsuite name="smoke">
    <testcase name="boot" time="0.5">
      <failure message="timeout">pod never became ready</failure>
    </testcase>
  </testsuite>
</testsuites>
"""

MIXED = b"""<testsuites time="20" timestamp="2024-05-01T10:00:00Z">
  <testsuite name="install">
    <testcase name="operator" time="1.0"/>
    <testcase name="crds" time="2.0"><failure/></testcase>
  </testsuite>
  <testsuite name="registry">
    <testcase name="push" time="3.0"><failure>denied</failure></testcase>
    <testcase name="pull" time="4.0"/>
  </testsuite>
</testsuites>
"""

EMPTY = b'<testsuites time="0" timestamp="2024-05-01T10:00:00Z"></testsuites>'


@pytest.fixture
def report_file(tmp_path):
    """Write XML bytes to a temp file and return its path as a string."""
    def _write(data: bytes, name: str = "report.xml") -> str:
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)
    return _write


@pytest.fixture
def smoke_passing() -> bytes:
    return SMOKE_PASSING


@pytest.fixture
def smoke_failing() -> bytes:
    return SMOKE_FAILING


@pytest.fixture
def mixed() -> bytes:
    return MIXED


@pytest.fixture
def empty() -> bytes:
    return EMPTY
