from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from jlfoundry.config import ProjectConfig  # noqa: E402


@pytest.fixture()
def awesome_config() -> ProjectConfig:
    return ProjectConfig.from_answers(
        "AwesomePackage",
        author_name="John Doe",
        author_email="john@example.com",
        runtime_version="1.12",
        description="An awesome package",
        year=2025,
    )
