from pathlib import Path

import pytest

EXAMPLES_DIR = Path(__file__).parent / "examples"


@pytest.fixture
def raml_file() -> Path:
    return EXAMPLES_DIR / "types_example.raml"


@pytest.fixture
def raml_data(raml_file: Path) -> str:
    return raml_file.read_text(encoding="utf-8")
