import sys
from pathlib import Path

import pytest


# Garante que `src/` está no PYTHONPATH quando rodar pytest no repo.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def example_arns():
    """ARNs válidos do arquivo de exemplos, sem comentários e linhas vazias."""
    lines = (FIXTURES / "examples.txt").read_text(encoding="utf-8").splitlines()
    return [line for line in lines if line and not line.startswith("#")]
