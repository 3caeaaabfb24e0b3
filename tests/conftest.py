from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def frame() -> np.ndarray:
    return np.zeros((200, 200, 3), dtype=np.uint8)


@pytest.fixture
def eventos() -> list:
    return []
