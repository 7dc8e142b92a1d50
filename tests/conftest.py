from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

import pytest

_TESTS_DIR = Path(__file__).resolve().parent
_PACKAGE_ROOT = _TESTS_DIR.parent
for _path in (_TESTS_DIR, _PACKAGE_ROOT):
    if str(_path) not in sys.path:
        sys.path.append(str(_path))

from fixtures import FaultyBackendCase, faulty_backend_cases
from modfconform.numerics import BACKENDS


@pytest.fixture(scope="session")
def faulty_backends() -> Iterable[FaultyBackendCase]:
    """Broken split implementations with their expected failure counts."""

    return tuple(faulty_backend_cases())


@pytest.fixture(params=sorted(BACKENDS))
def split(request):
    """Each shipped split implementation in turn."""

    return BACKENDS[request.param]
