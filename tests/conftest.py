import os
import sys

import pytest

# Raíz del proyecto en sys.path para importar 'app', 'config', 'utils', ...
_TESTS_DIR = os.path.dirname(__file__)
_ROOT_DIR = os.path.abspath(os.path.join(_TESTS_DIR, os.pardir))
if _ROOT_DIR not in sys.path:
    sys.path.insert(0, _ROOT_DIR)

from tests.support import builders as tree_builders


@pytest.fixture
def b():
    """Atajo a los builders de árboles InnerTube."""
    return tree_builders
