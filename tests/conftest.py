from pathlib import Path

import pytest

from sqlcompose import SQLFactory

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture
def builder() -> SQLFactory:
    """Statement factory shared by builder tests."""
    return SQLFactory()
