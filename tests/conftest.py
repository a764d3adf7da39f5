import shutil
import sys
import tempfile
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from matrimoni.storage.store import KeyValueStore


@pytest.fixture
def temp_dir():
    """create a temporary storage directory."""
    temp_dir = Path(tempfile.mkdtemp())
    yield temp_dir
    # cleanup
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


@pytest.fixture
def store(temp_dir):
    return KeyValueStore(temp_dir / "storage")


@pytest.fixture
def make_form():
    """factory for a complete, valid biodata form."""
    def _make_form(**overrides):
        form = {
            "name": "Priya Sharma",
            "gender": "Female",
            "dob": "1995-04-12",
            "contact": "9876543210",
            "email": "priya@example.com",
            "height": "5'4\"",
            "education": "MBA",
            "occupation": "Analyst",
            "location": "Mumbai",
            "religion": "Hindu",
        }
        form.update(overrides)
        return form
    return _make_form
