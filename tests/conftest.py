"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from tonality.fretboard import FretboardLookup, InstrumentLoader


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def instruments_library_path() -> Path:
    """Path to the built-in instrument library."""
    return Path(__file__).parent.parent / "src" / "tonality" / "fretboard" / "library"


@pytest.fixture
def instrument_loader(instruments_library_path: Path) -> InstrumentLoader:
    """Loader over the built-in library only."""
    return InstrumentLoader(library_path=instruments_library_path)


@pytest.fixture
def guitar(instrument_loader: InstrumentLoader) -> FretboardLookup:
    """Standard-tuned guitar."""
    definition = instrument_loader.get_instrument("guitar")
    assert definition is not None
    return FretboardLookup(definition)


@pytest.fixture
def ukulele(instrument_loader: InstrumentLoader) -> FretboardLookup:
    """GCEA ukulele."""
    definition = instrument_loader.get_instrument("ukulele")
    assert definition is not None
    return FretboardLookup(definition)
