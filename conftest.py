import pytest

from library import Library

REFERENCE_YEAR = 2024


@pytest.fixture
def lib():
    # Fixed year so future-year checks do not depend on the wall clock
    return Library(current_year=REFERENCE_YEAR)
