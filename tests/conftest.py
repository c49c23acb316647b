import pytest


@pytest.fixture
def people_rows():
    return [
        {"age": "25", "city": "NYC"},
        {"age": "30", "city": "LA"},
        {"age": "abc", "city": "NYC"},
    ]


@pytest.fixture
def linear_rows():
    """y = 2x, cells as text the way CSV parsing delivers them."""
    return [{"x": str(x), "y": str(2 * x)} for x in range(1, 6)]


@pytest.fixture
def mixed_rows():
    return [
        {"id": "1", "score": "3.5", "height": "170", "name": "ann"},
        {"id": "2", "score": "4.1", "height": "165", "name": "bob"},
        {"id": "3", "score": "", "height": "181", "name": "cy"},
        {"id": "4", "score": "2.9", "height": "158", "name": None},
        {"id": "5", "score": "4.8", "height": "177", "name": "dee"},
        {"id": "6", "score": "3.3", "height": "190", "name": "ann"},
    ]
