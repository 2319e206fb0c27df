import pytest

from quicksorts.sorting_algorithms import sorting_algorithms


@pytest.fixture(params=sorting_algorithms, ids=lambda algorithm: algorithm.name)
def algorithm(request):
    return request.param
