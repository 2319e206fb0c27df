from importlib import import_module
from pathlib import Path

from .SortingAlgorithm import SortingAlgorithm


class UnknownSortingAlgorithmError(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown sorting algorithm: {name}")


sorting_algorithms: list[SortingAlgorithm] = []
for file in sorted((Path(__file__).parent / "impl").glob("*.py")):
    module = import_module(f".{file.stem}", package="quicksorts.impl")
    sorting_algorithms.append(module.algorithm)


def get_sorting_algorithm(name: str) -> SortingAlgorithm:
    for algorithm in sorting_algorithms:
        if algorithm.name == name:
            return algorithm
    raise UnknownSortingAlgorithmError(name)
