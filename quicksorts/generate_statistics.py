import logging
from collections.abc import Iterable, Sequence
from decimal import Decimal
from itertools import product
from math import log2, nan
from random import Random
from time import thread_time
from typing import Any, Optional

import numpy as np
import pandas as pd
import plotly.express as px
import plotly.graph_objs as go
from tqdm import tqdm

from .comparators import natural
from .Config import *
from .sorting_algorithms import sorting_algorithms
from .SortingAlgorithm import SortingAlgorithm

logger = logging.getLogger(__name__)

COLUMNS = ["name", "N", "input", "lower bound", "best", "worst", "avg", "ratio"]


class InvalidSortingAlgorithmError(Exception):
    def __init__(self, name: str, arr: Sequence[int]) -> None:
        super().__init__(f"Invalid sorting algorithm: `{name}` produced {list(arr)}")


def to_displayable_int(x: int) -> str:
    return str(x) if x < 1e9 else f"{Decimal(x):.2e}"


def get_operation_cnts(algorithm: SortingAlgorithm, N: int) -> list[int]:
    def cmp(x: Any, y: Any) -> int:
        nonlocal operation_cnt
        operation_cnt += 1
        return natural(x, y)

    do_sample = N > algorithm.max_N
    if do_sample:
        start_time = thread_time()
    r = Random(SAMPLE_SEED)
    operation_cnts = []
    for val_array in algorithm.sampler(N, r) if do_sample else algorithm.generator(N):
        arr = list(val_array)
        operation_cnt = 0
        algorithm.sort_with(arr, cmp)
        if not algorithm.validator(arr):
            raise InvalidSortingAlgorithmError(algorithm.name, arr)
        operation_cnts.append(operation_cnt)
        if do_sample and int((thread_time() - start_time) * 1000) > MAX_SAMPLE_TIME_MS:
            break
    return operation_cnts


def get_avg_operation_cnt(algorithm: SortingAlgorithm, N: int) -> tuple[int, int, float]:
    data = np.array(get_operation_cnts(algorithm, N), dtype=np.int64)
    return int(data.min()), int(data.max()), float(data.mean())


def generate_statistics(Ns: Iterable[int] = STATISTICS_NS, algorithms: Optional[Sequence[SortingAlgorithm]] = None, progress: bool = True) -> pd.DataFrame:
    if algorithms is None:
        algorithms = sorting_algorithms
    tasks = list(product(algorithms, Ns))
    rows = []
    for algorithm, N in tqdm(tasks, disable=not progress):
        logger.info("init: `%s` with %d elements", algorithm.name, N)
        best, worst, avg = get_avg_operation_cnt(algorithm, N)
        logger.info("fin:  `%s` with %d elements", algorithm.name, N)
        input_total = algorithm.input_total(N)
        lower_bound = log2(input_total)
        ratio = nan if input_total <= 1 else avg / lower_bound
        rows.append((algorithm.name, N, to_displayable_int(input_total), lower_bound, best, worst, avg, ratio))
    df = pd.DataFrame(rows, columns=COLUMNS)
    return df.sort_values(["name", "N"], ignore_index=True)


def operation_histogram(algorithm: SortingAlgorithm, N: int) -> go.Figure:
    data = np.array(get_operation_cnts(algorithm, N), dtype=np.int32)
    fig = px.histogram(x=data, title=f"Comparison Count Distribution: {algorithm.name}, N = {N}", labels={"x": "Comparison Count"}, color=data, text_auto=True)
    fig.layout.update(showlegend=False)
    return fig
