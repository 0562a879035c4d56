from collections.abc import Iterable
from decimal import Decimal
from functools import cmp_to_key
from math import log2, nan
from multiprocessing import Pool
from pathlib import Path
from random import Random
from time import thread_time
from typing import NamedTuple

import numpy as np
import pandas as pd
from tqdm import tqdm

from .Config import *
from .merge_sort import algorithm
from .SortingAlgorithm import SortingAlgorithm

HEADER = "name,N,input,lower bound,best,worst,avg,worst bound,ratio"


class InvalidSortingAlgorithmError(Exception):
    def __init__(self, name: str, N: int) -> None:
        super().__init__(f"Invalid sorting algorithm: `{name}` produced an unsorted output for N={N}")


class IdxVal(NamedTuple):
    idx: int
    val: int


def to_displayable_int(x: int) -> str:
    return str(x) if x < 1e9 else f"{Decimal(x):.2e}"


def merge_sort_worst_case(N: int) -> int:
    if N <= 1:
        return 0
    k = (N - 1).bit_length()
    return N * k - (1 << k) + 1


def get_operation_cnts(sorting_algorithm: SortingAlgorithm, N: int, max_time_ms: int = MAX_SAMPLE_TIME_MS) -> np.ndarray:
    """Count the comparisons `sorting_algorithm` makes on every input of size `N`.

    Inputs are enumerated exhaustively up to `max_N` and sampled beyond it until
    `max_time_ms` of thread time has been spent.
    """

    def cmp(x: IdxVal, y: IdxVal) -> int:
        nonlocal operation_cnt
        operation_cnt += 1
        return x.val - y.val

    key = cmp_to_key(cmp)

    do_sample = N > sorting_algorithm.max_N
    if do_sample:
        start_time = thread_time()
    r = Random(SAMPLE_SEED)
    operation_cnts: list[int] = []
    for val_array in sorting_algorithm.sampler(N, r) if do_sample else sorting_algorithm.generator(N):
        idx_array = [key(IdxVal(i, x)) for i, x in enumerate(val_array)]
        operation_cnt = 0
        sorting_algorithm.func(idx_array)
        if not sorting_algorithm.validator(x.obj.val for x in idx_array):
            raise InvalidSortingAlgorithmError(sorting_algorithm.name, N)
        operation_cnts.append(operation_cnt)
        if do_sample and int((thread_time() - start_time) * 1000) >= max_time_ms:
            break
    return np.array(operation_cnts, dtype=np.int64)


def _work(N: int) -> str:
    operation_cnts = get_operation_cnts(algorithm, N)
    input_total = algorithm.input_total(N)
    lower_bound = log2(input_total)
    avg = operation_cnts.mean()
    ratio = nan if lower_bound == 0 else avg / lower_bound
    row = (
        algorithm.name,
        N,
        to_displayable_int(input_total),
        lower_bound,
        operation_cnts.min(),
        operation_cnts.max(),
        avg,
        merge_sort_worst_case(N),
        ratio,
    )
    return ",".join(map(str, row))


def generate_statistics(Ns: Iterable[int] = STATISTICS_NS, result_path: Path = RESULT_PATH) -> None:
    Ns = list(Ns)
    result_path.parent.mkdir(parents=True, exist_ok=True)
    print(f"init: `{algorithm.name}` with {len(Ns)} values of N")
    with Pool() as pool, open(result_path, "w") as f:
        f.write(HEADER + "\n")
        for result in tqdm(pool.imap_unordered(_work, Ns), total=len(Ns)):
            f.write(result + "\n")
            f.flush()
    print(f"fin:  `{algorithm.name}` -> {result_path}")


def sort_result(result_path: Path = RESULT_PATH) -> pd.DataFrame:
    df = pd.read_csv(result_path)
    df = df.sort_values("N", ignore_index=True)
    df.to_csv(result_path, index=False)
    return df


if __name__ == "__main__":
    generate_statistics()
    sort_result()
