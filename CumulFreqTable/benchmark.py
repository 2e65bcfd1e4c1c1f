"""
Compares the table implementations on random workloads.

Usage::

    python -m CumulFreqTable.benchmark --workload inc+sum --iterations 10000 --output bench.csv

For small tables the linear :class:`FreqTable` is usually the fastest, the
binary indexed tree overtakes it as the length grows.
"""
import argparse
import itertools
import logging
import time

import numpy as np
import pandas as pd
from tqdm import tqdm

from .settings import available_settings, make_table

logger = logging.getLogger(__name__)


def _run_inc(table, pos_update, pos_query):
    for pos in pos_update:
        table.inc(pos)


def _run_inc_sum(table, pos_update, pos_query):
    for pos, pos_sum in zip(pos_update, pos_query):
        table.inc(pos)
        table.sum(pos_sum)


def _run_inc_total(table, pos_update, pos_query):
    for pos in pos_update:
        table.inc(pos)
        table.total()


def _run_inc_sum_total(table, pos_update, pos_query):
    for pos, pos_sum in zip(pos_update, pos_query):
        table.inc(pos)
        table.sum(pos_sum)
        table.total()


workload2run = {
    'inc': _run_inc,
    'inc+sum': _run_inc_sum,
    'inc+total': _run_inc_total,
    'inc+sum+total': _run_inc_sum_total,
}


def run_benchmark(workloads=None, types=None, log_lengths=range(2, 17, 2), iterations=1000, seed=0, progress=True):
    """
    Times every combination of workload, table type and length.

    :param list or None workloads:
        Names from ``available_settings['workload']``, all of them if None.

    :param list or None types:
        Names from ``available_settings['type_table']``, all of them if None.

    :param iterable log_lengths: (default=range(2, 17, 2))
        Tables of length ``2**k`` are benchmarked for every ``k``.

    :param int iterations: (default=1000)
        Number of random operations per measurement.

    :param int seed: (default=0)
        Seed of the random positions, the same positions are used for every table type.

    :param bool progress: (default=True)
        Whether to display a tqdm progress bar.

    :returns pd.DataFrame:
        One row per measurement, with columns ``workload``, ``type_table``,
        ``length``, ``iterations``, ``seconds`` and ``ns_per_op``.
    """
    workloads = list(available_settings['workload'] if workloads is None else workloads)
    types = list(available_settings['type_table'] if types is None else types)
    for workload in workloads:
        if workload not in workload2run:
            raise ValueError("unknown workload {0!r}, expected one of {1}".format(
                workload, available_settings['workload']))
    for type_table in types:
        if type_table not in available_settings['type_table']:
            raise ValueError("unknown type_table {0!r}, expected one of {1}".format(
                type_table, available_settings['type_table']))
    if iterations <= 0:
        raise ValueError("iterations must be positive, got {0}".format(iterations))

    lengths = [1 << k for k in log_lengths]
    logger.info("benchmarking %s on %s for lengths %s", workloads, types, lengths)

    rows = []
    configs = list(itertools.product(workloads, lengths, types))
    for workload, length, type_table in tqdm(configs, disable=not progress):
        rng = np.random.default_rng(seed)
        pos_update = rng.integers(0, length, size=iterations).tolist()
        pos_query = rng.integers(0, length, size=iterations).tolist()
        table = make_table(type_table, length)
        start = time.perf_counter()
        workload2run[workload](table, pos_update, pos_query)
        seconds = time.perf_counter() - start
        rows.append({
            'workload': workload,
            'type_table': type_table,
            'length': length,
            'iterations': iterations,
            'seconds': seconds,
            'ns_per_op': seconds * 1e9 / iterations,
        })
    return pd.DataFrame(rows, columns=['workload', 'type_table', 'length', 'iterations', 'seconds', 'ns_per_op'])


def main(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark the cumulative frequency tables.")
    parser.add_argument('--workload', action='append', choices=available_settings['workload'],
                        help="workload to run, may be repeated (default: all)")
    parser.add_argument('--type-table', action='append', choices=available_settings['type_table'],
                        help="table type to run, may be repeated (default: all)")
    parser.add_argument('--min-log-length', type=int, default=2)
    parser.add_argument('--max-log-length', type=int, default=16)
    parser.add_argument('--step', type=int, default=2)
    parser.add_argument('--iterations', type=int, default=1000)
    parser.add_argument('--seed', type=int, default=0)
    parser.add_argument('--output', help="path of a CSV file to write the results to")
    parser.add_argument('--quiet', action='store_true', help="hide the progress bar")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    df = run_benchmark(workloads=args.workload, types=args.type_table,
                       log_lengths=range(args.min_log_length, args.max_log_length + 1, args.step),
                       iterations=args.iterations, seed=args.seed, progress=not args.quiet)
    print(df.pivot_table(index=['workload', 'length'], columns='type_table', values='ns_per_op').to_string())
    if args.output:
        df.to_csv(args.output, index=False)
        logger.info("results written to %s", args.output)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
