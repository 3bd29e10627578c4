"""
Combining Concurrent Described Computations

Three tasks run on a thread pool; their logs are gathered under one
parent in submission order and their values summed.
"""

import time
from concurrent.futures import ThreadPoolExecutor

from treelog import failure, gather, success
from treelog.log_setup import setup_logging


def fetch(n, delay):
    time.sleep(delay)
    return success(n, f"Got {n}")


def main():
    setup_logging(verbose=True)

    with ThreadPoolExecutor(max_workers=3) as pool:
        # Later submissions finish first; the log keeps submission order
        futures = [pool.submit(fetch, n, 0.3 - 0.1 * n) for n in (1, 2, 3)]
        summed = gather("Summed up", futures, fold=sum)

    print(summed.show())
    print(summed.value)

    with ThreadPoolExecutor(max_workers=2) as pool:
        futures = [
            pool.submit(fetch, 1, 0.0),
            pool.submit(lambda: failure("Couldn't get a 2")),
        ]
        failed = gather("Summed up", futures, fold=sum)

    print()
    print(failed.show())
    print(failed.outcome)


if __name__ == "__main__":
    main()
