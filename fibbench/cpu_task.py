import time
import logging

logger = logging.getLogger(__name__)

BENCH_N = 40


# A deliberately slow Fibonacci implementation (recursive)
def fib(n: int) -> int:
    if n < 2:
        return n
    return fib(n-2) + fib(n-1)

# Return value type: dict
def busy_cpu_task(n: int = BENCH_N):
    start = time.perf_counter()
    value = fib(n)
    elapsed = time.perf_counter() - start
    logger.debug("fib(%d) took %.3f s", n, elapsed)
    return {
        "n": n,
        "result": value,
        "elapsed_s": int(elapsed),
        "elapsed_ms": elapsed * 1000,
    }
