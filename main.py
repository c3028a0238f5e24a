from time import sleep, perf_counter

from combinators import iterate, limit
from lazy import LazyCursor
from models import CursorSettings, UnsupportedInfiniteSourceError
from ranges import Range
from reducers import println_cursor, reduce, reduce_until
from sequences import Fibonacci, StatisticsCursor
from utils import measure_performance, setup_logging

settings = CursorSettings.from_env()
logger = setup_logging(settings)


def expensive_transform(x):
    # Simulate a costly step so laziness is visible
    print(f"  computing f({x}) ...")
    sleep(0.2)  # pretend this is expensive
    return x * x


print("\n--- Demo: laziness (no work until pulled) ---")
pipeline = (
    LazyCursor.range(1, settings.demo_size)
    .map(expensive_transform)   # expensive; watch when it runs
    .filter(lambda v: v % 2 == 0)
    .limit(5)
)

print("Constructed pipeline. No output yet (nothing computed).")
print("\nDraining (should compute only what's needed for 5 items):")
t0 = perf_counter()
out = pipeline.to_list()
t1 = perf_counter()
print(f"Result: {out}")
print(f"Time: {t1 - t0:.2f}s\n")

print("--- Demo: infinite sources need an explicit bound ---")
naturals = iterate(1, lambda n: n + 1)
try:
    reduce(naturals, lambda acc, n: acc + n, 0)
except UnsupportedInfiniteSourceError as e:
    print(f"Refused: {e}")
total = reduce_until(naturals, lambda acc, n: acc + n, 0, lambda acc: acc > 55)
print(f"Sum of naturals until it passes 55: {total}")

fib = Fibonacci()
fib_total = reduce_until(fib, lambda acc, n: acc + n, 0, lambda acc: fib.current > 55)
print(f"Sum of Fibonacci numbers up to 55: {fib_total}\n")

print("--- Demo: statistics over a bounded view ---")
stats = StatisticsCursor(Range.closed(1, 100).cursor(), "1..100", "uniform step 1")
println_cursor(limit(stats, 10), settings=settings)
stats.report()

print("\n--- Demo: memory stays flat over a large source ---")
report = measure_performance(
    "count multiples of 1000",
    lambda: LazyCursor.range(0, 1_000_000).filter(lambda x: x % 1000 == 0).count()
)
print(f"Count: {report.result}, peak memory {report.memory_usage_mb:.3f}MB, "
      f"time {report.execution_time_ms:.1f}ms")
logger.info("Demo finished")
