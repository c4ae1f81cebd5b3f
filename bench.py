import time
import numpy as np
from src.curves import CatmullRomSpline


def benchmark_evaluate(resolution: int, queries: int = 20000) -> float:
    rng = np.random.default_rng(0)
    control_points = rng.uniform(-50.0, 50.0, size=(24, 3))
    spline = CatmullRomSpline(resolution, control_points, close_loop=True)
    ts = rng.uniform(0.0, 1.0, size=queries)
    start = time.perf_counter()
    for t in ts:
        spline.evaluate(float(t))
    elapsed = time.perf_counter() - start
    return queries / elapsed


def benchmark_build(resolution: int, builds: int = 50) -> float:
    rng = np.random.default_rng(1)
    control_points = rng.uniform(-50.0, 50.0, size=(24, 3))
    start = time.perf_counter()
    for _ in range(builds):
        CatmullRomSpline(resolution, control_points, close_loop=True)
    elapsed = time.perf_counter() - start
    return builds / elapsed


for resolution in (1, 5, 10, 20, 50, 100):
    evaluations_per_second = benchmark_evaluate(resolution)
    builds_per_second = benchmark_build(resolution)
    print(
        f"res {resolution:3d} → {evaluations_per_second:10.1f} evals/sec "
        f"({builds_per_second:8.1f} builds/sec)"
    )
