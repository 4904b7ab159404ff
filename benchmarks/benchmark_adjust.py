"""
Benchmark lightness adjustment (Numba kernel vs NumPy reference).
"""

import time

import numpy as np

from rgbshade.adjust import _adjust_numpy
from rgbshade.kernels import adjust_lightness_numba

N = 100_000
NUM_ITERATIONS = 100
FACTOR = -0.2

print("=" * 80)
print("LIGHTNESS ADJUSTMENT BENCHMARK (Numba vs NumPy)")
print(f"Testing with {N:,} colors, {NUM_ITERATIONS} iterations")
print("=" * 80)

# Setup
channels = np.random.randint(0, 256, size=(N, 3)).astype(np.uint8)
out = np.empty_like(channels)

# Warmup (includes JIT compilation)
print("\nWarming up...")
for _ in range(20):
    adjust_lightness_numba(channels, FACTOR, out)
    _adjust_numpy(channels, FACTOR)

# Benchmark Numba kernel
times_numba = []
for _ in range(NUM_ITERATIONS):
    start = time.perf_counter()
    adjust_lightness_numba(channels, FACTOR, out)
    times_numba.append((time.perf_counter() - start) * 1000)

# Benchmark NumPy reference
times_numpy = []
for _ in range(NUM_ITERATIONS):
    start = time.perf_counter()
    _adjust_numpy(channels, FACTOR)
    times_numpy.append((time.perf_counter() - start) * 1000)

mean_numba = np.mean(times_numba)
mean_numpy = np.mean(times_numpy)

print("\nResults:")
print(f"  Numba: {mean_numba:.3f} ms +/- {np.std(times_numba):.3f} ms")
print(f"  NumPy: {mean_numpy:.3f} ms +/- {np.std(times_numpy):.3f} ms")
print(f"  Speedup: {mean_numpy / mean_numba:.2f}x")

# Correctness check
assert np.array_equal(out, _adjust_numpy(channels, FACTOR)), "Numba and NumPy disagree"

# Test different batch sizes
print("\n" + "=" * 80)
print("BATCH SIZE SCALING")
print("=" * 80)

for N_test in [1_000, 10_000, 100_000, 1_000_000]:
    channels_test = np.random.randint(0, 256, size=(N_test, 3)).astype(np.uint8)
    out_test = np.empty_like(channels_test)

    times_test = []
    for _ in range(20):
        start = time.perf_counter()
        adjust_lightness_numba(channels_test, FACTOR, out_test)
        times_test.append((time.perf_counter() - start) * 1000)

    test_time = np.mean(times_test)
    throughput = N_test / test_time * 1000 / 1e6

    print(f"N={N_test:>9,}: {test_time:>7.3f} ms ({throughput:>5.0f} M colors/s)")

print("=" * 80)
