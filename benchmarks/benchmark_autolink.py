"""Benchmark autolinking throughput.

Run with:
    pytest benchmarks/benchmark_autolink.py -v --benchmark-only

Or for a quick number:
    python benchmarks/benchmark_autolink.py
"""

import time


def benchmark_enlace(docs: list[str], iterations: int = 10) -> float:
    """Average seconds to autolink all docs once."""
    from enlace import Autolinker

    linker = Autolinker()

    # Warmup
    for doc in docs[:10]:
        linker(doc)

    start = time.perf_counter()
    for _ in range(iterations):
        for doc in docs:
            linker(doc)
    elapsed = time.perf_counter() - start

    return elapsed / iterations


# pytest-benchmark integration
try:
    import pytest

    from enlace import Autolinker, autolink

    @pytest.mark.benchmark(group="autolink")
    def test_benchmark_large_document(benchmark, large_document):
        """Benchmark a large document with many links and skip regions."""
        result = benchmark(autolink, large_document)
        assert result.link_count > 0

    @pytest.mark.benchmark(group="autolink")
    def test_benchmark_plain_document(benchmark, plain_document):
        """Benchmark the no-link fast path."""
        result = benchmark(autolink, plain_document)
        assert result.link_count == 0

    @pytest.mark.benchmark(group="autolink")
    def test_benchmark_bytes_input(benchmark, large_document):
        """Benchmark bytes input (no encode/decode)."""
        benchmark(autolink, large_document.encode())

    @pytest.mark.benchmark(group="autolink-small")
    def test_benchmark_comments(benchmark, real_world_comments):
        """Benchmark many short inputs."""
        linker = Autolinker()
        benchmark(linker.link_many, real_world_comments)

except ImportError:
    pass


if __name__ == "__main__":
    comments = [
        f"comment {i}: see http://example.com/{i} or mail user{i}@example.com" for i in range(5000)
    ]
    per_run = benchmark_enlace(comments)
    print(f"{'enlace':20} {per_run * 1000:8.2f}ms for {len(comments)} comments")
