"""Benchmark scanning and block grouping.

Run with:
    pytest benchmarks/benchmark_scan.py -v --benchmark-only
"""

try:
    import pytest

    from mathseg import Scanner, group_components, parse, parse_components

    @pytest.mark.benchmark(group="scan")
    def test_benchmark_scan_large_document(benchmark, large_document):
        """Benchmark parse_components() on a ~100KB document."""
        benchmark(parse_components, large_document)

    @pytest.mark.benchmark(group="scan")
    def test_benchmark_scan_nested_named(benchmark, nested_named_document):
        """Benchmark the terminator rescan of nested named equations."""
        benchmark(parse_components, nested_named_document)

    @pytest.mark.benchmark(group="scan")
    def test_benchmark_shared_scanner(benchmark, real_world_docs):
        """Benchmark a reused Scanner over short snippets."""
        scanner = Scanner()

        def scan_all():
            for doc in real_world_docs:
                scanner.scan(doc)

        benchmark(scan_all)

    @pytest.mark.benchmark(group="group")
    def test_benchmark_group_components(benchmark, large_document):
        """Benchmark block grouping alone (components pre-scanned)."""
        components = parse_components(large_document)
        benchmark(group_components, components)

    @pytest.mark.benchmark(group="parse")
    def test_benchmark_parse_blocks(benchmark, large_document):
        """Benchmark parse() end to end."""
        benchmark(parse, large_document)

except ImportError:
    pass  # pytest not available
