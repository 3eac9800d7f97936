"""Thread safety tests for the scanner.

Scanner instances share no mutable state, so independent instances can
run on different threads. These tests use real threading to catch any
shared state sneaking in.
"""

from concurrent.futures import ThreadPoolExecutor

from toylang import scan
from toylang.tokens import Integer


def _program(n: int) -> str:
    return " ".join(f"v{i} = {i} * {n};" for i in range(50))


class TestScannerThreadSafety:
    def test_concurrent_scans_match_sequential(self) -> None:
        sources = [_program(n) for n in range(32)]
        expected = [scan(source) for source in sources]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(scan, sources))

        assert results == expected

    def test_each_result_has_its_own_values(self) -> None:
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda n: scan(f"{n} + {n}"), range(20)))

        for n, tokens in enumerate(results):
            assert tokens[0] == Integer(n)
            assert tokens[2] == Integer(n)
