"""Restrict whitespace to ASCII and report the first offending character."""

from toylang import ScanConfig, scan
from toylang.errors import LexError

source = "total =\u00a01;"

print(scan(source))

try:
    scan(source, config=ScanConfig(unicode_whitespace=False))
except LexError as e:
    print(f"Scan error: {e}")
