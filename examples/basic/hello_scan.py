"""Scan a toy program in 3 lines, zero config, zero deps."""

from toylang import scan

tokens = scan("x = (1 + 2) * 3;")
print(" ".join(repr(token) for token in tokens))
