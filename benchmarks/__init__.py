"""
Benchmark suite for starjson encoding and decoding performance.

Compares starjson against other JSON libraries:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Run with ``pytest benchmarks --benchmark-only`` after installing the
``bench`` extra.
"""
