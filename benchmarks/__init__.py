"""
Benchmark suite for prim JSON decoding and encoding performance.

Compares prim against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures speed and memory usage across different data shapes, and the
cost of prim's reviver, replacer, allowlist and hook features.
"""
