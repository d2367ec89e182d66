"""
Benchmark suite for jsonx string encoding and fragment classification.

Compares jsonx against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures encoding speed, classification speed and memory usage.
"""
