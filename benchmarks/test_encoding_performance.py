"""
Encoding performance benchmarks comparing prim against other libraries.

Covers plain serialization of every generated data shape, plus the prim-only
features: indentation, allowlists, replacers and serialization hooks.
"""

import json
from collections.abc import Callable
from typing import Any

import orjson
import pytest
import ujson  # type: ignore[import-untyped]

import prim
from benchmarks.data_generators import DATA_TYPES
from benchmarks.data_generators import generate_ledger
from benchmarks.data_generators import generate_test_value


def _orjson_dumps(value: Any) -> str:
    return orjson.dumps(value).decode("utf-8")


SERIALIZERS: list[tuple[str, Callable[[Any], Any]]] = [
    ("stdlib_json", json.dumps),
    ("orjson", _orjson_dumps),
    ("ujson", ujson.dumps),
    ("prim", prim.encode),
]


class TestEncodingBenchmarks:
    """Benchmarks for JSON serialization across different libraries."""

    @pytest.mark.parametrize("data_type", DATA_TYPES)
    @pytest.mark.parametrize("encoder,encode_func", SERIALIZERS)
    def test_encoding(
        self,
        benchmark: Any,
        data_type: str,
        encoder: str,
        encode_func: Callable[[Any], Any],
    ) -> None:
        """Benchmarks serialization of one data shape with one library."""
        benchmark.group = f"encode_{data_type}"
        value = generate_test_value(data_type)

        text = benchmark(encode_func, value)

        # Output formats differ; the decoded trees must not
        assert prim.decode(text) == prim.decode(prim.encode(value))

    @pytest.mark.benchmark(group="encode_options")
    def test_indented(self, benchmark: Any) -> None:
        value = generate_test_value("nested_structure")

        text = benchmark(prim.encode, value, None, 2)

        assert text.startswith('{\n  "level": ')

    @pytest.mark.benchmark(group="encode_options")
    def test_allowlist(self, benchmark: Any) -> None:
        value = generate_test_value("large_object")
        names = ["transactions", "id", "amount", "currency"]

        text = benchmark(prim.encode, value, names)

        assert prim.decode(text)["transactions"][0]["id"] == "txn_000000"

    @pytest.mark.benchmark(group="encode_options")
    def test_replacer(self, benchmark: Any) -> None:
        value = generate_test_value("mixed_array")

        def redact(holder: Any, key: Any, value: Any) -> Any:
            return "***" if key == "value" else value

        text = benchmark(prim.encode, value, redact)

        assert '"value":"***"' in text

    @pytest.mark.benchmark(group="encode_options")
    def test_hooks_and_dates(self, benchmark: Any) -> None:
        """Benchmarks values that go through to_json and date formatting."""
        ledger = generate_ledger()

        text = benchmark(prim.encode, ledger)

        entry = prim.decode(text)["entries"][0]
        assert entry["at"].endswith(".000Z")
        assert entry["amount"].endswith(" EUR")
