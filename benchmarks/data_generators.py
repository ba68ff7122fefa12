"""
Test data generators for encode and decode benchmarks.

Builds reproducible value trees of different shapes:
- Different sizes (small/large)
- Different complexity levels (flat/nested/mixed)
- String-heavy content that needs escaping
- Date values and serialization hooks that only prim understands
"""

import random
import string
from datetime import datetime
from datetime import timedelta
from typing import Any

import prim

# Constants for random data generation
_INT_TYPE = 1
_FLOAT_TYPE = 2
_STRING_TYPE = 3
_BOOL_TYPE = 4
_NULL_TYPE = 5
_ESCAPE_PROBABILITY = 0.3
_SEED = 20240115

DATA_TYPES = (
    "small_object",
    "large_object",
    "mixed_array",
    "nested_structure",
    "string_heavy",
)


class Money:
    """Amount stored in cents that serializes itself as a decimal string."""

    def __init__(self, cents: int, currency: str) -> None:
        self.cents = cents
        self.currency = currency

    def to_json(self, key: Any) -> str:
        return f"{self.cents / 100:.2f} {self.currency}"


def generate_test_value(data_type: str) -> Any:
    """Generates a plain value tree of the given shape."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(_SEED))


def generate_test_data(data_type: str) -> str:
    """Generates canonical JSON text for the given shape."""
    text = prim.encode(generate_test_value(data_type))
    assert text is not None
    return text


def generate_ledger(entries: int = 200) -> dict[str, Any]:
    """Generates records holding dates and hook values."""
    rng = random.Random(_SEED)
    start = datetime(2024, 1, 1)
    return {
        "owner": _random_string(rng, 12),
        "entries": [
            {
                "at": start + timedelta(minutes=rng.randint(0, 500_000)),
                "amount": Money(rng.randint(1, 1_000_000), "EUR"),
                "memo": _random_string(rng, 20),
            }
            for _ in range(entries)
        ],
    }


def _generate_small_object(rng: random.Random) -> dict[str, Any]:
    """Generates a small object (< 1KB) with basic key-value pairs."""
    return {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }


def _timestamp(rng: random.Random) -> str:
    return (
        f"2024-{rng.randint(1, 12):02d}-{rng.randint(1, 28):02d}"
        f"T{rng.randint(0, 23):02d}:{rng.randint(0, 59):02d}:00Z"
    )


def _generate_large_object(rng: random.Random) -> dict[str, Any]:
    """Generates a large object (> 10KB) with many fields."""
    return {
        "user_id": rng.randint(1000000, 9999999),
        "profile": {
            "first_name": _random_string(rng, 10),
            "last_name": _random_string(rng, 12),
            "email": f"{_random_string(rng, 8)}@{_random_string(rng, 6)}.com",
            "address": {
                "street": f"{rng.randint(1, 9999)} {_random_string(rng, 8)} St",
                "city": _random_string(rng, 12),
                "zip": f"{rng.randint(10000, 99999)}",
                "country": "US",
            },
            "notifications": {
                "email": rng.choice([True, False]),
                "sms": rng.choice([True, False]),
            },
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(rng.uniform(1.0, 1000.0), 2),
                "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
                "timestamp": _timestamp(rng),
                "description": f"Payment for {_random_string(rng, 20)}",
                "status": rng.choice(["completed", "pending", "failed"]),
            }
            for i in range(50)
        ],
        "activity_log": [
            {
                "timestamp": _timestamp(rng),
                "action": rng.choice(["login", "logout", "purchase", "view"]),
                "user_agent": f"Mozilla/5.0 ({_random_string(rng, 20)})",
            }
            for _ in range(30)
        ],
    }


def _generate_mixed_array(rng: random.Random) -> list[Any]:
    """Generates a large array with mixed data types."""
    array: list[Any] = []

    for i in range(200):
        choice = rng.randint(1, 6)
        if choice == _INT_TYPE:
            array.append(rng.randint(-1000, 1000))
        elif choice == _FLOAT_TYPE:
            array.append(round(rng.uniform(-100.0, 100.0), 3))
        elif choice == _STRING_TYPE:
            array.append(_random_string(rng, rng.randint(5, 30)))
        elif choice == _BOOL_TYPE:
            array.append(rng.choice([True, False]))
        elif choice == _NULL_TYPE:
            array.append(None)
        else:
            array.append(
                {
                    "index": i,
                    "value": _random_string(rng, 10),
                    "score": round(rng.uniform(0, 100), 2),
                }
            )

    return array


def _generate_nested_structure(rng: random.Random) -> dict[str, Any]:
    """Generates a deeply nested structure."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(rng, 10)}

        return {
            "level": depth,
            "data": _random_string(rng, 15),
            "items": [create_nested_dict(depth - 1) for _ in range(3)],
            "nested": create_nested_dict(depth - 1),
        }

    return create_nested_dict(6)


def _generate_string_heavy(rng: random.Random) -> dict[str, Any]:
    """Generates strings full of characters that must be escaped."""
    escapable = '"\\/\b\f\n\r\t\x01'
    plain = string.ascii_letters + string.digits + " "

    def create_escaped_string() -> str:
        return "".join(
            rng.choice(escapable)
            if rng.random() < _ESCAPE_PROBABILITY
            else rng.choice(plain)
            for _ in range(50)
        )

    return {
        "strings": [create_escaped_string() for _ in range(100)],
        "unicode": [
            f"Unicode: {chr(rng.randint(0x00A0, 0x2FFF))}" for _ in range(50)
        ],
        "mixed_content": {
            f"key_{i}": {
                "description": create_escaped_string(),
                "path": f"C:\\Users\\{_random_string(rng, 8)}\\file_{i}.txt",
            }
            for i in range(20)
        },
    }


def _random_string(rng: random.Random, length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(rng.choices(string.ascii_letters, k=length))
