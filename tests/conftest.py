"""
Pytest configuration and shared fixtures for prim tests.

Provides immutable test data fixtures: the json.org JSON_checker documents
with the grammar fault each malformed one must report.
"""

from dataclasses import dataclass
from typing import Any

import pytest

from prim import GrammarFault


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    expected_fault: GrammarFault | None = None


# https://json.org/JSON_checker/test/failN.json, keyed by N. fail1 (a bare
# string payload) and fail18 (nesting depth 20) are valid documents here.
_FAIL_DOCS: list[tuple[int, str, GrammarFault]] = [
    (2, '["Unclosed array"', GrammarFault.UNEXPECTED_EOF),
    (3, '{unquoted_key: "keys must be quoted"}', GrammarFault.UNRECOGNIZED_TOKEN),
    (4, '["extra comma",]', GrammarFault.TRAILING_ARRAY_COMMA),
    (5, '["double extra comma",,]', GrammarFault.LEADING_ARRAY_COMMA),
    (6, '[   , "<-- missing value"]', GrammarFault.LEADING_ARRAY_COMMA),
    (7, '["Comma after the close"],', GrammarFault.EXPECTED_EOF),
    (8, '["Extra close"]]', GrammarFault.EXPECTED_EOF),
    (9, '{"Extra comma": true,}', GrammarFault.TRAILING_OBJECT_COMMA),
    (
        10,
        '{"Extra value after close": true} "misplaced quoted value"',
        GrammarFault.EXPECTED_EOF,
    ),
    (11, '{"Illegal expression": 1 + 2}', GrammarFault.UNRECOGNIZED_TOKEN),
    (12, '{"Illegal invocation": alert()}', GrammarFault.UNRECOGNIZED_TOKEN),
    (
        13,
        '{"Numbers cannot have leading zeroes": 013}',
        GrammarFault.LEADING_ZERO,
    ),
    (14, '{"Numbers cannot be hex": 0x14}', GrammarFault.UNRECOGNIZED_TOKEN),
    (15, '["Illegal backslash escape: \\x15"]', GrammarFault.INVALID_ESCAPE),
    (16, "[\\naked]", GrammarFault.UNRECOGNIZED_TOKEN),
    (17, '["Illegal backslash escape: \\017"]', GrammarFault.INVALID_ESCAPE),
    (19, '{"Missing colon" null}', GrammarFault.MISSING_COLON),
    (20, '{"Double colon":: null}', GrammarFault.EXPECTED_BRACKET),
    (21, '{"Comma instead of colon", null}', GrammarFault.MISSING_COLON),
    (22, '["Colon instead of comma": false]', GrammarFault.MISSING_ARRAY_COMMA),
    (23, '["Bad value", truth]', GrammarFault.UNRECOGNIZED_TOKEN),
    (24, "['single quote']", GrammarFault.UNRECOGNIZED_TOKEN),
    (25, '["\ttab\tcharacter\tin\tstring\t"]', GrammarFault.UNESCAPED_CONTROL),
    (
        26,
        '["tab\\   character\\   in\\  string\\  "]',
        GrammarFault.INVALID_ESCAPE,
    ),
    (27, '["line\nbreak"]', GrammarFault.UNESCAPED_CONTROL),
    (28, '["line\\\nbreak"]', GrammarFault.INVALID_ESCAPE),
    (29, "[0e]", GrammarFault.EMPTY_EXPONENT),
    (30, "[0e+]", GrammarFault.EMPTY_EXPONENT),
    (31, "[0e+-1]", GrammarFault.EMPTY_EXPONENT),
    (
        32,
        '{"Comma instead if closing brace": true,',
        GrammarFault.UNEXPECTED_EOF,
    ),
    (33, '["mismatch"}', GrammarFault.MISSING_ARRAY_COMMA),
]


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must fail parsing, with the expected fault.

    These cases from json.org JSON_checker ensure strict standards
    compliance and distinguishable error reporting for malformed JSON.
    """
    cases = [
        JsonTestCase(
            description=f"fail{number}.json",
            input_data=doc,
            should_fail=True,
            expected_fault=fault,
        )
        for number, doc, fault in _FAIL_DOCS
    ]
    # https://code.google.com/archive/p/simplejson/issues/3
    cases.append(
        JsonTestCase(
            description="control character in string",
            input_data='["A\u001fZ control characters in string"]',
            should_fail=True,
            expected_fault=GrammarFault.UNESCAPED_CONTROL,
        )
    )
    return cases


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must parse successfully per the JSON grammar.

    These test cases validate standards compliance for valid JSON structures.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data="""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
    }
]""",
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
        ),
        JsonTestCase(
            description="fail1.json - string payload",
            input_data='"A JSON payload should be an object or array, not a string."',
            expected_output=(
                "A JSON payload should be an object or array, not a string."
            ),
        ),
        JsonTestCase(
            description="fail18.json - twenty levels of nesting",
            input_data='[[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]]',
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers all JSON primitive types and basic container structures.
    """
    return [
        JsonTestCase("null value", "null", False, None),
        JsonTestCase("true boolean", "true", False, True),
        JsonTestCase("false boolean", "false", False, False),
        JsonTestCase("integer", "42", False, 42.0),
        JsonTestCase("negative integer", "-17", False, -17.0),
        JsonTestCase("float", "3.14", False, 3.14),
        JsonTestCase("exponent", "1E2", False, 100.0),
        JsonTestCase("empty string", '""', False, ""),
        JsonTestCase("simple string", '"hello"', False, "hello"),
        JsonTestCase("empty array", "[]", False, []),
        JsonTestCase("empty object", "{}", False, {}),
        JsonTestCase("simple array", "[1, 2, 3]", False, [1.0, 2.0, 3.0]),
        JsonTestCase(
            "simple object", '{"key": "value"}', False, {"key": "value"}
        ),
        JsonTestCase("leading zero", "01", True),
        JsonTestCase("bare minus", "-", True),
        JsonTestCase("keyword prefix", "nul", True),
    ]
