"""
Practical JSON encoding and decoding with strict grammar checking.

Decodes text into plain Python values with an optional bottom-up reviver
pass, and encodes values back into canonical text with replacer functions,
property allowlists, indentation, custom serialization hooks and cycle
detection.
"""

import logging
import math
import os
import re
import time
from collections.abc import Callable
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from datetime import timedelta
from enum import Enum
from typing import Any
from typing import Final
from typing import NoReturn
from typing import Protocol
from typing import TypeAlias
from typing import runtime_checkable

from ._quoting import ESCAPES
from ._quoting import UNESCAPES
from ._quoting import format_number
from ._quoting import pad_zero
from ._quoting import quote

__version__ = "0.2.0"

logger = logging.getLogger(__name__)

# Type aliases for domain concepts - recursive definition
JsonValue = (
    str | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
)
Position: TypeAlias = int
Key: TypeAlias = str | int

# Callbacks receive the containing list/dict explicitly, then the key
Reviver = Callable[[Any, Key, Any], Any]
Replacer = Callable[[Any, Key, Any], Any]

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "PRIM_PROFILE" in os.environ

# Nesting guard shared by the parser and the serializer
DEFAULT_MAX_DEPTH: Final = int(os.environ.get("PRIM_MAX_DEPTH", "256"))

_WIDTH_LIMIT: Final = 10


class _Omit(Enum):
    OMIT = "omit"

    def __repr__(self) -> str:
        return "prim.OMIT"


# Returned by a reviver or replacer to delete/omit the current value
OMIT: Final = _Omit.OMIT


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during parsing and encoding."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a function call with timing and character processing info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Context manager for profiling hot paths."""

        def __init__(self, func_name: str, chars_to_process: int = 0):
            self.func_name = func_name
            self.chars = chars_to_process
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            if self.func_name not in _hot_path_stats:
                _hot_path_stats[self.func_name] = HotPathStats(self.func_name)
            _hot_path_stats[self.func_name].record_call(duration, self.chars)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:
    # Zero-cost in production - ignore arguments
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, chars: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


class GrammarFault(Enum):
    """Every way a document can violate the grammar, keyed to its message."""

    BYTE_ORDER_MARK = "JSON input should not contain BOM (Byte Order Mark)"
    UNESCAPED_CONTROL = "Unescaped control character in string"
    INVALID_UNICODE_ESCAPE = "Invalid Unicode escape sequence in string"
    INVALID_ESCAPE = "Invalid escape sequence in string"
    LEADING_ZERO = "Illegal octal literal"
    TRAILING_DECIMAL = "Illegal trailing decimal"
    EMPTY_EXPONENT = "Illegal empty exponent"
    UNTERMINATED_STRING = "Unterminated string"
    UNRECOGNIZED_TOKEN = "Unrecognized token"
    UNEXPECTED_MINUS = "Unexpected `-`"
    MISSING_ARRAY_COMMA = (
        "A comma (`,`) must separate the previous array element from the next"
    )
    TRAILING_ARRAY_COMMA = "Unexpected trailing `,` in array literal"
    LEADING_ARRAY_COMMA = "Unexpected `,` in array literal"
    MISSING_OBJECT_COMMA = (
        "A comma (`,`) must separate the previous object member from the next"
    )
    TRAILING_OBJECT_COMMA = "Unexpected trailing `,` in object literal"
    LEADING_OBJECT_COMMA = "Unexpected `,` in object literal"
    NON_STRING_KEY = "Object property names must be double-quoted strings"
    MISSING_COLON = (
        "A single colon (`:`) must separate each object property name "
        "from the value"
    )
    UNEXPECTED_EOF = "Unexpected end-of-file"
    EXPECTED_BRACKET = "Expected `[` or `{`"
    EXPECTED_EOF = "Expected end-of-file"
    MAX_DEPTH = "Maximum nesting depth exceeded"


class JSONDecodeError(ValueError):
    """
    Handles JSON parsing failures with precise position and context information.

    Error state containing position, line/column numbers and the grammar
    fault that was hit, to help users identify and fix JSON syntax issues.
    """

    def __init__(
        self,
        msg: str,
        doc: str = "",
        pos: Position = 0,
        code: GrammarFault | None = None,
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.code = code

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    @classmethod
    def from_fault(
        cls, fault: GrammarFault, doc: str, pos: Position
    ) -> "JSONDecodeError":
        return cls(fault.value, doc, pos, fault)


class JSONEncodeError(ValueError):
    """Raised when a value tree cannot be serialized."""


class CyclicStructureError(JSONEncodeError):
    """Raised when a list or dict is found among its own ancestors."""


@runtime_checkable
class SupportsToJSON(Protocol):
    """Values that pick their own stand-in before default encoding rules."""

    def to_json(self, key: Key) -> Any: ...


@runtime_checkable
class DateLike(Protocol):
    """Calendar values encoded as extended ISO-8601 UTC timestamps."""

    @property
    def year(self) -> int: ...

    @property
    def month(self) -> int: ...

    @property
    def day(self) -> int: ...

    @property
    def hour(self) -> int: ...

    @property
    def minute(self) -> int: ...

    @property
    def second(self) -> int: ...

    @property
    def microsecond(self) -> int: ...


def _check_max_depth(max_depth: int | None) -> None:
    if max_depth is None:
        return
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        raise TypeError("max_depth must be an integer or None")
    if max_depth < 1:
        raise ValueError("max_depth must be positive")


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures JSON parsing behavior with immutable settings.

    Holds the optional reviver run over the decoded tree and the nesting
    limit enforced while parsing.
    """

    reviver: Reviver | None = None
    max_depth: int | None = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.reviver is not None and not callable(self.reviver):
            raise TypeError("reviver must be callable")
        _check_max_depth(self.max_depth)


def _normalize_filter(
    value: Any,
) -> tuple[Replacer | None, tuple[str, ...] | None]:
    """Splits the encode filter argument into a replacer or an allowlist."""
    if callable(value):
        return value, None
    if isinstance(value, list | tuple):
        # Ordered set of names; numbers use their printed form
        names: dict[str, None] = {}
        for element in value:
            if isinstance(element, bool) or not isinstance(
                element, str | int | float
            ):
                continue
            name = _encode_key(element)
            if name is not None:
                names.setdefault(name)
        return None, tuple(names)
    return None, None


def _normalize_width(width: Any) -> str:
    """Turns the encode indent argument into the per-level gap string."""
    if isinstance(width, bool):
        return ""
    if isinstance(width, int | float):
        if math.isnan(width):
            return ""
        if math.isinf(width):
            count = _WIDTH_LIMIT if width > 0 else 0
        else:
            count = min(_WIDTH_LIMIT, max(0, math.trunc(width)))
        return " " * count
    if isinstance(width, str):
        return width[:_WIDTH_LIMIT]
    return ""


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures JSON encoding behavior with immutable settings.

    Centralized configuration for serialization options: the replacer or
    allowlist, the indentation gap and the nesting limit.
    """

    replacer: Replacer | None = None
    allowlist: tuple[str, ...] | None = None
    gap: str = ""
    max_depth: int | None = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.replacer is not None and not callable(self.replacer):
            raise TypeError("replacer must be callable")
        if self.replacer is not None and self.allowlist is not None:
            raise ValueError("replacer and allowlist are mutually exclusive")
        if not isinstance(self.gap, str):
            raise TypeError("gap must be a string")
        if len(self.gap) > _WIDTH_LIMIT:
            raise ValueError(f"gap must be at most {_WIDTH_LIMIT} characters")
        _check_max_depth(self.max_depth)

    @classmethod
    def from_arguments(
        cls, replacer: Any = None, indent: Any = None, **kwargs: Any
    ) -> "EncodeConfig":
        """Builds a configuration from loosely typed encode arguments."""
        callback, allowlist = _normalize_filter(replacer)
        return cls(
            replacer=callback,
            allowlist=allowlist,
            gap=_normalize_width(indent),
            **kwargs,
        )


class TokenKind(Enum):
    """Kinds of lexemes produced by the lexer."""

    PUNCTUATOR = "punctuator"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    END = "end"


@dataclass(frozen=True)
class JsonToken:
    """
    Represents a JSON token with position information.

    String and number tokens carry their decoded value, so the parser never
    looks at raw characters again.
    """

    kind: TokenKind
    value: Any
    start: Position
    end: Position

    def is_punctuator(self, symbol: str) -> bool:
        return self.kind is TokenKind.PUNCTUATOR and self.value == symbol


_WHITESPACE: Final = frozenset("\t\r\n ")
_PUNCTUATORS: Final = frozenset("{}[]:,")
_DIGITS: Final = frozenset("0123456789")
_HEX_DIGITS: Final = frozenset("0123456789abcdefABCDEF")
_KEYWORDS: Final = (
    ("true", TokenKind.BOOLEAN, True),
    ("false", TokenKind.BOOLEAN, False),
    ("null", TokenKind.NULL, None),
)

# Runs of string content that need no escape handling
_STRING_CHUNK: Final = re.compile(r'[^"\\\x00-\x1f]*')
_SURROGATE_PAIR: Final = re.compile("([\ud800-\udbff])([\udc00-\udfff])")


def _join_surrogate_pair(match: re.Match[str]) -> str:
    high, low = ord(match[1]), ord(match[2])
    return chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00))


class JsonLexer:
    """
    Tokenizes JSON input one lexeme at a time.

    Handles whitespace, strings, numbers, literals and punctuators, keeping a
    single forward-only cursor into the source text.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.length = len(text)

    def peek(self) -> str:
        """Returns current character without advancing, or "" at the end."""
        return self.text[self.pos] if self.pos < self.length else ""

    def fail(
        self, fault: GrammarFault, pos: Position | None = None
    ) -> NoReturn:
        raise JSONDecodeError.from_fault(
            fault, self.text, self.pos if pos is None else pos
        )

    def skip_whitespace(self) -> None:
        """Skips tab, carriage return, line feed and space characters."""
        with ProfileContext("skip_whitespace"):
            while self.pos < self.length and self.text[self.pos] in _WHITESPACE:
                self.pos += 1

    def _scan_escape(self) -> str:
        """Decodes the escape sequence starting at the current backslash."""
        begin = self.pos
        self.pos += 1
        symbol = self.peek()
        if symbol in UNESCAPES:
            self.pos += 1
            return UNESCAPES[symbol]
        if symbol == "u":
            digits = self.text[self.pos + 1 : self.pos + 5]
            if len(digits) != 4 or not all(c in _HEX_DIGITS for c in digits):
                self.fail(GrammarFault.INVALID_UNICODE_ESCAPE, begin)
            self.pos += 5
            return chr(int(digits, 16))
        self.fail(GrammarFault.INVALID_ESCAPE, begin)

    def scan_string(self) -> JsonToken:
        """Scans a JSON string token, returning its unescaped content."""
        with ProfileContext("scan_string"):
            start = self.pos
            self.pos += 1
            chunks: list[str] = []
            escaped = False

            while True:
                chunk = _STRING_CHUNK.match(self.text, self.pos)
                assert chunk is not None
                chunks.append(chunk.group())
                self.pos = chunk.end()

                char = self.peek()
                if char == '"':
                    self.pos += 1
                    value = "".join(chunks)
                    # \uXXXX escapes may spell out a UTF-16 surrogate pair
                    if escaped:
                        value = _SURROGATE_PAIR.sub(_join_surrogate_pair, value)
                    return JsonToken(TokenKind.STRING, value, start, self.pos)
                elif char == "\\":
                    chunks.append(self._scan_escape())
                    escaped = True
                elif not char:
                    self.fail(GrammarFault.UNTERMINATED_STRING, start)
                else:
                    self.fail(GrammarFault.UNESCAPED_CONTROL)

    def _scan_digits(self) -> int:
        """Advances past a run of ASCII digits and returns its length."""
        begin = self.pos
        while self.peek() in _DIGITS:
            self.pos += 1
        return self.pos - begin

    def _scan_integer_part(self, start: Position) -> None:
        """Scans the integer part of a JSON number."""
        if self.peek() == "0":
            self.pos += 1
            if self.peek() in _DIGITS:
                self.fail(GrammarFault.LEADING_ZERO, start)
        else:
            self._scan_digits()

    def _scan_fraction_part(self) -> None:
        """Scans the fraction part of a JSON number if present."""
        if self.peek() == ".":
            self.pos += 1
            if not self._scan_digits():
                self.fail(GrammarFault.TRAILING_DECIMAL)

    def _scan_exponent_part(self) -> None:
        """Scans the exponent part of a JSON number if present."""
        if self.peek() in ("e", "E"):
            self.pos += 1
            if self.peek() in ("+", "-"):
                self.pos += 1
            if not self._scan_digits():
                self.fail(GrammarFault.EMPTY_EXPONENT)

    def scan_number(self) -> JsonToken:
        """Scans a JSON number token and converts it to a float."""
        with ProfileContext("scan_number"):
            start = self.pos

            if self.peek() == "-":
                self.pos += 1
                if self.peek() not in _DIGITS:
                    self.fail(GrammarFault.UNEXPECTED_MINUS, start)

            self._scan_integer_part(start)
            self._scan_fraction_part()
            self._scan_exponent_part()

            literal = self.text[start : self.pos]
            return JsonToken(TokenKind.NUMBER, float(literal), start, self.pos)

    def scan_keyword(self) -> JsonToken:
        """Scans literal tokens: true, false, null."""
        with ProfileContext("scan_keyword"):
            start = self.pos
            for word, kind, value in _KEYWORDS:
                if self.text.startswith(word, start):
                    self.pos += len(word)
                    return JsonToken(kind, value, start, self.pos)
            self.fail(GrammarFault.UNRECOGNIZED_TOKEN)

    def next_token(self) -> JsonToken:
        """Returns the next token, or an END token once input is exhausted."""
        self.skip_whitespace()

        if self.pos >= self.length:
            return JsonToken(TokenKind.END, None, self.pos, self.pos)

        char = self.text[self.pos]
        start = self.pos

        if char in _PUNCTUATORS:
            self.pos += 1
            return JsonToken(TokenKind.PUNCTUATOR, char, start, self.pos)
        elif char == '"':
            return self.scan_string()
        elif char == "-" or char in _DIGITS:
            return self.scan_number()
        else:
            return self.scan_keyword()


class JsonParser:
    """
    Recursive descent parser over the lexer's token stream.

    Each production consumes and validates its own delimiters with at most
    one token of lookahead.
    """

    def __init__(self, lexer: JsonLexer, config: ParseConfig):
        self.lexer = lexer
        self.config = config
        self.depth = 0

    def fail(self, fault: GrammarFault, token: JsonToken) -> NoReturn:
        self.lexer.fail(fault, token.start)

    @contextmanager
    def _nested(self, opening: JsonToken) -> Iterator[None]:
        self.depth += 1
        max_depth = self.config.max_depth
        if max_depth is not None and self.depth > max_depth:
            self.fail(GrammarFault.MAX_DEPTH, opening)
        try:
            yield
        finally:
            self.depth -= 1

    def parse(self) -> JsonValue:
        """Parses exactly one value followed by the end of input."""
        value = self.parse_value(self.lexer.next_token())
        token = self.lexer.next_token()
        if token.kind is not TokenKind.END:
            self.fail(GrammarFault.EXPECTED_EOF, token)
        return value

    def parse_value(self, token: JsonToken) -> JsonValue:
        """Parses the value that begins with ``token``."""
        if token.kind is TokenKind.END:
            self.fail(GrammarFault.UNEXPECTED_EOF, token)
        if token.kind is not TokenKind.PUNCTUATOR:
            return token.value
        if token.value == "[":
            return self.parse_array(token)
        if token.value == "{":
            return self.parse_object(token)
        self.fail(GrammarFault.EXPECTED_BRACKET, token)

    def parse_array(self, opening: JsonToken) -> list[JsonValue]:
        """Parses the elements of an array after its opening bracket."""
        with ProfileContext("parse_array"), self._nested(opening):
            values: list[JsonValue] = []
            token = self.lexer.next_token()
            if token.is_punctuator("]"):
                return values

            while True:
                # Elisions and leading commas are not permitted
                if token.is_punctuator(","):
                    self.fail(GrammarFault.LEADING_ARRAY_COMMA, token)
                values.append(self.parse_value(token))

                token = self.lexer.next_token()
                if token.is_punctuator("]"):
                    return values
                if token.kind is TokenKind.END:
                    self.fail(GrammarFault.UNEXPECTED_EOF, token)
                if not token.is_punctuator(","):
                    self.fail(GrammarFault.MISSING_ARRAY_COMMA, token)

                comma = token
                token = self.lexer.next_token()
                if token.is_punctuator("]"):
                    self.fail(GrammarFault.TRAILING_ARRAY_COMMA, comma)

    def parse_object(self, opening: JsonToken) -> dict[str, JsonValue]:
        """Parses the members of an object after its opening brace."""
        with ProfileContext("parse_object"), self._nested(opening):
            members: dict[str, JsonValue] = {}
            token = self.lexer.next_token()
            if token.is_punctuator("}"):
                return members

            while True:
                if token.is_punctuator(","):
                    self.fail(GrammarFault.LEADING_OBJECT_COMMA, token)
                if token.kind is TokenKind.END:
                    self.fail(GrammarFault.UNEXPECTED_EOF, token)
                if token.kind is not TokenKind.STRING:
                    self.fail(GrammarFault.NON_STRING_KEY, token)
                key = token.value

                token = self.lexer.next_token()
                if token.kind is TokenKind.END:
                    self.fail(GrammarFault.UNEXPECTED_EOF, token)
                if not token.is_punctuator(":"):
                    self.fail(GrammarFault.MISSING_COLON, token)

                # The last write to a key decides its position
                value = self.parse_value(self.lexer.next_token())
                members.pop(key, None)
                members[key] = value

                token = self.lexer.next_token()
                if token.is_punctuator("}"):
                    return members
                if token.kind is TokenKind.END:
                    self.fail(GrammarFault.UNEXPECTED_EOF, token)
                if not token.is_punctuator(","):
                    self.fail(GrammarFault.MISSING_OBJECT_COMMA, token)

                comma = token
                token = self.lexer.next_token()
                if token.is_punctuator("}"):
                    self.fail(GrammarFault.TRAILING_OBJECT_COMMA, comma)


def walk(holder: Any, key: Key, reviver: Reviver) -> Any:
    """
    Runs ``reviver`` bottom-up over ``holder[key]`` and everything below it.

    Children are revived before their container. A child whose reviver
    result is ``OMIT`` is deleted from its list or dict; the result for
    ``holder[key]`` itself is returned to the caller.
    """
    value = holder[key]
    if isinstance(value, list):
        # Walk backwards so deletions leave unvisited indices in place
        for index in range(len(value) - 1, -1, -1):
            element = walk(value, index, reviver)
            if element is OMIT:
                del value[index]
            else:
                value[index] = element
    elif isinstance(value, dict):
        for name in list(value):
            if name not in value:
                continue
            member = walk(value, name, reviver)
            if member is OMIT:
                value.pop(name, None)
            else:
                value[name] = member
    return reviver(holder, key, value)


def decode(text: str, reviver: Reviver | None = None, **kwargs: Any) -> Any:
    """
    Parses JSON text into Python objects with strict standards compliance.

    Numbers decode as floats, arrays as lists and objects as dicts. With a
    reviver, every decoded value is passed through it bottom-up; see
    :func:`walk`.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON object must be str, not {type(text).__name__}"
        )

    config = ParseConfig(reviver=reviver, **kwargs)
    logger.debug(
        "Decoding %d characters (reviver: %s)",
        len(text),
        config.reviver is not None,
    )

    if text.startswith("\ufeff"):
        raise JSONDecodeError.from_fault(GrammarFault.BYTE_ORDER_MARK, text, 0)

    with ProfileContext("decode", len(text)):
        value = JsonParser(JsonLexer(text), config).parse()

    if config.reviver is None:
        return value
    return walk({"": value}, "", config.reviver)


@dataclass
class EncodeState:
    """
    Traversal state for one encode call.

    Tracks the lists and dicts currently being serialized so that a value
    appearing as its own ancestor is reported instead of recursing forever.
    """

    config: EncodeConfig
    stack: list[Any] = field(default_factory=list)

    def push(self, value: Any) -> None:
        if any(ancestor is value for ancestor in self.stack):
            raise CyclicStructureError("Cyclic structures cannot be serialized")
        max_depth = self.config.max_depth
        if max_depth is not None and len(self.stack) >= max_depth:
            raise JSONEncodeError("Maximum nesting depth exceeded")
        self.stack.append(value)

    def pop(self) -> None:
        self.stack.pop()


_DAY_US: Final = 86_400_000_000
_HOUR_US: Final = 3_600_000_000
_MINUTE_US: Final = 60_000_000
_SECOND_US: Final = 1_000_000


def _days_from_civil(year: int, month: int, day: int) -> int:
    """Counts days from 1970-01-01 in the proleptic Gregorian calendar."""
    year -= month <= 2
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )
    return era * 146_097 + day_of_era - 719_468


def _civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of :func:`_days_from_civil`, valid for any year."""
    days += 719_468
    era = days // 146_097
    day_of_era = days - era * 146_097
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36_524
        - day_of_era // 146_096
    ) // 365
    day_of_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + (3 if shifted_month < 10 else -9)
    year = year_of_era + era * 400 + (month <= 2)
    return year, month, day


def _utc_fields(value: DateLike) -> tuple[int, int, int, int, int, int, int]:
    """
    Returns the calendar fields of ``value`` shifted to UTC.

    Aware datetimes have their offset subtracted here rather than through
    ``astimezone``, so results in year 0 or year 10000 still format.
    """
    fields = (
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond,
    )
    if not isinstance(value, datetime):
        return fields
    offset = value.utcoffset()
    if not offset:
        return fields

    total = (
        _days_from_civil(value.year, value.month, value.day) * _DAY_US
        + value.hour * _HOUR_US
        + value.minute * _MINUTE_US
        + value.second * _SECOND_US
        + value.microsecond
        - offset // timedelta(microseconds=1)
    )
    days, rest = divmod(total, _DAY_US)
    hour, rest = divmod(rest, _HOUR_US)
    minute, rest = divmod(rest, _MINUTE_US)
    second, microsecond = divmod(rest, _SECOND_US)
    return (*_civil_from_days(days), hour, minute, second, microsecond)


def _format_timestamp(value: DateLike) -> str:
    """Formats a date-like value as an extended ISO-8601 UTC timestamp."""
    year, month, day, hour, minute, second, microsecond = _utc_fields(value)

    if year <= 0 or year >= 10_000:
        year_text = ("-" if year < 0 else "+") + pad_zero(6, abs(year))
    else:
        year_text = pad_zero(4, year)

    return (
        f"{year_text}-{pad_zero(2, month)}-{pad_zero(2, day)}"
        f"T{pad_zero(2, hour)}:{pad_zero(2, minute)}:{pad_zero(2, second)}"
        f".{pad_zero(3, microsecond // 1000)}Z"
    )


def _encode_number(number: int | float) -> str:
    """Encodes a number, writing non-finite values as null."""
    try:
        number = float(number)
    except OverflowError:
        return "null"
    return format_number(number) if math.isfinite(number) else "null"


def _encode_key(key: Any) -> str | None:
    """Converts a dict key to its property name, or None to skip it."""
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, int | float):
        try:
            return format_number(float(key))
        except OverflowError:
            return "Infinity" if key > 0 else "-Infinity"
    return None


def _property_names(obj: dict[Any, Any]) -> dict[str, Any]:
    """Maps each property name to the dict key it is written from."""
    names: dict[str, Any] = {}
    for key in obj:
        name = _encode_key(key)
        if name is not None:
            names[name] = key
    return names


def _join(
    results: list[str], brackets: str, indentation: str, gap: str
) -> str:
    """Wraps encoded members in brackets, one per line when indenting."""
    opening, closing = brackets
    if not results:
        return opening + closing
    if not gap:
        return opening + ",".join(results) + closing
    inner = indentation + gap
    separator = ",\n" + inner
    return (
        f"{opening}\n{inner}{separator.join(results)}\n{indentation}{closing}"
    )


# Exact types that never carry a serialization hook
_PLAIN_TYPES: Final = frozenset(
    {type(None), bool, int, float, str, list, tuple, dict}
)


def _serialize_array(
    array: list[Any] | tuple[Any, ...], indentation: str, state: EncodeState
) -> str:
    """Encodes list elements, writing absent elements as null."""
    with ProfileContext("serialize_array"):
        state.push(array)
        inner = indentation + state.config.gap
        results = []
        for index, element in enumerate(array):
            text = _serialize(index, array, element, inner, state)
            results.append("null" if text is None else text)
        state.pop()
        return _join(results, "[]", indentation, state.config.gap)


def _serialize_object(
    obj: dict[Any, Any], indentation: str, state: EncodeState
) -> str:
    """Encodes dict members, dropping members whose value is absent."""
    with ProfileContext("serialize_object"):
        state.push(obj)
        config = state.config
        inner = indentation + config.gap
        colon = ": " if config.gap else ":"

        keys = _property_names(obj)
        if config.allowlist is None:
            names: Any = list(keys)
        else:
            names = [name for name in config.allowlist if name in keys]

        results = []
        for name in names:
            # Hooks and the replacer see the key as stored in the dict
            key = keys[name]
            text = _serialize(key, obj, obj[key], inner, state)
            if text is not None:
                results.append(quote(name) + colon + text)
        state.pop()
        return _join(results, "{}", indentation, config.gap)


def _serialize(
    key: Key, holder: Any, value: Any, indentation: str, state: EncodeState
) -> str | None:
    """Encodes one value, returning None when it produces no text."""
    if type(value) not in _PLAIN_TYPES and not isinstance(value, type):
        if isinstance(value, SupportsToJSON) and callable(value.to_json):
            value = value.to_json(key)
        elif isinstance(value, DateLike):
            value = _format_timestamp(value)

    replacer = state.config.replacer
    if replacer is not None:
        value = replacer(holder, key, value)

    if value is None:
        return "null"
    elif isinstance(value, bool):
        return "true" if value else "false"
    elif isinstance(value, int | float):
        return _encode_number(value)
    elif isinstance(value, str):
        return quote(value)
    elif isinstance(value, list | tuple):
        return _serialize_array(value, indentation, state)
    elif isinstance(value, dict):
        return _serialize_object(value, indentation, state)
    # Callables, OMIT and any other unsupported value produce no text
    return None


def encode(
    value: Any, replacer: Any = None, indent: Any = None, **kwargs: Any
) -> str | None:
    """
    Serializes Python objects to canonical JSON text.

    ``replacer`` is either a function ``(holder, key, value)`` returning the
    value to encode, or a list of property names (strings or numbers) that
    restricts which dict members are written, in that order. The replacer and
    ``to_json`` hooks get the dict key as stored, so ``holder[key]`` works
    for non-string keys too. ``indent`` is a number of spaces (at most 10) or
    a string (first 10 characters) used per nesting level. Returns None when
    the value itself produces no text.
    """
    config = EncodeConfig.from_arguments(replacer, indent, **kwargs)
    logger.debug(
        "Encoding %s (replacer: %s, allowlist: %s, gap: %r)",
        type(value).__name__,
        config.replacer is not None,
        config.allowlist,
        config.gap,
    )
    state = EncodeState(config)
    with ProfileContext("encode"):
        return _serialize("", {"": value}, value, "", state)


# Stdlib-style names
loads = decode
dumps = encode


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "ESCAPES",
    "OMIT",
    "UNESCAPES",
    "CyclicStructureError",
    "DateLike",
    "EncodeConfig",
    "EncodeState",
    "GrammarFault",
    "HotPathStats",
    "JSONDecodeError",
    "JSONEncodeError",
    "JsonLexer",
    "JsonParser",
    "JsonToken",
    "ParseConfig",
    "SupportsToJSON",
    "TokenKind",
    "__version__",
    "clear_hot_path_stats",
    "decode",
    "dumps",
    "encode",
    "format_number",
    "get_hot_path_stats",
    "loads",
    "pad_zero",
    "quote",
    "walk",
]
