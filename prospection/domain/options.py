"""Recognised analysis options, validated once at the call boundary.

Every option falls back to its default when given a value it cannot use.
The fallback is logged as a warning and never raised, so a malformed
option degrades the result instead of aborting it.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)

MAX_PLACES = 15
DEFAULT_NGRAMS: Tuple[int, ...] = (2, 3)


class Encoding(str, Enum):
    BINARY = "binary"
    FREQUENCY = "frequency"


class OutputMode(str, Enum):
    LEX = "lex"
    ORIENTATION = "orientation"
    MATCHES = "matches"
    FULL = "full"


class SortKey(str, Enum):
    FREQ = "freq"
    WEIGHT = "weight"
    LEX = "lex"


class Locale(str, Enum):
    US = "US"
    GB = "GB"


class _Invalid:
    pass


_INVALID = _Invalid()
_TRUE_STRINGS = {"1", "true", "yes", "y", "on"}
_FALSE_STRINGS = {"0", "false", "no", "n", "off"}
_DISABLED_NGRAMS = {"", "none", "off", "false", "0"}
_LOCALE_ALIASES = {"US": Locale.US, "EN-US": Locale.US, "GB": Locale.GB, "UK": Locale.GB, "EN-GB": Locale.GB}


def _enum_parser(enum_cls: type[Enum]) -> Callable[[Any], Any]:
    def parse(value: Any) -> Any:
        if isinstance(value, enum_cls):
            return value
        text = str(value).strip().lower()
        for member in enum_cls:
            if member.value == text:
                return member
        return _INVALID

    return parse


def _parse_float(value: Any) -> Any:
    if isinstance(value, bool):
        return _INVALID
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return _INVALID
    if math.isnan(parsed):
        return _INVALID
    return parsed


def _parse_bool(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return _INVALID


def _parse_int(value: Any) -> Any:
    if isinstance(value, bool):
        return _INVALID
    if isinstance(value, float):
        if not value.is_integer():
            return _INVALID
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return _INVALID
    if isinstance(value, int):
        return value
    return _INVALID


def _parse_places(value: Any) -> Any:
    parsed = _parse_int(value)
    if isinstance(parsed, _Invalid) or not 0 <= parsed <= MAX_PLACES:
        return _INVALID
    return parsed


def _parse_locale(value: Any) -> Any:
    if isinstance(value, Locale):
        return value
    return _LOCALE_ALIASES.get(str(value).strip().upper(), _INVALID)


def _parse_ngrams(value: Any) -> Any:
    if value is True:
        return DEFAULT_NGRAMS
    if value is False:
        return ()
    if isinstance(value, str):
        if value.strip().lower() in _DISABLED_NGRAMS:
            return ()
        candidates: Iterable[Any] = [part for part in value.split(",") if part.strip()]
    elif isinstance(value, int):
        candidates = [value]
    elif isinstance(value, Iterable):
        candidates = list(value)
    else:
        return _INVALID

    arities = set()
    for candidate in candidates:
        arity = _parse_int(candidate)
        if isinstance(arity, _Invalid) or arity < 2:
            logger.warning("Dropping invalid n-gram arity %r; arities must be integers >= 2", candidate)
            continue
        arities.add(arity)
    return tuple(sorted(arities))


# option key (camelCase, snake_case and legacy spellings) -> field name
_FIELD_KEYS: Dict[str, str] = {
    "encoding": "encoding",
    "output": "output",
    "return": "output",
    "min": "min_weight",
    "min_weight": "min_weight",
    "max": "max_weight",
    "max_weight": "max_weight",
    "nGrams": "ngrams",
    "ngrams": "ngrams",
    "n_grams": "ngrams",
    "wcGrams": "wc_grams",
    "wc_grams": "wc_grams",
    "overlap": "overlap",
    "locale": "locale",
    "places": "places",
    "sortBy": "sort_by",
    "sort_by": "sort_by",
    "more": "more",
}

_PARSERS: Dict[str, Callable[[Any], Any]] = {
    "encoding": _enum_parser(Encoding),
    "output": _enum_parser(OutputMode),
    "min_weight": _parse_float,
    "max_weight": _parse_float,
    "ngrams": _parse_ngrams,
    "wc_grams": _parse_bool,
    "overlap": _parse_bool,
    "locale": _parse_locale,
    "places": _parse_places,
    "sort_by": _enum_parser(SortKey),
    "more": _parse_bool,
}


class AnalysisOptions(BaseModel):
    """Explicit option set for a single analysis call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    encoding: Encoding = Encoding.BINARY
    output: OutputMode = OutputMode.LEX
    min_weight: float = Field(default=-math.inf, alias="min")
    max_weight: float = Field(default=math.inf, alias="max")
    ngrams: Tuple[int, ...] = Field(default=DEFAULT_NGRAMS, alias="nGrams")
    wc_grams: bool = Field(default=False, alias="wcGrams")
    overlap: bool = True
    locale: Locale = Locale.US
    places: int = Field(default=9, ge=0, le=MAX_PLACES)
    sort_by: SortKey = Field(default=SortKey.LEX, alias="sortBy")
    more: bool = False

    @model_validator(mode="before")
    @classmethod
    def _coerce_raw_options(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, AnalysisOptions):
            return data.model_dump()
        if not isinstance(data, Mapping):
            logger.warning("Options must be a mapping, got %s; using defaults", type(data).__name__)
            return {}

        cleaned: Dict[str, Any] = {}
        for key, value in data.items():
            name = _FIELD_KEYS.get(str(key))
            if name is None:
                logger.warning("Ignoring unrecognised option %r", key)
                continue
            if value is None:
                continue
            parsed = _PARSERS[name](value)
            if isinstance(parsed, _Invalid):
                logger.warning("Invalid value %r for option %r; using the default", value, key)
                continue
            cleaned[name] = parsed

        low = cleaned.get("min_weight", -math.inf)
        high = cleaned.get("max_weight", math.inf)
        if low > high:
            logger.warning("Option min (%s) is greater than max (%s); every lexicon entry will be excluded", low, high)
        return cleaned

    @classmethod
    def coerce(cls, value: Optional[Any] = None, **overrides: Any) -> "AnalysisOptions":
        """Build options from a mapping, an existing instance, or keywords."""
        if isinstance(value, AnalysisOptions) and not overrides:
            return value
        if isinstance(value, AnalysisOptions):
            merged: Dict[str, Any] = value.model_dump()
        elif isinstance(value, Mapping):
            merged = dict(value)
        elif value is None:
            merged = {}
        else:
            logger.warning("Options must be a mapping, got %s; using defaults", type(value).__name__)
            merged = {}
        merged.update(overrides)
        return cls.model_validate(merged)

    @property
    def weight_range(self) -> Tuple[float, float]:
        return (self.min_weight, self.max_weight)


DEFAULT_OPTIONS = AnalysisOptions()


__all__ = [
    "AnalysisOptions",
    "DEFAULT_NGRAMS",
    "DEFAULT_OPTIONS",
    "Encoding",
    "Locale",
    "MAX_PLACES",
    "OutputMode",
    "SortKey",
]
