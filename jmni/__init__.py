"""Small, independent helpers for arrays, dates, strings, URLs and more.

Every helper lives in its own module under :mod:`jmni.utils` and is
re-exported here, so ``from jmni import debounce, is_equal`` works.
"""

from __future__ import annotations

from jmni.utils.array import (
    difference,
    flatten_array,
    intersection,
    sort_array,
    unique_array,
)
from jmni.utils.date import (
    InvalidDateError,
    InvalidTimezoneError,
    format_date,
    format_timezone_offset,
    format_with_timezone,
)
from jmni.utils.equality import is_equal
from jmni.utils.input_timing import (
    Debounced,
    Throttled,
    create_debounced,
    create_throttled,
    debounce,
    throttle,
)
from jmni.utils.mime import guess_mime_type, infer_mime_type, sniff_mime_type
from jmni.utils.navigator import is_mobile
from jmni.utils.number import pad_zero
from jmni.utils.query import (
    parse_query,
    query_params,
    remove_query_param,
    set_query_param,
)
from jmni.utils.signature import (
    SignatureParams,
    buffer_to_hex,
    gen_ran_hex,
    generate_signature,
    str_to_bytes,
    verify_signature,
)
from jmni.utils.string import (
    camel_to_snake,
    capitalize,
    generate_uid,
    random_string,
    snake_to_camel,
)

__version__ = "1.0.0"

__all__ = [
    "Debounced",
    "InvalidDateError",
    "InvalidTimezoneError",
    "SignatureParams",
    "Throttled",
    "buffer_to_hex",
    "camel_to_snake",
    "capitalize",
    "create_debounced",
    "create_throttled",
    "debounce",
    "difference",
    "flatten_array",
    "format_date",
    "format_timezone_offset",
    "format_with_timezone",
    "gen_ran_hex",
    "generate_signature",
    "generate_uid",
    "guess_mime_type",
    "infer_mime_type",
    "intersection",
    "is_equal",
    "is_mobile",
    "pad_zero",
    "parse_query",
    "query_params",
    "random_string",
    "remove_query_param",
    "set_query_param",
    "sniff_mime_type",
    "snake_to_camel",
    "sort_array",
    "str_to_bytes",
    "throttle",
    "unique_array",
    "verify_signature",
]
