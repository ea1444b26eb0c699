import logging
import struct
from typing import Callable, Dict, Optional, Union

from shortlink.core.exceptions import HashConfigurationError, HashFunctionError

logger = logging.getLogger(__name__)

HashFunction = Callable[[str], int]

DJB2_SEED = 5381
SDBM_SEED = 0
DEFAULT_ALGORITHM = "djb2"
CUSTOM_ALGORITHM = "custom"


def to_int32(value: int) -> int:
    """Truncate to the low 32 bits and reinterpret as signed two's complement."""
    value &= 0xFFFFFFFF
    if value & 0x80000000:
        return value - 0x100000000
    return value


def utf16_code_units(text: str):
    """Yield the UTF-16 code units of text (surrogate pairs for non-BMP chars)."""
    data = text.encode("utf-16-le", "surrogatepass")
    return struct.unpack(f"<{len(data) // 2}H", data)


def djb2(text: str) -> int:
    h = DJB2_SEED
    for code in utf16_code_units(text):
        h = to_int32(h * 33 + code)
    return h


def sdbm(text: str) -> int:
    h = SDBM_SEED
    for code in utf16_code_units(text):
        h = to_int32(code + (h << 6) + (h << 16) - h)
    return h


_HASH_FUNCTIONS: Dict[str, HashFunction] = {
    "djb2": djb2,
    "sdbm": sdbm,
}
BUILTIN_ALGORITHMS = frozenset(_HASH_FUNCTIONS)


def register_hash_function(name: str, fn: HashFunction) -> None:
    """Make fn selectable by name in hash_identifier."""
    if name == CUSTOM_ALGORITHM:
        raise HashConfigurationError(f"'{CUSTOM_ALGORITHM}' is reserved for per-call hash functions")
    if name in BUILTIN_ALGORITHMS:
        raise HashConfigurationError(f"Built-in hash algorithm '{name}' cannot be replaced")
    _HASH_FUNCTIONS[name] = fn


def available_algorithms():
    return sorted(_HASH_FUNCTIONS)


def resolve_hash_function(
    algorithm: Union[str, HashFunction] = DEFAULT_ALGORITHM,
    custom_hash_fn: Optional[HashFunction] = None,
) -> HashFunction:
    """Pick the hash strategy for an algorithm selector.

    algorithm may be a registered name, "custom" (which requires
    custom_hash_fn), or a callable used directly.
    """
    if callable(algorithm):
        return algorithm
    if algorithm == CUSTOM_ALGORITHM:
        if custom_hash_fn is None:
            raise HashConfigurationError("hash algorithm 'custom' requires a custom_hash_fn")
        return custom_hash_fn
    try:
        return _HASH_FUNCTIONS[algorithm]
    except KeyError:
        raise HashConfigurationError(
            f"Unknown hash algorithm '{algorithm}', expected one of {available_algorithms()} or '{CUSTOM_ALGORITHM}'"
        ) from None


def normalize_hash(raw) -> int:
    """Map a raw hash result to a non-negative identifier in [0, 2**31].

    abs() runs on Python ints, so INT32_MIN widens to 2**31 instead of
    overflowing.
    """
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise HashFunctionError(f"Hash function must return an int, got {type(raw).__name__}")
    return abs(to_int32(raw))


def hash_identifier(
    text: str,
    algorithm: Union[str, HashFunction] = DEFAULT_ALGORITHM,
    custom_hash_fn: Optional[HashFunction] = None,
) -> int:
    fn = resolve_hash_function(algorithm, custom_hash_fn)
    identifier = normalize_hash(fn(text))
    logger.debug("hashed %s... with %s -> %d", text[:50], getattr(fn, "__name__", fn), identifier)
    return identifier
