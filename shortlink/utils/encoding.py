from shortlink.core.exceptions import InvalidCharacterError

# Base62 alphabet, case-sensitive; position is the digit value
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
BASE = len(ALPHABET)
_DIGITS = {ch: i for i, ch in enumerate(ALPHABET)}


def encode_id(identifier: int) -> str:
    """Encode a non-negative integer to its Base62 short code."""
    if identifier < 0:
        raise ValueError(f"Identifier must be non-negative, got {identifier}")
    if identifier == 0:
        return ALPHABET[0]
    out = []
    while identifier:
        identifier, rem = divmod(identifier, BASE)
        out.append(ALPHABET[rem])
    return ''.join(reversed(out))


def decode_short_code(code: str) -> int:
    """Decode a Base62 short code back to its integer identifier.

    Leading zero-digits ("A") do not change the value, so "AAB" and "B"
    both decode to 1.
    """
    n = 0
    for position, ch in enumerate(code):
        digit = _DIGITS.get(ch)
        if digit is None:
            raise InvalidCharacterError(ch, position)
        n = n * BASE + digit
    return n
