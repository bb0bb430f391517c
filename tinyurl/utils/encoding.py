# Base36 alphabet (lowercase only for case-insensitive URLs)
ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)
_DIGITS = {ch: value for value, ch in enumerate(ALPHABET)}


def normalize_short_code(code: str) -> str:
    """Normalize short code to lowercase for case-insensitive lookups."""
    return code.lower().strip()


def is_valid_short_code(code: str) -> bool:
    # Checked before lowercasing: some non-ASCII letters lowercase to ASCII
    if not code.isascii():
        return False
    normalized = normalize_short_code(code)
    return bool(normalized) and all(ch in _DIGITS for ch in normalized)


def encode_base36(num: int) -> str:
    """Encode a non-negative integer as a lowercase Base36 string."""
    if num < 0:
        raise ValueError(f"Cannot encode negative identifier: {num}")
    if num == 0:
        return ALPHABET[0]
    out = []
    while num:
        num, rem = divmod(num, BASE)
        out.append(ALPHABET[rem])
    return ''.join(reversed(out))


def decode_base36(s: str) -> int:
    """Decode a Base36 string (any case) back to its integer.

    Raises ValueError when the string is empty or holds anything other than
    ASCII letters and digits.
    """
    if not is_valid_short_code(s):
        raise ValueError(f"Not a base36 short code: {s!r}")
    normalized = normalize_short_code(s)
    n = 0
    for ch in normalized:
        n = n * BASE + _DIGITS[ch]
    return n
