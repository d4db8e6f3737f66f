from subnim.errors import InvalidCharacter, Overflow

U64_MAX = 2**64 - 1

# Decimal text of the first value the parser cannot represent.
U64_MAX_PLUS_ONE_STR = str(U64_MAX + 1)

_DIGITS = "0123456789"


def parse_decimal(text: str, limit: int = U64_MAX) -> int:
    """Parse a string of ASCII decimal digits into a bounded unsigned integer.

    The scan runs left to right and stops at the first problem found, so a
    string that is both too long and contains a bad character may report
    either error. An empty string parses as 0.

    Args:
        text: The raw characters to parse
        limit: Largest value that may be produced

    Returns:
        The parsed integer

    Raises:
        InvalidCharacter: If a character outside 0-9 is encountered
        Overflow: If the accumulated value would exceed ``limit``
    """
    acc = 0
    for position, char in enumerate(text):
        digit = _DIGITS.find(char)
        if digit < 0:
            raise InvalidCharacter(char, position)

        acc *= 10
        if acc > limit:
            raise Overflow(limit)

        acc += digit
        if acc > limit:
            raise Overflow(limit)

    return acc
