"""Decode raw attribute masks into symbolic flag names."""

from .types import DecodedResult, FlagEntry, FlagTable, SpeedTable


def decode_mask(mask: int, table: FlagTable) -> DecodedResult:
    """Decompose mask into the names of the table entries it contains.

    Entries are claimed greedily in table (alphabetical) order and never
    revisited, so when two entries share bits the first name wins. Bits no
    entry explains are returned as the residual.
    """
    remaining = mask
    tokens = []

    for entry in table:
        if entry.value and remaining & entry.value == entry.value:
            tokens.append(entry.name)
            remaining -= entry.value

    return DecodedResult(tuple(tokens), remaining or None)


def lookup_speed(value: int, table: SpeedTable) -> FlagEntry | None:
    """Return the first entry whose value equals value exactly."""
    for entry in table:
        if entry.value == value:
            return entry
    return None


def resolve_speed(value: int, table: SpeedTable, strip: int = 0) -> str:
    """Resolve an enumerated speed value to its name.

    Args:
        value: Raw speed value.
        table: Speed table to match against.
        strip: Number of leading characters to drop from the matched name,
            1 turns ``B9600`` into ``9600``.

    Returns:
        The (stripped) name, or the decimal value when nothing matches.
    """
    entry = lookup_speed(value, table)
    if entry is None:
        return str(value)
    return entry.name[strip:]


def decode_control_mask(
    mask: int, table: FlagTable, speeds: SpeedTable, speed_mask: int = 0
) -> DecodedResult:
    """Decode c_cflag, naming the baud rate bits embedded in it.

    speed_mask selects the sub-field holding the rate (CBAUD on Linux). The
    resolved speed name follows the flag names. Speed bits that match no
    known rate are folded into the residual instead.
    """
    if not speed_mask:
        return decode_mask(mask, table)

    speed_bits = mask & speed_mask
    result = decode_mask(mask & ~speed_mask, table)
    residual = result.residual or 0

    entry = lookup_speed(speed_bits, speeds)
    if entry is None:
        return DecodedResult(result.tokens, (residual | speed_bits) or None)
    return DecodedResult((*result.tokens, entry.name), residual or None)
