# state/codec.py
# Nibble packing for peg codes: every code fits in 4 bits (0..8).


def squeeze(data) -> bytes:
    """
    Pack pairs of 4-bit values into single bytes.

    The first value of each pair goes into the low nibble, the second into
    the high nibble. Odd-length input is padded with one zero.

    Args:
        data (Iterable[int]): Values whose top four bits are zero.
    Returns:
        bytes: ceil(len(data) / 2) packed bytes.
    """
    values = list(data)
    if len(values) % 2 != 0:
        values.append(0)

    return bytes(
        (values[i] & 0x0F) | ((values[i + 1] << 4) & 0xF0)
        for i in range(0, len(values), 2)
    )


def unsqueeze(data) -> bytes:
    """
    Inverse of squeeze. Always returns an even number of bytes; the caller
    trims the padding using the count it expects.

    Args:
        data (Iterable[int]): Packed bytes.
    Returns:
        bytes: Two values per input byte, low nibble first.
    """
    out = bytearray()
    for value in data:
        out.append(value & 0x0F)
        out.append((value >> 4) & 0x0F)
    return bytes(out)
