"""Decoding of single UTF-8 sequences into code points."""

__all__ = ["utf8_sequence_length", "decode_utf8"]


def utf8_sequence_length(byte):
    """Return the length of the UTF-8 sequence started by ``byte``, or 0 if it cannot start one."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte value: {byte!r}")
    if byte < 0x80:
        return 1
    if 0xC2 <= byte < 0xE0:
        return 2
    if 0xE0 <= byte < 0xF0:
        return 3
    if 0xF0 <= byte < 0xF8:
        return 4
    return 0


def _is_continuation(byte):
    return 0x80 <= byte < 0xC0


def decode_utf8(data):
    """Decode the first UTF-8 sequence of ``data``.

    Returns a ``(code_point, length)`` pair; anything after the first
    sequence is ignored. Raises ``ValueError`` for malformed input.
    """
    data = bytes(data[:4])
    if not data:
        raise ValueError("no input to decode")

    lead = data[0]
    length = utf8_sequence_length(lead)
    if length == 0:
        raise ValueError(f"invalid UTF-8 lead byte 0x{lead:02x}")
    if len(data) < length:
        raise ValueError("truncated UTF-8 sequence")

    tail = data[1:length]
    if not all(_is_continuation(b) for b in tail):
        raise ValueError("invalid UTF-8 continuation byte")

    if length == 1:
        return lead, 1
    if length == 2:
        if lead & 0x1E == 0:
            raise ValueError("overlong UTF-8 sequence")
        return ((lead & 0x1F) << 6) | (tail[0] & 0x3F), 2
    if length == 3:
        if lead & 0x0F == 0 and tail[0] & 0x20 == 0:
            raise ValueError("overlong UTF-8 sequence")
        code = ((lead & 0x0F) << 12) | ((tail[0] & 0x3F) << 6) | (tail[1] & 0x3F)
        return code, 3
    if lead & 0x07 == 0 and tail[0] & 0x30 == 0:
        raise ValueError("overlong UTF-8 sequence")
    code = (
        ((lead & 0x07) << 18)
        | ((tail[0] & 0x3F) << 12)
        | ((tail[1] & 0x3F) << 6)
        | (tail[2] & 0x3F)
    )
    return code, 4