# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""Standard base64 encoding and decoding (RFC 4648 alphabet, '=' padded)"""

import llog

import logging

log = logging.getLogger(__name__)

charset = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD = '='

# Marks bytes outside the alphabet; must not be a 6-bit value.
INVALID = 0xFF

def _build_inverse_charset(chars):
    table = [INVALID] * 128

    for i, char in enumerate(chars):
        table[ord(char)] = i

    return tuple(table)

inverse_charset = _build_inverse_charset(charset)

class Base64Error(Exception):
    pass

class DecodeError(Base64Error):
    """Raised when text is not valid base64. The subclasses say which check
    failed; position is the index of the offending character in the input,
    or None when the whole input is at fault.
    """

    def __init__(self, message, position=None):
        super().__init__(message)

        self.position = position

class InvalidLengthError(DecodeError):
    pass

class NotAsciiError(DecodeError):
    pass

class InvalidAlphabetError(DecodeError):
    pass

class UnexpectedPaddingError(DecodeError):
    """Raised for '=' anywhere but the tail of the final group."""
    pass

def encode(val):
    """Encode bytes to a padded base64 string."""

    assert type(val) in (bytes, bytearray), type(val)

    vlen = len(val)
    result = []

    i = 0
    while i < vlen:
        b0 = val[i]
        result.append(charset[b0 >> 2])

        n = (b0 & 0x03) << 4
        i += 1
        if i == vlen:
            result.append(charset[n])
            result.append(PAD * 2)
            break

        b1 = val[i]
        result.append(charset[n | (b1 >> 4)])

        n = (b1 & 0x0F) << 2
        i += 1
        if i == vlen:
            result.append(charset[n])
            result.append(PAD)
            break

        b2 = val[i]
        result.append(charset[n | (b2 >> 6)])
        result.append(charset[b2 & 0x3F])
        i += 1

    return "".join(result)

def decode(val):
    """Decode a base64 string, returning bytes. Raises a DecodeError subclass
    on malformed input; nothing is returned for a partially valid input.
    """

    assert type(val) is str, type(val)

    vlen = len(val)

    if vlen & 0x03:
        raise InvalidLengthError(\
            "Invalid base64 length [{}]; must be a multiple of 4."\
                .format(vlen))

    # The inverse table only covers 7-bit ASCII.
    for i, char in enumerate(val):
        if ord(char) > 0x7F:
            raise NotAsciiError(\
                "Character {!r} at position [{}] is not ASCII."\
                    .format(char, i), i)

    result = bytearray()
    last = vlen - 4

    for i in range(0, vlen, 4):
        n0, n1, n2, n3 = _decode_group(val, i, i == last)

        result.append(((n0 << 2) | (n1 >> 4)) & 0xFF)

        if val[i + 2] == PAD:
            break
        result.append(((n1 << 4) | (n2 >> 2)) & 0xFF)

        if val[i + 3] == PAD:
            break
        result.append(((n2 << 6) | n3) & 0xFF)

    if log.isEnabledFor(logging.DEBUG):
        log.debug("Decoded [{}] characters into [{}] bytes."\
            .format(vlen, len(result)))

    return bytes(result)

def _decode_group(val, i, final):
    values = []

    for j in range(i, i + 4):
        char = val[j]
        if char == PAD:
            values.append(0)
            continue

        n = inverse_charset[ord(char)]
        if n == INVALID:
            raise InvalidAlphabetError(\
                "Character {!r} at position [{}] is not a valid base64"\
                    " character.".format(char, j), j)
        values.append(n)

    _check_padding(val, i, final)

    return values

def _check_padding(val, i, final):
    # Valid forms of a group: xxxx, or in the final group only, xxx= and xx==.
    c0, c1, c2, c3 = val[i:i + 4]

    if c0 == PAD or c1 == PAD:
        pos = i if c0 == PAD else i + 1
        raise UnexpectedPaddingError(\
            "Padding at position [{}] leaves less than one byte in the"\
                " group.".format(pos), pos)

    if c2 == PAD and c3 != PAD:
        raise UnexpectedPaddingError(\
            "Padding at position [{}] is followed by data.".format(i + 2),\
            i + 2)

    if not final and (c2 == PAD or c3 == PAD):
        pos = i + 2 if c2 == PAD else i + 3
        raise UnexpectedPaddingError(\
            "Padding at position [{}] is not in the final group."\
                .format(pos), pos)
