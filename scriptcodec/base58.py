# Copyright (C) 2011 Sam Rushing
# Copyright (C) 2013-2014 The python-bitcoinlib developers
# Copyright (C) 2026 The python-scriptcodec developers
#
# This file is part of python-scriptcodec.
#
# It is subject to the license terms in the LICENSE file found in the top-level
# directory of this distribution.
#
# No part of python-scriptcodec, including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

# pylama:ignore=E501

"""Base58 encoding and decoding"""

import binascii

from typing import Union

from scriptcodec.core import Hash, AddressDataEncodingError

B58_DIGITS = '123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz'


class Base58Error(AddressDataEncodingError):
    pass


class InvalidBase58Error(Base58Error):
    """Raised on generic invalid base58 data, such as bad characters.

    Checksum failures raise Base58ChecksumError specifically.
    """
    pass


class Base58ChecksumError(Base58Error):
    """Raised on Base58 checksum errors"""
    pass


def encode(b: Union[bytes, bytearray]) -> str:
    """Encode bytes to a base58-encoded string"""

    # Convert big-endian bytes to integer
    n = int('0x0' + binascii.hexlify(b).decode('utf8'), 16)

    # Divide that integer into bas58
    digits = []
    while n > 0:
        n, r = divmod(n, 58)
        digits.append(B58_DIGITS[r])
    res = ''.join(digits[::-1])

    # Encode leading zeros as base58 zeros
    pad = 0
    for c in b:
        if c == 0:
            pad += 1
        else:
            break
    return B58_DIGITS[0] * pad + res


def decode(s: str) -> bytes:
    """Decode a base58-encoding string, returning bytes"""
    if not s:
        return b''

    # Convert the string to an integer
    n = 0
    for c in s:
        n *= 58
        if c not in B58_DIGITS:
            raise InvalidBase58Error('Character %r is not a valid base58 character' % c)
        digit = B58_DIGITS.index(c)
        n += digit

    # Convert the integer to bytes
    h = '%x' % n
    if len(h) % 2:
        h = '0' + h
    res = binascii.unhexlify(h.encode('utf8')) if n else b''

    # Add padding back.
    pad = 0
    for c in s:
        if c == B58_DIGITS[0]:
            pad += 1
        else:
            break
    return b'\x00' * pad + res


def encode_check(data: Union[bytes, bytearray]) -> str:
    """Encode bytes to base58, with a 4-byte double-SHA256 checksum appended"""
    data = bytes(data)
    return encode(data + Hash(data)[0:4])


def decode_check(s: str) -> bytes:
    """Decode a base58check string, verifying and stripping the checksum"""
    k = decode(s)
    if len(k) < 4:
        raise Base58Error('data too short')
    data, check0 = k[0:-4], k[-4:]
    check1 = Hash(data)[:4]
    if check0 != check1:
        raise Base58ChecksumError('Checksum mismatch: expected %r, calculated %r' % (check0, check1))
    return data


__all__ = (
    'B58_DIGITS',
    'Base58Error',
    'InvalidBase58Error',
    'Base58ChecksumError',
    'encode',
    'decode',
    'encode_check',
    'decode_check',
)
