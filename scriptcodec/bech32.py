# Copyright (C) 2017 The python-bitcoinlib developers
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

"""Bech32 encoding and decoding"""

from typing import Tuple, Union

from scriptcodec.segwit_addr import encode, decode, bech32_decode
from scriptcodec.core import AddressDataEncodingError


class Bech32Error(AddressDataEncodingError):
    pass


class Bech32ChecksumError(Bech32Error):
    pass


def encode_witness_program(hrp: str, witver: int,
                           witprog: Union[bytes, bytearray]) -> str:
    """Encode a witness version and program as a bech32 string"""
    if not (0 <= witver <= 16):
        raise ValueError(
            'witver must be in range 0 to 16 inclusive; got %r' % witver)
    s = encode(hrp, witver, bytes(witprog))
    if s is None:
        raise Bech32Error(
            'witness program of {} bytes cannot be encoded for version {}'
            .format(len(witprog), witver))
    return s


def decode_witness_program(hrp: str, s: str) -> Tuple[int, bytes]:
    """Decode a bech32 string into witness version and program

    The string must carry the given human-readable part."""
    hrpgot, _ = bech32_decode(s)
    if hrpgot is None:
        raise Bech32ChecksumError('not a bech32 string, or checksum mismatch')
    if hrpgot != hrp:
        raise Bech32Error(
            'unexpected human-readable part {!r}, expected {!r}'
            .format(hrpgot, hrp))
    witver, data = decode(hrp, s)
    if witver is None or data is None:
        raise Bech32Error('invalid witness program')
    return witver, data


__all__ = (
    'Bech32Error',
    'Bech32ChecksumError',
    'encode',
    'decode',
    'encode_witness_program',
    'decode_witness_program',
)
