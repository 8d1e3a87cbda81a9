# Copyright (C) 2012-2017 The python-bitcoinlib developers
# Copyright (C) 2018-2019 The python-bitcointx developers
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

import binascii

from typing import Union

from .serialize import Hash, Hash160


def x(h: str) -> bytes:
    """Convert a hex string to bytes"""
    return binascii.unhexlify(h.encode('utf8'))


def b2x(b: Union[bytes, bytearray]) -> str:
    """Convert bytes to a hex string"""
    return binascii.hexlify(b).decode('utf8')


def bytes_for_repr(buf: Union[bytes, bytearray]) -> str:
    """Render bytes as an x('...') expression

    A run of one repeated byte is shortened to x('ab')*n."""
    if len(buf) > 1 and all(b == buf[0] for b in buf):
        return "x('{}')*{}".format(b2x(buf[:1]), len(buf))
    return "x('{}')".format(b2x(buf))


class AddressDataEncodingError(Exception):
    """Base class for all errors related to address encoding"""


__all__ = (
    'Hash',
    'Hash160',
    'x',
    'b2x',
    'bytes_for_repr',
    'AddressDataEncodingError',
)
