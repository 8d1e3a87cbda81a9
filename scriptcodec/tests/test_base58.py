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

import unittest

from scriptcodec.core import x, b2x
from scriptcodec.base58 import (
    encode, decode, encode_check, decode_check,
    Base58Error, InvalidBase58Error, Base58ChecksumError
)
from scriptcodec.core import AddressDataEncodingError

# (hex, base58) pairs
BASE58_VECTORS = (
    ('', ''),
    ('61', '2g'),
    ('626262', 'a3gV'),
    ('636363', 'aPEr'),
    ('73696d706c792061206c6f6e6720737472696e67', '2cFupjhnEsSn59qHXstmK2ffpLv2'),
    ('00eb15231dfceb60925886b67d065299925915aeb172c06647', '1NS17iag9jJgTHD1VXjvLCEnZuQ3rJDE9L'),
    ('516b6fcd0f', 'ABnLTmg'),
    ('bf4f89001e670274dd', '3SEo3LWLoPntC'),
    ('572e4794', '3EFU7m'),
    ('ecac89cad93923c02321', 'EJDM8drfXA6uyA'),
    ('10c8511e', 'Rt5zm'),
    ('00000000000000000000', '1111111111'),
)


class Test_base58(unittest.TestCase):
    def test_encode_decode(self):
        for exp_bin, exp_base58 in BASE58_VECTORS:
            exp_bin = x(exp_bin)

            act_base58 = encode(exp_bin)
            act_bin = decode(exp_base58)

            self.assertEqual(act_base58, exp_base58)
            self.assertEqual(act_bin, exp_bin)

    def test_leading_zeros(self):
        self.assertEqual(decode('111233QC4'), x('000000287fb4cd'))
        self.assertEqual(encode(x('000000287fb4cd')), '111233QC4')
        self.assertEqual(decode('1'), b'\x00')

    def test_invalid_base58_exception(self):
        invalids = ('0', 'O', 'I', 'l', '3oO', '&', 'a b')
        for invalid in invalids:
            with self.assertRaises(InvalidBase58Error):
                decode(invalid)
        self.assertTrue(issubclass(InvalidBase58Error, AddressDataEncodingError))


class Test_base58check(unittest.TestCase):
    def test_encode_decode(self):
        self.assertEqual(encode_check(b'\x00' * 21),
                         '1111111111111111111114oLvT2')
        self.assertEqual(decode_check('1111111111111111111114oLvT2'),
                         b'\x00' * 21)
        self.assertEqual(
            encode_check(x('05da1745e9b549bd0bfa1a569971c77eba30cd5a4b')),
            '3MaB7QVq3k4pQx3BhsvEADgzQonLSBwMdj')
        self.assertEqual(
            b2x(decode_check('mrCDrCybB6J1vRfbwM5hemdJz73FwDBC8r')),
            '6f751e76e8199196d454941c45d1b3a323f1433bd6')

    def test_checksum_mismatch(self):
        with self.assertRaises(Base58ChecksumError):
            decode_check('1111111111111111111114oLvT3')
        with self.assertRaises(Base58ChecksumError):
            decode_check('3MaB7QVq3k4pQx3BhsvEADgzQonLSBwMdJ')

    def test_too_short(self):
        with self.assertRaises(Base58Error):
            decode_check('')
        with self.assertRaises(Base58Error):
            decode_check('2g')
