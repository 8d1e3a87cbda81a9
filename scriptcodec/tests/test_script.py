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

import hashlib
import logging
import unittest

from scriptcodec.core import x, b2x, Hash160
from scriptcodec.core.serialize import (
    DeserializationExtraDataError, SerializationError
)
from scriptcodec.core.script import (
    CScript, CScriptOp, iter_script_items, has_canonical_pushes,
    describe_item, encode_item,
    MalformedScriptError, CScriptTruncatedPushDataError, ItemTooLargeError,
    CScriptInvalidError, OPCODE_NAMES, OPCODES_BY_NAME,
    OP_0, OP_1, OP_16, OP_DUP, OP_HASH160, OP_EQUALVERIFY, OP_CHECKSIG,
    OP_PUSHDATA1, OP_PUSHDATA2, OP_PUSHDATA4, OP_CHECKLOCKTIMEVERIFY,
    OP_NOP2, OP_RETURN, OP_CHECKSIGADD, OP_EQUAL,
    ScriptTemplate_Type, TEMPLATE_P2PKH, TEMPLATE_P2SH, TEMPLATE_P2WPKH,
    TEMPLATE_P2WSH, UnrecognizedTemplateError, InvalidHashLengthError,
    classify_script, script_for_template, standard_keyhash_scriptpubkey,
    standard_scripthash_scriptpubkey, standard_witness_v0_scriptpubkey
)


class Test_CScriptOp(unittest.TestCase):
    def test_pushdata(self):
        def T(data, expected):
            data = x(data)
            expected = x(expected)
            serialized_data = CScriptOp.encode_op_pushdata(data)
            self.assertEqual(serialized_data, expected)

        T('', '00')
        T('00', '0100')
        T('0011223344556677', '080011223344556677')
        T('ff'*0x4b, '4b' + 'ff'*0x4b)
        T('ff'*0x4c, '4c4c' + 'ff'*0x4c)
        T('ff'*0xff, '4cff' + 'ff'*0xff)
        T('ff'*0x100, '4d0001' + 'ff'*0x100)
        T('ff'*0x208, '4d0802' + 'ff'*0x208)

        with self.assertRaises(ItemTooLargeError):
            CScriptOp.encode_op_pushdata(b'\xff'*0x209)

    def test_is_singleton(self):
        self.assertTrue(OP_0 is CScriptOp(0x00))
        self.assertTrue(OP_1 is CScriptOp(0x51))
        self.assertTrue(OP_16 is CScriptOp(0x60))
        self.assertTrue(OP_CHECKSIG is CScriptOp(0xac))

        for i in range(0x0, 0x100):
            self.assertTrue(CScriptOp(i) is CScriptOp(i))

    def test_out_of_range(self):
        with self.assertRaises(ValueError):
            CScriptOp(-1)
        with self.assertRaises(ValueError):
            CScriptOp(0x100)

    def test_repr(self):
        self.assertEqual(repr(OP_DUP), 'OP_DUP')
        self.assertEqual(str(OP_CHECKSIG), 'OP_CHECKSIG')
        self.assertEqual(repr(CScriptOp(0x14)), 'CScriptOp(0x14)')


class Test_opcode_tables(unittest.TestCase):
    def test_names(self):
        self.assertEqual(OPCODE_NAMES[OP_DUP], 'OP_DUP')
        self.assertEqual(OPCODE_NAMES[OP_0], 'OP_0')
        self.assertEqual(OPCODE_NAMES[OP_NOP2], 'OP_CHECKLOCKTIMEVERIFY')
        self.assertEqual(OPCODE_NAMES[OP_CHECKSIGADD], 'OP_CHECKSIGADD')
        self.assertNotIn(CScriptOp(0x14), OPCODE_NAMES)

    def test_by_name(self):
        self.assertIs(OPCODES_BY_NAME['OP_FALSE'], OP_0)
        self.assertIs(OPCODES_BY_NAME['OP_TRUE'], OP_1)
        self.assertIs(OPCODES_BY_NAME['OP_NOP2'], OP_CHECKLOCKTIMEVERIFY)
        for op, name in OPCODE_NAMES.items():
            self.assertIs(OPCODES_BY_NAME[name], op)

    def test_read_only(self):
        with self.assertRaises(TypeError):
            OPCODE_NAMES[CScriptOp(0x14)] = 'OP_FOO'  # type: ignore
        with self.assertRaises(TypeError):
            OPCODES_BY_NAME['OP_FOO'] = OP_DUP  # type: ignore


class Test_CScript_construction(unittest.TestCase):
    def test_coercion(self):
        s = CScript([OP_DUP, 0xa9, bytearray(b'\x01\x02'), b'\x03\x04'])
        self.assertEqual(s.items, (b'\x76', b'\xa9', b'\x01\x02', b'\x03\x04'))
        for item in s:
            self.assertIsInstance(item, bytes)

    def test_bad_items(self):
        with self.assertRaises(TypeError):
            CScript(b'\x76\xa9')
        with self.assertRaises(TypeError):
            CScript(['OP_DUP'])
        with self.assertRaises(TypeError):
            CScript([True])
        with self.assertRaises(ValueError):
            CScript([256])
        with self.assertRaises(ValueError):
            CScript([-1])

    def test_immutable(self):
        s = CScript([OP_DUP])
        with self.assertRaises(AttributeError):
            s.items = ()  # type: ignore
        with self.assertRaises(AttributeError):
            del s.items

    def test_sequence(self):
        s = CScript([OP_DUP, b'\xaa\xbb', OP_CHECKSIG])
        self.assertEqual(len(s), 3)
        self.assertEqual(s[1], b'\xaa\xbb')
        self.assertEqual(s[-1], b'\xac')
        self.assertEqual(s[0:2], (b'\x76', b'\xaa\xbb'))
        self.assertEqual(list(s), [b'\x76', b'\xaa\xbb', b'\xac'])
        self.assertEqual(len(CScript()), 0)

    def test_equality(self):
        self.assertEqual(CScript([OP_DUP]), CScript([b'\x76']))
        self.assertEqual(hash(CScript([OP_DUP])), hash(CScript([b'\x76'])))
        self.assertNotEqual(CScript([OP_DUP]), CScript([OP_CHECKSIG]))
        self.assertNotEqual(CScript([OP_DUP]), (b'\x76',))
        # these serialize identically, but are different item sequences
        self.assertEqual(CScript([b'']).serialize(), CScript([OP_0]).serialize())
        self.assertNotEqual(CScript([b'']), CScript([OP_0]))


class Test_CScript_parse(unittest.TestCase):
    def test_opcodes_and_direct_pushes(self):
        s = CScript.deserialize(x('1976a914' + '00'*20 + '88ac'))
        self.assertEqual(s.items, (b'\x76', b'\xa9', b'\x00'*20, b'\x88', b'\xac'))

    def test_empty(self):
        self.assertEqual(CScript.deserialize(b'\x00'), CScript())

    def test_pushdata1(self):
        s = CScript.deserialize(x('06' + '4c04' + 'aabbccdd'))
        self.assertEqual(s.items, (x('aabbccdd'),))

    def test_pushdata1_length_is_unsigned(self):
        data = bytes(range(200))
        s = CScript.deserialize(bytes([202, 0x4c, 200]) + data)
        self.assertEqual(s.items, (data,))

        data = b'\x01' * 255
        s = CScript.deserialize(x('fd0101' + '4cff') + data)
        self.assertEqual(s.items, (data,))

    def test_pushdata2(self):
        data = b'\x02' * 300
        s = CScript.deserialize(x('fd2f01' + '4d2c01') + data)
        self.assertEqual(s.items, (data,))

    def test_pushdata4_is_an_opcode(self):
        s = CScript.deserialize(x('014e'))
        self.assertEqual(s.items, (bytes([OP_PUSHDATA4]),))

    def test_mixed(self):
        s = CScript.deserialize(x('0b' + '00' + '6a' + '02abcd' + '4c03010203' + 'ac'))
        self.assertEqual(s.items, (b'\x00', b'\x6a', x('abcd'), x('010203'), b'\xac'))

    def test_declared_length_longer_than_data(self):
        with self.assertRaises(MalformedScriptError):
            CScript.deserialize(x('0576a988'))

    def test_push_overruns_declared_length(self):
        with self.assertRaises(CScriptTruncatedPushDataError) as cm:
            CScript.deserialize(x('0303aabb' + 'cc'), allow_padding=True)
        self.assertEqual(cm.exception.data, x('aabb'))

    def test_push_truncated(self):
        with self.assertRaises(MalformedScriptError):
            CScript.deserialize(x('0214aa'))

    def test_missing_push_length(self):
        with self.assertRaises(MalformedScriptError):
            CScript.deserialize(x('014c'))
        with self.assertRaises(MalformedScriptError):
            CScript.deserialize(x('024d01'))

    def test_truncated_length_prefix(self):
        with self.assertRaises(MalformedScriptError):
            CScript.deserialize(b'')
        with self.assertRaises(MalformedScriptError):
            CScript.deserialize(x('fd01'))

    def test_error_hierarchy(self):
        with self.assertRaises(SerializationError):
            CScript.deserialize(x('0576a988'))
        with self.assertRaises(CScriptInvalidError):
            CScript.deserialize(x('0576a988'))

    def test_padding(self):
        with self.assertRaises(DeserializationExtraDataError) as cm:
            CScript.deserialize(x('0176' + 'ff'))
        self.assertEqual(cm.exception.obj, CScript([OP_DUP]))
        self.assertEqual(cm.exception.padding, b'\xff')

        s = CScript.deserialize(x('0176' + 'ff'), allow_padding=True)
        self.assertEqual(s, CScript([OP_DUP]))

    def test_from_payload(self):
        s = CScript.from_payload(x('76a914' + '11'*20 + '88ac'))
        self.assertTrue(s.is_p2pkh())
        with self.assertRaises(MalformedScriptError):
            CScript.from_payload(x('4c'))


class Test_iter_script_items(unittest.TestCase):
    def test(self):
        payload = x('00' + '0201ff' + '4c020304' + '4d0200aabb' + '76')
        self.assertEqual(
            list(iter_script_items(payload)),
            [(OP_0, b'\x00', 0),
             (CScriptOp(0x02), x('01ff'), 1),
             (OP_PUSHDATA1, x('0304'), 4),
             (OP_PUSHDATA2, x('aabb'), 8),
             (OP_DUP, b'\x76', 13)])

    def test_raw_iter(self):
        s = CScript([OP_DUP, b'\x00'*76, b''])
        self.assertEqual(
            list(s.raw_iter()),
            [(OP_DUP, b'\x76', 0),
             (OP_PUSHDATA1, b'\x00'*76, 1),
             (OP_0, b'\x00', 79)])

    def test_has_canonical_pushes(self):
        def T(hex_payload, expected):
            self.assertEqual(has_canonical_pushes(x(hex_payload)), expected)

        T('', True)
        T('76a914' + '00'*20 + '88ac', True)
        T('4c4c' + '00'*76, True)
        T('4d0001' + '00'*256, True)
        # one-byte push is written back as a bare byte
        T('01ab', False)
        # could have used a direct push
        T('4c0400000000', False)
        # could have used PUSHDATA1
        T('4d0400' + '00'*4, False)
        T('4dff00' + '00'*255, False)
        # too long to be written back at all
        T('4d0902' + '00'*521, False)
        # malformed
        T('4c', False)
        T('05aabb', False)


class Test_CScript_serialize(unittest.TestCase):
    def test_one_byte_items_verbatim(self):
        self.assertEqual(encode_item(b'\x76'), b'\x76')
        self.assertEqual(encode_item(b'\x00'), b'\x00')
        self.assertEqual(CScript([OP_RETURN, OP_DUP]).serialize(), x('026a76'))

    def test_boundaries(self):
        def T(n, expected_push_prefix, expected_script_prefix):
            item = b'\x5a' * n
            s = CScript([item])
            payload = s.payload()
            self.assertEqual(b2x(payload[:len(payload) - n]), expected_push_prefix)
            self.assertEqual(payload[len(payload) - n:], item)
            serialized = s.serialize()
            self.assertEqual(b2x(serialized[:len(serialized) - len(payload)]),
                             expected_script_prefix)
            self.assertEqual(CScript.deserialize(serialized), s)

        T(2, '02', '03')
        T(75, '4b', '4c')
        T(76, '4c4c', '4e')
        T(255, '4cff', 'fd0101')
        T(256, '4d0001', 'fd0301')
        T(520, '4d0802', 'fd0b02')

    def test_too_large(self):
        s = CScript([b'\x00' * 521])
        with self.assertRaises(ItemTooLargeError):
            s.serialize()
        with self.assertRaises(ValueError):
            s.payload()

    def test_p2pkh_end_to_end(self):
        s = CScript([OP_DUP, OP_HASH160, b'\x00'*20, OP_EQUALVERIFY, OP_CHECKSIG])
        serialized = s.serialize()
        self.assertEqual(b2x(serialized), '1976a914' + '00'*20 + '88ac')
        self.assertEqual(CScript.deserialize(serialized), s)

    def test_roundtrip(self):
        def T(items):
            s = CScript(items)
            self.assertEqual(CScript.deserialize(s.serialize()), s)

        T([])
        T([OP_0])
        T([OP_RETURN, b'hello world'])
        T([b'\x01' * 2, b'\x02' * 33, b'\x03' * 75])
        T([b'\x04' * 256, OP_CHECKSIG, b'\x05' * 400, b'\x06' * 520])
        T([OP_DUP, OP_HASH160, bytes(range(20)), OP_EQUALVERIFY, OP_CHECKSIG])
        T([CScriptOp(op) for op in range(0x4f, 0x100)])

    def test_non_minimal_encoding_is_lost(self):
        serialized = x('07' + '4c05' + '0102030405')
        s = CScript.deserialize(serialized)
        self.assertEqual(s.items, (x('0102030405'),))
        self.assertEqual(b2x(s.serialize()), '06' + '05' + '0102030405')

    def test_empty_item_is_lost(self):
        s = CScript([b''])
        self.assertEqual(s.serialize(), x('0100'))
        self.assertEqual(CScript.deserialize(s.serialize()), CScript([OP_0]))


class Test_CScript_display(unittest.TestCase):
    def test_describe_item(self):
        self.assertEqual(describe_item(b'\x76'), 'OP_DUP')
        self.assertEqual(describe_item(b'\x00'), 'OP_0')
        self.assertEqual(describe_item(b'\xb1'), 'OP_CHECKLOCKTIMEVERIFY')
        self.assertEqual(describe_item(b'\x14'), 'OP_CODE_20')
        self.assertEqual(describe_item(b'\xbb'), 'OP_CODE_187')
        self.assertEqual(describe_item(x('00ABff')), '00abff')
        self.assertEqual(describe_item(b''), '')

    def test_disassemble(self):
        s = CScript([OP_DUP, OP_HASH160, x('ab'*20), OP_EQUALVERIFY, OP_CHECKSIG])
        self.assertEqual(s.disassemble(),
                         ['OP_DUP', 'OP_HASH160', 'ab'*20,
                          'OP_EQUALVERIFY', 'OP_CHECKSIG'])
        self.assertEqual(str(s), '\n'.join(s.disassemble()))
        self.assertEqual(str(CScript()), '')

    def test_repr(self):
        def T(items, expected):
            self.assertEqual(repr(CScript(items)), expected)

        T([], 'CScript([])')
        T([OP_DUP, x('0102')], "CScript([OP_DUP, x('0102')])")
        T([x('00'*20)], "CScript([x('00')*20])")
        T([b'\x14'], 'CScript([CScriptOp(0x14)])')


class Test_templates(unittest.TestCase):
    def test_classify(self):
        def T(items, expected):
            s = CScript(items)
            self.assertEqual(classify_script(s), expected)
            self.assertEqual(s.template(), expected)

        T([OP_DUP, OP_HASH160, b'\x11'*20, OP_EQUALVERIFY, OP_CHECKSIG],
          TEMPLATE_P2PKH)
        T([OP_HASH160, b'\x22'*20, OP_EQUAL], TEMPLATE_P2SH)
        T([OP_0, b'\x33'*20], TEMPLATE_P2WPKH)
        T([OP_0, b'\x44'*32], TEMPLATE_P2WSH)
        T([b'\x00', b'\x00'*20], TEMPLATE_P2WPKH)
        T([b'\x00', b'\x00'*32], TEMPLATE_P2WSH)

    def test_classify_parsed(self):
        s = CScript.deserialize(x('1976a914' + '00'*20 + '88ac'))
        self.assertEqual(s.template(), TEMPLATE_P2PKH)
        self.assertEqual(s.template(), 'P2PKH')
        s = CScript.deserialize(x('22' + '0020' + '55'*32))
        self.assertEqual(s.template(), TEMPLATE_P2WSH)

    def test_unrecognized(self):
        def T(items):
            s = CScript(items)
            with self.assertRaises(UnrecognizedTemplateError):
                classify_script(s)
            with self.assertRaises(UnrecognizedTemplateError):
                s.template_hash()

        T([])
        T([OP_RETURN, b'hello'])
        T([OP_0, b'\x00'*21])
        T([OP_0, b'\x00'*19])
        T([OP_1, b'\x00'*32])
        T([OP_DUP, OP_HASH160, b'\x11'*20, OP_EQUALVERIFY])
        T([OP_DUP, OP_HASH160, b'\x11'*21, OP_EQUALVERIFY, OP_CHECKSIG])
        T([OP_HASH160, b'\x22'*32, OP_EQUAL])
        T([OP_HASH160, b'\x22'*20, OP_EQUALVERIFY])
        T([OP_0, b'\x00'*20, OP_0])

    def test_classify_type_check(self):
        with self.assertRaises(TypeError):
            classify_script(x('76a9'))  # type: ignore

    def test_predicates(self):
        s = CScript([OP_0, b'\x00'*20])
        self.assertTrue(s.is_witness_v0_keyhash())
        self.assertFalse(s.is_witness_v0_scripthash())
        self.assertFalse(s.is_p2sh())
        self.assertFalse(s.is_p2pkh())
        with self.assertRaises(TypeError):
            bool(s.is_p2pkh)

    def test_template_hash(self):
        h = bytes(range(32))
        self.assertEqual(CScript([OP_0, h]).template_hash(),
                         (TEMPLATE_P2WSH, h))
        self.assertEqual(
            CScript([OP_HASH160, h[:20], OP_EQUAL]).template_hash(),
            (TEMPLATE_P2SH, h[:20]))
        self.assertEqual(
            CScript([OP_DUP, OP_HASH160, h[:20], OP_EQUALVERIFY,
                     OP_CHECKSIG]).template_hash(),
            (TEMPLATE_P2PKH, h[:20]))

    def test_script_for_template(self):
        h20 = b'\x01' * 20
        h32 = b'\x02' * 32
        self.assertEqual(script_for_template(TEMPLATE_P2PKH, h20),
                         CScript([OP_DUP, OP_HASH160, h20, OP_EQUALVERIFY,
                                  OP_CHECKSIG]))
        self.assertEqual(script_for_template(TEMPLATE_P2SH, h20),
                         CScript([OP_HASH160, h20, OP_EQUAL]))
        self.assertEqual(script_for_template(TEMPLATE_P2WPKH, h20),
                         CScript([OP_0, h20]))
        self.assertEqual(script_for_template(TEMPLATE_P2WSH, h32),
                         CScript([OP_0, h32]))
        self.assertEqual(script_for_template('P2SH', bytearray(h20)),
                         CScript([OP_HASH160, h20, OP_EQUAL]))

        for template in (TEMPLATE_P2PKH, TEMPLATE_P2SH, TEMPLATE_P2WPKH):
            with self.assertRaises(InvalidHashLengthError):
                script_for_template(template, h32)
            self.assertEqual(
                script_for_template(template, h20).template_hash(),
                (template, h20))

        with self.assertRaises(InvalidHashLengthError):
            script_for_template(TEMPLATE_P2WSH, h20)
        with self.assertRaises(ValueError):
            script_for_template('P2TR', h32)
        with self.assertRaises(TypeError):
            script_for_template(TEMPLATE_P2SH, 'ab'*20)  # type: ignore

    def test_standard_scriptpubkeys(self):
        h20 = b'\x03' * 20
        h32 = b'\x04' * 32
        self.assertTrue(standard_keyhash_scriptpubkey(h20).is_p2pkh())
        self.assertTrue(standard_scripthash_scriptpubkey(h20).is_p2sh())
        self.assertTrue(
            standard_witness_v0_scriptpubkey(h20).is_witness_v0_keyhash())
        self.assertTrue(
            standard_witness_v0_scriptpubkey(h32).is_witness_v0_scripthash())
        with self.assertRaises(InvalidHashLengthError):
            standard_witness_v0_scriptpubkey(b'\x00'*21)

    def test_template_type(self):
        self.assertEqual(ScriptTemplate_Type('P2WPKH'), TEMPLATE_P2WPKH)
        with self.assertRaises(ValueError):
            ScriptTemplate_Type('FOO')
        with self.assertRaises(ValueError):
            ScriptTemplate_Type.register_type('P2SH')

    def test_to_p2wsh_scriptPubKey(self):
        redeem = CScript([OP_1])
        self.assertEqual(redeem.to_p2wsh_scriptPubKey(),
                         CScript([OP_0, hashlib.sha256(b'\x51').digest()]))

        big = CScript([b'\x00'*500] * 8)
        with self.assertRaisesRegex(ValueError, "maximum size allowed"):
            big.to_p2wsh_scriptPubKey()
        self.assertTrue(
            big.to_p2wsh_scriptPubKey(checksize=False)
            .is_witness_v0_scripthash())

    def test_to_p2sh_scriptPubKey(self):
        if 'ripemd160' not in hashlib.algorithms_available:
            logging.getLogger(__name__).warning(
                'ripemd160 is not available from hashlib, '
                'skipping P2SH hashing test')
            return

        redeem = CScript([OP_1])
        p2sh = redeem.to_p2sh_scriptPubKey()
        self.assertTrue(p2sh.is_p2sh())
        self.assertEqual(p2sh[1], Hash160(b'\x51'))
        self.assertEqual(b2x(p2sh[1]),
                         'da1745e9b549bd0bfa1a569971c77eba30cd5a4b')

        with self.assertRaises(ValueError):
            CScript([b'\x00'*300] * 2).to_p2sh_scriptPubKey()


if __name__ == '__main__':
    logging.basicConfig()
    unittest.main()
