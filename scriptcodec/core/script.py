# Copyright (C) 2012-2015 The python-bitcoinlib developers
# Copyright (C) 2018 The python-bitcointx developers
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

# pylama:ignore=E501,E261,E231,E221,C901

"""Scripts

A script is kept as an ordered sequence of items: data pushes and
single-byte opcodes, both stored as bytes. This module parses scripts
from their serialized form, serializes them back, matches them against
the standard output templates, and renders them for display.

Script evaluation is out of scope.
"""

import struct
import hashlib
from types import MappingProxyType
from typing import (
    List, Tuple, Dict, Union, Iterable, Iterator, Optional, TypeVar, Type,
    Generator, Mapping, Callable, Any, overload
)

from . import b2x, bytes_for_repr

from .serialize import (
    Hash160, VarIntSerializer, ImmutableSerializable, ByteStream_Type,
    SerializationError, ser_read
)

from ..util import no_bool_use_as_property, ensure_isinstance

MAX_SCRIPT_ELEMENT_SIZE = 520
MAX_STANDARD_P2WSH_SCRIPT_SIZE = 3600

# Control bytes 0x01..0x4b push that many bytes directly
MAX_DIRECT_PUSH_SIZE = 0x4b

# CScriptOp is a subclass of int, included here for documentation purposes
ScriptItem_Type = Union['CScriptOp', int, bytes, bytearray]

T_CScript = TypeVar('T_CScript', bound='CScript')

_opcode_instances: List['CScriptOp'] = []


class CScriptOp(int):
    """A single script opcode"""
    __slots__: List[str] = []

    @staticmethod
    def encode_op_pushdata(d: Union[bytes, bytearray]) -> bytes:
        """Encode a PUSHDATA op, returning bytes

        Always uses the shortest form available for the length of d."""
        if len(d) <= MAX_DIRECT_PUSH_SIZE:
            return bytes([len(d)]) + d # OP_PUSHDATA
        elif len(d) <= 0xff:
            return b'\x4c' + bytes([len(d)]) + d # OP_PUSHDATA1
        elif len(d) <= MAX_SCRIPT_ELEMENT_SIZE:
            return b'\x4d' + struct.pack(b'<H', len(d)) + d # OP_PUSHDATA2
        else:
            raise ItemTooLargeError(
                'Data of {} bytes exceeds the maximum of {} bytes for '
                'a single push'.format(len(d), MAX_SCRIPT_ELEMENT_SIZE))

    def to_item(self) -> bytes:
        """Return the opcode as a single-byte script item"""
        return bytes([self])

    def __str__(self) -> str:
        return repr(self)

    def __repr__(self) -> str:
        if self in OPCODE_NAMES:
            return OPCODE_NAMES[self]
        else:
            return 'CScriptOp(0x%x)' % self

    def __new__(cls, n: int) -> 'CScriptOp':
        if not 0 <= n <= 0xff:
            raise ValueError('opcode must be in range 0..255, got %d' % n)
        try:
            return _opcode_instances[n]
        except IndexError:
            assert len(_opcode_instances) == n
            # mypy cannot handle arguments to `int.__new__()` at the moment,
            # issue: https://github.com/python/typeshed/issues/2630
            _opcode_instances.append(super().__new__(cls, n))  # type: ignore
            return _opcode_instances[n]


# Populate opcode instance table
for _n in range(0xff+1):
    CScriptOp(_n)


# push value
OP_0 = CScriptOp(0x00)
OP_FALSE = OP_0
OP_PUSHDATA1 = CScriptOp(0x4c)
OP_PUSHDATA2 = CScriptOp(0x4d)
OP_PUSHDATA4 = CScriptOp(0x4e)
OP_1NEGATE = CScriptOp(0x4f)
OP_RESERVED = CScriptOp(0x50)
OP_1 = CScriptOp(0x51)
OP_TRUE = OP_1
OP_2 = CScriptOp(0x52)
OP_3 = CScriptOp(0x53)
OP_4 = CScriptOp(0x54)
OP_5 = CScriptOp(0x55)
OP_6 = CScriptOp(0x56)
OP_7 = CScriptOp(0x57)
OP_8 = CScriptOp(0x58)
OP_9 = CScriptOp(0x59)
OP_10 = CScriptOp(0x5a)
OP_11 = CScriptOp(0x5b)
OP_12 = CScriptOp(0x5c)
OP_13 = CScriptOp(0x5d)
OP_14 = CScriptOp(0x5e)
OP_15 = CScriptOp(0x5f)
OP_16 = CScriptOp(0x60)

# control
OP_NOP = CScriptOp(0x61)
OP_VER = CScriptOp(0x62)
OP_IF = CScriptOp(0x63)
OP_NOTIF = CScriptOp(0x64)
OP_VERIF = CScriptOp(0x65)
OP_VERNOTIF = CScriptOp(0x66)
OP_ELSE = CScriptOp(0x67)
OP_ENDIF = CScriptOp(0x68)
OP_VERIFY = CScriptOp(0x69)
OP_RETURN = CScriptOp(0x6a)

# stack ops
OP_TOALTSTACK = CScriptOp(0x6b)
OP_FROMALTSTACK = CScriptOp(0x6c)
OP_2DROP = CScriptOp(0x6d)
OP_2DUP = CScriptOp(0x6e)
OP_3DUP = CScriptOp(0x6f)
OP_2OVER = CScriptOp(0x70)
OP_2ROT = CScriptOp(0x71)
OP_2SWAP = CScriptOp(0x72)
OP_IFDUP = CScriptOp(0x73)
OP_DEPTH = CScriptOp(0x74)
OP_DROP = CScriptOp(0x75)
OP_DUP = CScriptOp(0x76)
OP_NIP = CScriptOp(0x77)
OP_OVER = CScriptOp(0x78)
OP_PICK = CScriptOp(0x79)
OP_ROLL = CScriptOp(0x7a)
OP_ROT = CScriptOp(0x7b)
OP_SWAP = CScriptOp(0x7c)
OP_TUCK = CScriptOp(0x7d)

# splice ops
OP_CAT = CScriptOp(0x7e)
OP_SUBSTR = CScriptOp(0x7f)
OP_LEFT = CScriptOp(0x80)
OP_RIGHT = CScriptOp(0x81)
OP_SIZE = CScriptOp(0x82)

# bit logic
OP_INVERT = CScriptOp(0x83)
OP_AND = CScriptOp(0x84)
OP_OR = CScriptOp(0x85)
OP_XOR = CScriptOp(0x86)
OP_EQUAL = CScriptOp(0x87)
OP_EQUALVERIFY = CScriptOp(0x88)
OP_RESERVED1 = CScriptOp(0x89)
OP_RESERVED2 = CScriptOp(0x8a)

# numeric
OP_1ADD = CScriptOp(0x8b)
OP_1SUB = CScriptOp(0x8c)
OP_2MUL = CScriptOp(0x8d)
OP_2DIV = CScriptOp(0x8e)
OP_NEGATE = CScriptOp(0x8f)
OP_ABS = CScriptOp(0x90)
OP_NOT = CScriptOp(0x91)
OP_0NOTEQUAL = CScriptOp(0x92)

OP_ADD = CScriptOp(0x93)
OP_SUB = CScriptOp(0x94)
OP_MUL = CScriptOp(0x95)
OP_DIV = CScriptOp(0x96)
OP_MOD = CScriptOp(0x97)
OP_LSHIFT = CScriptOp(0x98)
OP_RSHIFT = CScriptOp(0x99)

OP_BOOLAND = CScriptOp(0x9a)
OP_BOOLOR = CScriptOp(0x9b)
OP_NUMEQUAL = CScriptOp(0x9c)
OP_NUMEQUALVERIFY = CScriptOp(0x9d)
OP_NUMNOTEQUAL = CScriptOp(0x9e)
OP_LESSTHAN = CScriptOp(0x9f)
OP_GREATERTHAN = CScriptOp(0xa0)
OP_LESSTHANOREQUAL = CScriptOp(0xa1)
OP_GREATERTHANOREQUAL = CScriptOp(0xa2)
OP_MIN = CScriptOp(0xa3)
OP_MAX = CScriptOp(0xa4)

OP_WITHIN = CScriptOp(0xa5)

# crypto
OP_RIPEMD160 = CScriptOp(0xa6)
OP_SHA1 = CScriptOp(0xa7)
OP_SHA256 = CScriptOp(0xa8)
OP_HASH160 = CScriptOp(0xa9)
OP_HASH256 = CScriptOp(0xaa)
OP_CODESEPARATOR = CScriptOp(0xab)
OP_CHECKSIG = CScriptOp(0xac)
OP_CHECKSIGVERIFY = CScriptOp(0xad)
OP_CHECKMULTISIG = CScriptOp(0xae)
OP_CHECKMULTISIGVERIFY = CScriptOp(0xaf)

# expansion
OP_NOP1 = CScriptOp(0xb0)
OP_NOP2 = CScriptOp(0xb1)
OP_CHECKLOCKTIMEVERIFY = OP_NOP2
OP_NOP3 = CScriptOp(0xb2)
OP_CHECKSEQUENCEVERIFY = OP_NOP3
OP_NOP4 = CScriptOp(0xb3)
OP_NOP5 = CScriptOp(0xb4)
OP_NOP6 = CScriptOp(0xb5)
OP_NOP7 = CScriptOp(0xb6)
OP_NOP8 = CScriptOp(0xb7)
OP_NOP9 = CScriptOp(0xb8)
OP_NOP10 = CScriptOp(0xb9)

# tapscript
OP_CHECKSIGADD = CScriptOp(0xba)

OP_INVALIDOPCODE = CScriptOp(0xff)

# Names that share a value with a canonical name. The canonical name is
# what gets displayed; OP_NOP2 and OP_NOP3 display as CLTV and CSV.
_OPCODE_ALIASES = frozenset(('OP_FALSE', 'OP_TRUE', 'OP_NOP2', 'OP_NOP3'))

OPCODES_BY_NAME: Mapping[str, CScriptOp] = MappingProxyType({
    _name: _op for _name, _op in sorted(globals().items(),
                                        key=lambda kv: kv[0])
    if _name.startswith('OP_') and isinstance(_op, CScriptOp)
})

# Read-only after import; safe for concurrent lookups.
OPCODE_NAMES: Mapping[CScriptOp, str] = MappingProxyType({
    _op: _name for _name, _op in OPCODES_BY_NAME.items()
    if _name not in _OPCODE_ALIASES
})


class CScriptInvalidError(Exception):
    """Base class for CScript exceptions"""
    pass


class MalformedScriptError(CScriptInvalidError, SerializationError):
    """Serialized script does not add up to its declared length,
    or ends in the middle of a push"""


class CScriptTruncatedPushDataError(MalformedScriptError):
    """Invalid pushdata due to truncation"""
    def __init__(self, msg: str, data: bytes):
        self.data = data
        super().__init__(msg)


class ItemTooLargeError(CScriptInvalidError, ValueError):
    """Script item is too long to be represented by a single push"""


class UnrecognizedTemplateError(ValueError):
    """Script does not match any of the known templates"""


class InvalidHashLengthError(ValueError):
    """Hash supplied for a script template has the wrong size"""


def encode_item(item: Union[bytes, bytearray]) -> bytes:
    """Encode a single script item the way it appears in a serialized script

    Single-byte items are written as-is, whether they are opcodes or
    one-byte literals. Anything else becomes a push of the item."""
    if len(item) == 1:
        return bytes(item)
    return CScriptOp.encode_op_pushdata(bytes(item))


def iter_script_items(payload: Union[bytes, bytearray]
                      ) -> Generator[Tuple[CScriptOp, bytes, int], None, None]:
    """Raw iteration over a serialized script without its length prefix

    Yields tuples of (opcode, item, sop_idx). For pushes, opcode is the
    control byte that introduced the push, so the different possible
    PUSHDATA encodings can be distinguished. For everything else the item
    is the opcode byte itself. sop_idx is the offset of the control byte.
    """
    i = 0
    while i < len(payload):
        sop_idx = i
        opcode = payload[i]
        i += 1

        if 0 < opcode <= MAX_DIRECT_PUSH_SIZE:
            pushdata_type = 'PUSHDATA(%d)' % opcode
            datasize = opcode

        elif opcode == OP_PUSHDATA1:
            pushdata_type = 'PUSHDATA1'
            if i >= len(payload):
                raise MalformedScriptError('PUSHDATA1: missing data length')
            # indexing bytes yields an unsigned value, 0..255
            datasize = payload[i]
            i += 1

        elif opcode == OP_PUSHDATA2:
            pushdata_type = 'PUSHDATA2'
            if i + 1 >= len(payload):
                raise MalformedScriptError('PUSHDATA2: missing data length')
            datasize = payload[i] + (payload[i+1] << 8)
            i += 2

        else:
            yield (CScriptOp(opcode), bytes([opcode]), sop_idx)
            continue

        data = bytes(payload[i:i+datasize])

        # Check for truncation
        if len(data) < datasize:
            raise CScriptTruncatedPushDataError(
                '%s: truncated data, declared %d bytes, %d available'
                % (pushdata_type, datasize, len(data)), data)

        i += datasize

        yield (CScriptOp(opcode), data, sop_idx)


def has_canonical_pushes(payload: Union[bytes, bytearray]) -> bool:
    """Test if a serialized script (without the length prefix) would be
    reproduced byte-for-byte by parsing and serializing it again

    Parsing does not remember which push form was used, so a push that
    could have been written in a shorter form will be re-encoded
    differently. Malformed payloads return False.
    """
    try:
        items = list(iter_script_items(payload))
        for n, (opcode, item, sop_idx) in enumerate(items):
            end_idx = items[n+1][2] if n+1 < len(items) else len(payload)
            if encode_item(item) != payload[sop_idx:end_idx]:
                return False
    except CScriptInvalidError:
        return False
    return True


def describe_item(item: Union[bytes, bytearray]) -> str:
    """Return a one-line human-readable rendering of a script item"""
    if len(item) == 1:
        name = OPCODE_NAMES.get(CScriptOp(item[0]))
        if name is not None:
            return name
        return 'OP_CODE_%d' % item[0]
    return b2x(item)


def _coerce_item(item: ScriptItem_Type) -> bytes:
    if isinstance(item, (bytes, bytearray)):
        return bytes(item)
    if isinstance(item, int) and not isinstance(item, bool):
        if not 0 <= item <= 0xff:
            raise ValueError(
                'integer script item must be a single byte value, got %d'
                % item)
        return bytes([item])
    raise TypeError("type '{}' cannot be represented as a script item"
                    .format(type(item).__name__))


class CScript(ImmutableSerializable):
    """A script, as an ordered sequence of items

    Each item is bytes: either a pushed data chunk, or a single byte
    that is an opcode. A single-byte item may equally be a one-byte
    literal; the two are not told apart, and are handled by value.

    Serialized form is the byte length of the script, as a varint,
    followed by the script bytes.
    """
    __slots__: List[str] = ['items']

    items: Tuple[bytes, ...]

    def __init__(self, items: Iterable[ScriptItem_Type] = ()) -> None:
        if isinstance(items, (bytes, bytearray)):
            raise TypeError(
                'CScript() takes a sequence of items, use '
                'CScript.from_payload() to parse serialized script bytes')
        object.__setattr__(self, 'items',
                           tuple(_coerce_item(item) for item in items))

    @classmethod
    def from_payload(cls: Type[T_CScript], payload: Union[bytes, bytearray]
                     ) -> T_CScript:
        """Parse script bytes that are not prefixed with their length"""
        return cls(item for (_, item, _) in iter_script_items(payload))

    @classmethod
    def stream_deserialize(cls: Type[T_CScript], f: ByteStream_Type,
                           **kwargs: Any) -> T_CScript:
        try:
            total_len = VarIntSerializer.stream_deserialize(f)
            payload = ser_read(f, total_len)
        except SerializationError as err:
            raise MalformedScriptError(
                'script is shorter than its declared length: {}'
                .format(err)) from err
        return cls.from_payload(payload)

    def payload(self) -> bytes:
        """Return script bytes, without the length prefix"""
        return b''.join(encode_item(item) for item in self.items)

    def stream_serialize(self, f: ByteStream_Type, **kwargs: Any) -> None:
        payload = self.payload()
        VarIntSerializer.stream_serialize(len(payload), f)
        f.write(payload)

    def raw_iter(self) -> Generator[Tuple[CScriptOp, bytes, int], None, None]:
        """Raw iteration over the serialized form of the script

        See iter_script_items() for what is yielded."""
        return iter_script_items(self.payload())

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.items)

    @overload
    def __getitem__(self, index: int) -> bytes:
        ...

    @overload  # noqa
    def __getitem__(self, index: slice) -> Tuple[bytes, ...]:
        ...

    def __getitem__(self, index: Union[int, slice]  # noqa
                    ) -> Union[bytes, Tuple[bytes, ...]]:
        return self.items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CScript):
            return NotImplemented
        return self.items == other.items

    def __hash__(self) -> int:
        return hash(self.items)

    def disassemble(self) -> List[str]:
        """Return one display line per item"""
        return [describe_item(item) for item in self.items]

    def __str__(self) -> str:
        return '\n'.join(self.disassemble())

    def __repr__(self) -> str:
        def _repr(item: bytes) -> str:
            if len(item) == 1:
                return repr(CScriptOp(item[0]))
            return bytes_for_repr(item)

        return "%s([%s])" % (self.__class__.__name__,
                             ', '.join(_repr(item) for item in self.items))

    @no_bool_use_as_property
    def is_p2pkh(self) -> bool:
        """Test if the script is a p2pkh scriptPubKey"""
        return _matches_layout(self.items, TEMPLATE_P2PKH)

    @no_bool_use_as_property
    def is_p2sh(self) -> bool:
        """Test if the script is a p2sh scriptPubKey"""
        return _matches_layout(self.items, TEMPLATE_P2SH)

    @no_bool_use_as_property
    def is_witness_v0_keyhash(self) -> bool:
        """Returns true if this is a scriptpubkey for V0 P2WPKH. """
        return _matches_layout(self.items, TEMPLATE_P2WPKH)

    @no_bool_use_as_property
    def is_witness_v0_scripthash(self) -> bool:
        """Returns true if this is a scriptpubkey for V0 P2WSH. """
        return _matches_layout(self.items, TEMPLATE_P2WSH)

    def template(self) -> 'ScriptTemplate_Type':
        """Return the template this script matches

        Raises UnrecognizedTemplateError if there is none."""
        return classify_script(self)

    def template_hash(self) -> Tuple['ScriptTemplate_Type', bytes]:
        """Return the template this script matches, and the hash it carries"""
        template = classify_script(self)
        return template, self.items[_TEMPLATE_LAYOUTS[template].hash_index]

    def to_p2sh_scriptPubKey(self: T_CScript, checksize: bool = True
                             ) -> T_CScript:
        """Create P2SH scriptPubKey from this redeemScript

        checksize - Check if the redeemScript is larger than the 520-byte max
        pushdata limit; raise ValueError if limit exceeded.
        """
        payload = self.payload()
        if checksize and len(payload) > MAX_SCRIPT_ELEMENT_SIZE:
            raise ValueError("redeemScript exceeds max allowed size; P2SH output would be unspendable")
        return script_for_template(TEMPLATE_P2SH, Hash160(payload),
                                   script_class=self.__class__)

    def to_p2wsh_scriptPubKey(self: T_CScript, checksize: bool = True
                              ) -> T_CScript:
        """Create P2WSH scriptPubKey from this witnessScript

        checksize - Check if the witnessScript is larger than the 3600-byte max
        script standardness limit; raise ValueError if limit exceeded.
        """
        payload = self.payload()
        if checksize and len(payload) > MAX_STANDARD_P2WSH_SCRIPT_SIZE:
            raise ValueError(
                "witnessScript exceeds maximum size allowed for standard witness scripts")
        return script_for_template(TEMPLATE_P2WSH,
                                   hashlib.sha256(payload).digest(),
                                   script_class=self.__class__)


# By using a str-derived class for template tags instead of enum,
# code that knows about other script shapes can register its own
# tags without redefining the whole set.
class ScriptTemplate_Type(str):

    _known_values: Tuple[str, ...] = ()

    def __init__(self, _value: str) -> None:
        super().__init__()
        if self not in self._known_values:
            raise ValueError(
                f'{self!r} is not a registered script template')

    @classmethod
    def register_type(cls, value: str) -> 'ScriptTemplate_Type':
        ensure_isinstance(value, str, 'script template name')
        if value in cls._known_values:
            raise ValueError(f'value {value} is already registered')
        cls._known_values = tuple(list(cls._known_values) + [value])
        return cls(value)


TEMPLATE_P2PKH: ScriptTemplate_Type = ScriptTemplate_Type.register_type('P2PKH')
TEMPLATE_P2SH: ScriptTemplate_Type = ScriptTemplate_Type.register_type('P2SH')
TEMPLATE_P2WPKH: ScriptTemplate_Type = ScriptTemplate_Type.register_type('P2WPKH')
TEMPLATE_P2WSH: ScriptTemplate_Type = ScriptTemplate_Type.register_type('P2WSH')


class ScriptTemplateLayout:
    """Item layout of a standard script: opcodes with one hash slot"""

    __slots__: List[str] = ['ops', 'hash_index', 'hash_len']

    ops: Tuple[Optional[CScriptOp], ...]
    hash_index: int
    hash_len: int

    def __init__(self, ops: Iterable[Optional[CScriptOp]], *,
                 hash_len: int) -> None:
        self.ops = tuple(ops)
        self.hash_index = self.ops.index(None)
        self.hash_len = hash_len

    def matches(self, items: Tuple[bytes, ...]) -> bool:
        if len(items) != len(self.ops):
            return False
        for op, item in zip(self.ops, items):
            if op is None:
                if len(item) != self.hash_len:
                    return False
            elif item != op.to_item():
                return False
        return True

    def build(self, hashdata: bytes) -> List[bytes]:
        return [hashdata if op is None else op.to_item() for op in self.ops]


_TEMPLATE_LAYOUTS: Dict[ScriptTemplate_Type, ScriptTemplateLayout] = {
    TEMPLATE_P2PKH: ScriptTemplateLayout(
        (OP_DUP, OP_HASH160, None, OP_EQUALVERIFY, OP_CHECKSIG), hash_len=20),
    TEMPLATE_P2SH: ScriptTemplateLayout(
        (OP_HASH160, None, OP_EQUAL), hash_len=20),
    TEMPLATE_P2WPKH: ScriptTemplateLayout((OP_0, None), hash_len=20),
    TEMPLATE_P2WSH: ScriptTemplateLayout((OP_0, None), hash_len=32),
}


def _matches_layout(items: Tuple[bytes, ...],
                    template: ScriptTemplate_Type) -> bool:
    return _TEMPLATE_LAYOUTS[template].matches(items)


# Checked in order, first match wins. P2WPKH and P2WSH share the OP_0
# prefix and are told apart only by the length of the program.
TEMPLATE_MATCHERS: Tuple[Tuple[Callable[[CScript], bool],
                               ScriptTemplate_Type], ...] = (
    (lambda script: script.is_p2pkh(), TEMPLATE_P2PKH),
    (lambda script: script.is_p2sh(), TEMPLATE_P2SH),
    (lambda script: script.is_witness_v0_scripthash(), TEMPLATE_P2WSH),
    (lambda script: script.is_witness_v0_keyhash(), TEMPLATE_P2WPKH),
)


def classify_script(script: CScript) -> ScriptTemplate_Type:
    """Return the template the script matches

    Raises UnrecognizedTemplateError if the script matches none of them."""
    ensure_isinstance(script, CScript, 'script')
    for predicate, template in TEMPLATE_MATCHERS:
        if predicate(script):
            return template

    raise UnrecognizedTemplateError(
        'script does not match any known template: {!r}'.format(script))


def script_for_template(template: str, hashdata: Union[bytes, bytearray],
                        script_class: Type[T_CScript] = CScript  # type: ignore
                        ) -> T_CScript:
    """Build the standard script for a template, carrying the given hash

    The hash must be 32 bytes long for P2WSH, and 20 bytes for the others;
    InvalidHashLengthError is raised otherwise."""
    ensure_isinstance(hashdata, (bytes, bytearray), 'hash')
    layout = _TEMPLATE_LAYOUTS.get(template)  # type: ignore
    if layout is None:
        raise ValueError('unknown script template {!r}'.format(template))
    if len(hashdata) != layout.hash_len:
        raise InvalidHashLengthError(
            '{} script requires a hash of {} bytes, got {} bytes'
            .format(template, layout.hash_len, len(hashdata)))
    return script_class(layout.build(bytes(hashdata)))


def standard_keyhash_scriptpubkey(keyhash: bytes) -> CScript:
    return script_for_template(TEMPLATE_P2PKH, keyhash)


def standard_scripthash_scriptpubkey(scripthash: bytes) -> CScript:
    return script_for_template(TEMPLATE_P2SH, scripthash)


def standard_witness_v0_scriptpubkey(keyhash_or_scripthash: bytes) -> CScript:
    ensure_isinstance(keyhash_or_scripthash, bytes, 'keyhash or scripthash')
    if len(keyhash_or_scripthash) == 32:
        return script_for_template(TEMPLATE_P2WSH, keyhash_or_scripthash)
    if len(keyhash_or_scripthash) != 20:
        raise InvalidHashLengthError(
            'keyhash_or_scripthash len is not 20 nor 32')
    return script_for_template(TEMPLATE_P2WPKH, keyhash_or_scripthash)


__all__ = tuple(OPCODES_BY_NAME) + (
    'MAX_SCRIPT_ELEMENT_SIZE',
    'MAX_STANDARD_P2WSH_SCRIPT_SIZE',
    'MAX_DIRECT_PUSH_SIZE',
    'OPCODE_NAMES',
    'OPCODES_BY_NAME',
    'CScriptOp',
    'CScriptInvalidError',
    'MalformedScriptError',
    'CScriptTruncatedPushDataError',
    'ItemTooLargeError',
    'UnrecognizedTemplateError',
    'InvalidHashLengthError',
    'encode_item',
    'iter_script_items',
    'has_canonical_pushes',
    'describe_item',
    'CScript',
    'ScriptTemplate_Type',
    'ScriptTemplateLayout',
    'TEMPLATE_P2PKH',
    'TEMPLATE_P2SH',
    'TEMPLATE_P2WPKH',
    'TEMPLATE_P2WSH',
    'TEMPLATE_MATCHERS',
    'classify_script',
    'script_for_template',
    'standard_keyhash_scriptpubkey',
    'standard_scripthash_scriptpubkey',
    'standard_witness_v0_scriptpubkey',
)
