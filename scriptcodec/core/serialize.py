# Copyright (C) 2012-2018 The python-bitcoinlib developers
# Copyright (C) 2019 The python-bitcointx developers
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

"""Serialization routines

The variable-length integer codec used for script length prefixes,
and the stream plumbing the script codec is built on.
"""

import hashlib
import struct

from io import BytesIO
from typing import Any, List, Type, TypeVar, Union, BinaryIO

MAX_SIZE = 0x02000000

ByteStream_Type = Union[BinaryIO, BytesIO]

T_Serializable = TypeVar('T_Serializable', bound='Serializable')


def Hash(msg: bytes) -> bytes:
    """SHA256^2)(msg) -> bytes"""
    return hashlib.sha256(hashlib.sha256(msg).digest()).digest()


def Hash160(msg: bytes) -> bytes:
    """RIPEME160(SHA256(msg)) -> bytes"""
    h = hashlib.new('ripemd160')
    h.update(hashlib.sha256(msg).digest())
    return h.digest()


class SerializationError(Exception):
    """Base class for serialization errors"""


class SerializationTruncationError(SerializationError):
    """Serialized data was truncated

    Thrown by deserialize() and stream_deserialize()
    """


class DeserializationExtraDataError(SerializationError):
    """Deserialized data had extra data at the end

    Thrown by deserialize() when not all data is consumed during
    deserialization. The deserialized object and extra padding not consumed are
    saved.
    """
    def __init__(self, msg: str, obj: Any, padding: bytes) -> None:
        super().__init__(msg)
        self.obj = obj
        self.padding = padding


def ser_read(f: ByteStream_Type, n: int) -> bytes:
    """Read from a stream safely

    Raises SerializationError and SerializationTruncationError appropriately.
    Use this instead of f.read() in your classes stream_(de)serialization()
    functions.
    """
    if n > MAX_SIZE:
        raise SerializationError('Asked to read 0x%x bytes; MAX_SIZE exceeded' % n)
    r = f.read(n)
    if len(r) < n:
        raise SerializationTruncationError('Asked to read %i bytes, but only got %i' % (n, len(r)))
    return r


class Serializable(object):
    """Base class for serializable objects"""

    __slots__: List[str] = []

    def stream_serialize(self, f: ByteStream_Type, **kwargs: Any) -> None:
        """Serialize to a stream"""
        raise NotImplementedError

    @classmethod
    def stream_deserialize(cls: Type[T_Serializable], f: ByteStream_Type,
                           **kwargs: Any) -> T_Serializable:
        """Deserialize from a stream"""
        raise NotImplementedError

    def serialize(self, **kwargs: Any) -> bytes:
        """Serialize, returning bytes"""
        f = BytesIO()
        self.stream_serialize(f, **kwargs)
        return f.getvalue()

    @classmethod
    def deserialize(cls: Type[T_Serializable], buf: bytes,
                    allow_padding: bool = False, **kwargs: Any
                    ) -> T_Serializable:
        """Deserialize bytes, returning an instance

        allow_padding - Allow buf to include extra padding. (default False)

        If allow_padding is False and not all bytes are consumed during
        deserialization DeserializationExtraDataError will be raised.
        """
        fd = BytesIO(buf)
        r = cls.stream_deserialize(fd, **kwargs)
        if not allow_padding:
            padding = fd.read()
            if len(padding) != 0:
                raise DeserializationExtraDataError('Not all bytes consumed during deserialization',
                                                    r, padding)
        return r


class ImmutableSerializable(Serializable):
    """Immutable serializable object"""

    __slots__: List[str] = []

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError('Object is immutable')

    def __delattr__(self, name: str) -> None:
        raise AttributeError('Object is immutable')


class Serializer(object):
    """Base class for object serializers"""
    def __new__(cls) -> 'Serializer':
        raise NotImplementedError

    @classmethod
    def stream_serialize(cls, obj: Any, f: ByteStream_Type) -> None:
        raise NotImplementedError

    @classmethod
    def stream_deserialize(cls, f: ByteStream_Type) -> Any:
        raise NotImplementedError

    @classmethod
    def serialize(cls, obj: Any) -> bytes:
        f = BytesIO()
        cls.stream_serialize(obj, f)
        return f.getvalue()

    @classmethod
    def deserialize(cls, buf: Union[bytes, bytearray, ByteStream_Type]) -> Any:
        if isinstance(buf, (bytes, bytearray)):
            buf = BytesIO(buf)
        return cls.stream_deserialize(buf)


class VarIntSerializer(Serializer):
    """Serialization of variable length ints"""
    @classmethod
    def stream_serialize(cls, i: int, f: ByteStream_Type) -> None:
        if i < 0:
            raise ValueError('varint must be non-negative integer')
        elif i < 0xfd:
            f.write(bytes([i]))
        elif i <= 0xffff:
            f.write(bytes([0xfd]))
            f.write(struct.pack(b'<H', i))
        elif i <= 0xffffffff:
            f.write(bytes([0xfe]))
            f.write(struct.pack(b'<I', i))
        elif i <= 0xffffffffffffffff:
            f.write(bytes([0xff]))
            f.write(struct.pack(b'<Q', i))
        else:
            raise ValueError('varint must fit into 64 bits')

    @classmethod
    def stream_deserialize(cls, f: ByteStream_Type) -> int:
        r = ser_read(f, 1)[0]
        if r < 0xfd:
            return r
        elif r == 0xfd:
            return int(struct.unpack(b'<H', ser_read(f, 2))[0])
        elif r == 0xfe:
            return int(struct.unpack(b'<I', ser_read(f, 4))[0])
        else:
            return int(struct.unpack(b'<Q', ser_read(f, 8))[0])


def get_size_of_varint(i: int) -> int:
    """Return the number of bytes VarIntSerializer will use for i"""
    if i < 0:
        raise ValueError('varint must be non-negative integer')
    if i < 0xfd:
        return 1
    if i <= 0xffff:
        return 3
    if i <= 0xffffffff:
        return 5
    return 9


__all__ = (
    'MAX_SIZE',
    'Hash',
    'Hash160',
    'SerializationError',
    'SerializationTruncationError',
    'DeserializationExtraDataError',
    'ser_read',
    'Serializable',
    'ImmutableSerializable',
    'Serializer',
    'VarIntSerializer',
    'get_size_of_varint',
)
