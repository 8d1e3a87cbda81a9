# Copyright (C) 2012-2014 The python-bitcoinlib developers
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

"""Address-related functionality

Converts the hash carried by a standard script into a human-readable
address, and addresses back into standard scripts.
"""

# pylama:ignore=E501,E221

from typing import Optional, Union

import scriptcodec
import scriptcodec.base58
import scriptcodec.bech32

from scriptcodec.core import AddressDataEncodingError
from scriptcodec.util import ensure_isinstance
from scriptcodec.core.script import (
    CScript, ScriptTemplate_Type, script_for_template, InvalidHashLengthError,
    TEMPLATE_P2PKH, TEMPLATE_P2SH, TEMPLATE_P2WPKH, TEMPLATE_P2WSH
)

# Only version 0 witness programs have a standard template here
WITNESS_VERSION = 0


class CCoinAddressError(Exception):
    """Raised when an invalid coin address is encountered"""


class CBase58AddressError(CCoinAddressError):
    """Raised when an invalid base58-encoded address is encountered"""


class CBech32AddressError(CCoinAddressError):
    """Raised when an invalid bech32-encoded address is encountered"""


def _chain_params(testnet: Optional[bool]) -> scriptcodec.ChainParamsBase:
    if testnet is None:
        return scriptcodec.get_current_chain_params()
    if testnet:
        return scriptcodec.BitcoinTestnetParams()
    return scriptcodec.BitcoinMainnetParams()


def hash_to_address(hashdata: Union[bytes, bytearray],
                    testnet: Optional[bool],
                    template: ScriptTemplate_Type) -> str:
    """Encode the hash of a standard script as an address

    testnet=None uses the currently selected chain parameters,
    True or False pick bitcoin testnet or mainnet explicitly."""
    ensure_isinstance(hashdata, (bytes, bytearray), 'hash')

    # Validates the hash length for the template
    script_for_template(template, hashdata)

    params = _chain_params(testnet)
    if template == TEMPLATE_P2PKH:
        prefix = params.BASE58_PREFIXES['PUBKEY_ADDR']
    elif template == TEMPLATE_P2SH:
        prefix = params.BASE58_PREFIXES['SCRIPT_ADDR']
    else:
        return scriptcodec.bech32.encode_witness_program(
            params.BECH32_HRP, WITNESS_VERSION, hashdata)

    return scriptcodec.base58.encode_check(bytes([prefix]) + bytes(hashdata))


def script_to_address(script: CScript, testnet: Optional[bool] = None) -> str:
    """Return the address for a standard script

    Raises UnrecognizedTemplateError if the script is not one of the
    standard templates."""
    template, hashdata = script.template_hash()
    return hash_to_address(hashdata, testnet, template)


def _base58_address_to_script(address: str,
                              params: scriptcodec.ChainParamsBase) -> CScript:
    try:
        data = scriptcodec.base58.decode_check(address)
    except scriptcodec.base58.Base58Error as err:
        raise CBase58AddressError(str(err)) from err

    if len(data) != 21:
        raise CBase58AddressError(
            'base58 address payload must be 21 bytes, got {}'
            .format(len(data)))

    prefix, hashdata = data[0], data[1:]
    if prefix == params.BASE58_PREFIXES['PUBKEY_ADDR']:
        return script_for_template(TEMPLATE_P2PKH, hashdata)
    if prefix == params.BASE58_PREFIXES['SCRIPT_ADDR']:
        return script_for_template(TEMPLATE_P2SH, hashdata)

    raise CBase58AddressError(
        'address version byte {} is not known for {}'
        .format(prefix, params.readable_name))


def _bech32_address_to_script(address: str,
                              params: scriptcodec.ChainParamsBase) -> CScript:
    try:
        witver, witprog = scriptcodec.bech32.decode_witness_program(
            params.BECH32_HRP, address)
    except AddressDataEncodingError as err:
        raise CBech32AddressError(str(err)) from err

    if witver != WITNESS_VERSION:
        raise CBech32AddressError(
            'witness version {} is not supported'.format(witver))

    template = TEMPLATE_P2WSH if len(witprog) == 32 else TEMPLATE_P2WPKH
    try:
        return script_for_template(template, witprog)
    except InvalidHashLengthError as err:
        raise CBech32AddressError(str(err)) from err


def address_to_script(address: str, testnet: Optional[bool] = None
                      ) -> CScript:
    """Return the standard script an address stands for

    The address has to belong to the chosen chain (see hash_to_address()
    for the meaning of testnet)."""
    ensure_isinstance(address, str, 'address')
    params = _chain_params(testnet)
    if address.lower().startswith(params.BECH32_HRP + '1'):
        return _bech32_address_to_script(address, params)
    return _base58_address_to_script(address, params)


__all__ = (
    'CCoinAddressError',
    'CBase58AddressError',
    'CBech32AddressError',
    'hash_to_address',
    'script_to_address',
    'address_to_script',
)
