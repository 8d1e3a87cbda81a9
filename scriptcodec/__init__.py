# Copyright (C) 2012-2018 The python-bitcoinlib developers
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


"""Script codec for Bitcoin-style scripts

Chain parameters live here. They only matter when a script hash is
turned into an address or back: they supply the base58 version bytes
and the bech32 human-readable part.
"""

from contextlib import contextmanager
from typing import Dict, Tuple, Union, Optional, Type, Any, Generator, cast

import scriptcodec.util

# Note that setup.py can break if __init__.py imports any external
# dependencies, as these might not be installed when setup.py runs. In this
# case __version__ could be moved to a separate version.py and imported here.
__version__ = '0.1.0'


# initialized at the end of the module, because it
# references BitcoinMainnetParams, which is not yet defined here.
_chain_params_context: 'ChainParamsContextVar'

# registered name -> chain params class
_chain_params_by_name: Dict[str, Type['ChainParamsBase']] = {}


class ChainParamsMeta(type):
    """Checks the address attributes of chain params classes, and registers
    the classes that are declared with `name=...` for lookup by name."""

    _attribute_types = (
        ('NAME', str),
        ('BECH32_HRP', str),
        ('BASE58_PREFIXES', dict),
    )

    def __new__(mcs, cls_name: str, bases: Tuple[type, ...],
                dct: Dict[str, Any],
                name: Optional[Union[str, Tuple[str, ...]]] = None
                ) -> 'ChainParamsMeta':
        for attr_name, attr_type in mcs._attribute_types:
            if attr_name in dct and not isinstance(dct[attr_name], attr_type):
                raise TypeError('{}.{} must be an instance of {}'
                                .format(cls_name, attr_name,
                                        attr_type.__name__))

        cls_instance = super().__new__(mcs, cls_name, bases, dct)
        if name is None:
            return cls_instance

        names = (name,) if isinstance(name, str) else tuple(name)
        for n in names:
            if n in _chain_params_by_name:
                raise AssertionError(
                    'chain params name {} is already taken by {}'
                    .format(n, _chain_params_by_name[n].__name__))
            _chain_params_by_name[n] = cast(Type['ChainParamsBase'],
                                            cls_instance)
        setattr(cls_instance, 'NAME', names[0])
        return cls_instance


class ChainParamsBase(metaclass=ChainParamsMeta):
    """Base class of all chain parameters.

    Script parsing, serialization and classification never look at
    chain parameters."""

    NAME: str
    BECH32_HRP: str
    BASE58_PREFIXES: Dict[str, int]

    def get_network_id(self) -> str:
        _, _, network = self.NAME.partition('/')
        return network or 'main'

    def is_testnet(self) -> bool:
        return self.get_network_id() != 'main'

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def readable_name(self) -> str:
        chain, _, network = self.NAME.partition('/')
        return ' '.join(filter(None, (chain.capitalize(), network)))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.name!r}>"


class BitcoinMainnetParams(ChainParamsBase,
                           name=('bitcoin', 'bitcoin/mainnet')):
    BECH32_HRP = 'bc'
    BASE58_PREFIXES = {'PUBKEY_ADDR': 0, 'SCRIPT_ADDR': 5}


class BitcoinTestnetParams(BitcoinMainnetParams, name='bitcoin/testnet'):
    BECH32_HRP = 'tb'
    BASE58_PREFIXES = {'PUBKEY_ADDR': 111, 'SCRIPT_ADDR': 196}


class BitcoinRegtestParams(BitcoinTestnetParams, name='bitcoin/regtest'):
    BECH32_HRP = 'bcrt'


def get_current_chain_params() -> ChainParamsBase:
    return cast(ChainParamsBase, _chain_params_context.params)


@contextmanager
def ChainParams(params: Union[str, ChainParamsBase, Type[ChainParamsBase]]
                ) -> Generator[ChainParamsBase, None, None]:
    """Context manager to temporarily switch chain parameters.
    """
    prev, new = select_chain_params(params)
    try:
        yield new
    finally:
        select_chain_params(prev)


def select_chain_params(params: Union[str, ChainParamsBase,
                                      Type[ChainParamsBase]]
                        ) -> Tuple[ChainParamsBase, ChainParamsBase]:
    """Select the chain parameters to use, returning (previous, selected)

    params may be a registered name ('bitcoin', 'bitcoin/testnet',
    'bitcoin/regtest'), a ChainParamsBase subclass, or an instance of one.
    Default chain is 'bitcoin'.

    The selection is kept in a context variable, so it only affects
    the thread (or asyncio task) that makes it.
    """
    if isinstance(params, str):
        params_cls = _chain_params_by_name.get(params)
        if params_cls is None:
            raise ValueError('Unknown chain %r' % params)
        params = params_cls()
    elif isinstance(params, type):
        if not issubclass(params, ChainParamsBase):
            raise TypeError(
                'supplied class is not a subclass of ChainParamsBase')
        params = params()
    elif not isinstance(params, ChainParamsBase):
        raise ValueError('Supplied chain params is not a string, not a '
                         'subclass of, nor an instance of ChainParamsBase')

    prev_params = _chain_params_context.params
    _chain_params_context.params = params

    return prev_params, params


class ChainParamsContextVar(scriptcodec.util.ContextVarsCompat):
    params: ChainParamsBase


_chain_params_context = ChainParamsContextVar(params=BitcoinMainnetParams())


__all__ = (
    'ChainParamsBase',
    'BitcoinMainnetParams',
    'BitcoinTestnetParams',
    'BitcoinRegtestParams',
    'select_chain_params',
    'ChainParams',
    'get_current_chain_params',
)
