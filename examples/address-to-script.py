#!/usr/bin/env python3

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

"""Example of turning addresses into serialized scriptPubKeys"""

import sys

from scriptcodec import select_chain_params
from scriptcodec.core import b2x
from scriptcodec.wallet import address_to_script, CCoinAddressError

if __name__ == '__main__':
    if len(sys.argv) < 2:
        sys.stderr.write(
            "usage: {} [--testnet|--regtest] <address> [address...]\n"
            .format(sys.argv[0]))
        sys.exit(2)

    addresses = sys.argv[1:]
    if addresses[0] == '--testnet':
        select_chain_params('bitcoin/testnet')
        addresses = addresses[1:]
    elif addresses[0] == '--regtest':
        select_chain_params('bitcoin/regtest')
        addresses = addresses[1:]

    for address in addresses:
        try:
            script = address_to_script(address)
        except CCoinAddressError as exp:
            print('{}: {}'.format(address, exp), file=sys.stderr)
            continue

        print('{} {} {}'.format(address, script.template(),
                                b2x(script.serialize())))
