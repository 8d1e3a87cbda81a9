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

"""Example of parsing serialized scripts, and showing what they are"""

import sys

from scriptcodec import select_chain_params
from scriptcodec.core import x, b2x
from scriptcodec.core.serialize import SerializationError
from scriptcodec.core.script import (
    CScript, UnrecognizedTemplateError
)
from scriptcodec.wallet import script_to_address


def parser():
    import argparse

    parser = argparse.ArgumentParser(
        description=('parse length-prefixed scripts given in hex, '
                     'show their items, template and address'))
    parser.add_argument('script', nargs='+',
                        help='serialized script, in hex')
    parser.add_argument('-t', '--testnet', action='store_true',
                        dest='testnet', help='Use testnet')
    parser.add_argument('-r', '--regtest', action='store_true',
                        dest='regtest', help='Use regtest')
    return parser


if __name__ == '__main__':
    args = parser().parse_args()
    if args.testnet:
        select_chain_params('bitcoin/testnet')
    elif args.regtest:
        select_chain_params('bitcoin/regtest')

    failed = False
    for script_hex in args.script:
        try:
            script = CScript.deserialize(x(script_hex))
        except (ValueError, SerializationError) as exp:
            print('{}: {}'.format(script_hex, exp), file=sys.stderr)
            failed = True
            continue

        print(script_hex)
        for line in script.disassemble():
            print('    ' + line)

        try:
            reserialized = script.serialize()
        except ValueError as exp:
            print('  note: cannot be serialized again: {}'.format(exp))
        else:
            if reserialized != x(script_hex):
                print('  note: re-serializes as {}'.format(b2x(reserialized)))

        try:
            template, hashdata = script.template_hash()
        except UnrecognizedTemplateError:
            print('  template: none')
            continue

        print('  template: {} ({})'.format(template, b2x(hashdata)))
        print('  address: {}'.format(script_to_address(script)))

    if failed:
        sys.exit(1)
