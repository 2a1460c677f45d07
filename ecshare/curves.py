# Copyright (c) 2024 Neil Booth
#
# All rights reserved.
#
# See the file "LICENCE" for information about the copyright
# and warranty status of this software.

'''Field primes of the supported curves.'''

from typing import NamedTuple

__all__ = ('Curve', 'P', 'P256', 'SECP256K1')


# NIST P-256 field prime, 2^256 - 2^224 + 2^192 + 2^96 - 1
P = 'ffffffff00000001000000000000000000000000ffffffffffffffffffffffff'


class Curve(NamedTuple):
    name: str
    p: int
    # Byte length of one coordinate in SEC1 encoding
    size: int


P256 = Curve('P-256', int(P, 16), 32)
SECP256K1 = Curve(
    'secp256k1',
    int('FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFE_FFFFFC2F', 16),
    32,
)
