# Copyright (c) 2024 Neil Booth
#
# All rights reserved.
#
# See the file "LICENCE" for information about the copyright
# and warranty status of this software.

'''SEC1-encoded elliptic curve points.'''

__all__ = ('EncodedPoint', )

from coincurve import PublicKey

from .curves import P256, SECP256K1


UNCOMPRESSED = 0x04
COMPRESSED = (0x02, 0x03)


class EncodedPoint:
    '''A point in SEC1 encoding.

    No curve membership check is done here; the encoding only determines whether
    affine coordinates can be read out of it.
    '''

    def __init__(self, data, curve=P256):
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError('encoded point must be bytes')
        self.data = bytes(data)
        self.curve = curve

    @classmethod
    def from_affine(cls, x, y, curve=P256):
        '''Return the uncompressed encoding of the point (x, y).'''
        if not all(isinstance(v, int) for v in (x, y)):
            raise TypeError('coordinates must be integers')
        size = curve.size
        return cls(bytes([UNCOMPRESSED]) + x.to_bytes(size, 'big') + y.to_bytes(size, 'big'),
                   curve)

    @classmethod
    def from_public_key(cls, public_key):
        '''Return the uncompressed encoding of a coincurve (secp256k1) public key.'''
        if not isinstance(public_key, PublicKey):
            raise TypeError('public key must be a coincurve PublicKey')
        return cls(public_key.format(compressed=False), SECP256K1)

    def tag(self):
        return self.data[0] if self.data else None

    def is_compressed(self):
        return self.tag() in COMPRESSED and len(self.data) == 1 + self.curve.size

    def is_uncompressed(self):
        return self.tag() == UNCOMPRESSED and len(self.data) == 1 + 2 * self.curve.size

    def x(self):
        '''The x coordinate as big-endian bytes, or None.'''
        if self.is_uncompressed() or self.is_compressed():
            return self.data[1: 1 + self.curve.size]
        return None

    def y(self):
        '''The y coordinate as big-endian bytes, or None if compressed or malformed.'''
        if self.is_uncompressed():
            return self.data[1 + self.curve.size:]
        return None

    def to_bytes(self):
        return self.data

    def __eq__(self, other):
        return (isinstance(other, EncodedPoint) and self.data == other.data
                and self.curve == other.curve)

    def __hash__(self):
        return hash((self.data, self.curve))

    def __repr__(self):
        return f'EncodedPoint({self.data.hex()}, {self.curve.name})'
