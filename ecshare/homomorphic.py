# Copyright (c) 2024 Neil Booth
#
# All rights reserved.
#
# See the file "LICENCE" for information about the copyright
# and warranty status of this software.

'''Paillier encryption of raw integers.'''

__all__ = ('generate_keypair', 'encrypt', 'decrypt', 'MIN_KEY_LENGTH')

from math import gcd

from phe import paillier

from .errors import DecryptionError


# Plaintexts of the protocol reach about 3p^3 for a 256-bit prime
MIN_KEY_LENGTH = 1024


def generate_keypair(key_length=2048):
    '''Return a fresh (public_key, private_key) pair with an n of key_length bits.'''
    if not isinstance(key_length, int):
        raise TypeError('key length must be an integer')
    if key_length < MIN_KEY_LENGTH:
        raise ValueError(f'key length must be at least {MIN_KEY_LENGTH} bits')
    return paillier.generate_paillier_keypair(n_length=key_length)


def encrypt(public_key, plaintext, rng=None):
    '''Encrypt a non-negative integer smaller than n.

    If rng is given its randrange() draws the obfuscation factor; otherwise the
    system random source is used.
    '''
    if not isinstance(plaintext, int):
        raise TypeError('plaintext must be an integer')
    if not 0 <= plaintext < public_key.n:
        raise ValueError('plaintext out of range')
    r_value = None if rng is None else rng.randrange(1, public_key.n)
    return public_key.raw_encrypt(plaintext, r_value=r_value)


def decrypt(private_key, ciphertext):
    '''Decrypt a raw ciphertext, raising DecryptionError if it cannot be valid.'''
    n = private_key.public_key.n
    if not isinstance(ciphertext, int) or isinstance(ciphertext, bool):
        raise DecryptionError('ciphertext must be an integer')
    if not 0 < ciphertext < private_key.public_key.nsquare:
        raise DecryptionError('ciphertext out of range')
    # Every valid ciphertext is a unit mod n^2
    if gcd(ciphertext, n) != 1:
        raise DecryptionError('ciphertext is not invertible')
    try:
        return private_key.raw_decrypt(ciphertext)
    except (TypeError, ValueError, ZeroDivisionError) as e:
        raise DecryptionError(*e.args) from e
