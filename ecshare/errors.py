# Copyright (c) 2024 Neil Booth
#
# All rights reserved.
#
# See the file "LICENCE" for information about the copyright
# and warranty status of this software.

'''Exceptions raised by the secret share protocol.'''

__all__ = ('SecretShareError', 'InvalidPoint', 'DecryptionError', 'SequenceError')


class SecretShareError(Exception):
    pass


class InvalidPoint(SecretShareError):
    '''The point has no extractable affine coordinates.'''


class DecryptionError(SecretShareError):
    '''A ciphertext from the peer failed to decrypt.  Fatal to the session.'''


class SequenceError(SecretShareError):
    '''A round was invoked out of order, repeated, or after the session closed.'''
