# Copyright (c) 2024 Neil Booth
#
# All rights reserved.
#
# See the file "LICENCE" for information about the copyright
# and warranty status of this software.

'''Messages exchanged between master and slave.

Ciphertexts are raw Paillier ciphertexts under the master's key.  Correction
scalars (the n_*_mod_p fields) are plaintext integers chosen by the slave.
'''

__all__ = ('M1', 'M2', 'M3', 'S1', 'S2', 'S3')

from dataclasses import dataclass, fields

from phe.paillier import PaillierPublicKey


class _Message:

    def __post_init__(self):
        for field in fields(self):
            value = getattr(self, field.name)
            if field.type is int and (not isinstance(value, int) or isinstance(value, bool)):
                raise TypeError(f'{type(self).__name__}.{field.name} must be an integer')

    def ciphertexts(self):
        return tuple(getattr(self, field.name) for field in fields(self)
                     if field.name.startswith('e_'))


@dataclass(frozen=True)
class M1(_Message):
    '''Master's round one: its public key and encrypted coordinates.'''
    enc_key: PaillierPublicKey
    # E(x_q)
    e_x_q: int
    # E(-x_q)
    e_neg_x_q: int
    # E(y_q^2)
    e_y_q_pow_2: int
    # E(-2y_q)
    e_neg_2_y_q: int

    def __post_init__(self):
        if not isinstance(self.enc_key, PaillierPublicKey):
            raise TypeError('M1.enc_key must be a Paillier public key')
        super().__post_init__()


@dataclass(frozen=True)
class M2(_Message):
    # E((T * M_T)^(p-3) mod p)
    e_t_mod_pow: int


@dataclass(frozen=True)
class M3(_Message):
    # E(A * M_A * B * M_B mod p)
    e_ab_masked: int


@dataclass(frozen=True)
class S1(_Message):
    '''Slave's round one: masked A and T with their corrections.'''
    e_a_masked: int
    n_a_mod_p: int
    e_t_masked: int
    n_t_mod_p: int


@dataclass(frozen=True)
class S2(_Message):
    e_b_masked: int
    n_b_mod_p: int


@dataclass(frozen=True)
class S3(_Message):
    # Master's share of the pre-master secret, masked
    e_pms_masked: int
