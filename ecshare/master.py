# Copyright (c) 2024 Neil Booth
#
# All rights reserved.
#
# See the file "LICENCE" for information about the copyright
# and warranty status of this software.

'''Master side of 2-party elliptic curve secret sharing using Paillier.

Master and slave each hold a point.  At the end the master holds an additive
share, modulo the curve field prime, of the x coordinate of the sum of the two
points.  Rounds must be run in order, each exactly once:

    session = MasterSession(point)
    m1 = session.round_one()
    m2 = session.round_two(s1)
    m3 = session.round_three(s2)
    session.round_four(s3)
    secret = session.secret()
'''

__all__ = ('MasterSession', 'State')

from enum import IntEnum
from functools import wraps
from threading import Lock

from .curves import P256
from .errors import DecryptionError, InvalidPoint, SequenceError
from .homomorphic import generate_keypair, encrypt, decrypt
from .messages import M1, M2, M3, S1, S2, S3
from .points import EncodedPoint


class State(IntEnum):
    INITIALIZED = 0
    STEP_ONE = 1
    STEP_TWO = 2
    STEP_THREE = 3
    COMPLETE = 4


def exclusive(func):
    '''Run a round while holding the session lock; a concurrent call is a SequenceError.'''
    @wraps(func)
    def wrapper(self, *args):
        if not self._lock.acquire(blocking=False):
            raise SequenceError('another round is in progress')
        try:
            return func(self, *args)
        finally:
            self._lock.release()
    return wrapper


class MasterSession:
    '''One run of the protocol.  Not reusable.'''

    def __init__(self, point, *, curve=P256, key_length=2048, keypair=None, rng=None):
        if isinstance(point, (bytes, bytearray)):
            point = EncodedPoint(point, curve)
        if not isinstance(point, EncodedPoint):
            raise TypeError('point must be an EncodedPoint')
        if point.curve != curve:
            raise InvalidPoint(f'point is on {point.curve.name}, not {curve.name}')
        x, y = point.x(), point.y()
        if x is None:
            raise InvalidPoint('invalid point')
        if y is None:
            raise InvalidPoint('invalid point, or compressed')
        x, y = int.from_bytes(x, 'big'), int.from_bytes(y, 'big')
        if not (x < curve.p and y < curve.p):
            raise InvalidPoint('coordinate out of range')

        if keypair is None:
            keypair = generate_keypair(key_length)
        self._curve = curve
        self._p = curve.p
        self._enc_key, self._dec_key = keypair
        self._rng = rng
        self._lock = Lock()
        self._state = State.INITIALIZED
        self._closed = False
        # Per-state private data
        self._x = x
        self._y = y
        self._a_masked_mod_p = None
        self._secret = None

    def _check_state(self, state):
        if self._closed:
            raise SequenceError('session is closed')
        if self._state != state:
            raise SequenceError(f'expected state {state.name}, session is in '
                                f'{self._state.name}')

    def _close(self):
        self._closed = True
        self._enc_key = self._dec_key = None
        self._x = self._y = self._a_masked_mod_p = self._secret = None

    def _encrypt(self, plaintext):
        return encrypt(self._enc_key, plaintext, self._rng)

    def _decrypt(self, ciphertext):
        try:
            return decrypt(self._dec_key, ciphertext)
        except DecryptionError:
            self._close()
            raise

    def _check_message(self, message, kind):
        if not isinstance(message, kind):
            raise TypeError(f'expected a {kind.__name__} message, got {type(message).__name__}')

    @property
    def state(self):
        return self._state

    @property
    def closed(self):
        return self._closed

    @property
    def curve(self):
        return self._curve

    @property
    def p(self):
        return self._p

    @property
    def public_key(self):
        if self._closed:
            raise SequenceError('session is closed')
        return self._enc_key

    @exclusive
    def round_one(self):
        '''Return M1 carrying encryptions of x, -x, y^2 and -2y modulo p.'''
        self._check_state(State.INITIALIZED)
        p, x, y = self._p, self._x, self._y

        message = M1(
            enc_key=self._enc_key,
            e_x_q=self._encrypt(x),
            e_neg_x_q=self._encrypt((p - x) % p),
            e_y_q_pow_2=self._encrypt(pow(y, 2, p)),
            e_neg_2_y_q=self._encrypt((p - 2 * y) % p),
        )

        self._x = self._y = None
        self._state = State.STEP_ONE
        return message

    @exclusive
    def round_two(self, s1):
        '''Demask A and T, and return M2 carrying E((T * M_T)^(p-3) mod p).

        Raising to p - 3 inverts the square of T * M_T.
        '''
        self._check_state(State.STEP_ONE)
        self._check_message(s1, S1)
        p = self._p

        # A * M_A mod p
        a_masked = self._decrypt(s1.e_a_masked)
        a_masked_mod_p = (a_masked - s1.n_a_mod_p) % p

        # T * M_T mod p
        t_masked = self._decrypt(s1.e_t_masked)
        t_masked_mod_p = (t_masked - s1.n_t_mod_p) % p

        message = M2(e_t_mod_pow=self._encrypt(pow(t_masked_mod_p, p - 3, p)))

        self._a_masked_mod_p = a_masked_mod_p
        self._state = State.STEP_TWO
        return message

    @exclusive
    def round_three(self, s2):
        '''Demask B and return M3 carrying E(A * M_A * B * M_B mod p).'''
        self._check_state(State.STEP_TWO)
        self._check_message(s2, S2)
        p = self._p

        b_masked = self._decrypt(s2.e_b_masked)
        b_masked_mod_p = (b_masked - s2.n_b_mod_p) % p

        message = M3(e_ab_masked=self._encrypt(b_masked_mod_p * self._a_masked_mod_p % p))

        self._a_masked_mod_p = None
        self._state = State.STEP_THREE
        return message

    @exclusive
    def round_four(self, s3):
        '''Decrypt the master's share.  Nothing further is sent.'''
        self._check_state(State.STEP_THREE)
        self._check_message(s3, S3)

        pms_masked = self._decrypt(s3.e_pms_masked)

        self._secret = pms_masked % self._p
        # No more decryptions are needed
        self._dec_key = None
        self._state = State.COMPLETE

    @exclusive
    def secret(self):
        '''Return the master's share, an integer in [0, p), and close the session.'''
        self._check_state(State.COMPLETE)
        secret = self._secret
        self._close()
        return secret

    def next(self, message=None):
        '''Run the round due next, returning its outbound message (None after round four).'''
        if self._closed:
            raise SequenceError('session is closed')
        if self._state == State.INITIALIZED:
            if message is not None:
                raise TypeError('round one takes no message')
            return self.round_one()
        if self._state == State.COMPLETE:
            raise SequenceError('session is complete; extract the secret')
        rounds = {
            State.STEP_ONE: self.round_two,
            State.STEP_TWO: self.round_three,
            State.STEP_THREE: self.round_four,
        }
        return rounds[self._state](message)

    def __repr__(self):
        status = 'closed' if self._closed else self._state.name
        return f'<MasterSession {self._curve.name} {status}>'
