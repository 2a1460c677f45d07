import random

import pytest

from ecshare import generate_keypair, S1, S2, S3


class Slave:
    '''A semi-honest slave holding the point (x, y).

    It ends up with share such that the master's secret plus share is the x
    coordinate of the sum of both points, modulo p.
    '''

    def __init__(self, x, y, p, rng=None):
        self.x = x
        self.y = y
        self.p = p
        self.rng = rng or random.SystemRandom()
        self.share = self.rng.randrange(p)

    def _encrypt(self, value):
        return self.enc_key.raw_encrypt(value, r_value=self.rng.randrange(1, self.enc_key.n))

    def _add(self, *ciphertexts):
        result = 1
        for c in ciphertexts:
            result = result * c % self.nsquare
        return result

    def _mul(self, ciphertext, k):
        return pow(ciphertext, k, self.nsquare)

    def _mask(self, ciphertext):
        mask = self.rng.randrange(1, self.p)
        noise = self.rng.randrange(self.p * self.p)
        return mask, self._add(self._mul(ciphertext, mask), self._encrypt(noise)), noise % self.p

    def step_one(self, m1):
        p, x, y = self.p, self.x, self.y
        self.enc_key = m1.enc_key
        self.nsquare = m1.enc_key.nsquare
        self.e_neg_x_q = m1.e_neg_x_q
        # A = (y - y_q)^2, T = x - x_q
        e_a = self._add(m1.e_y_q_pow_2, self._mul(m1.e_neg_2_y_q, y), self._encrypt(y * y % p))
        e_t = self._add(self._encrypt(x), m1.e_neg_x_q)
        self.m_a, e_a_masked, n_a_mod_p = self._mask(e_a)
        self.m_t, e_t_masked, n_t_mod_p = self._mask(e_t)
        return S1(e_a_masked=e_a_masked, n_a_mod_p=n_a_mod_p,
                  e_t_masked=e_t_masked, n_t_mod_p=n_t_mod_p)

    def step_two(self, m2):
        p = self.p
        # B = T^-2
        e_b = self._mul(m2.e_t_mod_pow, self.m_t * self.m_t % p)
        self.m_b, e_b_masked, n_b_mod_p = self._mask(e_b)
        return S2(e_b_masked=e_b_masked, n_b_mod_p=n_b_mod_p)

    def step_three(self, m3):
        p = self.p
        unmask = pow(self.m_a * self.m_b, p - 2, p)
        # lambda^2 - x_q - x - share, plus a multiple of p
        e_pms = self._add(
            self._mul(m3.e_ab_masked, unmask),
            self.e_neg_x_q,
            self._encrypt((p - self.x) % p),
            self._encrypt((p - self.share) % p),
            self._encrypt(p * self.rng.randrange(p)),
        )
        return S3(e_pms_masked=e_pms)


class SlaveChannel:
    '''An async channel whose far end is a Slave.'''

    def __init__(self, slave):
        self.slave = slave
        self.steps = [slave.step_one, slave.step_two, slave.step_three]
        self.sent = []
        self.reply = None

    async def send(self, message):
        self.sent.append(message)
        self.reply = self.steps.pop(0)(message)

    async def receive(self):
        return self.reply


@pytest.fixture(scope='session')
def keypair():
    return generate_keypair(1024)


@pytest.fixture
def make_slave():
    return Slave


@pytest.fixture
def make_channel():
    return SlaveChannel
