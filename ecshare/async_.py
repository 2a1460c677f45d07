# Copyright (c) 2024 Neil Booth
#
# All rights reserved.
#
# See the file "LICENCE" for information about the copyright
# and warranty status of this software.

'''An asyncio interface to a master session.

Key generation and the per-round arithmetic are CPU-bound, so they are run in a
worker thread; the event loop stays free to service the transport and other
sessions.
'''

__all__ = ('AsyncMasterSession', 'run_in_thread')

import asyncio
import logging
from functools import partial

from .errors import SequenceError
from .master import MasterSession


logger = logging.getLogger(__name__)


async def run_in_thread(func, *args, **kwargs):
    '''Run a function in a separate thread, and await its completion.'''
    return await asyncio.get_running_loop().run_in_executor(None, partial(func, *args, **kwargs))


class AsyncMasterSession:
    '''An asynchronous wrapper around a MasterSession object.'''

    def __init__(self, session):
        if not isinstance(session, MasterSession):
            raise TypeError('session must be a MasterSession')
        self._session = session
        # Set while a call is running in the worker thread
        self._busy = False

    @classmethod
    async def create(cls, point, **kwargs):
        '''Create a session; keyword arguments are passed to MasterSession.'''
        return cls(await run_in_thread(MasterSession, point, **kwargs))

    @property
    def session(self):
        return self._session

    @property
    def state(self):
        return self._session.state

    @property
    def closed(self):
        return self._session.closed

    async def _schedule(self, func, *args):
        if self._busy:
            raise SequenceError('another round is in progress')
        self._busy = True
        try:
            return await run_in_thread(func, *args)
        finally:
            self._busy = False

    async def next(self, message=None):
        return await self._schedule(self._session.next, message)

    async def secret(self):
        return await self._schedule(self._session.secret)

    async def run(self, channel):
        '''Run the protocol from round one over channel and return the master's share.

        channel must provide coroutines send(message) and receive().
        '''
        session = self._session
        message = None
        while True:
            state = session.state
            outbound = await self.next(message)
            logger.debug('%r: completed round %d', session, state + 1)
            if outbound is None:
                break
            await channel.send(outbound)
            message = await channel.receive()
        return await self.secret()
