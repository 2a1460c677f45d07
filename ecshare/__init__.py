# Copyright (c) 2024 Neil Booth
#
# All rights reserved.
#
# See the file "LICENCE" for information about the copyright
# and warranty status of this software.

from .async_ import *
from .curves import *
from .errors import *
from .homomorphic import *
from .master import *
from .messages import *
from .points import *

ecshare_version_str = '0.1'
ecshare_version = tuple(int(part) for part in ecshare_version_str.split('.'))

__all__ = sum((
    async_.__all__,
    curves.__all__,
    errors.__all__,
    homomorphic.__all__,
    master.__all__,
    messages.__all__,
    points.__all__,
), ())
