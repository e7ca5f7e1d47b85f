from __future__ import annotations

import logging

TRACE = 15
EVENT = 18
logging.addLevelName(TRACE, "TRACE")
logging.addLevelName(EVENT, "EVENT")


def _trace(self, message, *args, **kwargs):
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)


logging.Logger.trace = _trace
