'''
**axfrscope.axfr**
-------------

The zone-transfer enumeration pipeline: a `Dispatcher` feeding a pool of
`TransferWorker` tasks that classify transferred records into hostnames.
See: `axfrscope.axfr._worker` and `axfrscope.axfr._classifier` for more details.
'''
from axfrscope.axfr._classifier import (
    AddressResolver,
    Candidate,
    candidate_for,
    classify,
)
from axfrscope.axfr._dispatcher import Dispatcher, read_lines
from axfrscope.axfr._output import HostnameWriter
from axfrscope.axfr._worker import TransferWorker, WorkerStats, ZoneBackend

__all__ = [
    'AddressResolver',
    'Candidate',
    'candidate_for',
    'classify',
    'Dispatcher',
    'read_lines',
    'HostnameWriter',
    'TransferWorker',
    'WorkerStats',
    'ZoneBackend',
]
