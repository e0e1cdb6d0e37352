'''
**axfrscope**

Enumerates the hostnames of DNS zones by attempting zone transfers (AXFR)
against every authoritative name server of each domain it is given.
'''
from axfrscope.axfr import Dispatcher, HostnameWriter, WorkerStats
from axfrscope.dns import DNSBackend, ResolverConfig

__all__ = [
    'Dispatcher',
    'HostnameWriter',
    'WorkerStats',
    'DNSBackend',
    'ResolverConfig',
]
