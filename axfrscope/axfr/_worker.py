import asyncio
import dataclasses as dc
import logging
from collections.abc import Iterable
from typing import Protocol, Self

from axfrscope.axfr._classifier import classify
from axfrscope.axfr._output import HostnameWriter
from axfrscope.dns import AxfrError, TransferBatch, TransferError

logger = logging.getLogger(__name__)


class ZoneBackend(Protocol):
    async def lookup_ns(self, domain: str) -> list[str]: ...

    async def resolve_a(self, name: str) -> list[str]: ...

    async def transfer(self, domain: str, server: str) -> list[TransferBatch]: ...


@dc.dataclass(slots=True)
class WorkerStats:
    domains: int = 0
    servers: int = 0
    transfers: int = 0
    hostnames: int = 0

    @classmethod
    def combine(cls, stats: Iterable[Self]) -> Self:
        total = cls()
        for item in stats:
            total.domains += item.domains
            total.servers += item.servers
            total.transfers += item.transfers
            total.hostnames += item.hostnames
        return total


class TransferWorker:
    '''
    Takes domains off the shared queue and enumerates each one by
    transferring its zone from every authoritative name server.

    A `None` on the queue tells the worker to stop.
    '''

    def __init__(
        self,
        backend: ZoneBackend,
        queue: 'asyncio.Queue[str | None]',
        writer: HostnameWriter,
        *,
        name: str = 'worker',
    ) -> None:
        self.name = name
        self.stats = WorkerStats()
        self._backend = backend
        self._queue = queue
        self._writer = writer

    async def run(self) -> WorkerStats:
        while True:
            domain = await self._queue.get()
            try:
                if domain is None:
                    break
                await self.process(domain)
            except Exception:
                logger.exception(f'{self.name}: unexpected error while processing {domain}')
            finally:
                self._queue.task_done()

        logger.debug(f'{self.name} stopped: {self.stats}')
        return self.stats

    async def process(self, domain: str) -> None:
        '''
        Enumerate the hostnames of one domain.

        A failed name server lookup skips the domain and a failed transfer
        skips that server, both with a warning. The remaining servers are
        still tried.

        Parameters
        ----------
        domain : str
        '''
        self.stats.domains += 1
        try:
            servers = await self._backend.lookup_ns(domain)
        except AxfrError as exc:
            logger.warning(f'Error looking up NS records for {domain}: {exc}')
            return

        for server in servers:
            self.stats.servers += 1
            await self._transfer_from(domain, server)

    async def _transfer_from(self, domain: str, server: str) -> None:
        try:
            batches = await self._backend.transfer(domain, server)
        except TransferError as exc:
            logger.warning(f'Error transferring {domain} from {server}: {exc}')
            batches = exc.batches
        else:
            self.stats.transfers += 1

        for batch in batches:
            await self._emit_batch(batch)

    async def _emit_batch(self, batch: TransferBatch) -> None:
        for record in batch:
            hostname = await classify(record, self._backend)
            if hostname is None:
                continue

            self._writer.write(hostname)
            self.stats.hostnames += 1
