import asyncio
import logging
from collections.abc import AsyncIterable, AsyncIterator, Iterable
from typing import TextIO

from axfrscope.axfr._output import HostnameWriter
from axfrscope.axfr._worker import TransferWorker, WorkerStats, ZoneBackend
from axfrscope.dns import DNSBackend, ResolverConfig

logger = logging.getLogger(__name__)


async def read_lines(stream: TextIO) -> AsyncIterator[str]:
    '''
    Read a blocking text stream such as stdin line by line without
    stalling the event loop.

    Parameters
    ----------
    stream : TextIO

    Yields
    ------
    str
    '''
    while line := await asyncio.to_thread(stream.readline):
        yield line


async def _iter_domains(lines: Iterable[str] | AsyncIterable[str]) -> AsyncIterator[str]:
    if isinstance(lines, AsyncIterable):
        async for line in lines:
            if domain := line.strip():
                yield domain
        return

    for line in lines:
        if domain := line.strip():
            yield domain


class Dispatcher:
    '''
    Feeds domains to a fixed pool of `TransferWorker` tasks sharing one
    queue and waits for all of them to drain it.
    '''

    def __init__(
        self,
        backend: ZoneBackend | None = None,
        *,
        config: ResolverConfig | None = None,
        writer: HostnameWriter | None = None,
    ) -> None:
        self._config = config or ResolverConfig()
        self._backend = backend or DNSBackend(self._config)
        self._writer = writer or HostnameWriter()

    async def run(self, lines: Iterable[str] | AsyncIterable[str]) -> WorkerStats:
        '''
        Enumerate every domain read from `lines`.

        Individual lookup failures never abort the batch; this returns once
        the input is exhausted and every queued domain has been processed.

        Parameters
        ----------
        lines : Iterable[str] | AsyncIterable[str]
            One domain per line. Blank lines are skipped.

        Returns
        -------
        WorkerStats
            _The counters of all workers added together_
        '''
        queue: asyncio.Queue[str | None] = asyncio.Queue(maxsize=self._config.queue_size)
        workers = [
            TransferWorker(self._backend, queue, self._writer, name=f'worker-{i}')
            for i in range(self._config.concurrency)
        ]
        tasks = [asyncio.create_task(worker.run(), name=worker.name) for worker in workers]
        logger.debug(f'Started {len(tasks)} workers against {self._config.nameserver}')

        queued = 0
        try:
            async for domain in _iter_domains(lines):
                await queue.put(domain)
                queued += 1
        finally:
            for _ in tasks:
                await queue.put(None)
            results = await asyncio.gather(*tasks)

        stats = WorkerStats.combine(results)
        logger.info(
            f'Processed {queued} domains, {stats.transfers}/{stats.servers} transfers '
            f'succeeded, {stats.hostnames} hostnames written'
        )
        return stats
