import asyncio
import io
from collections import Counter

import pytest

from axfrscope.axfr import Dispatcher, read_lines
from axfrscope.dns import ARecord, QueryError, ResolverConfig
from tests.conftest import FakeBackend


def _zone_backend(domains: list[str]) -> FakeBackend:
    return FakeBackend(
        ns={domain: [f'ns.{domain}.'] for domain in domains},
        transfers={
            (domain, f'ns.{domain}'): [[
                ARecord(f'a.{domain}.', '192.0.2.1'),
                ARecord(f'b.{domain}.', '192.0.2.2'),
            ]]
            for domain in domains
        },
    )


@pytest.mark.asyncio
async def test_empty_input_produces_no_output(writer):
    dispatcher = Dispatcher(FakeBackend(), config=ResolverConfig(concurrency=4), writer=writer)

    stats = await dispatcher.run([])

    assert writer.lines == []
    assert stats.domains == 0


@pytest.mark.asyncio
async def test_every_domain_is_processed_once(writer):
    domains = [f'zone{i}.example' for i in range(20)]
    backend = _zone_backend(domains)
    dispatcher = Dispatcher(backend, config=ResolverConfig(concurrency=3), writer=writer)

    stats = await dispatcher.run(f'{domain}\n' for domain in domains)

    expected = Counter(
        host for domain in domains for host in (f'a.{domain}', f'b.{domain}')
    )
    assert Counter(writer.lines) == expected
    assert stats.domains == 20
    assert stats.hostnames == 40
    assert sorted(d for kind, d in backend.calls if kind == 'NS') == sorted(domains)


@pytest.mark.asyncio
async def test_bad_domain_does_not_abort_batch(writer):
    backend = _zone_backend(['good.example'])
    backend.ns['bad.example.'] = QueryError('SERVFAIL')
    dispatcher = Dispatcher(backend, config=ResolverConfig(concurrency=1), writer=writer)

    await dispatcher.run(['bad.example', 'good.example'])

    assert writer.lines == ['a.good.example', 'b.good.example']


@pytest.mark.asyncio
async def test_blank_lines_and_whitespace_are_ignored(writer):
    backend = _zone_backend(['example.org'])
    dispatcher = Dispatcher(backend, config=ResolverConfig(concurrency=2), writer=writer)

    stats = await dispatcher.run(['\n', '  example.org  \n', '   '])

    assert stats.domains == 1
    assert backend.calls[0] == ('NS', 'example.org')


@pytest.mark.asyncio
async def test_async_input_and_small_queue(writer):
    domains = [f'z{i}.example' for i in range(10)]

    async def lines():
        for domain in domains:
            await asyncio.sleep(0)
            yield domain

    backend = _zone_backend(domains)
    config = ResolverConfig(concurrency=2, queue_size=1)
    stats = await Dispatcher(backend, config=config, writer=writer).run(lines())

    assert stats.domains == 10
    assert len(writer.lines) == 20


@pytest.mark.asyncio
async def test_read_lines_from_stream():
    stream = io.StringIO('example.com\nexample.org\n')

    assert [line async for line in read_lines(stream)] == ['example.com\n', 'example.org\n']


@pytest.mark.asyncio
async def test_dispatcher_over_stream(writer):
    backend = _zone_backend(['example.com'])
    dispatcher = Dispatcher(backend, writer=writer)

    await dispatcher.run(read_lines(io.StringIO('example.com\n')))

    assert writer.lines == ['a.example.com', 'b.example.com']
