'''
Shared fixtures: a canned in-memory backend standing in for the resolver
and transfer clients, and a writer collecting output lines.
'''
from __future__ import annotations

import io

import pytest

from axfrscope.axfr import HostnameWriter
from axfrscope.dns import (
    NoAnswerError,
    TransferBatch,
    TransferError,
    to_fqdn,
)


class FakeBackend:
    '''
    Answers from tables keyed by fully-qualified names. A table value that
    is an exception instance is raised instead of returned.
    '''

    def __init__(
        self,
        *,
        ns: dict[str, list[str] | Exception] | None = None,
        addresses: dict[str, list[str] | Exception] | None = None,
        transfers: dict[tuple[str, str], list[TransferBatch] | Exception] | None = None,
    ) -> None:
        self.ns = {to_fqdn(k): v for k, v in (ns or {}).items()}
        self.addresses = {to_fqdn(k): v for k, v in (addresses or {}).items()}
        self.transfers = {
            (to_fqdn(domain), to_fqdn(server)): v
            for (domain, server), v in (transfers or {}).items()
        }
        self.calls: list[tuple[str, str]] = []

    @staticmethod
    def _answer(value):
        if isinstance(value, Exception):
            raise value
        return value

    async def lookup_ns(self, domain: str) -> list[str]:
        self.calls.append(('NS', domain))
        return self._answer(self.ns.get(to_fqdn(domain), NoAnswerError(f'no NS for {domain}')))

    async def resolve_a(self, name: str) -> list[str]:
        self.calls.append(('A', name))
        return self._answer(self.addresses.get(to_fqdn(name), NoAnswerError(f'no A for {name}')))

    async def transfer(self, domain: str, server: str) -> list[TransferBatch]:
        self.calls.append(('AXFR', f'{domain}@{server}'))
        key = (to_fqdn(domain), to_fqdn(server))
        return self._answer(self.transfers.get(key, TransferError(f'refused by {server}')))


class CollectingWriter(HostnameWriter):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(io.StringIO())

    @property
    def lines(self) -> list[str]:
        return self._stream.getvalue().splitlines()


@pytest.fixture
def writer() -> CollectingWriter:
    return CollectingWriter()


@pytest.fixture
def example_backend() -> FakeBackend:
    '''
    example.com with two name servers: ns1 refuses the transfer, ns2
    serves a zone mixing every record kind.
    '''
    from axfrscope.dns import (
        AAAARecord,
        ARecord,
        CNAMERecord,
        NSRecord,
        PTRRecord,
        SRVRecord,
        UnclassifiedRecord,
    )

    zone = [
        UnclassifiedRecord('example.com.', 'SOA'),
        NSRecord('example.com.', 'ns1.example.com.'),
        NSRecord('example.com.', 'ns2.example.com.'),
        ARecord('host.example.com.', '1.2.3.4'),
        AAAARecord('host6.example.com.', '2001:db8::1'),
        CNAMERecord('alias.example.com.', 'real.example.com.'),
        CNAMERecord('dangling.example.com.', 'gone.example.com.'),
        SRVRecord('_sip._tcp.example.com.', 'svc.example.com.', 10, 5, 5060),
        PTRRecord('4.3.2.1.in-addr.arpa.', 'host.example.com.'),
        UnclassifiedRecord('example.com.', 'MX'),
        UnclassifiedRecord('example.com.', 'SOA'),
    ]
    return FakeBackend(
        ns={'example.com': ['ns1.example.com.', 'ns2.example.com.']},
        addresses={
            'ns2.example.com': ['192.0.2.2'],
            'real.example.com': ['5.6.7.8'],
            'svc.example.com': [],
        },
        transfers={
            ('example.com', 'ns1.example.com'): TransferError('REFUSED'),
            ('example.com', 'ns2.example.com'): [zone],
        },
    )
