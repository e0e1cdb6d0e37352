import asyncio
import logging

import dns.asyncquery
import dns.exception
import dns.inet
import dns.message
import dns.query
import dns.rdatatype as rtype

from axfrscope.dns import _parser as record_parser
from axfrscope.dns._errors import (
    AxfrError,
    NoAddressRecordError,
    NoAnswerError,
    QueryError,
    TransferError,
)
from axfrscope.dns._models import ResolverConfig
from axfrscope.dns._records import AnswerRecord, ARecord, NSRecord, TransferBatch

logger = logging.getLogger(__name__)

_EXCHANGE_ERRORS = (
    dns.exception.DNSException,
    EOFError,
    OSError,
    ValueError,
)


def to_fqdn(domain: str) -> str:
    '''
    Return the fully-qualified form of a domain name by appending the
    root label when it is missing.

    Parameters
    ----------
    domain : str

    Returns
    -------
    str
    '''
    return domain if domain.endswith('.') else f'{domain}.'


class DNSBackend:
    '''
    The resolver and zone-transfer client used by the enumeration pipeline.
    Every query, including the forward lookups used to confirm aliases,
    goes to the single configured name server.
    '''

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self._config = config or ResolverConfig()

    async def exchange(
        self,
        qname: str,
        rdtype: rtype.RdataType,
    ) -> list[AnswerRecord]:
        '''
        Send a single query to the configured name server and parse the
        answer section of the response.

        Parameters
        ----------
        qname : str
        rdtype : rtype.RdataType

        Returns
        -------
        list[AnswerRecord]
            _The answer records in the order the server returned them_

        Raises
        ------
        QueryError
            If the query could not be built or the exchange failed.
        '''
        queried = rtype.to_text(rdtype)
        try:
            query = dns.message.make_query(to_fqdn(qname), rdtype)
            response, _ = await dns.asyncquery.udp_with_fallback(
                query,
                self._config.nameserver,
                timeout=self._config.timeout,
                port=self._config.port,
            )
        except _EXCHANGE_ERRORS as exc:
            raise QueryError(f'{queried} query for {qname} failed: {exc}') from exc

        return record_parser.parse_rrsets(response.answer)

    async def lookup_ns(self, domain: str) -> list[str]:
        '''
        Look up the name servers authoritative for a domain.

        Parameters
        ----------
        domain : str

        Returns
        -------
        list[str]
            _The name server names, in the order the resolver returned them_

        Raises
        ------
        NoAnswerError
            If the answer section was empty.
        QueryError
            If the exchange failed.
        '''
        records = await self.exchange(domain, rtype.NS)
        if not records:
            raise NoAnswerError(f'no answer for NS query of {domain}')

        return [rec.target for rec in records if isinstance(rec, NSRecord)]

    async def resolve_a(self, name: str) -> list[str]:
        '''
        Resolve a name to its IPv4 addresses.

        Parameters
        ----------
        name : str

        Returns
        -------
        list[str]
            _The addresses sorted ascending by their string value_

        Raises
        ------
        NoAnswerError
            If the answer section was empty.
        NoAddressRecordError
            If the answer section held no A records, e.g. only a CNAME.
        QueryError
            If the exchange failed.
        '''
        records = await self.exchange(name, rtype.A)
        if not records:
            raise NoAnswerError(f'no answer for A query of {name}')

        addresses = [rec.address for rec in records if isinstance(rec, ARecord)]
        if not addresses:
            raise NoAddressRecordError(f'no A record returned for {name}')

        return sorted(addresses)

    async def _server_address(self, server: str) -> str:
        if dns.inet.is_address(server):
            return server

        addresses = await self.resolve_a(server)
        return addresses[0]

    def _xfr(self, domain: str, server: str, address: str) -> list[TransferBatch]:
        batches: list[TransferBatch] = []
        try:
            for message in dns.query.xfr(
                address,
                domain,
                port=self._config.port,
                timeout=self._config.timeout,
                lifetime=self._config.lifetime,
                relativize=False,
            ):
                batches.append(record_parser.parse_rrsets(message.answer))
        except _EXCHANGE_ERRORS as exc:
            raise TransferError(
                f'zone transfer of {domain} from {server} failed: {exc}',
                batches=batches,
            ) from exc

        return batches

    async def transfer(self, domain: str, server: str) -> list[TransferBatch]:
        '''
        Attempt an AXFR of a domain from one of its name servers.

        The blocking transfer runs in a worker thread so the event loop
        keeps serving the other workers.

        Parameters
        ----------
        domain : str
        server : str
            A name server name or an address literal.

        Returns
        -------
        list[TransferBatch]
            _One batch of answer records per response message, in order_

        Raises
        ------
        TransferError
            If the server cannot be resolved or the transfer fails. Batches
            received before the failure are kept on the exception.
        '''
        try:
            address = await self._server_address(server)
        except AxfrError as exc:
            raise TransferError(f'cannot resolve name server {server}: {exc}') from exc

        logger.debug(f'Requesting AXFR of {domain} from {server} ({address})')
        return await asyncio.to_thread(self._xfr, to_fqdn(domain), server, address)

    @property
    def config(self) -> ResolverConfig:
        return self._config
