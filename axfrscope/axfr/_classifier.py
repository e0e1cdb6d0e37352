'''
Decides which transferred records yield a hostname.

Address and pointer records carry their own resolution and are accepted
as they are. NS, CNAME and SRV records point elsewhere, so they are only
accepted once the name they point at resolves to an IPv4 address.
'''
from __future__ import annotations

import functools
from typing import NamedTuple, Protocol

from axfrscope.dns import (
    AAAARecord,
    AnswerRecord,
    ARecord,
    AxfrError,
    CNAMERecord,
    NSRecord,
    PTRRecord,
    SRVRecord,
)


class AddressResolver(Protocol):
    async def resolve_a(self, name: str) -> list[str]: ...


class Candidate(NamedTuple):
    hostname: str
    confirm: str | None = None


@functools.singledispatch
def candidate_for(record: AnswerRecord) -> Candidate | None:
    '''
    Map a record onto the hostname it yields and the name that has to
    resolve before that hostname is trusted.

    Parameters
    ----------
    record : AnswerRecord

    Returns
    -------
    Candidate | None
        _None for record kinds that never yield a hostname_
    '''
    return None


@candidate_for.register
def _(record: ARecord) -> Candidate:
    return Candidate(record.name)


@candidate_for.register
def _(record: AAAARecord) -> Candidate:
    return Candidate(record.name)


@candidate_for.register
def _(record: PTRRecord) -> Candidate:
    return Candidate(record.target)


@candidate_for.register
def _(record: NSRecord) -> Candidate:
    return Candidate(record.target, confirm=record.target)


@candidate_for.register
def _(record: CNAMERecord) -> Candidate:
    # the alias is emitted, the target is what has to resolve
    return Candidate(record.name, confirm=record.target)


@candidate_for.register
def _(record: SRVRecord) -> Candidate:
    return Candidate(record.target, confirm=record.target)


async def classify(record: AnswerRecord, resolver: AddressResolver) -> str | None:
    '''
    Classify a record and run the forward lookup it needs, if any.

    Lookup failures and empty results reject the record without logging,
    they are the expected outcome for dangling names in a zone.

    Parameters
    ----------
    record : AnswerRecord
    resolver : AddressResolver

    Returns
    -------
    str | None
        _The accepted hostname, or None if the record is rejected_
    '''
    candidate = candidate_for(record)
    if candidate is None:
        return None

    if candidate.confirm is None:
        return candidate.hostname

    try:
        addresses = await resolver.resolve_a(candidate.confirm)
    except AxfrError:
        return None

    return candidate.hostname if addresses else None
