from __future__ import annotations

import functools
from collections.abc import Iterable

import dns.name
import dns.rdata
import dns.rdatatype
import dns.rrset
from dns.rdtypes.ANY.CNAME import CNAME as R_CNAME
from dns.rdtypes.ANY.NS import NS as R_NS
from dns.rdtypes.ANY.PTR import PTR as R_PTR
from dns.rdtypes.IN.A import A as R_A
from dns.rdtypes.IN.AAAA import AAAA as R_AAAA
from dns.rdtypes.IN.SRV import SRV as R_SRV

from axfrscope.dns._records import (
    AAAARecord,
    AnswerRecord,
    ARecord,
    CNAMERecord,
    NSRecord,
    PTRRecord,
    SRVRecord,
    UnclassifiedRecord,
)


def _name(n: dns.name.Name) -> str:
    return n.to_text()


@functools.singledispatch
def parse_rdata(r: dns.rdata.Rdata, owner: dns.name.Name) -> AnswerRecord:
    '''
    A parser for the rdata of an answer record, using singledispatch to map
    each dnspython rdata class onto its record variant.

    Parameters
    ----------
    r : dns.rdata.Rdata
        The rdata to convert.
    owner : dns.name.Name
        The owner name of the rrset the rdata belongs to.

    Returns
    -------
    AnswerRecord
        _`UnclassifiedRecord` for any kind without a registered parser_
    '''
    return UnclassifiedRecord(
        name=_name(owner),
        rtype=dns.rdatatype.to_text(r.rdtype),
    )


@parse_rdata.register
def _(r: R_A, owner: dns.name.Name) -> ARecord:
    return ARecord(name=_name(owner), address=r.address)


@parse_rdata.register
def _(r: R_AAAA, owner: dns.name.Name) -> AAAARecord:
    return AAAARecord(name=_name(owner), address=r.address)


@parse_rdata.register
def _(r: R_PTR, owner: dns.name.Name) -> PTRRecord:
    return PTRRecord(name=_name(owner), target=_name(r.target))


@parse_rdata.register
def _(r: R_NS, owner: dns.name.Name) -> NSRecord:
    return NSRecord(name=_name(owner), target=_name(r.target))


@parse_rdata.register
def _(r: R_CNAME, owner: dns.name.Name) -> CNAMERecord:
    return CNAMERecord(name=_name(owner), target=_name(r.target))


@parse_rdata.register
def _(r: R_SRV, owner: dns.name.Name) -> SRVRecord:
    return SRVRecord(
        name=_name(owner),
        target=_name(r.target),
        priority=int(r.priority),
        weight=int(r.weight),
        port=int(r.port),
    )


def parse_rrsets(rrsets: Iterable[dns.rrset.RRset]) -> list[AnswerRecord]:
    '''
    Flatten the rrsets of a message section into answer records,
    keeping the order they appear in on the wire.
    '''
    return [
        parse_rdata(rdata, rrset.name)
        for rrset in rrsets
        for rdata in rrset
    ]
