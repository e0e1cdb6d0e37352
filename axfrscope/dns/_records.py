import dataclasses as dc


@dc.dataclass(slots=True, frozen=True)
class ARecord:
    name: str
    address: str


@dc.dataclass(slots=True, frozen=True)
class AAAARecord:
    name: str
    address: str


@dc.dataclass(slots=True, frozen=True)
class PTRRecord:
    name: str
    target: str


@dc.dataclass(slots=True, frozen=True)
class NSRecord:
    name: str
    target: str


@dc.dataclass(slots=True, frozen=True)
class CNAMERecord:
    name: str
    target: str


@dc.dataclass(slots=True, frozen=True)
class SRVRecord:
    name: str
    target: str
    priority: int = 0
    weight: int = 0
    port: int = 0


@dc.dataclass(slots=True, frozen=True)
class UnclassifiedRecord:
    '''
    Any record kind the classifier has no rule for, e.g. SOA, MX or TXT.
    '''
    name: str
    rtype: str


AnswerRecord = (
    ARecord |
    AAAARecord |
    PTRRecord |
    NSRecord |
    CNAMERecord |
    SRVRecord |
    UnclassifiedRecord
)

TransferBatch = list[AnswerRecord]
