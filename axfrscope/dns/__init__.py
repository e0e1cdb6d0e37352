'''
**axfrscope.dns**
-------------


The resolver and zone-transfer clients, the answer record types they
produce and the errors they raise.
See: `axfrscope.dns._core` and `axfrscope.dns._records` for more details.
'''
from axfrscope.dns._core import (
    DNSBackend,
    to_fqdn,
)
from axfrscope.dns._errors import (
    AxfrError,
    NoAddressRecordError,
    NoAnswerError,
    QueryError,
    TransferError,
)
from axfrscope.dns._models import ResolverConfig
from axfrscope.dns._parser import parse_rdata, parse_rrsets
from axfrscope.dns._records import (
    AnswerRecord,
    TransferBatch,
    ARecord,
    AAAARecord,
    PTRRecord,
    NSRecord,
    CNAMERecord,
    SRVRecord,
    UnclassifiedRecord,
)

__all__ = [
    "DNSBackend",
    "to_fqdn",
    "AxfrError",
    "NoAddressRecordError",
    "NoAnswerError",
    "QueryError",
    "TransferError",
    "ResolverConfig",
    "parse_rdata",
    "parse_rrsets",
    "AnswerRecord",
    "TransferBatch",
    "ARecord",
    "AAAARecord",
    "PTRRecord",
    "NSRecord",
    "CNAMERecord",
    "SRVRecord",
    "UnclassifiedRecord",
]
