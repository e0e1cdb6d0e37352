'''
The error taxonomy shared by the resolver and transfer clients.

Every failure raised by `DNSBackend` derives from `AxfrError` so callers
can absorb a whole class of failures at the scope they care about.
'''
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from axfrscope.dns._records import AnswerRecord


class AxfrError(Exception):
    ...


class QueryError(AxfrError):
    '''
    The request/response exchange with the resolver failed.
    '''


class NoAnswerError(AxfrError):
    '''
    The resolver answered with an empty answer section.
    '''


class NoAddressRecordError(AxfrError):
    '''
    The answer section held records, but none of them were A records.
    '''


class TransferError(AxfrError):
    '''
    A zone transfer from one name server failed.

    Attributes
    ----------
    batches : list[list[AnswerRecord]]
        The batches received before the transfer broke off, in order.
    '''

    def __init__(
        self,
        message: str,
        *,
        batches: list[list[AnswerRecord]] | None = None,
    ) -> None:
        super().__init__(message)
        self.batches: list[list[AnswerRecord]] = batches or []
