import sys
from typing import TextIO


class HostnameWriter:
    '''
    The output sink shared by every worker, one hostname per line.
    '''
    __slots__ = (
        '_stream',
        'count',
    )

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self.count = 0

    def write(self, hostname: str) -> None:
        # a single write per line keeps lines whole between workers
        self._stream.write(f'{hostname.rstrip(".")}\n')
        self._stream.flush()
        self.count += 1
