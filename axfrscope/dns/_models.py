import dataclasses as dc


@dc.dataclass(slots=True)
class ResolverConfig:
    '''
    Options for DNS lookups, zone transfers and the worker pool.
    '''
    nameserver: str = '8.8.8.8'
    port: int = 53
    timeout: float = 5.0
    lifetime: float = 30.0
    concurrency: int = 8
    queue_size: int = 256

    def __post_init__(self) -> None:
        if self.concurrency < 1:
            raise ValueError(f'concurrency must be at least 1, got {self.concurrency}')
        if self.queue_size < 0:
            raise ValueError(f'queue_size cannot be negative, got {self.queue_size}')
        if self.timeout <= 0 or self.lifetime <= 0:
            raise ValueError('timeout and lifetime must be positive')
        if not 0 < self.port < 65536:
            raise ValueError(f'port out of range: {self.port}')
        if not self.nameserver:
            raise ValueError('nameserver cannot be empty')
