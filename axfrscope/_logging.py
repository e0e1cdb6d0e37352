'''
Logging setup for the command line. Log lines go to stderr so stdout
carries nothing but hostnames.
'''
from __future__ import annotations

import logging
import logging.config


def configure_logging(level: str = 'WARNING') -> None:
    '''
    Configure root logging with a single stderr handler.

    Parameters
    ----------
    level : str
        Logging level name (e.g. "DEBUG", "WARNING").
    '''
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'console': {
                    'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
                    'datefmt': '%Y/%m/%d %H:%M:%S',
                },
            },
            'handlers': {
                'stderr': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'console',
                    'stream': 'ext://sys.stderr',
                    'level': level,
                },
            },
            'root': {
                'handlers': ['stderr'],
                'level': level,
            },
        }
    )
