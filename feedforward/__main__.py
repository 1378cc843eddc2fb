"""
__main__.py
~~~~~~~~~~~

Build a small random network and print it.

Usage:
    python -m feedforward
"""

import logging

from feedforward.config import configure_logging
from feedforward.network import Network

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging()
    network = Network(3, 1, 4, 6)
    logger.debug(f"Built network {network.sizes}")
    print(network)


if __name__ == '__main__':
    main()
