"""
Even numbers from a generator that keeps its own counter.

    python demo/even.py [--trace] [--restart]
"""

import sys

from corogen import generator, yield_
from corogen.config.config import to_optparse
from corogen.config.generatoroption import get_corogen_config


def even():
    x = 0
    while True:
        x += 1
        x += 1
        yield_(x)


def main(argv):
    config = get_corogen_config()
    parser = to_optparse(config, ['generator.*'])
    parser.parse_args(argv)
    g = generator(even, config)
    # This will print even numbers from 2..20
    for i in range(10):
        print(g())


if __name__ == '__main__':
    main(sys.argv[1:])
