"""
Inversion of control: the generator believes it is the one asking for
input, while the loop at the bottom is actually the one reading it.

    python demo/counter.py [--yield-alias=NAME] [--trace]
"""

import sys

from corogen import bind
from corogen.config.config import to_optparse
from corogen.config.generatoroption import get_corogen_config


def make_processor(config):
    ns = bind({}, config)
    gimme_more_input = ns[config.exports.yield_alias]
    generator = ns[config.exports.generator_alias]

    def processor():
        i = 0
        while True:
            i += gimme_more_input(i)
    return generator(processor)


def count_jump(current_count):
    print("Count: %d" % (current_count,))
    line = input("Add to that: ")
    return int(line.strip() or 0)


def main(argv):
    config = get_corogen_config({'exports.yield_alias': 'gimme_more_input'})
    to_optparse(config).parse_args(argv)
    processor = make_processor(config)
    count = processor()
    try:
        while True:
            count = processor(count_jump(count))
    except (EOFError, KeyboardInterrupt):
        print()


if __name__ == '__main__':
    main(sys.argv[1:])
