"""
Binding the public operations under caller-chosen names.

    from corogen import bind
    from corogen.config.generatoroption import get_corogen_config

    config = get_corogen_config({'exports.generator_alias': 'fiber',
                                 'exports.yield_alias': 'gimme_more_input'})
    bind(globals(), config)

Generators built through the bound constructor use the 'generator'
options of the same config.
"""

from corogen.config.config import ConfigError
from corogen.config.generatoroption import get_corogen_config
from corogen.generator import make_generator, yield_


def make_exports(config=None):
    "Returns {name: operation} for the constructor and yield_()."
    if config is None:
        config = get_corogen_config()
    generator_alias = config.exports.generator_alias
    yield_alias = config.exports.yield_alias
    if generator_alias == yield_alias:
        raise ConfigError("generator and yield are both bound to %r" % (
            generator_alias,))

    def constructor(body):
        return make_generator(body, config)
    constructor.__name__ = generator_alias
    constructor.__doc__ = make_generator.__doc__

    return {generator_alias: constructor, yield_alias: yield_}


def bind(namespace, config=None):
    """Install the operations into 'namespace' (typically globals()).
Returns what was installed."""
    exports = make_exports(config)
    namespace.update(exports)
    return exports
