import pytest

from corogen.config.config import ConfigError, to_optparse
from corogen.config.generatoroption import get_corogen_config


def test_defaults():
    conf = get_corogen_config()
    assert conf.exports.generator_alias == 'generator'
    assert conf.exports.yield_alias == 'yield_'
    assert not conf.generator.restart
    assert not conf.generator.trace


def test_fresh_config_each_time():
    conf = get_corogen_config()
    conf.generator.restart = True
    assert not get_corogen_config().generator.restart


def test_overrides():
    conf = get_corogen_config({'exports.yield_alias': 'gimme_more_input',
                               'generator.trace': True})
    assert conf.exports.yield_alias == 'gimme_more_input'
    assert conf.generator.trace
    with pytest.raises(ConfigError):
        get_corogen_config({'exports.yield_alias': 'yield'})
    with pytest.raises(ConfigError):
        get_corogen_config({'generator.unknown': True})


def test_cmdline():
    conf = get_corogen_config()
    parser = to_optparse(conf)
    (options, args) = parser.parse_args(args=['--generator-alias=fiber',
                                              '--restart', 'rest'])
    assert conf.exports.generator_alias == 'fiber'
    assert conf.generator.restart
    assert not conf.generator.trace
    assert args == ['rest']
    with pytest.raises(SystemExit):
        parser.parse_args(args=['--yield-alias=for'])
