from corogen.config.config import *
import pytest


def make_description():
    dummy = BoolOption('dummy', 'dummy', default=False)
    nameoption = StrOption('name', 'Some name', default='gen',
                           validator=is_identifier)
    booloption = BoolOption('bool', 'Test boolean option')
    freeoption = StrOption('free', 'Any string')

    switchgroup = OptionDescription('switch', 'Switching', [dummy,
                                                            freeoption])
    descr = OptionDescription('corogen', 'Test options', [
        switchgroup, booloption, nameoption])
    return descr


def test_base_config():
    descr = make_description()
    config = Config(descr, bool=False)

    assert not config.switch.dummy
    config.switch.dummy = True
    assert config.switch.dummy
    assert config.switch.free is None
    config.switch.free = 'any thing'
    assert config.switch.free == 'any thing'

    assert config.name == 'gen'
    config.name = 'other_name'
    assert config.name == 'other_name'
    assert not config.bool

    with pytest.raises(ConfigError):
        config.switch.foo = 'bar'
    with pytest.raises(ConfigError):
        config.bool = 123
    with pytest.raises(ConfigError):
        config.name = 'class'
    with pytest.raises(ConfigError):
        config.name = None
    with pytest.raises(ConfigError):
        config.switch = 'x'
    assert config.name == 'other_name'


def test_config_error_is_value_error():
    config = Config(make_description())
    with pytest.raises(ValueError):
        config.bool = 'yes'


def test_overrides_by_path():
    descr = make_description()
    config = Config(descr, **{'switch.dummy': True, 'name': 'x'})
    assert config.switch.dummy
    assert config.name == 'x'
    with pytest.raises(ConfigError):
        Config(descr, **{'switch.missing': True})


def test_getpaths():
    config = Config(make_description())
    assert config.getpaths() == ['switch.dummy', 'switch.free', 'bool',
                                 'name']


def test_to_optparse_str_and_bool():
    booloption = BoolOption('bool', 'Boolean option test', default=False,
                            cmdline='--bool -b')
    stroption = StrOption('name', 'Name option test', default='gen',
                          validator=is_identifier)
    descr = OptionDescription('test', 'Test options', [booloption,
                                                       stroption])
    config = Config(descr)

    parser = to_optparse(config)
    (options, args) = parser.parse_args(args=['-b', '--name=fiber'])
    assert config.bool
    assert config.name == 'fiber'

    config = Config(descr)
    parser = to_optparse(config, ['bool'])
    (options, args) = parser.parse_args(args=[])
    assert not config.bool


def test_to_optparse_group():
    config = Config(make_description())
    parser = to_optparse(config, ['switch.*'])
    (options, args) = parser.parse_args(args=['--switch-dummy',
                                              '--switch-free=x y'])
    assert config.switch.dummy
    assert config.switch.free == 'x y'
    assert not parser.has_option('--name')


def test_to_optparse_invalid_value():
    config = Config(make_description())
    parser = to_optparse(config, ['name'])
    with pytest.raises(SystemExit):
        parser.parse_args(args=['--name=2fast'])
    assert config.name == 'gen'


def test_is_identifier():
    assert is_identifier('yield_')
    assert is_identifier('gimme_more_input')
    assert not is_identifier('yield')
    assert not is_identifier('2fast')
    assert not is_identifier('')
