import keyword
import optparse


class ConfigError(ValueError):
    pass


class Config(object):

    def __init__(self, descr, **overrides):
        self._descr = descr
        self._build(overrides)

    def _build(self, overrides):
        for child in self._descr._children:
            if isinstance(child, Option):
                self.__dict__[child._name] = child.default
            elif isinstance(child, OptionDescription):
                self.__dict__[child._name] = Config(child)
        for name, value in overrides.items():
            subconfig, name = self._get_by_path(name)
            setattr(subconfig, name, value)

    def __setattr__(self, name, value):
        if name.startswith('_'):
            self.__dict__[name] = value
            return
        self.setoption(name, value)

    def setoption(self, name, value):
        if name not in self.__dict__:
            raise ConfigError('unknown option %s' % (name,))
        child = getattr(self._descr, name)
        if isinstance(child, OptionDescription):
            raise ConfigError('%s is an option group, not an option' % (name,))
        child.setoption(self, value)

    def _get_by_path(self, path):
        """returns tuple (config, name)"""
        path = path.split('.')
        for step in path[:-1]:
            self = getattr(self, step)
        return self, path[-1]

    def getpaths(self, currpath=None):
        """returns a list of all option paths in self, recursively

            currpath should not be provided (helps with recursion)
        """
        if currpath is None:
            currpath = []
        paths = []
        for option in self._descr._children:
            attr = option._name
            value = getattr(self, attr)
            if isinstance(value, Config):
                currpath.append(attr)
                paths += value.getpaths(currpath=currpath)
                currpath.pop()
            else:
                paths.append('.'.join(currpath + [attr]))
        return paths


DEFAULT_OPTION_NAME = object()


class Option(object):
    def __init__(self, name, doc, default, cmdline=DEFAULT_OPTION_NAME):
        self._name = name
        self.doc = doc
        self.default = default
        self.cmdline = cmdline

    def validate(self, value):
        raise NotImplementedError('abstract base class')

    def setoption(self, config, value):
        if not self.validate(value):
            raise ConfigError('invalid value %r for option %s' % (
                value, self._name))
        config.__dict__[self._name] = value

    def add_optparse_option(self, argnames, parser, config):
        raise NotImplementedError('abstract base class')


class BoolOption(Option):
    def __init__(self, name, doc, default=True, cmdline=DEFAULT_OPTION_NAME):
        super(BoolOption, self).__init__(name, doc, default, cmdline)

    def validate(self, value):
        return isinstance(value, bool)

    def add_optparse_option(self, argnames, parser, config):
        def _callback(option, opt_str, value, parser, *args, **kwargs):
            config.setoption(self._name, True)
        parser.add_option(help=self.doc,
                          action='callback',
                          callback=_callback, *argnames)


class StrOption(Option):
    def __init__(self, name, doc, default=None, validator=None,
                 cmdline=DEFAULT_OPTION_NAME):
        super(StrOption, self).__init__(name, doc, default, cmdline)
        self._validator = validator

    def validate(self, value):
        if not isinstance(value, str):
            return False
        if self._validator is not None:
            return self._validator(value)
        return True

    def add_optparse_option(self, argnames, parser, config):
        def _callback(option, opt_str, value, parser, *args, **kwargs):
            try:
                config.setoption(self._name, value.strip())
            except ConfigError as e:
                raise optparse.OptionValueError(e.args[0])
        parser.add_option(help=self.doc,
                          action='callback', type='string',
                          callback=_callback, *argnames)


def is_identifier(value):
    "A name that can be bound in a module namespace."
    return value.isidentifier() and not keyword.iskeyword(value)


class OptionDescription(object):
    def __init__(self, name, doc, children):
        self._name = name
        self.doc = doc
        self._children = children
        for child in children:
            setattr(self, child._name, child)


def to_optparse(config, useoptions=None, parser=None):
    """Command line switches for the options at 'useoptions' (all by
default); 'group.*' stands for every option of a group."""
    grps = {}
    def get_group(name, doc):
        steps = name.split('.')
        if len(steps) < 2:
            return parser
        grpname = steps[-2]
        grp = grps.get(grpname, None)
        if grp is None:
            grp = grps[grpname] = parser.add_option_group(doc)
        return grp

    if parser is None:
        parser = optparse.OptionParser()
    if useoptions is None:
        useoptions = config.getpaths()
    for path in useoptions:
        if path.endswith(".*"):
            path = path[:-2]
            subconf, name = config._get_by_path(path)
            children = [
                path + "." + child._name
                for child in getattr(subconf, name)._descr._children]
            useoptions.extend(children)
        else:
            subconf, name = config._get_by_path(path)
            option = getattr(subconf._descr, name)
            if option.cmdline is DEFAULT_OPTION_NAME:
                chunks = ('--%s' % (path.replace('.', '-').replace('_', '-'),),)
            else:
                chunks = option.cmdline.split(' ')
            grp = get_group(path, subconf._descr.doc)
            option.add_optparse_option(chunks, grp, subconf)
    return parser
