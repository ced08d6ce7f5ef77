"""
Generators on top of execution contexts.

    @generator
    def even():
        x = 0
        while True:
            x += 2
            yield_(x)

    even()  ->  2
    even()  ->  4

The handle returned by make_generator() is called like a function.  Each
call resumes the body where it last suspended; the value passed to
yield_() becomes the result of the call, and the arguments of the next
call become the result of yield_().  The arguments of the very first
call are the arguments of the body itself.

Every invocation pushes a (generator context, resume context) record
on the suspension stack of the thread and yield_() pops it again, so a
generator that drives other generators always gets control back from
them, not the code that happened to create them.
"""

import threading
from collections import namedtuple

from corogen.config.generatoroption import get_corogen_config
from corogen.context import (create_context, current_context, transfer,
                             switch_to, set_resume, is_finished, log)
from corogen.error import (YieldOutsideGenerator, GeneratorExhausted,
                           GeneratorRunning)


class GeneratorState(object):
    PRIMED    = 'primed'       # created, body not entered yet
    RUNNING   = 'running'
    SUSPENDED = 'suspended'    # parked in yield_()
    COMPLETED = 'completed'    # body returned
    ERRORED   = 'errored'      # body raised

    finished = (COMPLETED, ERRORED)


SuspensionRecord = namedtuple('SuspensionRecord', 'context resume')


class SuspensionStack(object):

    def __init__(self):
        self.records = []

    def __len__(self):
        return len(self.records)

    def push(self, record):
        self.records.append(record)

    def top(self):
        return self.records[-1]

    def pop(self):
        return self.records.pop()

    def discard(self, record):
        "Remove 'record' if it is still on the stack.  Identity, not equality."
        for i in range(len(self.records) - 1, -1, -1):
            if self.records[i] is record:
                del self.records[i]
                return True
        return False


class _local(threading.local):
    def __init__(self):
        self.suspensions = SuspensionStack()

_tls = _local()


def getsuspensions():
    "The suspension stack of the calling thread."
    return _tls.suspensions


def _unpack(args):
    if not args:
        return None
    if len(args) == 1:
        return args[0]
    return args


def _suspend(value):
    suspensions = getsuspensions()
    if not suspensions:
        raise YieldOutsideGenerator("yield_() outside of a generator")
    record = suspensions.top()
    if record.context is not current_context():
        raise YieldOutsideGenerator(
            "yield_() from %r, but the generator being invoked is %r" % (
                current_context(), record.context))
    suspensions.pop()
    resume = record.resume
    # this frame stays suspended: hold no reference to our own context
    del record
    return switch_to(resume, value)


def _entry(body, restart, trace, name):
    # the suspended context refers to this closure; it must not refer
    # to the Handle, or neither could ever be collected
    def run(_):
        args = _suspend(None)
        while True:
            result = body(*args)
            if not restart:
                return result
            if trace:
                log.trace("%s: body returned, restarting" % (name,))
            args = current_context().params
    return run


def yield_(value=None):
    """Suspend the running generator, making 'value' the result of the
handle call that resumed it.  Returns the arguments of the next call:
None for no arguments, the argument itself for one, a tuple for more."""
    return _unpack(_suspend(value))


def yield_many(value=None):
    "Like yield_(), but always returns the tuple of arguments."
    return _suspend(value)


class Handle(object):
    "A primed generator.  Calling it resumes the body."

    def __init__(self, body, config):
        self._trace = config.generator.trace
        self.__name__ = getattr(body, '__name__', 'generator')
        self.__doc__ = getattr(body, '__doc__', None)
        self._state = None
        creator = current_context()
        self._context = create_context(_entry(body, config.generator.restart,
                                              self._trace, self.__name__),
                                       creator,
                                       name=self.__name__, trace=self._trace)
        suspensions = getsuspensions()
        record = SuspensionRecord(self._context, creator)
        suspensions.push(record)
        try:
            transfer(creator, self._context)
        except BaseException:
            suspensions.discard(record)
            raise
        self._setstate(GeneratorState.PRIMED)

    def _setstate(self, state):
        if self._trace:
            log.trace("%s: %s -> %s" % (self.__name__, self._state, state))
        self._state = state

    @property
    def state(self):
        return self._state

    @property
    def dead(self):
        return self._state in GeneratorState.finished

    def __call__(self, *args):
        if self._state == GeneratorState.RUNNING:
            raise GeneratorRunning("generator %s already executing" % (
                self.__name__,))
        if self._state in GeneratorState.finished:
            raise GeneratorExhausted("generator %s is %s" % (
                self.__name__, self._state))
        current = current_context()
        set_resume(self._context, current)
        suspensions = getsuspensions()
        record = SuspensionRecord(self._context, current)
        self._context.params = args
        suspensions.push(record)
        self._setstate(GeneratorState.RUNNING)
        try:
            value = transfer(current, self._context, args)
        except BaseException:
            suspensions.discard(record)
            self._setstate(GeneratorState.ERRORED)
            raise
        if is_finished(self._context):
            suspensions.discard(record)
            self._setstate(GeneratorState.COMPLETED)
            raise GeneratorExhausted("generator %s returned" % (
                self.__name__,), value=value)
        self._setstate(GeneratorState.SUSPENDED)
        return value

    def __iter__(self):
        return self

    def __next__(self):
        if self.dead:
            raise StopIteration
        try:
            return self()
        except GeneratorExhausted:
            if self._state != GeneratorState.COMPLETED:
                # raised by some other generator inside the body
                raise
            raise StopIteration from None

    def __repr__(self):
        return '<generator %s %s>' % (self.__name__, self._state)


def make_generator(body, config=None):
    """Create and prime a generator running 'body'.  None of 'body' runs
until the returned handle is first called.  Usable as a decorator."""
    if config is None:
        config = get_corogen_config()
    return Handle(body, config)

generator = make_generator
