"""
Execution contexts and the transfer of control between them.

A context is a greenlet: it owns its own C and Python stack and the
point at which it last suspended.  transfer() is a strict rendezvous
between two named contexts; there is no scheduler choosing among
ready contexts, the target is always explicit.

When a context's body returns or raises, control goes to the context's
resume point (the greenlet 'parent'), which the protocol layer repoints
with set_resume() on every invocation.
"""

import greenlet

from corogen.error import ContextError, ResumedFinishedContext
from corogen.tool.ansi_print import AnsiLogger

log = AnsiLogger("corogen")


class Context(greenlet.greenlet):
    """A context created by create_context().  The main context of a
thread, or a greenlet created by other code, is a plain greenlet; the
functions of this module accept both."""

    # arguments of the invocation in flight, read by bodies that restart
    params = ()

    def __init__(self, body, parent=None, name=None, trace=False):
        greenlet.greenlet.__init__(self, body)
        if parent is not None:
            set_resume(self, parent)
        if name is None:
            name = getattr(body, '__name__', '?')
        self.name = name
        self.trace = trace

    def __repr__(self):
        if self.dead:
            status = 'finished'
        elif self:
            status = 'started'
        else:
            status = 'new'
        return '<Context %s %s>' % (self.name, status)


def current_context():
    "Returns the running context (i.e. the one which called this function)."
    return greenlet.getcurrent()


def create_context(body, parent=None, name=None, trace=False):
    """Allocate a context that runs 'body(value)' on the first transfer
into it, 'value' being what that transfer carries.  Nothing runs yet.
'parent' defaults to the running context."""
    return Context(body, parent, name=name, trace=trace)


def is_started(context):
    return bool(context) or context.dead


def is_finished(context):
    return context.dead


def set_resume(context, resume):
    "Make 'context' hand control to 'resume' when its body ends."
    try:
        context.parent = resume
    except ValueError as e:
        # cyclic parent chain or a context from another thread
        raise ContextError(str(e)) from e


def _describe(context):
    return getattr(context, 'name', None) or 'main'


def transfer(source, target, value=None):
    """Suspend 'source', which must be the running context, and resume
'target' where it last suspended, or at the start of its body.

Returns when a later transfer names 'source' again, or when a context
whose resume point is 'source' finishes; the result is the value that
transfer carried (or the finished body's return value).
"""
    if source is not greenlet.getcurrent():
        raise ContextError("transfer() from %r, which is not the running "
                           "context" % (source,))
    del source
    return switch_to(target, value)


def switch_to(target, value=None):
    """transfer() from the running context.  No frame of the running
context keeps a reference to that context while it is suspended here,
so an unreachable suspended context is still reclaimed."""
    if target.dead:
        raise ResumedFinishedContext()
    if (getattr(greenlet.getcurrent(), 'trace', False) or
            getattr(target, 'trace', False)):
        log.trace("transfer %s -> %s" % (_describe(greenlet.getcurrent()),
                                         _describe(target)))
    try:
        return target.switch(value)
    except greenlet.error as e:
        raise ContextError(str(e)) from e
