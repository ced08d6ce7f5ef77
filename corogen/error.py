"""Errors raised by the context layer and the generator protocol.

They are usage errors: nothing here is retried or recovered from, the
exception goes straight back to whoever made the offending call.
"""


class GeneratorError(Exception):
    "Base class of everything corogen raises on misuse."


class ContextError(GeneratorError):
    "Usage error of the context layer (bad source, cross-thread switch...)."


class ResumedFinishedContext(ContextError):
    "A transfer targeted a context whose body already ran to completion."

    def __init__(self, message="resumed a finished generator"):
        ContextError.__init__(self, message)


class YieldOutsideGenerator(GeneratorError):
    """yield_() was called while no generator is running in this thread,
or from a context that is not the generator currently being invoked."""


class GeneratorRunning(GeneratorError):
    "A generator was invoked from inside its own body."


class GeneratorExhausted(GeneratorError):
    """The generator completed or died with an exception and cannot be
resumed any more.  'value' holds what the body returned, for the call
during which it returned; it is None afterwards."""

    def __init__(self, message="generator exhausted", value=None):
        GeneratorError.__init__(self, message)
        self.value = value
