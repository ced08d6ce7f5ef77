"""
Generators built on greenlets: functions that keep their locals and
their position across calls, suspend with yield_() from anywhere in
their call stack, and receive new arguments when resumed.
"""

from corogen.error import (GeneratorError, ContextError,
                           ResumedFinishedContext, YieldOutsideGenerator,
                           GeneratorRunning, GeneratorExhausted)
from corogen.generator import (make_generator, generator, yield_, yield_many,
                               Handle, GeneratorState)
from corogen.exports import make_exports, bind

__version__ = '0.3.0'

__all__ = '''make_generator generator yield_ yield_many Handle GeneratorState
             make_exports bind GeneratorError ContextError
             ResumedFinishedContext YieldOutsideGenerator GeneratorRunning
             GeneratorExhausted'''.split()
