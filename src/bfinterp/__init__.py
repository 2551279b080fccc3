
from .errors import BFError, InvalidInstructionError, PointerRangeError, UnbalancedLoopError
from .interpreter import Interpreter, InterpreterOptions, interpret, strip_code
from .sinks import ConsoleSink, ElementSink, OutputSink, QtWidgetSink
from .api import RunResult, run_file, run_string

__all__ = [
    'Interpreter',
    'InterpreterOptions',
    'interpret',
    'strip_code',
    'BFError',
    'InvalidInstructionError',
    'PointerRangeError',
    'UnbalancedLoopError',
    'OutputSink',
    'ConsoleSink',
    'ElementSink',
    'QtWidgetSink',
    'RunResult',
    'run_string',
    'run_file',
]
