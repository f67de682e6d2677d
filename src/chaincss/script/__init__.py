from chaincss.script.context import BuilderContext
from chaincss.script.executor import compile_document, execute
from chaincss.script.interpreter import Interpreter, ScriptRuntimeError
from chaincss.script.splitter import split

__all__ = [
    "BuilderContext",
    "Interpreter",
    "ScriptRuntimeError",
    "compile_document",
    "execute",
    "split",
]
