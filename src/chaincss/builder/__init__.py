from chaincss.builder.builder import PROPERTY_SETTERS, StyleBuilder
from chaincss.builder.compiler import compile, run, to_kebab

__all__ = ["PROPERTY_SETTERS", "StyleBuilder", "compile", "run", "to_kebab"]
