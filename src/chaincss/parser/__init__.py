from chaincss.parser.errors import ParseError
from chaincss.parser.transformer import parse_expression, parse_script

__all__ = ["ParseError", "parse_expression", "parse_script"]
