from chaincss.errors import SyntaxValidationError
from chaincss.validation.validator import diagnose, validate, validate_or_raise

__all__ = ["SyntaxValidationError", "diagnose", "validate", "validate_or_raise"]
