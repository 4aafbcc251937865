from .authorize_operation import AuthorizeOperation
from .format_output import FormatOutput
from .parse_operation import OperationParseError, ParseOperation
from .write_output import WriteOutput

__all__ = [
    "AuthorizeOperation",
    "FormatOutput",
    "OperationParseError",
    "ParseOperation",
    "WriteOutput",
]
