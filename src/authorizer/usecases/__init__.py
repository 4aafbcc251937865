from .authorizer import Authorizer
from .messages import OperationResult, OutputLine

__all__ = ["Authorizer", "OperationResult", "OutputLine"]
