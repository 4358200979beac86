# core/exceptions.py
from typing import Optional

class MetaConvertException(Exception):
    """Base exception for the frame metadata converter"""
    pass

class FieldExtractionError(MetaConvertException, KeyError):
    """A record field is missing or has the wrong type"""
    def __init__(self, record_name: str, field_name: str, expected_type: Optional[str] = None):
        message = f"Field '{field_name}' of record '{record_name}'"
        if expected_type:
            message += f" is missing or not of type {expected_type}"
        else:
            message += " is missing"
        super().__init__(message)
        self.record_name = record_name
        self.field_name = field_name
        self.expected_type = expected_type

    def __str__(self) -> str:
        # KeyError quotes its message otherwise
        return self.args[0]

class InvalidFrameError(MetaConvertException):
    """Frame metadata could not be turned into a VideoFrame"""
    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.line_number = line_number
