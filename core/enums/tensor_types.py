"""
Tensor enumerations for the frame metadata converter.
"""

from enum import IntEnum


class Precision(IntEnum):
    """Numeric precision of raw tensor data"""
    ANY = 0
    FP32 = 10
    FP16 = 11
    BF16 = 12
    FP64 = 13
    Q78 = 20
    I16 = 30
    U8 = 40
    BOOL = 41
    I8 = 50
    U16 = 60
    I32 = 70
    BIN = 71
    I64 = 72
    U64 = 73
    U32 = 74
    CUSTOM = 80
    UNSPECIFIED = 255

    @classmethod
    def from_value(cls, value: int) -> "Precision":
        """Map a raw precision value, unknown values become UNSPECIFIED"""
        try:
            return cls(value)
        except ValueError:
            return cls.UNSPECIFIED


class Layout(IntEnum):
    """Memory layout of raw tensor data"""
    ANY = 0
    NCHW = 1
    NHWC = 2
    NC = 193

    @classmethod
    def from_value(cls, value: int) -> "Layout":
        try:
            return cls(value)
        except ValueError:
            return cls.ANY
