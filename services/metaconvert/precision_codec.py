# services/metaconvert/precision_codec.py
import logging
from typing import Any, List, Optional, Union

import numpy as np

from core.enums import Precision

logger = logging.getLogger(__name__)

# Raw tensor data is little-endian, as written by the inference elements
_U8 = np.dtype(np.uint8)
_FP32 = np.dtype('<f4')


def encode(precision: Optional[Union[Precision, int]], raw: Any) -> List[Optional[Union[int, float]]]:
    """
    Decode a raw tensor buffer into a list of JSON numbers.

    U8 data becomes ints in [0, 255]; every other precision is decoded as
    32-bit floats. An empty list means "no data" to the caller.
    """
    if raw is None:
        return []

    dtype = _U8 if precision == Precision.U8 else _FP32
    if precision is not None and precision not in (Precision.U8, Precision.FP32):
        logger.debug(f"🔢 Precision {precision!r} decoded as FP32")

    array = _to_array(raw, dtype)
    if array.size == 0:
        return []

    if dtype is _FP32 and not np.isfinite(array).all():
        # NaN/Infinity have no JSON form, written as null
        return [value if np.isfinite(value) else None for value in array.tolist()]
    return array.tolist()


def _to_array(raw: Any, dtype: np.dtype) -> np.ndarray:
    if isinstance(raw, (bytes, bytearray, memoryview)):
        buffer = memoryview(raw).cast('B')
        # A trailing partial element is ignored
        usable = len(buffer) - len(buffer) % dtype.itemsize
        return np.frombuffer(buffer[:usable], dtype=dtype)
    return np.asarray(raw, dtype=dtype).ravel()
