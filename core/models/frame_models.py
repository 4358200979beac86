# core/models/frame_models.py
import numbers
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Union

from core.enums import Precision, Layout
from core.exceptions import FieldExtractionError


@dataclass
class VideoInfo:
    """Negotiated video resolution"""
    width: int
    height: int

    def to_dict(self) -> Dict[str, int]:
        return {
            'width': self.width,
            'height': self.height
        }


@dataclass
class Segment:
    """Time segment of the stream, all positions in nanoseconds"""
    start: int = 0
    stop: Optional[int] = None
    time: int = 0
    applied_rate: float = 1.0

    def to_stream_time(self, position: Optional[int]) -> Optional[int]:
        """
        Map a buffer position (PTS) to stream time.

        Returns None when the position is undefined or falls outside the segment.
        """
        if position is None or position < self.start:
            return None
        if self.stop is not None and position > self.stop:
            return None

        offset = position - self.start
        abs_applied_rate = abs(self.applied_rate)
        if abs_applied_rate != 1.0:
            offset = int(offset * abs_applied_rate)

        if self.applied_rate > 0:
            return self.time + offset

        # Reverse playback: stream time counts down from segment.time
        if self.time >= offset:
            return self.time - offset
        return None


@dataclass
class MetaRecord:
    """Named key-value structure attached to a region or a frame"""
    name: str
    fields: Dict[str, Any] = field(default_factory=dict)

    def has_field(self, key: str) -> bool:
        return key in self.fields

    def get_double(self, key: str) -> float:
        value = self.fields.get(key)
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise FieldExtractionError(self.name, key, 'double')
        return float(value)

    def get_int(self, key: str) -> int:
        value = self.fields.get(key)
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise FieldExtractionError(self.name, key, 'int')
        return int(value)

    def get_string(self, key: str) -> str:
        value = self.fields.get(key)
        if not isinstance(value, str):
            raise FieldExtractionError(self.name, key, 'string')
        return value


class Tensor:
    """Read-only tensor view over a MetaRecord"""

    DATA_FIELD = 'data_buffer'

    def __init__(self, record: MetaRecord):
        self._record = record

    @property
    def name(self) -> str:
        return self._record.name

    @property
    def precision(self) -> Optional[Precision]:
        value = self._optional_int('precision')
        return Precision.from_value(value) if value is not None else None

    @property
    def layout(self) -> Optional[Layout]:
        value = self._optional_int('layout')
        return Layout.from_value(value) if value is not None else None

    @property
    def model_name(self) -> str:
        return self._string('model_name')

    @property
    def layer_name(self) -> str:
        return self._string('layer_name')

    @property
    def format(self) -> str:
        return self._string('format')

    @property
    def label(self) -> str:
        return self._string('label')

    @property
    def confidence(self) -> Optional[float]:
        try:
            return self._record.get_double('confidence')
        except FieldExtractionError:
            return None

    @property
    def label_id(self) -> Optional[int]:
        return self._optional_int('label_id')

    @property
    def data(self) -> Union[bytes, List[Any], None]:
        return self._record.fields.get(self.DATA_FIELD)

    def is_detection(self) -> bool:
        return self.name == 'detection'

    def _string(self, key: str) -> str:
        try:
            return self._record.get_string(key)
        except FieldExtractionError:
            return ""

    def _optional_int(self, key: str) -> Optional[int]:
        try:
            return self._record.get_int(key)
        except FieldExtractionError:
            return None


@dataclass
class RegionOfInterest:
    """Rectangular region of a frame with its attached records"""
    x: int
    y: int
    w: int
    h: int
    object_id: int = 0
    roi_type: Optional[str] = None
    params: List[MetaRecord] = field(default_factory=list)


@dataclass
class VideoFrame:
    """One video frame with its analytics metadata"""
    pts: Optional[int] = None
    regions: List[RegionOfInterest] = field(default_factory=list)
    tensors: List[Tensor] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)

    def add_message(self, message: str) -> None:
        self.messages.append(message)
