# core/models/document_models.py
import math
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Union


class _Absent:
    """Marker for a document field that is not present at all"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'ABSENT'


# Parsed tags may legitimately be JSON null, so None cannot mean "absent" there
ABSENT = _Absent()


def json_number(value: Optional[float]) -> Optional[float]:
    """NaN and infinities have no JSON form, they are written as null"""
    if value is None or math.isfinite(value):
        return value
    return None


@dataclass(frozen=True)
class BoundingBox:
    """Normalized bounding box of a detection record"""
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {
            'x_min': json_number(self.x_min),
            'x_max': json_number(self.x_max),
            'y_min': json_number(self.y_min),
            'y_max': json_number(self.y_max)
        }


@dataclass(frozen=True)
class DetectionOutput:
    """A record classified as a detection"""
    bounding_box: BoundingBox
    confidence: float
    label_id: int
    label: Optional[str] = None

    key = 'detection'

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'bounding_box': self.bounding_box.to_dict(),
            'confidence': json_number(self.confidence),
            'label_id': self.label_id
        }
        if self.label is not None:
            result['label'] = self.label
        return result


@dataclass(frozen=True)
class AttributeOutput:
    """A record classified as a named attribute (label produced by a model)"""
    key: str
    label: str
    model_name: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'label': self.label,
            'model': {'name': self.model_name}
        }


@dataclass(frozen=True)
class Skip:
    """A record that contributes nothing to the region"""
    reason: str = ""


RecordOutput = Union[DetectionOutput, AttributeOutput, Skip]


@dataclass
class FrameHeader:
    """Frame-level fields of the document"""
    resolution: Optional[Dict[str, int]] = None
    source: Optional[str] = None
    timestamp: Optional[int] = None
    tags: Any = ABSENT

    def is_empty(self) -> bool:
        return (
            self.resolution is None
            and self.source is None
            and self.timestamp is None
            and self.tags is ABSENT
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.resolution is not None:
            result['resolution'] = dict(self.resolution)
        if self.source is not None:
            result['source'] = self.source
        if self.timestamp is not None:
            result['timestamp'] = self.timestamp
        if self.tags is not ABSENT:
            result['tags'] = self.tags
        return result


@dataclass
class FrameDocument:
    """Complete per-frame document, assembled once and then serialized"""
    header: FrameHeader
    objects: List[Dict[str, Any]] = field(default_factory=list)
    tensors: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        result = self.header.to_dict()
        if self.objects:
            # Region fields win over frame fields on key collision
            result.update({'objects': self.objects})
        if self.tensors:
            result['tensors'] = self.tensors
        return result
