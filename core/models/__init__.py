# Core Models Package
"""
Core data models for the frame metadata converter.
Contains frame metadata inputs, document outputs, and JSON input schemas.
"""

from .frame_models import (
    VideoInfo,
    Segment,
    MetaRecord,
    Tensor,
    RegionOfInterest,
    VideoFrame
)
from .document_models import (
    ABSENT,
    json_number,
    BoundingBox,
    DetectionOutput,
    AttributeOutput,
    Skip,
    RecordOutput,
    FrameHeader,
    FrameDocument
)
from .input_models import RecordInput, RegionInput, FrameInput

__all__ = [
    'VideoInfo',
    'Segment',
    'MetaRecord',
    'Tensor',
    'RegionOfInterest',
    'VideoFrame',
    'ABSENT',
    'json_number',
    'BoundingBox',
    'DetectionOutput',
    'AttributeOutput',
    'Skip',
    'RecordOutput',
    'FrameHeader',
    'FrameDocument',
    'RecordInput',
    'RegionInput',
    'FrameInput'
]
