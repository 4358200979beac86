"""
Frame metadata converter package

Turns the analytics metadata of a video frame into one JSON document:
- precision_codec: raw tensor buffers to JSON numbers
- tensor_serializer: tensor descriptors to JSON objects
- record_classifier: region records to detection/attribute outputs
- region_serializer: regions of interest to the "objects" array
- frame_context: resolution, source, timestamp and tags
- document_assembler: merging and empty-result suppression
- converter: per-frame entry point, hands messages to a sink
"""

from .document_assembler import ConvertOptions, assemble
from .frame_context import FrameContext
from .sinks import MessageSink, FrameMessageSink, StreamMessageSink
from .converter import MetaConverter

__version__ = "1.0.0"

__all__ = [
    "MetaConverter",
    "ConvertOptions",
    "FrameContext",
    "MessageSink",
    "FrameMessageSink",
    "StreamMessageSink",
    "assemble"
]
