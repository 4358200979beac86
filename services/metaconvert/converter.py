# services/metaconvert/converter.py
import json
import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from core.models import VideoFrame, VideoInfo, Segment, FrameDocument
from shared.decorators.error_handling import handle_conversion_errors
from shared.decorators.timing import time_execution
from . import document_assembler
from .document_assembler import ConvertOptions
from .frame_context import FrameContext
from .sinks import MessageSink, FrameMessageSink

if TYPE_CHECKING:
    from app.settings import ConverterSettings


class MetaConverter:
    """
    Converts the analytics metadata of a frame into a JSON message.

    Holds configuration only; every convert() call works on its own frame,
    so one converter can serve frames from several threads.
    """

    def __init__(
        self,
        options: ConvertOptions = ConvertOptions(),
        sink: Optional[MessageSink] = None,
        info: Optional[VideoInfo] = None,
        source: Optional[str] = None,
        tags: Optional[str] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.options = options
        self.sink = sink or FrameMessageSink()
        self.info = info
        self.source = source
        self.tags = tags
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: 'ConverterSettings', sink: Optional[MessageSink] = None,
                      info: Optional[VideoInfo] = None, **kwargs) -> 'MetaConverter':
        """Create a converter from ConverterSettings"""
        return cls(
            options=settings.to_options(),
            sink=sink,
            info=info,
            source=settings.source,
            tags=settings.tags,
            **kwargs
        )

    def build_document(self, frame: VideoFrame, segment: Optional[Segment] = None) -> Optional[FrameDocument]:
        """Assemble the document of a frame, None if there is nothing to post"""
        frame_context = FrameContext.from_frame(
            frame,
            segment=segment,
            info=self.info,
            source=self.source,
            tags=self.tags
        )
        return document_assembler.assemble(
            frame_context,
            frame.regions,
            frame.tensors,
            self.options
        )

    def serialize(self, document: FrameDocument) -> str:
        """Canonical string form: insertion-ordered keys, compact unless indented"""
        return dump_json(document.to_dict(), self.options.json_indent)

    @handle_conversion_errors(default_return=False)
    @time_execution
    def convert(self, frame: VideoFrame, segment: Optional[Segment] = None) -> bool:
        """
        Convert one frame and hand the message to the sink.

        Returns:
            False if the conversion failed, True otherwise (including frames
            with nothing to post)
        """
        document = self.build_document(frame, segment)
        if document is None:
            return True

        message = self.serialize(document)
        self.sink.publish(frame, message)
        self.logger.info(f"📤 JSON message: {message}")
        return True


def dump_json(payload: Dict[str, Any], indent: int = -1) -> str:
    if indent >= 0:
        return json.dumps(payload, indent=indent, ensure_ascii=False, allow_nan=False)
    return json.dumps(payload, separators=(',', ':'), ensure_ascii=False, allow_nan=False)
