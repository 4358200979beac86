# services/metaconvert/frame_context.py
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from core.models import VideoFrame, VideoInfo, Segment, FrameHeader, ABSENT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameContext:
    """Frame-level values the document is anchored to"""
    info: Optional[VideoInfo] = None
    source: Optional[str] = None
    timestamp: Optional[int] = None
    tags: Optional[str] = None

    @classmethod
    def from_frame(
        cls,
        frame: VideoFrame,
        segment: Optional[Segment] = None,
        info: Optional[VideoInfo] = None,
        source: Optional[str] = None,
        tags: Optional[str] = None
    ) -> 'FrameContext':
        """Build the context of a frame, with its timestamp relative to the segment"""
        segment = segment or Segment()
        stream_time = segment.to_stream_time(frame.pts)

        timestamp = None
        if stream_time is not None and stream_time >= segment.time:
            timestamp = stream_time - segment.time

        return cls(info=info, source=source, timestamp=timestamp, tags=tags)


def extract_header(context: FrameContext) -> FrameHeader:
    header = FrameHeader()

    if context.info is not None:
        header.resolution = context.info.to_dict()
    if context.source is not None:
        header.source = context.source
    if context.timestamp is not None:
        header.timestamp = context.timestamp

    tags = _parse_tags(context.tags)
    if tags is not ABSENT:
        header.tags = tags

    return header


def extract(context: FrameContext) -> Dict[str, Any]:
    """Frame-level document fields: resolution, source, timestamp, tags"""
    return extract_header(context).to_dict()


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant {name}")


def _parse_tags(raw_tags: Optional[str]) -> Any:
    if raw_tags is None:
        return ABSENT
    try:
        return json.loads(raw_tags, parse_constant=_reject_constant)
    except ValueError:
        logger.debug(f"🏷️ Dropping tags, not valid JSON: {raw_tags!r}")
        return ABSENT
