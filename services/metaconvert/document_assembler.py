# services/metaconvert/document_assembler.py
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from core.models import RegionOfInterest, Tensor, FrameDocument
from . import frame_context as frame_context_extractor
from . import region_serializer
from . import tensor_serializer
from .frame_context import FrameContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConvertOptions:
    """Per-converter switches"""
    include_tensor_data: bool = False
    emit_empty_results: bool = False
    json_indent: int = -1


def assemble(
    frame_context: FrameContext,
    regions: Iterable[RegionOfInterest],
    frame_tensors: Iterable[Tensor],
    options: ConvertOptions = ConvertOptions()
) -> Optional[FrameDocument]:
    """
    Build the document of one frame.

    Returns None when there is nothing to post: no objects and no frame
    tensors (unless empty results are requested), or no frame-level fields
    to anchor the document to.
    """
    objects = region_serializer.serialize_all(regions, options.include_tensor_data)

    tensors = []
    if options.include_tensor_data:
        tensors = tensor_serializer.serialize_all(frame_tensors)

    if not objects and not tensors and not options.emit_empty_results:
        logger.debug("🔍 No detections found, not posting JSON message")
        return None

    header = frame_context_extractor.extract_header(frame_context)
    if header.is_empty():
        logger.debug("🔍 No frame context, not posting JSON message")
        return None

    return FrameDocument(header=header, objects=objects, tensors=tensors)
