# services/metaconvert/tensor_serializer.py
import logging
from typing import Any, Dict, Iterable, List

from core.models import Tensor, json_number
from . import precision_codec

logger = logging.getLogger(__name__)


def serialize(tensor: Tensor) -> Dict[str, Any]:
    """
    Convert one tensor descriptor into a JSON object.

    Only present, non-empty values are written. Detection tensors carry their
    label in the region's "detection" object, so it is not repeated here.
    """
    result: Dict[str, Any] = {}

    precision = tensor.precision
    if precision is not None:
        result['precision'] = precision.name
    layout = tensor.layout
    if layout is not None:
        result['layout'] = layout.name

    for key, value in (
        ('name', tensor.name),
        ('model_name', tensor.model_name),
        ('layer_name', tensor.layer_name),
        ('format', tensor.format),
    ):
        if value:
            result[key] = value

    if not tensor.is_detection():
        label = tensor.label
        if label:
            result['label'] = label

    confidence = tensor.confidence
    if confidence is not None:
        result['confidence'] = json_number(confidence)
    label_id = tensor.label_id
    if label_id is not None:
        result['label_id'] = label_id

    try:
        data = precision_codec.encode(precision, tensor.data)
    except (TypeError, ValueError, OverflowError) as e:
        logger.debug(f"⏭️ Leaving out data of tensor '{tensor.name}': {e}")
        data = []
    if data:
        result['data'] = data

    return result


def serialize_all(tensors: Iterable[Tensor]) -> List[Dict[str, Any]]:
    """Serialize frame-level tensors in order"""
    result = [serialize(tensor) for tensor in tensors]
    logger.debug(f"🧮 Serialized {len(result)} tensors")
    return result
