# services/metaconvert/region_serializer.py
import logging
from typing import Any, Dict, Iterable, List

from core.models import RegionOfInterest, Tensor, DetectionOutput, AttributeOutput
from . import record_classifier
from . import tensor_serializer

logger = logging.getLogger(__name__)


def serialize(region: RegionOfInterest, include_tensor_data: bool = False) -> Dict[str, Any]:
    """Convert one region of interest and its records into a JSON object"""
    result: Dict[str, Any] = {}
    tensors: List[Dict[str, Any]] = []

    if include_tensor_data:
        result['tensors'] = tensors

    result['x'] = region.x
    result['y'] = region.y
    result['w'] = region.w
    result['h'] = region.h

    if region.object_id != 0:
        result['id'] = region.object_id
    if region.roi_type is not None:
        result['roi_type'] = region.roi_type

    for record in region.params:
        output = record_classifier.classify(record, region.roi_type)

        # Same key twice: the later record wins
        if isinstance(output, (DetectionOutput, AttributeOutput)):
            result[output.key] = output.to_dict()

        if include_tensor_data:
            tensors.append(tensor_serializer.serialize(Tensor(record)))

    return result


def serialize_all(regions: Iterable[RegionOfInterest], include_tensor_data: bool = False) -> List[Dict[str, Any]]:
    """
    Serialize all regions of a frame, in attachment order.

    Regions that serialize to an empty object are left out.
    """
    objects = []
    for region in regions:
        region_object = serialize(region, include_tensor_data)
        if region_object:
            objects.append(region_object)

    logger.debug(f"📦 Serialized {len(objects)} regions")
    return objects
