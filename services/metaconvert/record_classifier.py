# services/metaconvert/record_classifier.py
import logging
from typing import Optional

from core.exceptions import FieldExtractionError
from core.models import (
    MetaRecord,
    BoundingBox,
    DetectionOutput,
    AttributeOutput,
    Skip,
    RecordOutput
)

logger = logging.getLogger(__name__)

DETECTION_RECORD = 'detection'


def classify(record: MetaRecord, region_type_label: Optional[str] = None) -> RecordOutput:
    """
    Classify a region record as a detection, an attribute, or nothing.

    Args:
        record: Record attached to the region (left untouched)
        region_type_label: Type label of the owning region, used as the
            detection label

    Returns:
        DetectionOutput, AttributeOutput or Skip
    """
    try:
        if record.name == DETECTION_RECORD:
            return _classify_detection(record, region_type_label)
        return _classify_attribute(record)
    except FieldExtractionError as e:
        logger.debug(f"⏭️ Skipping record '{record.name}': {e}")
        return Skip(reason=str(e))


def _classify_detection(record: MetaRecord, region_type_label: Optional[str]) -> DetectionOutput:
    bounding_box = BoundingBox(
        x_min=record.get_double('x_min'),
        x_max=record.get_double('x_max'),
        y_min=record.get_double('y_min'),
        y_max=record.get_double('y_max')
    )
    return DetectionOutput(
        bounding_box=bounding_box,
        confidence=record.get_double('confidence'),
        label_id=record.get_int('label_id'),
        label=region_type_label
    )


def _classify_attribute(record: MetaRecord) -> AttributeOutput:
    label = record.get_string('label')
    model_name = record.get_string('model_name')

    # attribute_name is optional; a present string is used as is, even empty
    attribute_name = record.name
    if record.has_field('attribute_name') and isinstance(record.fields['attribute_name'], str):
        attribute_name = record.fields['attribute_name']

    return AttributeOutput(key=attribute_name, label=label, model_name=model_name)
