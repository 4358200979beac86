"""Shared builders for converter tests."""

from __future__ import annotations

import pytest

from core.models import MetaRecord, RegionOfInterest


def detection_record(**overrides) -> MetaRecord:
    fields = {
        "x_min": 0.1,
        "x_max": 0.5,
        "y_min": 0.2,
        "y_max": 0.6,
        "confidence": 0.9,
        "label_id": 2,
    }
    fields.update(overrides)
    return MetaRecord(name="detection", fields=fields)


def attribute_record(name: str = "color", **fields) -> MetaRecord:
    return MetaRecord(name=name, fields=fields)


@pytest.fixture
def person_region() -> RegionOfInterest:
    return RegionOfInterest(
        x=10, y=20, w=30, h=40, object_id=0, roi_type="person", params=[detection_record()]
    )
