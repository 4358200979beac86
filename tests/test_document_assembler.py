"""Tests for document assembly and empty-result suppression."""

from __future__ import annotations

from core.models import MetaRecord, RegionOfInterest, Tensor, VideoInfo
from services.metaconvert.document_assembler import ConvertOptions, assemble
from services.metaconvert.frame_context import FrameContext

CONTEXT = FrameContext(info=VideoInfo(width=640, height=480), source="cam1", timestamp=1000)


def test_end_to_end_document(person_region) -> None:
    document = assemble(CONTEXT, [person_region], [])
    assert document is not None
    assert document.to_dict() == {
        "resolution": {"width": 640, "height": 480},
        "source": "cam1",
        "timestamp": 1000,
        "objects": [
            {
                "x": 10,
                "y": 20,
                "w": 30,
                "h": 40,
                "roi_type": "person",
                "detection": {
                    "bounding_box": {"x_min": 0.1, "x_max": 0.5, "y_min": 0.2, "y_max": 0.6},
                    "confidence": 0.9,
                    "label_id": 2,
                    "label": "person",
                },
            }
        ],
    }


def test_no_regions_suppresses_document() -> None:
    context = FrameContext(info=VideoInfo(width=640, height=480), source="cam1")
    assert assemble(context, [], []) is None


def test_empty_results_keep_frame_fields_only() -> None:
    context = FrameContext(info=VideoInfo(width=640, height=480), source="cam1")
    document = assemble(context, [], [], ConvertOptions(emit_empty_results=True))
    assert document is not None
    assert document.to_dict() == {"resolution": {"width": 640, "height": 480}, "source": "cam1"}


def test_empty_frame_context_never_posts(person_region) -> None:
    assert assemble(FrameContext(), [person_region], []) is None
    assert assemble(FrameContext(), [], [], ConvertOptions(emit_empty_results=True)) is None


def test_frame_tensors_only_when_tensor_data_enabled() -> None:
    frame_tensors = [Tensor(MetaRecord(name="scene", fields={"label": "indoor", "data_buffer": [1.0]}))]

    assert assemble(CONTEXT, [], frame_tensors) is None

    document = assemble(CONTEXT, [], frame_tensors, ConvertOptions(include_tensor_data=True))
    assert document is not None
    result = document.to_dict()
    assert "objects" not in result
    assert result["tensors"] == [{"name": "scene", "label": "indoor", "data": [1.0]}]


def test_objects_precede_frame_tensors(person_region) -> None:
    frame_tensors = [Tensor(MetaRecord(name="scene"))]
    document = assemble(CONTEXT, [person_region], frame_tensors, ConvertOptions(include_tensor_data=True))
    result = document.to_dict()
    assert list(result) == ["resolution", "source", "timestamp", "objects", "tensors"]
    assert result["objects"][0]["tensors"] == [{"name": "detection", "confidence": 0.9, "label_id": 2}]


def test_assembly_is_repeatable(person_region) -> None:
    regions = [person_region, RegionOfInterest(x=5, y=5, w=5, h=5, object_id=3)]
    first = assemble(CONTEXT, regions, []).to_dict()
    second = assemble(CONTEXT, regions, []).to_dict()
    assert first == second
    assert list(first) == list(second)
    assert [list(obj) for obj in first["objects"]] == [list(obj) for obj in second["objects"]]
