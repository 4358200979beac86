"""Tests for tensor descriptor serialization."""

from __future__ import annotations

from core.enums import Layout, Precision
from core.models import MetaRecord, Tensor
from services.metaconvert import tensor_serializer


def _tensor(name: str = "classification", **fields) -> Tensor:
    return Tensor(MetaRecord(name=name, fields=fields))


def test_full_descriptor_keeps_field_order() -> None:
    tensor = _tensor(
        precision=int(Precision.U8),
        layout=int(Layout.NCHW),
        model_name="resnet",
        layer_name="prob",
        format="label",
        label="cat",
        confidence=0.75,
        label_id=3,
        data_buffer=bytes([1, 2, 3]),
    )
    result = tensor_serializer.serialize(tensor)
    assert list(result) == [
        "precision",
        "layout",
        "name",
        "model_name",
        "layer_name",
        "format",
        "label",
        "confidence",
        "label_id",
        "data",
    ]
    assert result["precision"] == "U8"
    assert result["layout"] == "NCHW"
    assert result["name"] == "classification"
    assert result["data"] == [1, 2, 3]


def test_empty_and_missing_values_are_omitted() -> None:
    result = tensor_serializer.serialize(_tensor(model_name="", label="", data_buffer=b""))
    assert result == {"name": "classification"}


def test_detection_tensor_has_no_label() -> None:
    result = tensor_serializer.serialize(_tensor("detection", label="person", confidence=0.5))
    assert "label" not in result
    assert result["confidence"] == 0.5


def test_wrongly_typed_fields_are_left_out() -> None:
    result = tensor_serializer.serialize(
        _tensor(confidence="high", label_id=1.5, precision="U8", data_buffer=["x"])
    )
    assert result == {"name": "classification"}


def test_unknown_precision_value_is_unspecified() -> None:
    result = tensor_serializer.serialize(_tensor(precision=999, data_buffer=[0.5]))
    assert result["precision"] == "UNSPECIFIED"
    assert result["data"] == [0.5]


def test_serialize_all_keeps_order() -> None:
    tensors = [_tensor("a"), _tensor("b")]
    assert tensor_serializer.serialize_all(tensors) == [{"name": "a"}, {"name": "b"}]


def test_nan_confidence_is_kept_as_null() -> None:
    result = tensor_serializer.serialize(_tensor(confidence=float("nan"), label_id=4))
    assert result == {"name": "classification", "confidence": None, "label_id": 4}
