# ================================
# core/models/input_models.py
# ================================
import base64
import binascii
from typing import Optional, Dict, Any, List

from pydantic import BaseModel, Field, validator

from core.enums import Precision, Layout
from .frame_models import MetaRecord, RegionOfInterest, Tensor, VideoFrame


class RecordInput(BaseModel):
    """JSON description of one metadata record"""
    name: str
    fields: Dict[str, Any] = Field(default_factory=dict)

    @validator('name')
    def validate_name(cls, v):
        if not v:
            raise ValueError("Record name must not be empty")
        return v

    def to_record(self) -> MetaRecord:
        fields = dict(self.fields)

        # Enum fields may be given by name ("U8", "NCHW")
        for key, enum_cls in (('precision', Precision), ('layout', Layout)):
            value = fields.get(key)
            if isinstance(value, str):
                try:
                    fields[key] = int(enum_cls[value.upper()])
                except KeyError:
                    raise ValueError(f"Unknown {key} '{value}' in record '{self.name}'")

        encoded = fields.pop('data_buffer_b64', None)
        if encoded is not None:
            try:
                fields[Tensor.DATA_FIELD] = base64.b64decode(encoded, validate=True)
            except (binascii.Error, TypeError) as e:
                raise ValueError(f"Invalid base64 data in record '{self.name}': {e}")

        return MetaRecord(name=self.name, fields=fields)


class RegionInput(BaseModel):
    """JSON description of one region of interest"""
    x: int = Field(ge=0)
    y: int = Field(ge=0)
    w: int = Field(ge=0)
    h: int = Field(ge=0)
    id: int = 0
    roi_type: Optional[str] = None
    params: List[RecordInput] = Field(default_factory=list)

    def to_region(self) -> RegionOfInterest:
        return RegionOfInterest(
            x=self.x,
            y=self.y,
            w=self.w,
            h=self.h,
            object_id=self.id,
            roi_type=self.roi_type,
            params=[param.to_record() for param in self.params]
        )


class FrameInput(BaseModel):
    """JSON description of one frame and its metadata"""
    pts: Optional[int] = Field(default=None, ge=0)
    regions: List[RegionInput] = Field(default_factory=list)
    tensors: List[RecordInput] = Field(default_factory=list)

    model_config = {
        "extra": "ignore"
    }

    def to_video_frame(self) -> VideoFrame:
        return VideoFrame(
            pts=self.pts,
            regions=[region.to_region() for region in self.regions],
            tensors=[Tensor(record.to_record()) for record in self.tensors]
        )
