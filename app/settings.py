# app/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import validator
from typing import Optional
from pathlib import Path

from services.metaconvert.document_assembler import ConvertOptions

# =============================================================================
# Converter Settings
# =============================================================================
class ConverterSettings(BaseSettings):
    """Metadata converter settings with validation"""

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = "frame-metaconvert"
    app_version: str = "1.0.0"

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------
    add_tensor_data: bool = False      # region + frame tensors in the document
    add_empty_results: bool = False    # post frames without detections too
    source: Optional[str] = None       # source URI written to every document
    tags: Optional[str] = None         # raw JSON string, dropped if invalid
    json_indent: int = -1              # -1 = compact

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_level: str = "INFO"
    log_format: str = "json"  # json, console
    log_file_path: Optional[Path] = None
    log_max_size: str = "100MB"
    log_backup_count: int = 5

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @validator('json_indent')
    def validate_json_indent(cls, v):
        if v < -1:
            raise ValueError("json_indent must be -1 (compact) or >= 0")
        return v

    @validator('log_level')
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @validator('log_format')
    def validate_log_format(cls, v):
        valid_formats = ['json', 'console']
        if v not in valid_formats:
            raise ValueError(f"Log format must be one of: {valid_formats}")
        return v

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    def to_options(self) -> ConvertOptions:
        return ConvertOptions(
            include_tensor_data=self.add_tensor_data,
            emit_empty_results=self.add_empty_results,
            json_indent=self.json_indent
        )

    # -------------------------------------------------------------------------
    # Pydantic Settings Config
    # -------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_prefix="METACONVERT_",   # map .env variables like METACONVERT_ADD_TENSOR_DATA
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
