from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from app.scoring.models import GradeInfo, PhoneticDetail


class GradeRequest(BaseModel):
    reference_text: str = Field(..., description="Reference text")
    transcribed_text: str = Field(..., description="Transcribed text")


class IpaRequest(BaseModel):
    text: str = Field(..., description="Text to annotate")


class TtsRequest(BaseModel):
    text: str = Field(..., min_length=1)
    voice: Optional[str] = None
    speed: Optional[float] = Field(None, description="Playback speed, 0.25 to 4.0")


class TtsSlowRequest(BaseModel):
    text: str = Field(..., min_length=1)
    voice: Optional[str] = None


class TranscriptionResponse(BaseModel):
    text: str
    language: str
    duration: Optional[float] = None
    segments: Optional[List[Dict[str, Any]]] = None


class DatabaseSaveResult(BaseModel):
    success: bool
    recording_id: Optional[str] = None
    message: Optional[str] = None
    error: Optional[str] = None


class AnalysisResponse(BaseModel):
    transcribed_text: str
    reference_text: str
    score: int
    feedback: str
    grade: GradeInfo
    phonetic_details: List[PhoneticDetail]
    pronunciation_guide: str
    duration: Optional[float] = None
    database_save: Optional[DatabaseSaveResult] = None
    note: Optional[str] = None


class RecordingUpdate(BaseModel):
    """Partial update; unknown fields are stored as-is."""

    model_config = ConfigDict(extra="allow")

    reference_text: Optional[str] = None
    transcribed_text: Optional[str] = None
    score: Optional[int] = Field(None, ge=0, le=100)
    user_id: Optional[str] = None
    feedback: Optional[str] = None


class RecordingListResponse(BaseModel):
    recordings: List[Dict[str, Any]]
    count: int
    note: Optional[str] = None
    query: Optional[str] = None
    score_range: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    detail: str
