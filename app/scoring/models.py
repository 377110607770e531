from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class PhoneticDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    transcribed: str
    reference_notation: str
    transcribed_notation: str
    similarity: float
    correct: bool
    feedback: Optional[str] = None


class ScoreResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int
    feedback: str
    phonetic_details: List[PhoneticDetail]
    pronunciation_guide: str


class GradeInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    grade: str
    level: str
    color: str


class GradeReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int
    feedback: str
    grade: GradeInfo
    phonetic_details: List[PhoneticDetail]
    pronunciation_guide: str


class TextAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    notation: str
    words: List[str]
    word_notations: List[str]
    stress_guide: str
