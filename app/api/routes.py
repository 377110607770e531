import os
from datetime import datetime, timezone
from typing import Optional
from fastapi import APIRouter, File, Form, Header, HTTPException, Query, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response
from app.api.schemas import (
    AnalysisResponse,
    ErrorResponse,
    GradeRequest,
    IpaRequest,
    MessageResponse,
    RecordingListResponse,
    RecordingUpdate,
    TranscriptionResponse,
    TtsRequest,
    TtsSlowRequest,
)
from app.constants.audio_properties import (
    DEFAULT_LANGUAGE,
    DEFAULT_SPEECH_SPEED,
    MAX_AUDIO_UPLOAD_BYTES,
    MAX_SPEECH_SPEED,
    MIN_SPEECH_SPEED,
    SPEECH_MEDIA_TYPE,
)
from app.constants.practice import PRACTICE_PHRASES, VOICE_IDS, VOICES
from app.scoring.exceptions import ScoringError
from app.scoring.models import GradeReport, TextAnalysis
from app.scoring.scorer import get_full_analysis, grade
from app.speech.client import SpeechClient, SpeechServiceError
from app.storage import statistics
from app.storage.recordings import (
    API_VERSION,
    RecordingStore,
    RecordingStoreError,
    build_recording,
)
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pronunciation"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

RECORDING_NOT_FOUND = "Recording not found"
METADATA_ONLY_NOTE = "Audio file processed temporarily - only metadata saved to database"


def _speech_client(request: Request) -> SpeechClient:
    speech = getattr(request.app.state, "speech", None)
    if speech is None:
        raise HTTPException(status_code=500, detail="Services are not initialized.")
    return speech


def _recording_store(request: Request) -> RecordingStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=500, detail="Services are not initialized.")
    return store


async def _read_audio(audio: Optional[UploadFile]) -> bytes:
    if audio is None:
        raise HTTPException(status_code=400, detail="No audio file provided")

    too_large = HTTPException(
        status_code=400,
        detail=f"Audio too large. Max {MAX_AUDIO_UPLOAD_BYTES // (1024 * 1024)}MB allowed.",
    )
    if audio.size is not None and audio.size > MAX_AUDIO_UPLOAD_BYTES:
        raise too_large

    content = await audio.read()
    if not content:
        raise HTTPException(status_code=400, detail="No audio file provided")
    if len(content) > MAX_AUDIO_UPLOAD_BYTES:
        raise too_large
    return content


async def _call_store(detail: str, func, *args):
    try:
        return await run_in_threadpool(func, *args)
    except RecordingStoreError as e:
        logger.error(f"{detail}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=detail)


async def _grade_or_400(reference_text: str, transcribed_text: str) -> GradeReport:
    try:
        return await run_in_threadpool(grade, reference_text, transcribed_text)
    except ScoringError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/")
async def get_root(request: Request):
    return {
        "message": "Pronunciation Trainer API",
        "version": request.app.version,
        "status": "running",
        "storage": "metadata_only",
    }


@router.get("/health")
async def health_check(request: Request):
    store = getattr(request.app.state, "store", None)
    return {
        "status": "healthy",
        "api_version": API_VERSION,
        "database": store.backend if store is not None else "unavailable",
        "storage": "none",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.post("/transcribe", response_model=TranscriptionResponse, responses=ERROR_RESPONSES)
async def transcribe(
    request: Request,
    audio: UploadFile = File(None),
    language: str = Form(DEFAULT_LANGUAGE),
):
    speech = _speech_client(request)
    content = await _read_audio(audio)

    try:
        return await run_in_threadpool(
            speech.transcribe, content, audio.filename or "audio.wav", language or DEFAULT_LANGUAGE
        )
    except SpeechServiceError as e:
        logger.error(f"Transcription failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Transcription failed")


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def analyze(
    request: Request,
    audio: UploadFile = File(None),
    reference_text: str = Form(None),
    user_id: Optional[str] = Form(None),
    save_to_database: bool = Form(True),
    x_user_id: Optional[str] = Header(None),
):
    speech = _speech_client(request)
    store = _recording_store(request)
    content = await _read_audio(audio)

    if not reference_text or not reference_text.strip():
        raise HTTPException(status_code=400, detail="Reference text is required")

    filename = audio.filename or "audio.wav"
    try:
        transcription = await run_in_threadpool(speech.transcribe, content, filename)
    except SpeechServiceError as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Analysis failed")

    transcribed_text = transcription["text"]
    report = await _grade_or_400(reference_text, transcribed_text)

    response = {
        "transcribed_text": transcribed_text,
        "reference_text": reference_text,
        "score": report.score,
        "feedback": report.feedback,
        "grade": report.grade,
        "phonetic_details": report.phonetic_details,
        "pronunciation_guide": report.pronunciation_guide,
        "duration": transcription["duration"],
    }

    if save_to_database:
        recording = build_recording(
            reference_text,
            transcribed_text,
            report.score,
            x_user_id or user_id,
            {
                "feedback": report.feedback,
                "phonetic_details": [d.model_dump() for d in report.phonetic_details],
                "pronunciation_guide": report.pronunciation_guide,
                "grade": report.grade.grade,
                "grade_level": report.grade.level,
                "duration": transcription["duration"],
                "file_size": len(content),
                "file_type": os.path.splitext(filename)[1].lstrip(".") or None,
            },
        )
        try:
            recording_id = await run_in_threadpool(store.save, recording)
            response["database_save"] = {
                "success": True,
                "recording_id": recording_id,
                "message": f"Metadata saved to {store.backend} store",
            }
        except RecordingStoreError as e:
            logger.error(f"Error saving metadata: {e}", exc_info=True)
            response["database_save"] = {"success": False, "error": str(e)}
        response["note"] = METADATA_ONLY_NOTE

    return response


@router.post("/grade", response_model=GradeReport, responses=ERROR_RESPONSES)
async def grade_pronunciation(body: GradeRequest):
    return await _grade_or_400(body.reference_text, body.transcribed_text)


@router.post("/ipa", response_model=TextAnalysis, responses=ERROR_RESPONSES)
async def get_ipa(body: IpaRequest):
    return await run_in_threadpool(get_full_analysis, body.text)


def _check_voice(voice: Optional[str]) -> None:
    if voice is not None and voice not in VOICE_IDS:
        raise HTTPException(status_code=400, detail=f"Invalid voice: {voice}")


async def _speech_response(filename: str, synthesize, *args) -> Response:
    try:
        audio_bytes = await run_in_threadpool(synthesize, *args)
    except SpeechServiceError as e:
        logger.error(f"TTS generation failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="TTS generation failed")

    return Response(
        content=audio_bytes,
        media_type=SPEECH_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.post("/tts", response_class=Response, responses=ERROR_RESPONSES)
async def text_to_speech(request: Request, body: TtsRequest):
    speed = DEFAULT_SPEECH_SPEED if body.speed is None else body.speed
    if not MIN_SPEECH_SPEED <= speed <= MAX_SPEECH_SPEED:
        raise HTTPException(
            status_code=400,
            detail=f"Speed must be between {MIN_SPEECH_SPEED} and {MAX_SPEECH_SPEED}",
        )
    _check_voice(body.voice)

    speech = _speech_client(request)
    return await _speech_response(
        "speech.mp3", speech.synthesize, body.text, body.voice, speed
    )


@router.post("/tts/slow", response_class=Response, responses=ERROR_RESPONSES)
async def slow_text_to_speech(request: Request, body: TtsSlowRequest):
    _check_voice(body.voice)
    speech = _speech_client(request)
    return await _speech_response(
        "speech_slow.mp3", speech.synthesize_slow, body.text, body.voice
    )


@router.get(
    "/recordings",
    response_model=RecordingListResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def get_recordings(
    request: Request,
    user_id: Optional[str] = None,
    limit: int = Query(100, ge=1, le=1000),
):
    store = _recording_store(request)
    if user_id:
        recordings = await _call_store(
            "Failed to get recordings", store.query, "user_id", user_id, limit
        )
    else:
        recordings = await _call_store("Failed to get recordings", store.list, limit)

    return {
        "recordings": recordings,
        "count": len(recordings),
        "note": "Only metadata available - audio files not stored",
    }


@router.get(
    "/recordings/search",
    response_model=RecordingListResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def search_recordings(
    request: Request,
    query: str = Query(..., min_length=1),
    limit: int = Query(50, ge=1, le=1000),
):
    store = _recording_store(request)
    recordings = await _call_store(
        "Search failed", statistics.search_recordings, store, query, limit
    )
    return {"recordings": recordings, "count": len(recordings), "query": query}


@router.get(
    "/recordings/score-range",
    response_model=RecordingListResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def get_recordings_by_score(
    request: Request,
    min_score: int = Query(0, ge=0, le=100),
    max_score: int = Query(100, ge=0, le=100),
    limit: int = Query(50, ge=1, le=1000),
):
    if min_score > max_score:
        raise HTTPException(status_code=400, detail="min_score must not exceed max_score")

    store = _recording_store(request)
    recordings = await _call_store(
        "Failed to get recordings by score",
        store.query_range,
        "score",
        min_score,
        max_score,
        limit,
    )
    return {
        "recordings": recordings,
        "count": len(recordings),
        "score_range": f"{min_score}-{max_score}",
    }


@router.get("/recordings/{recording_id}", responses=ERROR_RESPONSES)
async def get_recording(request: Request, recording_id: str):
    store = _recording_store(request)
    recording = await _call_store("Failed to get recording", store.get, recording_id)
    if recording is None:
        raise HTTPException(status_code=404, detail=RECORDING_NOT_FOUND)
    return recording


@router.put("/recordings/{recording_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def update_recording(request: Request, recording_id: str, updates: RecordingUpdate):
    store = _recording_store(request)
    success = await _call_store(
        "Failed to update recording",
        store.update,
        recording_id,
        updates.model_dump(exclude_unset=True),
    )
    if not success:
        raise HTTPException(status_code=404, detail=RECORDING_NOT_FOUND)
    return {"message": "Recording updated successfully"}


@router.delete(
    "/recordings/{recording_id}", response_model=MessageResponse, responses=ERROR_RESPONSES
)
async def delete_recording(request: Request, recording_id: str):
    store = _recording_store(request)
    success = await _call_store("Failed to delete recording", store.delete, recording_id)
    if not success:
        raise HTTPException(status_code=404, detail=RECORDING_NOT_FOUND)
    return {"message": "Recording deleted successfully"}


@router.get("/statistics", responses=ERROR_RESPONSES)
async def get_statistics(request: Request):
    store = _recording_store(request)
    return await _call_store("Failed to get statistics", statistics.get_statistics, store)


@router.get("/statistics/user/{user_id}", responses=ERROR_RESPONSES)
async def get_user_statistics(request: Request, user_id: str):
    store = _recording_store(request)
    return await _call_store(
        "Failed to get user statistics", statistics.get_user_statistics, store, user_id
    )


@router.get("/phrases")
async def get_phrases():
    return {"phrases": PRACTICE_PHRASES}


@router.get("/voices")
async def get_voices():
    return {"voices": VOICES}
