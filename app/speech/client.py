import logging
from typing import List, Optional

from openai import OpenAI, OpenAIError

from app.constants.audio_properties import (
    DEFAULT_LANGUAGE,
    DEFAULT_SPEECH_SPEED,
    MAX_SPEECH_SPEED,
    MIN_SPEECH_SPEED,
    SLOW_SPEECH_SPEED,
)

logger = logging.getLogger(__name__)


class SpeechServiceError(RuntimeError):
    """The speech provider failed to transcribe or synthesize."""


def _segment_to_dict(segment) -> dict:
    if isinstance(segment, dict):
        return segment
    return segment.model_dump()


class SpeechClient:
    """Thin wrapper over the OpenAI audio endpoints."""

    def __init__(
        self,
        client: OpenAI,
        transcription_model: str,
        tts_model: str,
        default_voice: str,
    ):
        self.client = client
        self.transcription_model = transcription_model
        self.tts_model = tts_model
        self.default_voice = default_voice

    def transcribe(
        self, audio_bytes: bytes, filename: str, language: str = DEFAULT_LANGUAGE
    ) -> dict:
        """Returns ``{text, language, duration, segments}`` for an audio file."""
        try:
            transcription = self.client.audio.transcriptions.create(
                file=(filename, audio_bytes),
                model=self.transcription_model,
                language=language,
                response_format="verbose_json",
            )
        except OpenAIError as e:
            logger.error(f"Transcription failed: {e}")
            raise SpeechServiceError("Transcription failed") from e

        segments: Optional[List[dict]] = None
        raw_segments = getattr(transcription, "segments", None)
        if raw_segments is not None:
            segments = [_segment_to_dict(s) for s in raw_segments]

        return {
            "text": transcription.text,
            "language": language,
            "duration": getattr(transcription, "duration", None),
            "segments": segments,
        }

    def synthesize(
        self,
        text: str,
        voice: Optional[str] = None,
        speed: float = DEFAULT_SPEECH_SPEED,
    ) -> bytes:
        if not MIN_SPEECH_SPEED <= speed <= MAX_SPEECH_SPEED:
            raise ValueError(
                f"Speed must be between {MIN_SPEECH_SPEED} and {MAX_SPEECH_SPEED}"
            )

        try:
            response = self.client.audio.speech.create(
                model=self.tts_model,
                voice=voice or self.default_voice,
                input=text,
                speed=speed,
            )
        except OpenAIError as e:
            logger.error(f"Speech synthesis failed: {e}")
            raise SpeechServiceError("TTS generation failed") from e

        return response.content

    def synthesize_slow(self, text: str, voice: Optional[str] = None) -> bytes:
        return self.synthesize(text, voice, SLOW_SPEECH_SPEED)

    def close(self) -> None:
        self.client.close()


def create_speech_client(
    api_key: Optional[str],
    transcription_model: str,
    tts_model: str,
    default_voice: str,
) -> SpeechClient:
    """Builds the OpenAI-backed speech client."""
    logger.info(
        f"Creating speech client: stt={transcription_model}, tts={tts_model}"
    )
    return SpeechClient(
        OpenAI(api_key=api_key),
        transcription_model=transcription_model,
        tts_model=tts_model,
        default_voice=default_voice,
    )
