import os

os.environ.setdefault("ENABLE_UI", "false")
os.environ.setdefault("RECORDING_STORE", "memory")
os.environ.setdefault("GRADIO_ANALYTICS_ENABLED", "False")

import pytest
from fastapi.testclient import TestClient

from app.speech.client import SpeechServiceError
from app.storage.recordings import InMemoryRecordingStore


class FakeSpeechClient:
    def __init__(self):
        self.transcript = "The dog sat"
        self.duration = 2.5
        self.fail = False
        self.transcribe_calls = []
        self.synthesize_calls = []
        self.closed = False

    def transcribe(self, audio_bytes, filename, language="en"):
        self.transcribe_calls.append((audio_bytes, filename, language))
        if self.fail:
            raise SpeechServiceError("Transcription failed")
        return {
            "text": self.transcript,
            "language": language,
            "duration": self.duration,
            "segments": [{"id": 0, "text": self.transcript}],
        }

    def synthesize(self, text, voice=None, speed=1.0):
        self.synthesize_calls.append((text, voice, speed))
        if self.fail:
            raise SpeechServiceError("TTS generation failed")
        return b"ID3fake-mp3"

    def synthesize_slow(self, text, voice=None):
        return self.synthesize(text, voice, 0.75)

    def close(self):
        self.closed = True


@pytest.fixture
def fake_speech():
    return FakeSpeechClient()


@pytest.fixture
def client(monkeypatch, fake_speech):
    from app.core import lifespan as lifespan_module

    monkeypatch.setattr(lifespan_module, "create_speech_client", lambda *_args: fake_speech)
    monkeypatch.setattr(
        lifespan_module, "create_recording_store", lambda *_args: InMemoryRecordingStore()
    )

    from app.main import app

    with TestClient(app) as test_client:
        yield test_client
