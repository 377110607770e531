from contextlib import asynccontextmanager
from fastapi import FastAPI
import logging
from app.constants.environmental_variables import (
    MONGODB_COLLECTION,
    MONGODB_DATABASE,
    MONGODB_URI,
    OPENAI_API_KEY,
    OPENAI_TRANSCRIPTION_MODEL,
    OPENAI_TTS_MODEL,
    OPENAI_TTS_VOICE,
    RECORDING_STORE,
)
from app.speech.client import create_speech_client
from app.storage.recordings import create_recording_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Lifespan: Initializing services...")
    try:
        app.state.speech = create_speech_client(
            OPENAI_API_KEY, OPENAI_TRANSCRIPTION_MODEL, OPENAI_TTS_MODEL, OPENAI_TTS_VOICE
        )
        app.state.store = create_recording_store(
            RECORDING_STORE, MONGODB_URI, MONGODB_DATABASE, MONGODB_COLLECTION
        )
    except Exception as e:
        logger.error(f"Lifespan: Failed to initialize services: {e}")
        app.state.speech = None
        app.state.store = None
        raise

    logger.info("Lifespan: Services initialized successfully.")
    try:
        yield
    finally:
        speech = app.state.speech
        store = app.state.store
        app.state.speech = None
        app.state.store = None
        if speech is not None:
            speech.close()
        if store is not None:
            store.close()
        logger.info("Lifespan: Services released.")
