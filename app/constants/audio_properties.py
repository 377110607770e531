MIN_SPEECH_SPEED = 0.25
MAX_SPEECH_SPEED = 4.0
DEFAULT_SPEECH_SPEED = 1.0
SLOW_SPEECH_SPEED = 0.75

DEFAULT_LANGUAGE = "en"

# OpenAI rejects audio uploads above 25 MB.
MAX_AUDIO_UPLOAD_BYTES = 25 * 1024 * 1024

SPEECH_MEDIA_TYPE = "audio/mpeg"
