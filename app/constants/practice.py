PRACTICE_PHRASES = [
    {
        "id": 1,
        "text": "The quick brown fox jumps over the lazy dog",
        "difficulty": "beginner",
        "category": "tongue_twister",
    },
    {
        "id": 2,
        "text": "She sells seashells by the seashore",
        "difficulty": "beginner",
        "category": "tongue_twister",
    },
    {
        "id": 3,
        "text": "How much wood would a woodchuck chuck",
        "difficulty": "beginner",
        "category": "tongue_twister",
    },
    {
        "id": 4,
        "text": "Peter Piper picked a peck of pickled peppers",
        "difficulty": "intermediate",
        "category": "tongue_twister",
    },
    {
        "id": 5,
        "text": "I scream, you scream, we all scream for ice cream",
        "difficulty": "beginner",
        "category": "tongue_twister",
    },
    {
        "id": 6,
        "text": "The sixth sick sheikh's sixth sheep's sick",
        "difficulty": "advanced",
        "category": "tongue_twister",
    },
    {
        "id": 7,
        "text": "Hello, how are you doing today?",
        "difficulty": "beginner",
        "category": "conversation",
    },
    {
        "id": 8,
        "text": "Could you please tell me where the nearest station is?",
        "difficulty": "intermediate",
        "category": "conversation",
    },
    {
        "id": 9,
        "text": "I would like to schedule an appointment for next week",
        "difficulty": "intermediate",
        "category": "business",
    },
    {
        "id": 10,
        "text": "The weather forecast predicts thunderstorms throughout the weekend",
        "difficulty": "advanced",
        "category": "news",
    },
]

VOICES = [
    {"id": "alloy", "name": "Alloy", "description": "Neutral, balanced voice"},
    {"id": "echo", "name": "Echo", "description": "Male, clear voice"},
    {"id": "fable", "name": "Fable", "description": "British accent, expressive"},
    {"id": "onyx", "name": "Onyx", "description": "Deep, authoritative voice"},
    {"id": "nova", "name": "Nova", "description": "Female, warm voice"},
    {"id": "shimmer", "name": "Shimmer", "description": "Soft, friendly voice"},
]

VOICE_IDS = [voice["id"] for voice in VOICES]
