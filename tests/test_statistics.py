from app.storage import statistics
from app.storage.recordings import InMemoryRecordingStore, build_recording


def recording(score, user_id="alice", reference_text="Hello world", feedback=None):
    return build_recording(
        reference_text, "hello", score, user_id, {"feedback": feedback} if feedback else None
    )


def test_summarize_empty():
    assert statistics.summarize_recordings([]) == {
        "total_recordings": 0,
        "average_score": 0,
        "total_users": 0,
        "api_version": "fastapi",
    }


def test_summarize_recordings_distribution():
    recordings = [
        recording(95, "alice"),
        recording(75, "alice"),
        recording(55, "bob"),
        recording(10, "carol"),
    ]

    summary = statistics.summarize_recordings(recordings)

    assert summary["total_recordings"] == 4
    assert summary["average_score"] == 58.75
    assert summary["total_users"] == 3
    assert summary["score_distribution"] == {
        "excellent": 1,
        "good": 1,
        "fair": 1,
        "poor": 1,
    }


def test_summarize_recordings_distribution_boundaries():
    summary = statistics.summarize_recordings(
        [recording(90), recording(89), recording(70), recording(50), recording(49)]
    )

    assert summary["score_distribution"] == {
        "excellent": 1,
        "good": 2,
        "fair": 1,
        "poor": 1,
    }


def test_user_statistics_without_recordings():
    summary = statistics.summarize_user_recordings([])

    assert summary["total_recordings"] == 0
    assert summary["improvement_trend"] is None


def test_user_statistics_trend_needs_ten_recordings():
    summary = statistics.summarize_user_recordings([recording(s) for s in (80, 60, 70)])

    assert summary["average_score"] == 70.0
    assert summary["best_score"] == 80
    assert summary["worst_score"] == 60
    assert summary["improvement_trend"] is None
    assert len(summary["recent_recordings"]) == 3


def test_user_statistics_trend_compares_newest_and_oldest_five():
    scores = [90, 90, 90, 90, 90, 50, 50, 50, 50, 50]

    summary = statistics.summarize_user_recordings([recording(s) for s in scores])

    assert summary["improvement_trend"] == 40.0
    assert len(summary["recent_recordings"]) == 5


def test_get_user_statistics_reads_from_store():
    store = InMemoryRecordingStore()
    store.save(recording(60, "alice"))
    store.save(recording(80, "alice"))
    store.save(recording(10, "bob"))

    summary = statistics.get_user_statistics(store, "alice")

    assert summary["total_recordings"] == 2
    assert summary["average_score"] == 70.0


def test_search_recordings_matches_text_and_feedback():
    store = InMemoryRecordingStore()
    store.save(recording(60, reference_text="She sells seashells"))
    store.save(recording(60, reference_text="Peter Piper", feedback="Great job!"))
    store.save(recording(60, reference_text="Unrelated"))

    assert len(statistics.search_recordings(store, "SEASHELLS")) == 1
    assert len(statistics.search_recordings(store, "great")) == 1
    assert len(statistics.search_recordings(store, "e", limit=2)) == 2


def test_average_score_rounds_half_up():
    summary = statistics.summarize_recordings([recording(s) for s in [70] * 7 + [71]])

    assert summary["average_score"] == 70.13


def test_user_average_score_rounds_half_up():
    summary = statistics.summarize_user_recordings([recording(s) for s in [70] * 7 + [71]])

    assert summary["average_score"] == 70.13
