import requests
import json
import os

# Configuration
API_URL = os.getenv("SAYRIGHT_API_URL", "http://localhost:8000/api/analyze")
AUDIO_FILE_PATH = os.getenv("SAYRIGHT_AUDIO_FILE", "sample.wav")
REFERENCE_TEXT = "The quick brown fox jumps over the lazy dog"
USER_ID = "local-test"


def test_analysis():
    # 1. Check if file exists
    if not os.path.exists(AUDIO_FILE_PATH):
        print(f"Error: File not found at {AUDIO_FILE_PATH}")
        return

    # 2. Prepare the payload
    # 'data' contains form fields
    payload = {"reference_text": REFERENCE_TEXT, "save_to_database": "true"}
    headers = {"x-user-id": USER_ID}

    # 'files' contains the binary audio data
    # format: 'fieldname': ('filename', open_file_handle, 'content_type')
    files = {
        "audio": (
            os.path.basename(AUDIO_FILE_PATH),
            open(AUDIO_FILE_PATH, "rb"),
            "audio/wav",
        )
    }

    try:
        print(f"Sending request to {API_URL}...")

        # 3. Send POST request
        response = requests.post(API_URL, data=payload, files=files, headers=headers)

        # 4. Handle Response
        if response.status_code == 200:
            print("\n✅ Success!")
            result = response.json()
            print(f"Score: {result['score']} ({result['grade']['grade']})")
            print(json.dumps(result, indent=4, ensure_ascii=False))
        else:
            print(f"\n❌ Failed with status code: {response.status_code}")
            print("Response:", response.text)

    except requests.exceptions.ConnectionError:
        print("\n❌ Could not connect to the server. Is it running?")
    except Exception as e:
        print(f"\n❌ An error occurred: {e}")
    finally:
        # Close the file handle
        files["audio"][1].close()


if __name__ == "__main__":
    test_analysis()
