import requests

BASE_URL = "http://localhost:8000"


def check_health():
    try:
        r = requests.get(f"{BASE_URL}/health", timeout=10)
        print("Health Check:", r.status_code, r.json())
    except Exception as e:
        print("Health Check Failed:", e)


def check_generate(topic="frontend", num_questions=5, difficulty="easy"):
    payload = {"topic": topic, "numQuestions": num_questions, "difficulty": difficulty}
    try:
        print(f"Requesting quiz: {payload}")
        r = requests.post(f"{BASE_URL}/api/v1/generate-quiz", json=payload, timeout=180)
        print("Status:", r.status_code)
        if r.status_code == 200:
            data = r.json()
            print("Success!")
            print("Topic:", data["topic"], "| Difficulty:", data["difficulty"])
            for q in data["questions"]:
                print(f"  {q['id']}: {q['question']}  ->  {q['options'][q['correctIndex']]}")
        else:
            print("Error:", r.json().get("error"))
    except Exception as e:
        print("Generate Failed:", e)


if __name__ == "__main__":
    check_health()
    check_generate()
    check_generate(topic="a")  # expect 400 BAD_REQUEST
