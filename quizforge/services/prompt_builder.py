import json
from typing import NamedTuple

from quizforge.schemas.quiz import Difficulty, MAX_EXPLANATION_LENGTH, QuizRequest


class QuizPrompt(NamedTuple):
    system: str
    user: str


# ── System Prompt — STRICT JSON ───────────────────────────────────────────────

QUIZ_SYSTEM_PROMPT = (
    "You are an expert educational assessment designer who writes "
    "single-answer multiple-choice quizzes.\n\n"
    "CRITICAL RULES:\n"
    "1. Every question has EXACTLY 4 options.\n"
    "2. Exactly ONE option is correct; give its position as \"correctIndex\" (0-3).\n"
    "3. The 4 options must be distinct, and none may be empty.\n"
    f"4. Each explanation is brief: at most {MAX_EXPLANATION_LENGTH} characters.\n"
    "5. Question ids are sequential strings: \"q1\", \"q2\", \"q3\", ...\n"
    "6. Output ONLY valid JSON — no markdown fences, no commentary, no prose.\n"
)

DIFFICULTY_GUIDANCE = {
    Difficulty.easy: "Focus on definitions and foundational facts a beginner should know.",
    Difficulty.mixed: "Use a natural blend of recall, understanding and applied questions.",
    Difficulty.hard: "Emphasize applied reasoning: scenarios, trade-offs and multi-step problems.",
}

# easy → predictable wording, hard → more varied scenarios
DIFFICULTY_TEMPERATURE = {
    Difficulty.easy: 0.2,
    Difficulty.mixed: 0.5,
    Difficulty.hard: 0.8,
}

EXAMPLE_SHAPE = {
    "topic": "string",
    "difficulty": "easy|mixed|hard",
    "questions": [
        {
            "id": "q1",
            "question": "string",
            "options": ["string", "string", "string", "string"],
            "correctIndex": 0,
            "explanation": "string",
        }
    ],
}

CORRECTION_PROMPT = (
    "Your previous output was invalid JSON or did not match the required schema. "
    "Resend the complete quiz as valid JSON only, in exactly the shape given above. "
    "No markdown fences and no text before or after the JSON object."
)


def temperature_for(difficulty: Difficulty) -> float:
    return DIFFICULTY_TEMPERATURE[Difficulty(difficulty)]


def build_quiz_prompt(request: QuizRequest) -> QuizPrompt:
    """Turn a validated request into the system/user message pair."""
    difficulty = Difficulty(request.difficulty)
    user = "\n".join([
        f"Topic: {request.topic}",
        f"Number of questions: {request.num_questions}",
        f"Difficulty: {difficulty.value}",
        DIFFICULTY_GUIDANCE[difficulty],
        "",
        f"Generate exactly {request.num_questions} questions with ids "
        f"\"q1\" through \"q{request.num_questions}\".",
        f"Set \"topic\" to {json.dumps(request.topic)} and \"difficulty\" to \"{difficulty.value}\".",
        "Return ONLY JSON of this exact shape (no markdown):",
        json.dumps(EXAMPLE_SHAPE, indent=2),
    ])
    return QuizPrompt(system=QUIZ_SYSTEM_PROMPT, user=user)


def build_correction_message() -> str:
    return CORRECTION_PROMPT
