import logging
from typing import Any, Dict, List, Optional

from quizforge.schemas.quiz import QuizRequest, QuizResponse
from quizforge.services.providers.curated_banks import CURATED_BANKS, TOPIC_ALIASES
from quizforge.services.validator import validate_quiz

logger = logging.getLogger(__name__)

DISTRACTOR_TEMPLATES = (
    "General concept {n}",
    "Unrelated term {n}",
    "Common misconception {n}",
)


def normalize_topic(topic: str) -> str:
    key = " ".join(topic.strip().lower().split())
    return TOPIC_ALIASES.get(key, key)


def find_curated_bank(topic: str) -> Optional[List[Dict[str, Any]]]:
    return CURATED_BANKS.get(normalize_topic(topic))


def generic_question(topic: str, index: int) -> Dict[str, Any]:
    """
    Synthesize question ``index`` (0-based) for an unknown topic.

    The correct option is rotated to position ``index % 4`` so answers
    are spread evenly over a quiz instead of always sitting first.
    """
    n = index + 1
    correct = f"{topic} core idea {n}"
    base = [correct] + [template.format(n=n) for template in DISTRACTOR_TEMPLATES]
    shift = index % len(base)
    options = base[-shift:] + base[:-shift] if shift else base
    return {
        "id": f"q{n}",
        "question": f'Which of the following is most closely associated with "{topic}"?',
        "options": options,
        "correctIndex": shift,
        "explanation": f'"{correct}" is the only option tied to the topic; the others are generic distractors.',
    }


class LocalQuizProvider:
    """Deterministic, offline provider used when no remote credential is configured."""

    name = "local"

    def build_questions(self, topic: str, count: int) -> List[Dict[str, Any]]:
        bank = find_curated_bank(topic) or []
        questions = [
            {"id": f"q{i + 1}", **entry}
            for i, entry in enumerate(bank[:count])
        ]
        # Requests larger than the bank are topped up with generic items.
        for i in range(len(questions), count):
            questions.append(generic_question(topic, i))
        return questions

    async def generate_quiz(self, request: QuizRequest) -> QuizResponse:
        curated = find_curated_bank(request.topic) is not None
        logger.info(
            f"[LOCAL] Building {request.num_questions} questions for '{request.topic}' "
            f"({'curated bank' if curated else 'generic'})"
        )
        payload = {
            "topic": request.topic,
            "difficulty": request.difficulty,
            "questions": self.build_questions(request.topic, request.num_questions),
        }
        return validate_quiz(payload, max_questions=request.num_questions)
