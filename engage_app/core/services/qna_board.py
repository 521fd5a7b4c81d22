"""Service for the audience Q&A board."""

from __future__ import annotations

from engage_app.core.errors import NotFoundError, ValidationError
from engage_app.core.identifiers import IdSequence
from engage_app.core.models import QnAQuestion


class QnABoard:
    """Collects audience questions, their upvotes and the answered flag."""

    def __init__(self, ids: IdSequence) -> None:
        self._ids = ids
        self._questions: list[QnAQuestion] = []

    def get_questions(self) -> list[QnAQuestion]:
        """Questions in submission order."""
        return list(self._questions)

    def submit(self, text: str, author: str | None, anonymous_label: str) -> QnAQuestion:
        cleaned_text = text.strip()
        if not cleaned_text:
            raise ValidationError("Question text must not be empty.")
        cleaned_author = (author or "").strip() or anonymous_label

        question = QnAQuestion(id=self._ids.next_id(), text=cleaned_text, author=cleaned_author)
        self._questions.append(question)
        return question

    def upvote(self, question_id: int) -> QnAQuestion:
        # No per-voter dedup: participants carry no identity.
        question = self._find(question_id)
        question.upvotes += 1
        return question

    def toggle_answered(self, question_id: int) -> QnAQuestion:
        question = self._find(question_id)
        question.answered = not question.answered
        return question

    def sorted_questions(self, sort_by_upvotes: bool = True) -> list[QnAQuestion]:
        return sort_questions(self._questions, sort_by_upvotes)

    def _find(self, question_id: int) -> QnAQuestion:
        question = next((q for q in self._questions if q.id == question_id), None)
        if question is None:
            raise NotFoundError(f"Question {question_id} does not exist.")
        return question


def sort_questions(questions: list[QnAQuestion], sort_by_upvotes: bool = True) -> list[QnAQuestion]:
    """Unanswered first; then by upvotes when requested. The sort is stable."""
    if sort_by_upvotes:
        return sorted(questions, key=lambda q: (q.answered, -q.upvotes))
    return sorted(questions, key=lambda q: q.answered)
