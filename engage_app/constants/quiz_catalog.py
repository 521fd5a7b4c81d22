"""Built-in quiz questions played in every room."""

from __future__ import annotations

from engage_app.core.models import QuizQuestion

QUIZ_QUESTIONS: tuple[QuizQuestion, ...] = (
    QuizQuestion(
        id=1,
        question="What is the capital of France?",
        options=("Berlin", "Madrid", "Paris", "Rome"),
        correct_answer_index=2,
        time_limit=15,
    ),
    QuizQuestion(
        id=2,
        question="Which planet is known as the Red Planet?",
        options=("Earth", "Mars", "Jupiter", "Venus"),
        correct_answer_index=1,
        time_limit=15,
    ),
    QuizQuestion(
        id=3,
        question="What is the largest ocean on Earth?",
        options=("Atlantic", "Indian", "Arctic", "Pacific"),
        correct_answer_index=3,
        time_limit=20,
    ),
    QuizQuestion(
        id=4,
        question="Who wrote 'To Kill a Mockingbird'?",
        options=("Harper Lee", "Mark Twain", "J.K. Rowling", "F. Scott Fitzgerald"),
        correct_answer_index=0,
        time_limit=20,
    ),
)
