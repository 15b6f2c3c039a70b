"""
ChemQuiz - chemistry flashcard quizzes over a categorized compound catalog.
"""

from chemquiz.quiz import (
    QuizError,
    OptionCountTooSmallError,
    NotEnoughCompoundsError,
    InsufficientUniqueOptionsError,
    QuizItem,
    QuizMode,
    generate_quiz,
)

__version__ = "1.0.0"

__all__ = [
    'QuizError',
    'OptionCountTooSmallError',
    'NotEnoughCompoundsError',
    'InsufficientUniqueOptionsError',
    'QuizItem',
    'QuizMode',
    'generate_quiz',
]
