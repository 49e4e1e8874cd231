from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence

from ..core.exceptions import InvalidInput


@dataclass(frozen=True)
class QuizQuestion:
    question: str
    options: List[str]
    answer: int  # index into options


DEFAULT_QUESTIONS = [
    QuizQuestion(
        "What is the name of the fast-food restaurant where SpongeBob works?",
        ["Chum Bucket", "Krusty Krab", "Weenie Hut Jr.", "Shell Shack"], 1
    ),
    QuizQuestion(
        "Who is SpongeBob's best friend?",
        ["Patrick Star", "Squidward Tentacles", "Mr. Krabs", "Sandy Cheeks"], 0
    ),
    QuizQuestion(
        "What is the secret ingredient in the Krabby Patty?",
        ["Kelp", "Plankton", "It's a secret!", "Mayonnaise"], 2
    ),
    QuizQuestion(
        "What instrument does Squidward play?",
        ["Clarinet", "Flute", "Trumpet", "Violin"], 0
    ),
    QuizQuestion(
        "What is the name of SpongeBob's pet snail?",
        ["Larry", "Gary", "Barry", "Harry"], 1
    ),
    QuizQuestion(
        "Who lives in the Chum Bucket?",
        ["Plankton", "Mermaid Man", "Barnacle Boy", "Bubble Bass"], 0
    ),
    QuizQuestion(
        "What shape is SpongeBob's driving teacher, Mrs. Puff?",
        ["Pufferfish", "Shark", "Stingray", "Jellyfish"], 0
    ),
    QuizQuestion(
        "What does Squidward think of SpongeBob's enthusiasm?",
        ["He enjoys it", "He finds it annoying", "He is inspired by it", "He ignores it"], 1
    ),
    QuizQuestion(
        "Who is the owner of the Krusty Krab?",
        ["Mr. Krabs", "SpongeBob", "Squidward", "Patrick"], 0
    ),
    QuizQuestion(
        "Where does SpongeBob live?",
        ["In a rock", "In a pineapple", "In a boat", "In a shell"], 1
    ),
    QuizQuestion(
        "What hobby does SpongeBob enjoy in his spare time?",
        ["Jellyfishing", "Weightlifting", "Playing soccer", "Painting"], 0
    ),
    QuizQuestion(
        "Who tries to steal the Krabby Patty secret formula?",
        ["Patrick Star", "Plankton", "Sandy Cheeks", "King Neptune"], 1
    ),
    QuizQuestion(
        "What type of animal is Sandy Cheeks?",
        ["Octopus", "Squirrel", "Starfish", "Crab"], 1
    ),
]


class QuizService:
    """Picks the question of the day from a fixed catalogue"""

    def __init__(self, questions: Optional[Sequence[QuizQuestion]] = None):
        self.questions = list(questions or DEFAULT_QUESTIONS)
        if not self.questions:
            raise ValueError("Quiz catalogue cannot be empty")

    def question_for(self, day: Optional[date] = None) -> QuizQuestion:
        """Everyone gets the same question on the same calendar day"""
        day = day or date.today()
        day_of_year = day.timetuple().tm_yday - 1
        return self.questions[day_of_year % len(self.questions)]

    def check_answer(self, choice: int, day: Optional[date] = None) -> bool:
        question = self.question_for(day)
        if not 0 <= choice < len(question.options):
            raise InvalidInput(f"Choice must be between 0 and {len(question.options) - 1}.")
        return choice == question.answer
