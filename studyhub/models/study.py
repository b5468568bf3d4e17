from dataclasses import dataclass, replace
from enum import Enum

OPTION_COUNT = 4


class Difficulty(Enum):
	EASY = 'easy'
	MEDIUM = 'medium'
	HARD = 'hard'


@dataclass(frozen=True)
class Question:
	id: str
	text: str
	options: list[str]
	correct_answer_index: int
	explanation: str

	def __post_init__(self):
		if len(self.options) != OPTION_COUNT:
			raise ValueError(f'Question {self.id} must have exactly {OPTION_COUNT} options, got {len(self.options)}')
		if not 0 <= self.correct_answer_index < OPTION_COUNT:
			raise ValueError(f'Question {self.id} has correct answer index out of range: {self.correct_answer_index}')


@dataclass(frozen=True)
class Quiz:
	id: str
	title: str
	questions: list[Question]
	completed: bool = False
	score: int | None = None

	def __post_init__(self):
		if not self.questions:
			raise ValueError(f'Quiz {self.id} must have at least one question')

	def with_score(self, score: int) -> 'Quiz':
		return replace(self, completed=True, score=score)


@dataclass(frozen=True)
class Flashcard:
	id: str
	front: str
	back: str
	difficulty: Difficulty
