from studyhub.models import OPTION_COUNT, Question, Quiz
from studyhub.providers.base import normalize_topic
from studyhub.utils.logger import logger

from .base import BaseGenerator, timestamp_id
from .prompt_builder import build_quiz_prompt


class QuizGenerator(BaseGenerator):
	name = 'quiz_generator'

	def __init__(self, llm_client, question_count: int = 8):
		super().__init__(llm_client)
		self.question_count = question_count

	async def generate(self, topic: str, difficulty: str = 'intermediate') -> Quiz:
		topic = normalize_topic(topic)
		prompt = build_quiz_prompt(topic, difficulty, self.question_count)
		response = await self.llm_client.generate(prompt, max_tokens=3000)

		quiz = self.parse_quiz(response, topic)
		logger.info(f'Generated quiz with {len(quiz.questions)} questions for: {topic}')
		return quiz

	def parse_quiz(self, response: str, topic: str) -> Quiz:
		data = self.parse_json_response(response)
		raw_questions = self.require_list(data, 'questions', 'quiz')

		if len(raw_questions) != self.question_count:
			raise self.invalid(f'expected {self.question_count} questions, got {len(raw_questions)}')

		questions = [self._parse_question(index, raw) for index, raw in enumerate(raw_questions)]

		title = topic + ' Knowledge Check'
		if isinstance(data, dict):
			title = self.optional_text(data, 'title') or title

		return Quiz(id=timestamp_id('quiz'), title=title, questions=questions)

	def _parse_question(self, index: int, raw: dict) -> Question:
		where = f'question {index + 1}'
		if not isinstance(raw, dict):
			raise self.invalid(f'{where}: expected an object')

		text = self.require_text(raw, 'question', 'text', where=where)

		options = raw.get('options')
		if not isinstance(options, list) or len(options) != OPTION_COUNT:
			raise self.invalid(f'{where}: expected exactly {OPTION_COUNT} options')
		if not all(isinstance(o, str) and o.strip() for o in options):
			raise self.invalid(f'{where}: options must be non-empty strings')

		answer = raw.get('correctAnswer', raw.get('correct_answer'))
		# bool is an int subclass; reject it explicitly
		if isinstance(answer, bool) or not isinstance(answer, int) or not 0 <= answer < OPTION_COUNT:
			raise self.invalid(f'{where}: correctAnswer must be an index in [0, {OPTION_COUNT})')

		return Question(
			id=f'q{index + 1}',
			text=text,
			options=[o.strip() for o in options],
			correct_answer_index=answer,
			explanation=self.optional_text(raw, 'explanation') or '',
		)
