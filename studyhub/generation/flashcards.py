from studyhub.models import Difficulty, Flashcard
from studyhub.providers.base import normalize_topic
from studyhub.utils.logger import logger

from .base import BaseGenerator
from .prompt_builder import build_flashcard_prompt


class FlashcardGenerator(BaseGenerator):
	name = 'flashcard_generator'

	def __init__(self, llm_client, card_count: int = 8):
		super().__init__(llm_client)
		self.card_count = card_count

	async def generate(self, topic: str) -> list[Flashcard]:
		topic = normalize_topic(topic)
		prompt = build_flashcard_prompt(topic, self.card_count)
		response = await self.llm_client.generate(prompt, max_tokens=2000)

		cards = self.parse_flashcards(response)
		logger.info(f'Generated {len(cards)} flashcards for: {topic}')
		return cards

	def parse_flashcards(self, response: str) -> list[Flashcard]:
		raw_cards = self.require_list(self.parse_json_response(response), 'flashcards', 'flashcards')

		if len(raw_cards) != self.card_count:
			raise self.invalid(f'expected {self.card_count} flashcards, got {len(raw_cards)}')

		cards = []
		for index, raw in enumerate(raw_cards):
			where = f'flashcard {index + 1}'
			if not isinstance(raw, dict):
				raise self.invalid(f'{where}: expected an object')

			try:
				difficulty = Difficulty(str(raw.get('difficulty', '')).strip().lower())
			except ValueError as e:
				raise self.invalid(f'{where}: invalid difficulty {raw.get("difficulty")!r}') from e

			cards.append(
				Flashcard(
					id=f'fc-{index + 1}',
					front=self.require_text(raw, 'front', where=where),
					back=self.require_text(raw, 'back', where=where),
					difficulty=difficulty,
				)
			)

		return cards
