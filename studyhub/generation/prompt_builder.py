from studyhub.models import SourceType

CONTENT_EXCERPT_LIMIT = 12000

JSON_ONLY = 'Return ONLY valid JSON (no markdown, no explanations).'


def build_quiz_prompt(topic: str, difficulty: str, question_count: int) -> str:
	return f"""You are an experienced teacher writing a multiple-choice quiz.

TOPIC: "{topic}"
LEVEL: {difficulty}

STRICT CONSTRAINTS:
1. QUANTITY: Write EXACTLY {question_count} questions. No more, no less.
2. OPTIONS: Every question has EXACTLY 4 answer options and exactly one correct option.
3. ANSWER: "correctAnswer" is the zero-based index (0-3) of the correct option.
4. EXPLANATION: One or two sentences explaining why the answer is correct.
5. FORMAT: {JSON_ONLY}

REQUIRED JSON STRUCTURE:
{{
  "title": "{topic} Knowledge Check",
  "questions": [
    {{
      "question": "The question text?",
      "options": ["Option A", "Option B", "Option C", "Option D"],
      "correctAnswer": 0,
      "explanation": "Why option A is correct."
    }}
  ]
}}

Write the {question_count} questions now:"""


def build_flashcard_prompt(topic: str, card_count: int) -> str:
	return f"""You are creating study flashcards.

TOPIC: "{topic}"

STRICT CONSTRAINTS:
1. QUANTITY: Create EXACTLY {card_count} flashcards.
2. CONTENT: "front" is a short question or term, "back" is a concise answer (1-3 sentences).
3. DIFFICULTY: Tag each card "easy", "medium" or "hard" and mix all three levels.
4. FORMAT: {JSON_ONLY}

REQUIRED JSON STRUCTURE:
{{
  "flashcards": [
    {{"front": "What is ...?", "back": "...", "difficulty": "easy"}}
  ]
}}

Create the {card_count} flashcards now:"""


def build_note_prompt(source_type: SourceType, title: str, source_url: str | None, content: str | None) -> str:
	if content:
		material = f'CONTENT:\n{content[:CONTENT_EXCERPT_LIMIT]}'
	else:
		material = f'SOURCE URL: {source_url or "not provided"}\n(Work from the title and your knowledge of the subject.)'

	if source_type == SourceType.VIDEO:
		anchors = (
			'- Give every key point and section a "timestamp" (m:ss) where it is covered.\n'
			'- Include a "timestamps" list of {"time", "description"} chapter markers.'
		)
	else:
		anchors = (
			'- Give every key point a "pageReference" such as "Page 2".\n'
			'- Include a "quotes" list of {"text", "source", "pageReference"} notable quotes.'
		)

	return f"""You are an expert note-taking assistant. Create comprehensive, well-structured study notes.

SOURCE TYPE: {source_type.value}
TITLE: {title}
{material}

REQUIREMENTS:
- "summary": 2-4 sentences.
- "keyPoints": 3-8 items with "text" and "importance" ("high", "medium" or "low").
- "definitions": important terms as {{"term", "definition"}}.
{anchors}
- "sections": detailed notes as {{"title", "content"}}; a section may have "subsections"
  with the same shape, but subsections must not have subsections of their own.

{JSON_ONLY}

REQUIRED JSON STRUCTURE:
{{
  "summary": "...",
  "keyPoints": [{{"text": "...", "importance": "high"}}],
  "definitions": [{{"term": "...", "definition": "..."}}],
  "sections": [{{"title": "...", "content": "...", "subsections": []}}]
}}
"""
