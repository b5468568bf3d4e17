"""Placeholder content used when a provider or generator is unavailable.

Every builder is pure and network-free: the same topic always yields the same
records, with the topic embedded verbatim so the result still reads as relevant.
"""

import re

from studyhub.models import (
	ArticleResult,
	Definition,
	Difficulty,
	Flashcard,
	Importance,
	KeyPoint,
	NoteContent,
	NoteSection,
	PaperResult,
	Question,
	Quiz,
	Quote,
	SourceType,
	Timestamp,
	VideoResult,
)


def _slug(text: str) -> str:
	return re.sub(r'[^a-z0-9]+', '-', text.lower()).strip('-') or 'topic'


def fallback_videos(topic: str) -> list[VideoResult]:
	return [
		VideoResult(
			id='yt-1',
			title=f'Complete Guide to {topic} - Beginner to Advanced',
			channel_name='EduTech Academy',
			duration='24:15',
			view_count_label='1.2M views',
			published_at='2024-01-15',
			thumbnail_url='https://img.youtube.com/vi/ukzFI9rgwfU/maxresdefault.jpg',
			watch_url='https://www.youtube.com/watch?v=ukzFI9rgwfU',
			description=f'Comprehensive tutorial covering all aspects of {topic}...',
		),
		VideoResult(
			id='yt-2',
			title=f'{topic} Explained in 10 Minutes',
			channel_name='Quick Learning',
			duration='10:32',
			view_count_label='850.0K views',
			published_at='2024-01-10',
			thumbnail_url='https://img.youtube.com/vi/LlKAna21fLE/maxresdefault.jpg',
			watch_url='https://www.youtube.com/watch?v=LlKAna21fLE',
			description=f'Quick overview of {topic} fundamentals...',
		),
	]


def fallback_articles(topic: str) -> list[ArticleResult]:
	return [
		ArticleResult(
			id='art-1',
			title=f'Understanding {topic}: A Comprehensive Analysis',
			source='TechCrunch',
			author='Dr. Sarah Johnson',
			published_at='2024-01-20',
			url='https://techcrunch.com/example-article',
			summary=f'This article provides an in-depth analysis of {topic} and its implications for modern technology.',
			read_time_label='8 min read',
		),
		ArticleResult(
			id='art-2',
			title=f'The Future of {topic}: Trends and Predictions',
			source='MIT Technology Review',
			author='Prof. Michael Chen',
			published_at='2024-01-18',
			url='https://technologyreview.com/example-article',
			summary=f'Exploring emerging trends and future developments in {topic}.',
			read_time_label='12 min read',
		),
	]


def fallback_papers(topic: str) -> list[PaperResult]:
	return [
		PaperResult(
			id='paper-1',
			title=f'Advanced Techniques in {topic}: A Systematic Review',
			authors=['Dr. Alice Smith', 'Prof. Bob Wilson', 'Dr. Carol Davis'],
			journal='Nature Technology',
			published_at='2024-01-25',
			doi='10.1038/example.2024.001',
			url='https://nature.com/articles/example',
			abstract=f'This systematic review examines recent advances in {topic} methodologies...',
			key_findings=[
				f'New {topic} techniques show 40% improvement in efficiency',
				'Cross-domain applications demonstrate significant potential',
				'Future research directions identified in three key areas',
			],
		)
	]


# (question, options, correct index, explanation)
_QUESTION_TEMPLATES = [
	(
		'What is the primary purpose of {topic}?',
		['To solve complex problems', 'To improve understanding', 'To reduce effort and cost', 'All of the above'],
		3,
		'{topic} serves several purposes at once: solving problems, improving understanding and reducing effort.',
	),
	(
		'Which of the following is a key characteristic of {topic}?',
		['A systematic structure', 'Random behaviour', 'No practical use', 'Complete independence from theory'],
		0,
		'A systematic structure is one of the most important characteristics of {topic}.',
	),
	(
		'What is the best first step when starting to learn {topic}?',
		['Memorise advanced results', 'Master the core definitions', 'Skip the fundamentals', 'Only read summaries'],
		1,
		'Core definitions are the foundation every later idea in {topic} builds on.',
	),
	(
		'Which activity best reinforces knowledge of {topic}?',
		['Passive re-reading', 'Highlighting everything', 'Practising with worked problems', 'Studying once, late at night'],
		2,
		'Active practice with worked problems is the most reliable way to retain {topic}.',
	),
	(
		'How do experts usually approach a new problem in {topic}?',
		['Guess and move on', 'Break it into smaller known parts', 'Avoid using prior results', 'Start from the most complex case'],
		1,
		'Decomposing a problem into familiar parts is a standard expert strategy in {topic}.',
	),
	(
		'Why are real-world examples useful when studying {topic}?',
		['They connect theory to practice', 'They replace the theory', 'They are only decorative', 'They make topics harder'],
		0,
		'Examples show how the ideas of {topic} apply outside the textbook.',
	),
	(
		'Which statement about mistakes while learning {topic} is most accurate?',
		['They should be hidden', 'They prove the topic is too hard', 'They reveal gaps worth reviewing', 'They do not matter'],
		2,
		'Reviewing mistakes highlights exactly which parts of {topic} need more attention.',
	),
	(
		'What is a sign that you have a solid understanding of {topic}?',
		['You can recite a definition', 'You recognise the title', 'You have watched one video', 'You can explain it in your own words'],
		3,
		'Explaining {topic} in your own words shows understanding beyond memorisation.',
	),
]


def fallback_quiz(topic: str, question_count: int = 8) -> Quiz:
	questions = []
	for index in range(question_count):
		text, options, correct, explanation = _QUESTION_TEMPLATES[index % len(_QUESTION_TEMPLATES)]
		questions.append(
			Question(
				id=f'q{index + 1}',
				text=text.format(topic=topic),
				options=list(options),
				correct_answer_index=correct,
				explanation=explanation.format(topic=topic),
			)
		)

	return Quiz(id=f'quiz-{_slug(topic)}', title=f'{topic} Knowledge Check', questions=questions)


# (front, back, difficulty)
_FLASHCARD_TEMPLATES = [
	(
		'What is {topic}?',
		'{topic} is a subject built on systematic approaches to understanding and solving problems.',
		Difficulty.EASY,
	),
	('Key benefits of {topic}', 'Studying {topic} improves efficiency, clarity of thinking and problem solving.', Difficulty.EASY),
	('Core vocabulary of {topic}', 'The essential terms of {topic} name its main objects, processes and results.', Difficulty.EASY),
	(
		'Fundamental principles of {topic}',
		'The principles of {topic} are the small set of rules from which the rest follows.',
		Difficulty.MEDIUM,
	),
	(
		'Common applications of {topic}',
		'{topic} is applied wherever its methods turn a real problem into a solvable one.',
		Difficulty.MEDIUM,
	),
	(
		'Common misconceptions about {topic}',
		'Many {topic} errors come from applying a rule outside the conditions where it holds.',
		Difficulty.MEDIUM,
	),
	(
		'Advanced {topic} techniques',
		'Advanced {topic} work combines the fundamentals with optimisation and abstraction.',
		Difficulty.HARD,
	),
	(
		'Open questions in {topic}',
		'Research in {topic} continues on problems that current methods cannot yet solve.',
		Difficulty.HARD,
	),
]


def fallback_flashcards(topic: str, card_count: int = 8) -> list[Flashcard]:
	cards = []
	for index in range(card_count):
		front, back, difficulty = _FLASHCARD_TEMPLATES[index % len(_FLASHCARD_TEMPLATES)]
		cards.append(
			Flashcard(
				id=f'fc-{index + 1}',
				front=front.format(topic=topic),
				back=back.format(topic=topic),
				difficulty=difficulty,
			)
		)
	return cards


def fallback_note_content(source_type: SourceType, title: str) -> NoteContent:
	if source_type == SourceType.VIDEO:
		return _video_note_content(title)
	if source_type == SourceType.ARTICLE:
		return _article_note_content(title)
	return _document_note_content(title)


def _video_note_content(title: str) -> NoteContent:
	return NoteContent(
		summary=(
			f'Comprehensive overview of {title} covering fundamental concepts, practical applications, and key '
			'insights. The video provides structured learning with clear explanations and real-world examples.'
		),
		key_points=[
			KeyPoint('kp-1', 'Introduction to core concepts and foundational principles', Importance.HIGH, timestamp='2:15'),
			KeyPoint('kp-2', 'Practical applications and real-world use cases', Importance.HIGH, timestamp='8:30'),
			KeyPoint('kp-3', 'Advanced techniques and optimization strategies', Importance.MEDIUM, timestamp='15:45'),
			KeyPoint('kp-4', 'Common pitfalls and how to avoid them', Importance.MEDIUM, timestamp='22:10'),
		],
		definitions=[
			Definition('Key Concept', 'A fundamental principle that forms the basis for understanding the topic.'),
			Definition('Implementation', 'The practical application of theoretical concepts in real-world scenarios.'),
		],
		timestamps=[
			Timestamp('0:00', 'Introduction and overview'),
			Timestamp('2:15', 'Core concepts explanation'),
			Timestamp('8:30', 'Practical applications'),
			Timestamp('15:45', 'Advanced techniques'),
			Timestamp('22:10', 'Common mistakes'),
			Timestamp('28:00', 'Summary and conclusion'),
		],
		sections=[
			NoteSection(
				'sec-1',
				'Introduction',
				'Overview of the topic and learning objectives. Sets the foundation for understanding key concepts.',
				timestamp='0:00',
			),
			NoteSection(
				'sec-2',
				'Fundamental Concepts',
				'Detailed explanation of core principles and theoretical foundations.',
				timestamp='2:15',
				subsections=[
					NoteSection(
						'subsec-1',
						'Basic Principles',
						'Introduction to fundamental principles and their significance.',
						timestamp='3:00',
					),
					NoteSection(
						'subsec-2',
						'Key Relationships',
						'How different concepts relate to and influence each other.',
						timestamp='5:30',
					),
				],
			),
			NoteSection(
				'sec-3',
				'Practical Applications',
				'Real-world examples and use cases demonstrating practical implementation.',
				timestamp='8:30',
			),
			NoteSection(
				'sec-4',
				'Advanced Topics',
				'Complex concepts and advanced techniques for deeper understanding.',
				timestamp='15:45',
			),
		],
	)


def _article_note_content(title: str) -> NoteContent:
	return NoteContent(
		summary=(
			f'Detailed analysis of {title} with key insights, supporting evidence, and practical implications. '
			'The article provides comprehensive coverage of the topic with well-researched content.'
		),
		key_points=[
			KeyPoint('kp-1', 'Main thesis and central argument of the article', Importance.HIGH, page_reference='Page 1'),
			KeyPoint('kp-2', 'Supporting evidence and research findings', Importance.HIGH, page_reference='Page 2-3'),
			KeyPoint('kp-3', 'Practical implications and applications', Importance.MEDIUM, page_reference='Page 4'),
			KeyPoint('kp-4', 'Future research directions and conclusions', Importance.MEDIUM, page_reference='Page 5'),
		],
		definitions=[
			Definition('Technical Term', 'Specialized terminology used within the field of study.'),
			Definition('Methodology', 'The systematic approach used to conduct research or analysis.'),
		],
		quotes=[
			Quote(
				'q-1',
				'This represents a significant advancement in our understanding of the field.',
				'Author Name',
				page_reference='Page 2',
			),
			Quote(
				'q-2',
				'The implications of these findings extend far beyond the immediate scope of this study.',
				'Author Name',
				page_reference='Page 4',
			),
		],
		sections=[
			NoteSection('sec-1', 'Introduction', 'Overview of the research question and objectives.'),
			NoteSection('sec-2', 'Literature Review', 'Analysis of existing research and theoretical framework.'),
			NoteSection('sec-3', 'Methodology', 'Research methods and analytical approaches used.'),
			NoteSection('sec-4', 'Results and Discussion', 'Key findings and their interpretation.'),
			NoteSection('sec-5', 'Conclusion', 'Summary of findings and future research directions.'),
		],
	)


def _document_note_content(title: str) -> NoteContent:
	return NoteContent(
		summary=(
			f'Comprehensive analysis of {title} with detailed examination of key concepts, methodologies, and '
			'findings. The document provides in-depth coverage with supporting data and references.'
		),
		key_points=[
			KeyPoint('kp-1', 'Primary research objectives and hypotheses', Importance.HIGH, page_reference='Page 1-2'),
			KeyPoint('kp-2', 'Methodology and experimental design', Importance.HIGH, page_reference='Page 3-5'),
			KeyPoint('kp-3', 'Key findings and statistical analysis', Importance.HIGH, page_reference='Page 6-8'),
			KeyPoint('kp-4', 'Discussion of implications and limitations', Importance.MEDIUM, page_reference='Page 9-10'),
		],
		definitions=[
			Definition('Research Variable', 'A factor or element that can be measured or manipulated in research.'),
			Definition(
				'Statistical Significance',
				'The likelihood that a result occurred by chance, typically measured by p-value.',
			),
		],
		quotes=[
			Quote(
				'q-1',
				'The results demonstrate a statistically significant relationship between the variables.',
				'Research Team',
				page_reference='Page 7',
			),
		],
		sections=[
			NoteSection('sec-1', 'Abstract', 'Brief summary of the research objectives, methods, and key findings.'),
			NoteSection('sec-2', 'Introduction', 'Background information and research context.'),
			NoteSection('sec-3', 'Methodology', 'Detailed description of research methods and procedures.'),
			NoteSection('sec-4', 'Results', 'Presentation of findings with supporting data and analysis.'),
			NoteSection('sec-5', 'Discussion', 'Interpretation of results and their broader implications.'),
			NoteSection('sec-6', 'Conclusion', 'Summary of key findings and recommendations for future research.'),
		],
	)
