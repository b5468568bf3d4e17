from dataclasses import dataclass, field
from enum import Enum


class ResourceType(Enum):
	VIDEO = 'video'
	DOCUMENT = 'document'
	QUIZ = 'quiz'


class StepType(Enum):
	WATCH = 'watch'
	READ = 'read'
	TEST = 'test'


@dataclass(frozen=True)
class Bookmark:
	id: str
	resource_id: str
	resource_type: ResourceType
	title: str
	created_at: str


@dataclass(frozen=True)
class LearningStep:
	id: str
	type: StepType
	title: str
	resource_id: str


@dataclass(frozen=True)
class LearningPath:
	id: str
	title: str
	description: str
	steps: list[LearningStep]


@dataclass(frozen=True)
class TimestampNote:
	time: str
	note: str


@dataclass(frozen=True)
class VideoNotes:
	video_id: str
	video_title: str
	current_notes: str
	created_at: str
	timestamps: list[TimestampNote] = field(default_factory=list)


@dataclass(frozen=True)
class QuickNote:
	"""Free-form note typed while studying, optionally pinned to a video time or flashcard."""

	id: str
	content: str
	timestamp: str
	video_time: str | None = None
	flashcard_id: str | None = None
