from dataclasses import dataclass, field
from enum import Enum


class SourceType(Enum):
	VIDEO = 'video'
	ARTICLE = 'article'
	DOCUMENT = 'document'


class Importance(Enum):
	HIGH = 'high'
	MEDIUM = 'medium'
	LOW = 'low'


@dataclass(frozen=True)
class KeyPoint:
	id: str
	text: str
	importance: Importance
	timestamp: str | None = None
	page_reference: str | None = None


@dataclass(frozen=True)
class Definition:
	term: str
	definition: str


@dataclass(frozen=True)
class Timestamp:
	time: str
	description: str


@dataclass(frozen=True)
class Quote:
	id: str
	text: str
	source: str
	timestamp: str | None = None
	page_reference: str | None = None


@dataclass(frozen=True)
class NoteSection:
	id: str
	title: str
	content: str
	timestamp: str | None = None
	subsections: list['NoteSection'] = field(default_factory=list)


@dataclass(frozen=True)
class NoteContent:
	summary: str
	key_points: list[KeyPoint]
	definitions: list[Definition]
	sections: list[NoteSection]
	timestamps: list[Timestamp] | None = None
	quotes: list[Quote] | None = None


@dataclass(frozen=True)
class StudyNote:
	id: str
	title: str
	source_type: SourceType
	source_id: str
	created_at: str
	updated_at: str
	tags: list[str]
	content: NoteContent
	source_url: str | None = None
