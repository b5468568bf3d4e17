from dataclasses import dataclass, field


@dataclass(frozen=True)
class VideoResult:
	id: str
	title: str
	channel_name: str
	duration: str
	view_count_label: str
	published_at: str
	thumbnail_url: str
	watch_url: str
	description: str


@dataclass(frozen=True)
class ArticleResult:
	id: str
	title: str
	source: str
	author: str
	published_at: str
	url: str
	summary: str
	read_time_label: str


@dataclass(frozen=True)
class PaperResult:
	id: str
	title: str
	authors: list[str]
	journal: str
	published_at: str
	doi: str
	url: str
	abstract: str
	key_findings: list[str] = field(default_factory=list)
