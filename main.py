import argparse
import asyncio
import json
import sys
from pathlib import Path

from dotenv import load_dotenv


def run_search(args):
	from studyhub.config.settings import settings
	from studyhub.core.factory import create_orchestrator
	from studyhub.storage import JsonStore, SearchHistory
	from studyhub.storage.helpers import to_jsonable

	orchestrator = create_orchestrator(settings)
	bundle = asyncio.run(orchestrator.search(args.topic))
	SearchHistory(JsonStore(settings.STORAGE_PATH), settings.RECENT_SEARCH_LIMIT).record(bundle.topic)

	print(json.dumps(to_jsonable(bundle), indent=2, ensure_ascii=False))


def run_history(args):
	from studyhub.config.settings import settings
	from studyhub.storage import JsonStore, SearchHistory

	history = SearchHistory(JsonStore(settings.STORAGE_PATH), settings.RECENT_SEARCH_LIMIT)
	if args.clear:
		history.clear()
		print('Search history cleared')
		return

	recent = history.recent()
	if not recent:
		print('No recent searches')
	for index, topic in enumerate(recent, 1):
		print(f'{index}. {topic}')


def run_notes(args):
	from studyhub.config.settings import settings
	from studyhub.core.factory import create_note_service
	from studyhub.export import export_note
	from studyhub.storage import JsonStore, NoteStore

	service = create_note_service(settings)

	if args.source == 'video':
		note = asyncio.run(service.analyze_video(args.url or '', args.title))
	elif args.source == 'article':
		content = Path(args.file).read_text(encoding='utf-8') if args.file else ''
		note = asyncio.run(service.analyze_article(content, args.title, args.url))
	else:
		text = Path(args.text_file).read_text(encoding='utf-8') if args.text_file else None
		note = asyncio.run(service.analyze_pdf(args.file or '', args.title, text))

	NoteStore(JsonStore(settings.STORAGE_PATH)).save(note)
	print(f'Notes saved: {note.title} ({note.id})')

	if args.export:
		exported = export_note(note, args.export)
		settings.EXPORT_DIR.mkdir(parents=True, exist_ok=True)
		output_path = settings.EXPORT_DIR / exported.filename
		output_path.write_bytes(exported.content)
		print(f'Exported to: {output_path}')


def main():
	load_dotenv()

	parser = argparse.ArgumentParser(description='StudyHub')
	parser.add_argument('--log-level', help='Override LOG_LEVEL for this run, e.g. DEBUG')
	subparsers = parser.add_subparsers(dest='command', required=True)

	search_parser = subparsers.add_parser('search', help='Search a topic and generate study material')
	search_parser.add_argument('topic', help='Topic to study')
	search_parser.set_defaults(handler=run_search)

	history_parser = subparsers.add_parser('history', help='Show recent searches')
	history_parser.add_argument('--clear', action='store_true', help='Forget recent searches')
	history_parser.set_defaults(handler=run_history)

	notes_parser = subparsers.add_parser('notes', help='Generate study notes')
	notes_parser.add_argument('source', choices=['video', 'article', 'pdf'])
	notes_parser.add_argument('--title', required=True, help='Title of the source')
	notes_parser.add_argument('--url', help='Video or article URL')
	notes_parser.add_argument('--file', help='Article text file or PDF path')
	notes_parser.add_argument('--text-file', help='Text already extracted from the PDF')
	notes_parser.add_argument('--export', choices=['txt', 'md', 'docx', 'pdf'], help='Also export the notes')
	notes_parser.set_defaults(handler=run_notes)

	args = parser.parse_args()
	if args.log_level:
		from studyhub.config.settings import settings
		from studyhub.utils.logger import configure_logging

		configure_logging(args.log_level, settings.LOG_FILE)

	args.handler(args)


if __name__ == '__main__':
	from studyhub.errors import ValidationError

	try:
		main()
	except ValidationError as e:
		print(f'\n{e}')
		sys.exit(2)
	except KeyboardInterrupt:
		print('\n\nInterrupted.')
		sys.exit(0)
	except Exception as e:
		print(f'\nError: {e}')
		sys.exit(1)
