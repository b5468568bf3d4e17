import argparse

from dotenv import load_dotenv


def main():
	load_dotenv()

	parser = argparse.ArgumentParser(description='Run the StudyHub API server')
	parser.add_argument('--host', default='127.0.0.1', help='Interface to bind')
	parser.add_argument('--port', type=int, default=8000, help='Port to listen on')
	parser.add_argument('--reload', action='store_true', help='Reload on code changes')
	args = parser.parse_args()

	import uvicorn

	from studyhub.utils.logger import logger

	logger.info(f'Serving StudyHub API on http://{args.host}:{args.port}/api')
	uvicorn.run('studyhub.api.main:app', host=args.host, port=args.port, reload=args.reload, server_header=False)


if __name__ == '__main__':
	main()
