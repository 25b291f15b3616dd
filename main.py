"""mailbody - email body conversion between plain text, Markdown and HTML

Main entry point for the mailbody command line.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from mailbody.compose import compose_forward_html, message_body_text
from mailbody.document import extract_body_content
from mailbody.render import parse_body_format, render_body, render_body_inner
from mailbody.utils.markdown_render import MAX_QUOTE_DEPTH, QUOTE_DEPTH_CEILING

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _parse_positive_int(env_name: str, default: int, maximum: int) -> int:
    """Return a positive int up to maximum from the environment, or default when unset."""
    value = os.getenv(env_name)
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise ValueError(f"{env_name} must be a positive integer") from exc
    if parsed <= 0:
        raise ValueError(f"{env_name} must be a positive integer")
    if parsed > maximum:
        raise ValueError(f"{env_name} must not exceed {maximum}")
    return parsed


def load_config():
    """Load configuration from environment variables

    Returns:
        Dictionary with configuration values
    """
    load_dotenv()

    config = {
        'body_format': os.getenv('MAILBODY_FORMAT', 'text').strip().lower(),
        'log_level': os.getenv('MAILBODY_LOG_LEVEL', 'INFO').strip().upper(),
        'log_file': os.getenv('MAILBODY_LOG_FILE') or None,
    }

    try:
        config['max_quote_depth'] = _parse_positive_int(
            'MAILBODY_MAX_QUOTE_DEPTH', MAX_QUOTE_DEPTH, QUOTE_DEPTH_CEILING
        )
    except ValueError:
        logger.error(f"Invalid MAILBODY_MAX_QUOTE_DEPTH: {os.getenv('MAILBODY_MAX_QUOTE_DEPTH')}")
        raise

    # Validate log level
    if not isinstance(logging.getLevelName(config['log_level']), int):
        logger.error(f"Invalid MAILBODY_LOG_LEVEL: {config['log_level']}")
        raise ValueError("MAILBODY_LOG_LEVEL must be a logging level name such as INFO or DEBUG")

    logger.debug(f"Configuration loaded: format={config['body_format']}, "
                 f"max quote depth={config['max_quote_depth']}")

    return config


def setup_logging(level: str = 'INFO', log_file: Optional[str] = None):
    """Configure logging to stderr and, optionally, a log file"""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='mailbody',
        description='Convert email bodies between plain text, Markdown and HTML.',
    )
    commands = parser.add_subparsers(dest='command', required=True)

    render = commands.add_parser('render', help='Render a body to an HTML document')
    render.add_argument('file', nargs='?', help='Body file (default: stdin)')
    render.add_argument('--format', dest='body_format', help='text, md/markdown or html')
    render.add_argument('--fragment', action='store_true',
                        help='Print the HTML fragment without the document wrapper')

    forward = commands.add_parser('forward', help='Prepend a body above a forwarded message')
    forward.add_argument('file', nargs='?', help='Body file (default: stdin)')
    forward.add_argument('--original', required=True, help='HTML file of the original message')
    forward.add_argument('--format', dest='body_format', help='text, md/markdown or html')

    extract = commands.add_parser('extract', help='Print the inner content of a document body')
    extract.add_argument('file', nargs='?', help='HTML file (default: stdin)')

    read = commands.add_parser('read', help='Print a message body as plain text')
    read.add_argument('file', nargs='?', help='Body file (default: stdin)')
    read.add_argument('--content-type', default='html', help='Body content type (default: html)')

    return parser


def _read_input(path: Optional[str]) -> str:
    if path is None or path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def run_command(args: argparse.Namespace, config: dict) -> str:
    """Execute one parsed command and return its output"""
    body_format = parse_body_format(getattr(args, 'body_format', None) or config['body_format'])
    depth = config['max_quote_depth']

    if args.command == 'render':
        body = _read_input(args.file)
        if args.fragment:
            return render_body_inner(body, body_format, depth)
        return render_body(body, body_format, depth)

    if args.command == 'forward':
        original = _read_input(args.original)
        body = _read_input(args.file)
        return compose_forward_html(body, body_format, original, depth)

    if args.command == 'extract':
        return extract_body_content(_read_input(args.file))

    return message_body_text(_read_input(args.file), args.content_type)


def main(argv: Optional[List[str]] = None):
    """Main execution flow"""
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    setup_logging(config['log_level'], config['log_file'])

    try:
        output = run_command(args, config)
    except OSError as e:
        logger.error(f"Failed to read input: {e}")
        return 1

    sys.stdout.write(output)
    if output and not output.endswith('\n'):
        sys.stdout.write('\n')
    return 0


if __name__ == "__main__":
    sys.exit(main())
