# services/metaconvert/main.py
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, TextIO, Tuple

from pydantic import ValidationError

from app.settings import ConverterSettings
from core.exceptions import InvalidFrameError
from core.models import FrameInput, Segment, VideoFrame, VideoInfo
from shared.config.logging_config import configure_logging
from .converter import MetaConverter
from .sinks import StreamMessageSink

logger = logging.getLogger(__name__)


class MetaConvertService:
    """Converts a stream of JSON frame descriptions, one frame per line"""

    def __init__(self, converter: MetaConverter, segment: Optional[Segment] = None):
        self.converter = converter
        self.segment = segment or Segment()

        self.processed_count = 0
        self.failed_count = 0

    def run(self, stream: TextIO) -> bool:
        """Convert every frame of the stream; False if any frame failed"""
        for line_number, frame in self.read_frames(stream):
            if frame is None:
                self.failed_count += 1
                continue

            if self.converter.convert(frame, self.segment):
                self.processed_count += 1
            else:
                self.failed_count += 1
                logger.warning(f"⚠️ Frame on line {line_number} was not converted")

        logger.info(f"📊 Conversion finished: {self.get_stats()}")
        return self.failed_count == 0

    def read_frames(self, stream: TextIO) -> Iterator[Tuple[int, Optional[VideoFrame]]]:
        for line_number, line in enumerate(stream, start=1):
            if not line.strip():
                continue
            try:
                yield line_number, parse_frame(line, line_number)
            except InvalidFrameError as e:
                logger.error(f"❌ {e}")
                yield line_number, None

    def get_stats(self) -> Dict[str, Any]:
        return {
            'processed_count': self.processed_count,
            'failed_count': self.failed_count
        }


def parse_frame(line: str, line_number: Optional[int] = None) -> VideoFrame:
    """Parse one JSON frame description into a VideoFrame"""
    location = f" on line {line_number}" if line_number is not None else ""
    try:
        return FrameInput.model_validate(json.loads(line)).to_video_frame()
    except ValidationError as e:
        raise InvalidFrameError(f"Invalid frame{location}: {e.error_count()} validation error(s)\n{e}", line_number)
    except ValueError as e:
        raise InvalidFrameError(f"Invalid frame{location}: {e}", line_number)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='metaconvert',
        description='Convert per-frame analytics metadata into JSON messages'
    )
    parser.add_argument('input', help="JSON lines file with one frame per line ('-' for stdin)")
    parser.add_argument('-o', '--output', help='Output file (default: stdout)')
    parser.add_argument(
        '--add-tensor-data',
        action='store_true',
        default=None,
        help='Include raw tensor data of regions and frames'
    )
    parser.add_argument(
        '--add-empty-results',
        action='store_true',
        default=None,
        help='Post a message even for frames without detections'
    )
    parser.add_argument('--source', help='Source URI written to every message')
    parser.add_argument('--tags', help='JSON object written as "tags" to every message')
    parser.add_argument('--json-indent', type=int, help='Indent messages (-1 for compact output)')
    parser.add_argument('--width', type=int, help='Frame width for "resolution"')
    parser.add_argument('--height', type=int, help='Frame height for "resolution"')
    parser.add_argument('--segment-start', type=int, default=0, help='Segment start (ns)')
    parser.add_argument('--segment-time', type=int, default=0, help='Segment stream time (ns)')
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Set logging level'
    )
    parser.add_argument('--log-format', choices=['json', 'console'], help='Log output format')
    return parser


def _settings_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    # Only explicit flags override environment/.env values
    overrides = {
        'add_tensor_data': args.add_tensor_data,
        'add_empty_results': args.add_empty_results,
        'source': args.source,
        'tags': args.tags,
        'json_indent': args.json_indent,
        'log_level': args.log_level,
        'log_format': args.log_format,
    }
    return {key: value for key, value in overrides.items() if value is not None}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if (args.width is None) != (args.height is None):
        parser.error("--width and --height must be given together")

    try:
        settings = ConverterSettings(**_settings_overrides(args))
    except ValidationError as e:
        parser.error(str(e))

    configure_logging(
        log_level=settings.log_level,
        log_format=settings.log_format,
        log_file_path=settings.log_file_path,
        log_max_size=settings.log_max_size,
        log_backup_count=settings.log_backup_count
    )

    info = VideoInfo(width=args.width, height=args.height) if args.width is not None else None
    segment = Segment(start=args.segment_start, time=args.segment_time)

    output = open(args.output, 'w', encoding='utf-8') if args.output else sys.stdout
    try:
        converter = MetaConverter.from_settings(settings, sink=StreamMessageSink(output), info=info)
        service = MetaConvertService(converter, segment)

        if args.input == '-':
            success = service.run(sys.stdin)
        else:
            with Path(args.input).open('r', encoding='utf-8') as stream:
                success = service.run(stream)
    except KeyboardInterrupt:
        logger.info("🛑 metaconvert stopped by user")
        return 130
    finally:
        if output is not sys.stdout:
            output.close()

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
