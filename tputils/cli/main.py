import argparse
import logging
import random
import sys

from tputils.utils import array_utils, char_sequence_utils
from tputils.utils.config import Config, print_config
from tputils.utils.log import initialize_log

logger = logging.getLogger(__name__)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='tputils-cli',
        description='Run sequence and string helpers from the command line.',
        epilog='Example: tputils-cli shift 3 1 2 3 4 5 6 7',
    )
    parser.add_argument(
        '-c',
        '--config',
        default='config.yaml',
        help='Path to the YAML configuration file.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    shift = subparsers.add_parser('shift', help='Rotate values to the right.')
    shift.add_argument('offset', type=int, help='Positions to rotate, negative rotates left.')
    shift.add_argument('values', nargs='+', help='Values to rotate.')
    shift.add_argument('--start', type=int, default=None, help='First index of the range.')
    shift.add_argument('--end', type=int, default=None, help='Exclusive end of the range.')

    shuffle = subparsers.add_parser('shuffle', help='Randomly permute values.')
    shuffle.add_argument('values', nargs='+', help='Values to shuffle.')

    abbreviate = subparsers.add_parser('abbreviate', help='Shorten text with a marker.')
    abbreviate.add_argument('text', help='Text to abbreviate.')
    abbreviate.add_argument('width', type=int, help='Maximum width of the result.')
    abbreviate.add_argument('--offset', type=int, default=0, help='Left edge offset.')

    pad = subparsers.add_parser('pad', help='Pad text up to a size.')
    pad.add_argument('text', help='Text to pad.')
    pad.add_argument('size', type=int, help='Size of the result.')
    side = pad.add_mutually_exclusive_group()
    side.add_argument('--left', dest='side', action='store_const', const='left')
    side.add_argument('--right', dest='side', action='store_const', const='right')
    side.add_argument('--center', dest='side', action='store_const', const='center')
    pad.set_defaults(side='left')

    return parser.parse_args(argv)


def run_shift(args: argparse.Namespace, config: Config) -> str:
    values = list(args.values)
    array_utils.shift(values, args.offset, args.start, args.end)
    return ' '.join(values)


def run_shuffle(args: argparse.Namespace, config: Config) -> str:
    values = list(args.values)
    logger.debug(f'Shuffling with seed: {config.shuffle_seed}')
    array_utils.shuffle(values, random.Random(config.shuffle_seed))
    return ' '.join(values)


def run_abbreviate(args: argparse.Namespace, config: Config) -> str:
    return char_sequence_utils.abbreviate(
        args.text, args.width, offset=args.offset, marker=config.abbrev_marker
    )


def run_pad(args: argparse.Namespace, config: Config) -> str:
    pads = {
        'left': char_sequence_utils.left_pad,
        'right': char_sequence_utils.right_pad,
        'center': char_sequence_utils.center,
    }
    return pads[args.side](args.text, args.size, config.pad_char)


COMMANDS = {
    'shift': run_shift,
    'shuffle': run_shuffle,
    'abbreviate': run_abbreviate,
    'pad': run_pad,
}


def main(argv: list[str] | None = None) -> int:
    args = parse_arguments(argv)
    try:
        config = Config(args.config)
        initialize_log(config.log_level)
        print_config(config)

        logger.debug(f'Running command: {args.command}')
        print(COMMANDS[args.command](args, config))
    except (ValueError, TypeError, IndexError) as e:
        logger.critical(f'Command {args.command} failed: {e}')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
