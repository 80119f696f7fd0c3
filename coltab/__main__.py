import argparse
import logging
import sys

from coltab import constants
from coltab.util import ansi
from coltab.util.errors import TableError
from coltab.util.table import Table
from coltab.util.width import get_measurer


def setup(verbose=False):
    # logging to stderr so stdout carries only the table
    logging.basicConfig(format=constants.LOG_FORMAT, style='{',
                        datefmt=constants.LOG_DATE_FORMAT,
                        level=logging.DEBUG if verbose else logging.INFO,
                        handlers=[logging.StreamHandler(sys.stderr)])


def build_table(args, lines):
    table = Table(args.template, measurer=get_measurer(args.width),
                  line_end=constants.CRLF_LINE_END if args.crlf else constants.DEFAULT_LINE_END)
    bold = ansi.wrap(ansi.BOLD)
    for line in lines:
        line = line.rstrip('\r\n')
        if not line:
            continue
        if args.heading_prefix and line.startswith(args.heading_prefix):
            heading = line[len(args.heading_prefix):]
            table.add_heading(bold(heading) if args.bold_headings else heading)
        else:
            table.add_row(table.new_row(*line.split(args.delimiter)))
    return table


def main(argv=None):
    parser = argparse.ArgumentParser(prog='coltab',
                                     description='Align delimited text into columns.')
    parser.add_argument('template', help="column template, e.g. '{:>}  {:<}'")
    parser.add_argument('--input', type=argparse.FileType('r', encoding='utf-8'),
                        default=sys.stdin)
    parser.add_argument('--delimiter', default=constants.DEFAULT_DELIMITER)
    parser.add_argument('--heading-prefix', default=constants.DEFAULT_HEADING_PREFIX)
    parser.add_argument('--width', choices=('unicode', 'chars'),
                        default=constants.WIDTH_STRATEGY)
    parser.add_argument('--crlf', action='store_true')
    parser.add_argument('--bold-headings', action='store_true')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args(argv)

    setup(args.verbose)

    try:
        if args.input is sys.stdin:
            table = build_table(args, args.input)
        else:
            with args.input:
                table = build_table(args, args.input)
        output = table.render()
    except (TableError, ValueError) as e:
        logging.error(e)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
