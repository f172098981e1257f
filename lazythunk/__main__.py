import argparse
import json
import logging
import sys

from . import combinators
from . import construct
from . import formatter
from . import generators
from . import parameters


log = logging.getLogger(__name__)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='lazythunk', description='Print lazy lists')
	parser.add_argument('--parameter-file', action='append', default=[], help='JSON file of parameters, may be given more than once')
	parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS, help='Overrides the logging level from the parameters')
	commands = parser.add_subparsers(dest='command', required=True)
	range_parser = commands.add_parser('range', help='Print the numbers from start up to end, one per line')
	range_parser.add_argument('start', type=int)
	range_parser.add_argument('end', type=int, nargs='?', help='Leave out for a list that never ends')
	range_parser.add_argument('-n', '--take', type=int, help='Only print this many elements')
	array_parser = commands.add_parser('array', help='Print the elements of a JSON array, one per line')
	array_parser.add_argument('array', type=json.loads)
	array_parser.add_argument('-n', '--take', type=int, help='Only print this many elements')
	show_parser = commands.add_parser('show', help='Print a JSON array as a single formatted line')
	show_parser.add_argument('array', type=json.loads)
	return parser.parse_args(argv)


def retrieve_parameters(filenames):
	for i in filenames:
		with open(i) as f:
			yield json.load(f)


def build_list(args):
	if args.command == 'range':
		xs = generators.range(args.start, args.end)
	else:
		xs = construct.from_array(args.array)
	if getattr(args, 'take', None) is not None:
		xs = combinators.take(args.take, xs)
	return xs


def main(argv=None):
	args = parse_arguments(argv)
	params = parameters.load_parameters(list(retrieve_parameters(args.parameter_file)))
	logging.basicConfig(level = args.log_level or params.logging.level)
	log.info('Running %s command', args.command)
	format_options = {
		'limit': params.format.limit,
		'separator': params.format.separator,
		'pretty_sympy': params.format.sympy,
	}
	xs = build_list(args)
	try:
		if args.command == 'show':
			print(formatter.format(xs, **format_options))
		else:
			construct.print_list(xs, **format_options)
	except KeyboardInterrupt:
		print('Operation halted by keyboard interrupt')
		return 1
	return 0


if __name__ == '__main__':
	sys.exit(main())
