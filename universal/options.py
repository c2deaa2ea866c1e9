import sys
from optparse import OptionParser


def exec_main(parser, function):
    (options, args) = parser.parse_args()
    if len(args) != 1:
        sys.stderr.write("Please provide a character name as a command-line argument.\n")
        parser.print_usage(sys.stderr)
        sys.exit(1)
    if options.stdout and not options.dryrun:
        sys.stderr.write("-s/--stdout requires -d/--dry-run\n")
        sys.exit(1)
    if options.timeout <= 0:
        sys.stderr.write("-t/--timeout must be a positive number of seconds\n")
        sys.exit(1)
    return function(args[0], options)


def option_parser(usage):
    parser = OptionParser(usage=usage)
    parser.add_option(
        "-o", "--output", dest="output", default="_",
        help="Output data directory, created if missing. (default: _)")
    parser.add_option(
        "-d", "--dry-run", dest="dryrun", default=False, action="store_true",
        help="Dry run (no actual output)")
    parser.add_option(
        "-k", "--skip-schema", dest="skip_schema", default=False, action="store_true",
        help="Skip schema validation")
    parser.add_option(
        "-s", "--stdout", dest="stdout", default=False, action="store_true",
        help="Write json to stdout")
    parser.add_option(
        "-t", "--timeout", dest="timeout", default=30.0, type="float",
        help="Seconds to wait for the page to download (default: 30)")
    parser.add_option(
        "--no-skill-priority", dest="skill_priority", default=True,
        action="store_false",
        help="Leave skill priority out of the extracted build")
    return parser
