"""
This is an interactive evaluator for the Xinter expression language.

For example:

    xinter

starts an interactive session. Inside it, besides ordinary lines like
`x = 2 + 3 * 4` or `log x`, a few words are reserved:

    calc / decalc   echo the value of every bare expression (or stop)
    dev / undev     trace the scanner and parser step by step (or stop)
    run             replay every line entered so far
    exit            leave

    xinter script.xi

runs the lines of script.xi first, then stops unless -i is given.
"""
import sys, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="xinter",
	description="Interactive evaluator for the Xinter expression language.",
	formatter_class=argparse.RawDescriptionHelpFormatter,
	epilog=__doc__.strip(),
)
parser.add_argument("script", nargs="?", help="a file of lines to run before (or instead of) typing them.")
parser.add_argument('-c', "--calc", action="store_true", help="Start in calc mode.")
parser.add_argument('-d', "--dev", action="store_true", help="Start in developer (tracing) mode.")
parser.add_argument('-i', "--interactive", action="store_true", help="Keep reading from the keyboard after the script.")
parser.add_argument('-v', "--verbose", action="count", help="Chatter about what the session is doing, on stderr.")

def run(args):
	from .diagnostics import Report
	from .session import Session
	report = Report(verbose=args.verbose)
	session = Session(report=report)
	session.calc_mode = args.calc
	session.debug_mode = args.dev
	if args.script:
		path = Path.cwd() / args.script
		report.info("Reading", path)
		try:
			with open(path, "r", encoding="utf-8") as fh:
				lines = fh.read().splitlines()
		except OSError as ex:
			print("Could not read %s: %s" % (path, ex), file=sys.stderr)
			return 1
		if not session.feed(lines) or not args.interactive:
			return 0
	session.interact()
	return 0

def main(argv=None):
	return run(parser.parse_args(argv))

