
import sys
import logging

# Library modules log through here so that every logger hangs off of the
#  'graphvisit' hierarchy; scripts talk to the user through notice/warn/die.

def getLogger(name=None):
	if name:
		return logging.getLogger(name)
	else:
		return logging.getLogger('graphvisit')

def set_verbosity(verbose):
	''' Configure the root logger for a script run. '''
	level = logging.DEBUG if verbose else logging.WARNING
	logging.basicConfig(level=level, format='%(name)s: %(message)s')

# think logger.info, except the name `info` already belonged to
#  a local variable in some places
def notice(msg, *args):
	print(msg % args)

def warn(msg, *args):
	print('Warning: ' + (msg % args), file=sys.stderr)

def die(msg, *args, code=1):
	print('Fatal: ' + (msg % args), file=sys.stderr)
	sys.exit(code)
