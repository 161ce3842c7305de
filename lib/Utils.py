import re
import errno
import logging

# Longest name a single path segment may carry, in bytes.
MAX_NAMELEN = 255


# Raise ENAMETOOLONG if name cannot be stored in a directory.
def check_name(name):
	if len(name.encode('utf-8')) > MAX_NAMELEN:
		raise IOError(errno.ENAMETOOLONG, f"name too long: {name[:32]}...")


def parse_size(size_str):
	if (type(size_str) == int):
		return size_str

	multipliers = {
		't': 1000**4,
		'g': 1000**3,
		'm': 1000**2,
		'k': 1000**1,
		'tb': 1000**4,
		'gb': 1000**3,
		'mb': 1000**2,
		'kb': 1000**1,
		'tib': 1024**4,
		'gib': 1024**3,
		'mib': 1024**2,
		'kib': 1024**1,
	}
	size_re = re.compile(r'^\s*(\d+)\s*(%s)?\s*$' % ("|".join(list(multipliers.keys())),),
						 re.I)

	m = size_re.match(size_str)
	if not m:
		raise ValueError("not a valid size specifier")

	size = int(m.group(1))
	multiplier = m.group(2)
	if multiplier is not None:
		try:
			size *= multipliers[multiplier.lower()]
		except KeyError:
			raise ValueError("invalid size multiplier")

	return size


# Modes arrive either as ints or as octal strings from the command line ("755", "0o755").
def parse_mode(mode_str):
	if (type(mode_str) == int):
		return mode_str

	try:
		return int(str(mode_str).strip(), 8)
	except ValueError:
		raise ValueError("invalid mode specifier")


def parse_log_level(log_level):
	try:
		return {'error': logging.ERROR,
				'warning': logging.WARNING,
				'info': logging.INFO,
				'debug': logging.DEBUG}[log_level.lower()]
	except (KeyError, AttributeError):
		raise ValueError("invalid log level specifier")
