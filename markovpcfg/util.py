"""Misc code to avoid cyclic imports."""
import sys
import gzip
import logging
import traceback
from functools import wraps


def workerfunc(func):
	"""Wrap a multiprocessing worker function to produce a full traceback."""
	@wraps(func)
	def wrapper(*args, **kwds):
		"""Apply decorated function."""
		try:
			return func(*args, **kwds)
		except Exception:  # pylint: disable=W0703
			# Put traceback as string into an exception and raise that
			raise Exception('in worker process\n%s' %
					''.join(traceback.format_exception(*sys.exc_info())))
	return wrapper


def openread(filename, encoding='utf8'):
	"""Open stdin/file for reading; decompress gz files on-the-fly.

	:param encoding: if None, mode is binary; otherwise, text."""
	mode = 'rb' if encoding is None else 'rt'
	if filename == '-':
		return open(sys.stdin.fileno(), mode=mode, encoding=encoding,
				closefd=False)
	if filename.endswith('.gz'):
		return gzip.open(filename, mode=mode, encoding=encoding)
	return open(filename, mode=mode, encoding=encoding)


def openwrite(filename, encoding='utf8'):
	"""Open stdout/file for writing in text mode."""
	if filename == '-':
		return open(sys.stdout.fileno(), mode='w', encoding=encoding,
				closefd=False)
	return open(filename, mode='w', encoding=encoding)


def setuplogging(verbosity=1):
	"""Log to stderr, in a format with just the message.

	:param verbosity: 0: warnings and errors; 1: progress; 2: details."""
	formatstr = '%(message)s'
	if verbosity == 0:
		logging.basicConfig(level=logging.WARNING, format=formatstr)
	elif verbosity == 1:
		logging.basicConfig(level=logging.INFO, format=formatstr)
	else:
		logging.basicConfig(level=logging.DEBUG, format=formatstr)


__all__ = ['workerfunc', 'openread', 'openwrite', 'setuplogging']
