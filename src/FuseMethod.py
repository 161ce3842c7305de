import errno
import logging

# Every FUSE method returns a result or a negative errno; nothing may escape to the transport.
def FuseMethod(func):
	def wrapper(*a, **kw):
		try:
			return func(*a, **kw)
		except (IOError, OSError) as e:
			if (getattr(e, 'errno', None) == errno.ENOENT):
				logging.debug("Failed operation", exc_info=True)
			else:
				logging.info("Failed operation", exc_info=True)

			if hasattr(e, 'errno') and isinstance(e.errno, int):
				# Standard operation
				return -e.errno
			return -errno.EACCES

		except Exception:
			logging.warning("Unexpected exception", exc_info=True)
			return -errno.EIO

	wrapper.__name__ = func.__name__
	wrapper.__doc__ = func.__doc__
	return wrapper
