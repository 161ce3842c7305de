import logging
import logging.handlers

# Send log records to the console in the foreground, to syslog when daemonized.
def ConfigureLogging(log_level, mountpoint, foreground=True, handler=None):
	logger = logging.getLogger('')

	if (handler is None):
		if (foreground):
			handler = logging.StreamHandler()
		else:
			handler = logging.handlers.SysLogHandler(address='/dev/log')

	if (foreground):
		fmt = logging.Formatter(fmt=("%(asctime)s spiderfs[%(process)d]: " +
									 str(mountpoint) + " %(levelname)s: %(message)s"))
	else:
		fmt = logging.Formatter(fmt=("spiderfs[%(process)d]: " +
									 str(mountpoint) + ": %(levelname)s: %(message)s"))

	handler.setFormatter(fmt)
	logger.addHandler(handler)
	logger.setLevel(log_level)
	return handler
