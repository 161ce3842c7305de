"""
lib/Upath.py

Purpose:
Implements a universal path class that splits absolute filesystem paths (upaths) into their segments in a consistent manner.

Place in Architecture:
Used by the Tree and its operations so that every path coming from the kernel is handled as a list of segments, never as a raw string.

Interface:

	__init__(path=""): Constructs a UniversalPath from a string or another UniversalPath.
	__str__(): Returns the normalized upath (no leading '/').
	FromPath(path): Splits a '/' delimited path, discarding empty segments.
	AsPath(): Returns the upath as an absolute path.
	IsRoot(): Whether the upath names the root directory.
	GetParent(): Returns the parent upath.
	GetName(): Returns the final segment.

TODOs/FIXMEs:
None noted.
"""

import errno

class UniversalPath:
	def __init__(this, path=""):
		if (isinstance(path, UniversalPath)):
			this.segments = list(path.segments)
			this.upath = path.upath
		elif (isinstance(path, str)):
			this.FromPath(path)
		else:
			raise IOError(errno.EINVAL, f"not a path: {path!r}")

	def __str__(this):
		return this.upath

	def __repr__(this):
		return f"<UniversalPath {this.AsPath()}>"

	# "." and ".." are not interpreted; the kernel hands us resolved paths.
	def FromPath(this, path):
		assert isinstance(path, str)
		this.segments = [segment for segment in path.split("/") if segment]
		this.upath = "/".join(this.segments)

	def AsPath(this):
		return "/" + this.upath

	def IsRoot(this):
		return not this.segments

	def GetParent(this):
		return UniversalPath("/".join(this.segments[:-1]))

	def GetName(this):
		if (not this.segments):
			return ""
		return this.segments[-1]
