"""
File FS Operations
------------------

Purpose:
	Implements create, open, read, write and truncate.

Role in Architecture:
	- Mixed into the Tree; relies on the FSOp lookups and the Tree lock.
	- File data lives in the ContentArena. Hardlinked names share one content id, so a write through any name is seen through all of them.
	- create below the root asks the provisioning hook for initial content. The hook runs without the lock; the file exists, empty, until its result is applied.

Interface:
	- create(path, mode, uid=None, gid=None)
	- open(path): existence check only; no handle is kept.
	- read(path, size, offset): RETURNS at most size bytes, never past the end of the file.
	- write(path, data, offset): RETURNS len(data). Writing past the end zero fills the gap.
	- truncate(path, size)
	- Raise IOError with errno codes on failure.
"""

import errno
import logging
import stat

from ...Upath import UniversalPath
from ..common.FSOp import FSOp
from ..File import File

class FileOps(FSOp):

	def create(this, path, mode, uid=None, gid=None):
		upath = UniversalPath(path)
		if (upath.IsRoot()):
			raise IOError(errno.EEXIST, "cannot create root directory")

		uid, gid = this.GetOwner(uid, gid)
		with this.lock:
			parent, name = this.ResolveParent(upath)
			this.CheckNewEntry(parent, name)

			id = this.arena.Allocate()
			file = File(name, stat.S_IFREG | stat.S_IMODE(mode), uid, gid, id=id, content=id)
			parent.files.Add(file)
			parent.mtime = file.ctime

			provision = this.hook is not None and parent is not this.root

		logging.debug(f"Created file {upath.AsPath()}")

		if (provision):
			data = this.Provision(this.GetContextKey(upath.GetParent()), name)
			if (data):
				with this.lock:
					this.MaterializeFile(file, data)

	# Writes that landed while the hook ran take precedence over provisioned content.
	def MaterializeFile(this, file, data):
		if (file.destroyed or file.content is None):
			logging.debug(f"File {file.name} was removed before it could be provisioned")
			return

		if (len(this.arena.Get(file.content))):
			logging.info(f"Not provisioning {file.name}: it was written to first")
			return

		this.arena.Fill(file.content, data)
		logging.debug(f"Provisioned {file.name} with {len(data)} bytes")

	def open(this, path):
		with this.lock:
			this.GetFile(path)

	def read(this, path, size, offset):
		if (size < 0 or offset < 0):
			raise IOError(errno.EINVAL, f"invalid read of {size} bytes at {offset}")

		with this.lock:
			file = this.GetFile(path)
			return this.arena.Read(this.GetContentId(file), size, offset)

	def write(this, path, data, offset):
		if (offset < 0):
			raise IOError(errno.EINVAL, f"invalid write at {offset}")

		with this.lock:
			file = this.GetFile(path)
			return this.arena.Write(this.GetContentId(file), data, offset)

	def truncate(this, path, size):
		if (size < 0):
			raise IOError(errno.EINVAL, f"invalid size {size}")

		with this.lock:
			file = this.GetFile(path)
			this.arena.Truncate(this.GetContentId(file), size)
