"""
Directory FS Operations
-----------------------

Purpose:
	Implements mkdir, rmdir and readdir.

Role in Architecture:
	- Mixed into the Tree; relies on the FSOp lookups and the Tree lock.
	- mkdir below the root asks the provisioning hook for content and materializes it as a placeholder file in the new directory. The hook runs without the lock.
	- rmdir removes a whole subtree, counting every file in it out of its content.

Interface:
	- mkdir(path, mode, uid=None, gid=None)
	- rmdir(path)
	- readdir(path): RETURNS ['.', '..', child directories..., child files...]
	- Raise IOError with errno codes on failure.
"""

import errno
import logging
import stat
import time

from ...Upath import UniversalPath
from ..common.FSOp import FSOp
from ..Directory import Directory
from ..File import File

class DirectoryOps(FSOp):

	def mkdir(this, path, mode, uid=None, gid=None):
		upath = UniversalPath(path)
		if (upath.IsRoot()):
			raise IOError(errno.EEXIST, "cannot re-mkdir root directory")

		uid, gid = this.GetOwner(uid, gid)
		with this.lock:
			parent, name = this.ResolveParent(upath)
			this.CheckNewEntry(parent, name)

			directory = Directory(name, stat.S_IFDIR | stat.S_IMODE(mode), uid, gid, id=this.arena.NextId())
			parent.dirs.Add(directory)
			parent.mtime = directory.ctime

			provision = this.hook is not None and parent is not this.root

		logging.debug(f"Made directory {upath.AsPath()}")

		if (provision):
			data = this.Provision(this.GetContextKey(upath.GetParent()), name)
			with this.lock:
				this.MaterializeDirectory(directory, data)

	# The directory may have been removed or filled while the hook ran.
	def MaterializeDirectory(this, directory, data):
		if (directory.destroyed):
			logging.debug(f"Directory {directory.name} was removed before it could be provisioned")
			return

		if (directory.HasChild(this.placeholder_name)):
			logging.info(f"Not provisioning {directory.name}: {this.placeholder_name} already exists")
			return

		id = this.arena.Allocate()
		this.arena.Fill(id, data)
		directory.files.Add(File(
			this.placeholder_name,
			stat.S_IFREG | 0o644,
			directory.uid,
			directory.gid,
			id=id,
			content=id
		))
		logging.debug(f"Provisioned {directory.name} with {len(data)} bytes")

	def rmdir(this, path):
		upath = UniversalPath(path)
		if (upath.IsRoot()):
			raise IOError(errno.EBUSY, "cannot remove root directory")

		with this.lock:
			parent, name = this.ResolveParent(upath)
			directory = parent.dirs.Get(name)
			if (directory is None):
				raise IOError(errno.ENOENT, f"no such directory: {upath.AsPath()}")
			if (directory.IsLink()):
				raise IOError(errno.ENOTDIR, f"{upath.AsPath()} is a symlink")

			parent.dirs.Remove(name)
			directory.Destroy(this.arena)

		logging.debug(f"Removed directory {upath.AsPath()}")

	def readdir(this, path):
		with this.lock:
			directory = this.GetDirectory(path)
			directory.Touch(atime=time.time())
			return ['.', '..'] + directory.GetChildNames()
