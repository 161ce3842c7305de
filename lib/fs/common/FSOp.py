"""
lib/fs/common/FSOp.py

Purpose:
Defines the base class for File System Operations (FSOps). Each group of FSOps (directory, file, link, common) is a mixin deriving from FSOp; the Tree combines them.

Place in Architecture:
Serves as the foundation for all tree operations. It provides the lookups every operation needs: resolving paths to parents and entries, checking that a new name may be added, and building the context key handed to the provisioning hook.

Interface:

	GetRoot(): The root Directory. ENOENT once the Tree is torn down.
	ResolveParent(upath): (parent Directory, final segment).
	ResolveChain(upath): Every directory from the root down to the parent of upath.
	GetEntry(upath): The inode at upath; the root for "/".
	GetDirectory(upath): A real (non symlink) Directory at upath.
	GetFile(upath): The File at upath.
	GetContentId(file): The content id of a regular file.
	CheckNewEntry(parent, name): ENAMETOOLONG / EEXIST checks for a new child.
	GetContextKey(upath): The ancestor segments of upath joined by the query separator.
	GetOwner(uid, gid): Fill in default ownership for new entries.

TODOs/FIXMEs:
None.
"""

import errno

from ...Upath import UniversalPath
from ...Utils import check_name
from .PathResolver import ResolveParent, ResolveChain

# An FSOp, or File System Operation, performs a single operation on the tree.
# For example, making a directory, reading from a file, renaming an entry, etc.
# All FSOps should be:
# - Atomic: They hold the governing Tree's lock for as long as they touch the tree.
# - Self contained: No handle or other state is kept between operations; every call re-resolves its path.
#
# All state storage and locking capabilities are provided by the governing Tree.
# NOTE: every method here expects this.lock to be held by the caller.
class FSOp(object):

	def GetRoot(this):
		if (this.root is None):
			raise IOError(errno.ENOENT, "filesystem is not initialized")
		return this.root

	def ResolveParent(this, upath):
		return ResolveParent(this.GetRoot(), upath)

	def ResolveChain(this, upath):
		return ResolveChain(this.GetRoot(), upath)

	def GetEntry(this, upath):
		upath = UniversalPath(upath)
		if (upath.IsRoot()):
			return this.GetRoot()

		parent, name = this.ResolveParent(upath)
		ret = parent.GetChild(name)
		if (ret is None):
			raise IOError(errno.ENOENT, f"no such file or directory: {upath.AsPath()}")
		return ret

	def GetDirectory(this, upath):
		upath = UniversalPath(upath)
		if (upath.IsRoot()):
			return this.GetRoot()

		parent, name = this.ResolveParent(upath)
		ret = parent.dirs.Get(name)
		if (ret is None or ret.IsLink()):
			raise IOError(errno.ENOENT, f"no such directory: {upath.AsPath()}")
		return ret

	def GetFile(this, upath):
		upath = UniversalPath(upath)
		if (upath.IsRoot()):
			raise IOError(errno.EISDIR, "the root is a directory")

		parent, name = this.ResolveParent(upath)
		ret = parent.files.Get(name)
		if (ret is None):
			if (name in parent.dirs):
				raise IOError(errno.EISDIR, f"{upath.AsPath()} is a directory")
			raise IOError(errno.ENOENT, f"no such file: {upath.AsPath()}")
		return ret

	# Symlinks carry no content.
	def GetContentId(this, file):
		if (file.content is None):
			raise IOError(errno.EINVAL, f"{file.name} has no content")
		return file.content

	def CheckNewEntry(this, parent, name):
		check_name(name)
		if (parent.HasChild(name)):
			raise IOError(errno.EEXIST, f"{name} already exists")

	def GetContextKey(this, upath):
		return this.query_separator.join(UniversalPath(upath).segments)

	def GetOwner(this, uid=None, gid=None):
		if (uid is None or uid == -1):
			uid = this.uid
		if (gid is None or gid == -1):
			gid = this.gid
		return uid, gid
