"""
Link FS Operations
------------------

Purpose:
	Implements link, symlink, readlink and unlink.

Role in Architecture:
	- Mixed into the Tree; relies on the FSOp lookups and the Tree lock.
	- A hardlink is a new File holding the same content id as its source. The content's link_count counts every such name; the content is reclaimed when the last one is unlinked, whichever name that is.
	- A symlink stores its target verbatim. Whether the placeholder is a File or a Directory depends only on what the target names in the tree at the time; a dangling target is fine.

Interface:
	- link(source, target)
	- symlink(target, linkpath, uid=None, gid=None)
	- readlink(path): RETURNS the stored target, or "" for entries that are not links.
	- unlink(path)
	- Raise IOError with errno codes on failure.
"""

import errno
import logging
import posixpath
import stat

from ...Upath import UniversalPath
from ..common.FSOp import FSOp
from ..common.PathResolver import ResolveParent
from ..Directory import Directory
from ..File import File

class LinkOps(FSOp):

	def link(this, source, target):
		source = UniversalPath(source)
		target = UniversalPath(target)
		if (target.IsRoot()):
			raise IOError(errno.EEXIST, "the root directory already exists")
		if (source.IsRoot()):
			raise IOError(errno.EINVAL, "cannot hardlink a directory")

		with this.lock:
			src_parent, src_name = this.ResolveParent(source)
			dst_parent, dst_name = this.ResolveParent(target)
			this.CheckNewEntry(dst_parent, dst_name)

			original = src_parent.files.Get(src_name)
			if (original is None):
				if (src_name in src_parent.dirs):
					raise IOError(errno.EINVAL, "cannot hardlink a directory")
				raise IOError(errno.ENOENT, f"no such file: {source.AsPath()}")

			if (original.IsLink()):
				alias = File(dst_name, original.mode, original.uid, original.gid, id=this.arena.NextId())
				alias.link_target = original.link_target
			else:
				this.arena.Acquire(original.content)
				alias = File(
					dst_name,
					original.mode,
					original.uid,
					original.gid,
					id=original.content,
					content=original.content
				)
			dst_parent.files.Add(alias)

		logging.debug(f"Linked {target.AsPath()} to {source.AsPath()}")

	def symlink(this, target, linkpath, uid=None, gid=None):
		upath = UniversalPath(linkpath)
		if (upath.IsRoot()):
			raise IOError(errno.EEXIST, "the root directory already exists")

		uid, gid = this.GetOwner(uid, gid)
		mode = stat.S_IFLNK | 0o777
		with this.lock:
			parent, name = this.ResolveParent(upath)
			this.CheckNewEntry(parent, name)

			if (this.IsDirectoryTarget(target, upath)):
				link = Directory(name, mode, uid, gid, id=this.arena.NextId())
				link.link_target = target
				parent.dirs.Add(link)
			else:
				link = File(name, mode, uid, gid, id=this.arena.NextId())
				link.link_target = target
				parent.files.Add(link)

		logging.debug(f"Symlinked {upath.AsPath()} -> {target}")

	# Relative targets are taken from the directory holding the link.
	def IsDirectoryTarget(this, target, upath):
		if (not target):
			return False

		if (not target.startswith("/")):
			target = posixpath.join(upath.GetParent().AsPath(), target)
		resolved = UniversalPath(posixpath.normpath(target))
		if (resolved.IsRoot()):
			return True

		try:
			parent, name = ResolveParent(this.GetRoot(), resolved)
		except IOError:
			return False
		return name in parent.dirs

	def readlink(this, path):
		with this.lock:
			entry = this.GetEntry(path)
			if (entry.link_target is None):
				return ""
			return entry.link_target

	# Directory symlinks are unlinked too; the kernel never rmdirs a symlink.
	def unlink(this, path):
		upath = UniversalPath(path)
		if (upath.IsRoot()):
			raise IOError(errno.EBUSY, "cannot unlink root directory")

		with this.lock:
			parent, name = this.ResolveParent(upath)
			file = parent.files.Get(name)
			if (file is not None):
				parent.files.Remove(name)
				file.Destroy(this.arena)
			else:
				directory = parent.dirs.Get(name)
				if (directory is None):
					raise IOError(errno.ENOENT, f"no such file: {upath.AsPath()}")
				if (not directory.IsLink()):
					raise IOError(errno.EISDIR, f"{upath.AsPath()} is a directory")
				parent.dirs.Remove(name)
				directory.Destroy(this.arena)

		logging.debug(f"Unlinked {upath.AsPath()}")
