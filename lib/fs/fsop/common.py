"""
Common FS Operations
--------------------

Purpose:
	Implements the operations that apply to files and directories alike: getattr, rename, chmod, chown, utimens, access and statfs.

Role in Architecture:
	- Mixed into the Tree; relies on the FSOp lookups and the Tree lock.
	- getattr maps an inode onto the stat fields FUSE expects. Directory sizes and link counts are synthetic; files report their shared content's size and link count; symlinks report a link count and size of 1.
	- rename moves an entry between directories without copying content. It never replaces an existing entry.

Interface:
	- getattr(path): RETURNS a dict of st_* fields.
	- rename(old, new, flags=0)
	- chmod(path, mode), chown(path, uid, gid)
	- utimens(path, atime=None, mtime=None)
	- access(path, mode)
	- statfs(): RETURNS a dict of f_* fields.
	- Raise IOError with errno codes on failure.
"""

import errno
import logging
import time

from ...Upath import UniversalPath
from ...Utils import MAX_NAMELEN
from ..common.FSOp import FSOp
from ..Directory import Directory

BLOCK_SIZE = 4096
FREE_BLOCKS = 1 << 20 # Reported, not enforced. Space is limited by memory and max_file_size only.
FREE_FILES = 1 << 20

class CommonOps(FSOp):

	def getattr(this, path):
		with this.lock:
			return this.GetAttributes(this.GetEntry(path))

	def GetAttributes(this, entry):
		ret = {
			'st_ino': entry.id,
			'st_mode': entry.mode,
			'st_uid': entry.uid,
			'st_gid': entry.gid,
			'st_atime': entry.atime,
			'st_mtime': entry.mtime,
			'st_ctime': entry.ctime,
		}

		if (entry.IsLink()):
			ret['st_nlink'] = 1
			ret['st_size'] = 1
		elif (isinstance(entry, Directory)):
			ret['st_nlink'] = entry.GetLinkCount()
			ret['st_size'] = entry.GetSize()
		else:
			content = this.arena.Get(entry.content)
			ret['st_nlink'] = content.link_count
			ret['st_size'] = len(content)
			ret['st_atime'] = content.atime
			ret['st_mtime'] = content.mtime

		return ret

	def rename(this, old, new, flags=0):
		if (flags):
			raise IOError(errno.EINVAL, f"unsupported rename flags {flags}")

		old = UniversalPath(old)
		new = UniversalPath(new)
		if (old.IsRoot() or new.IsRoot()):
			raise IOError(errno.EBUSY, "cannot rename the root directory")

		with this.lock:
			src_parent, src_name = this.ResolveParent(old)
			dst_chain = this.ResolveChain(new)
			dst_parent, dst_name = dst_chain[-1], new.GetName()
			this.CheckNewEntry(dst_parent, dst_name)

			# Files win if a name somehow appears in both tables.
			entry = src_parent.files.Get(src_name)
			if (entry is not None):
				src_table = src_parent.files
				dst_table = dst_parent.files
			else:
				entry = src_parent.dirs.Get(src_name)
				if (entry is None):
					raise IOError(errno.ENOENT, f"no such file or directory: {old.AsPath()}")
				if (any(directory is entry for directory in dst_chain)):
					raise IOError(errno.EINVAL, f"cannot move {old.AsPath()} into itself")
				src_table = src_parent.dirs
				dst_table = dst_parent.dirs

			src_table.Remove(src_name)
			entry.name = dst_name
			dst_table.Add(entry)

			now = time.time()
			entry.ctime = now
			src_parent.mtime = now
			dst_parent.mtime = now

		logging.debug(f"Renamed {old.AsPath()} to {new.AsPath()}")

	def chmod(this, path, mode):
		with this.lock:
			this.GetEntry(path).SetMode(mode)

	def chown(this, path, uid, gid):
		with this.lock:
			this.GetEntry(path).SetOwner(uid, gid)

	# File times live with the content, so every hardlink shows the same times.
	def utimens(this, path, atime=None, mtime=None):
		now = time.time()
		if (atime is None):
			atime = now
		if (mtime is None):
			mtime = now

		with this.lock:
			entry = this.GetEntry(path)
			if (isinstance(entry, Directory) or entry.content is None):
				entry.Touch(atime, mtime)
			else:
				content = this.arena.Get(entry.content)
				content.atime = atime
				content.mtime = mtime

	# Permissions are stored, never enforced.
	def access(this, path, mode):
		with this.lock:
			this.GetEntry(path)

	def statfs(this):
		with this.lock:
			used = -(-this.arena.GetTotalSize() // BLOCK_SIZE)
			files = this.CountEntries(this.GetRoot())

		return {
			'f_bsize': BLOCK_SIZE,
			'f_frsize': BLOCK_SIZE,
			'f_blocks': used + FREE_BLOCKS,
			'f_bfree': FREE_BLOCKS,
			'f_bavail': FREE_BLOCKS,
			'f_files': files + FREE_FILES,
			'f_ffree': FREE_FILES,
			'f_favail': FREE_FILES,
			'f_namemax': MAX_NAMELEN,
		}

	# Walked with an explicit stack; trees may be deeper than the recursion limit.
	def CountEntries(this, directory):
		ret = 0
		stack = [directory]
		while (stack):
			directory = stack.pop()
			ret += 1 + len(directory.files)
			for child in directory.dirs:
				if (child.IsLink()):
					ret += 1
				else:
					stack.append(child)
		return ret
