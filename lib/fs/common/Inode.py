"""
lib/fs/common/Inode.py

Purpose:
Provides the base class for all in-memory filesystem inodes (files and directories). It holds the metadata every entry carries.

Place in Architecture:
A core part of the FS layer. Directory and File derive from it; the Tree operations read and mutate these fields under the Tree lock.

Interface:

	__init__(name, mode, uid, gid, id): Initializes an inode; the name is length checked.
	IsLink(): Whether *this is a symbolic link placeholder.
	SetMode(mode): Replace the permission bits, keeping the type bits.
	SetOwner(uid, gid): Replace uid and/or gid; -1 leaves a field untouched.
	Touch(atime, mtime): Update timestamps.
	Destroy(arena): Release everything *this owns. Override in your child class.

TODOs/FIXMEs:
None.
"""

import stat
import time

from ...Utils import check_name

class Inode(object):
	def __init__(this, name, mode, uid=0, gid=0, id=None):
		check_name(name)

		this.name = name
		this.mode = mode
		this.uid = uid
		this.gid = gid
		this.id = id # Stable inode number, drawn from the Tree's ContentArena.

		this.link_target = None # Only for symlinks.
		this.destroyed = False

		now = time.time()
		this.atime = now
		this.mtime = now
		this.ctime = now

	def __repr__(this):
		return f"<{this.__class__.__name__} {this.name!r} ({this.id})>"

	def IsLink(this):
		return this.link_target is not None

	def SetMode(this, mode):
		this.mode = stat.S_IFMT(this.mode) | stat.S_IMODE(mode)
		this.ctime = time.time()

	def SetOwner(this, uid, gid):
		if (uid is not None and uid != -1):
			this.uid = uid
		if (gid is not None and gid != -1):
			this.gid = gid
		this.ctime = time.time()

	def Touch(this, atime=None, mtime=None):
		if (atime is not None):
			this.atime = atime
		if (mtime is not None):
			this.mtime = mtime

	# Release everything *this owns.
	# Please override for your child class.
	def Destroy(this, arena):
		this.destroyed = True
