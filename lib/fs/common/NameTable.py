"""
lib/fs/common/NameTable.py

Purpose:
An ordered, name-keyed collection of inodes. Each Directory keeps one for its child directories and one for its child files.

Place in Architecture:
The leaf of the data model. Directory listing order is the NameTable insertion order.

Interface:

	Add(inode): Insert an inode under its own name. EEXIST on duplicates.
	Remove(name): Detach and return the inode with the given name. ENOENT if absent.
	Get(name, default=None): Lookup without detaching.
	GetNames(): Snapshot of the names, in insertion order.

TODOs/FIXMEs:
None.
"""

import errno

class NameTable(object):
	def __init__(this):
		# dicts keep insertion order, which is the listing order.
		this.entries = {}

	def __contains__(this, name):
		return name in this.entries

	def __len__(this):
		return len(this.entries)

	# Iterates over a snapshot so callers may Remove while looping.
	def __iter__(this):
		return iter(list(this.entries.values()))

	def Add(this, inode):
		if (inode.name in this.entries):
			raise IOError(errno.EEXIST, f"{inode.name} already exists")
		this.entries[inode.name] = inode

	def Remove(this, name):
		try:
			return this.entries.pop(name)
		except KeyError:
			raise IOError(errno.ENOENT, f"no such entry: {name}")

	def Get(this, name, default=None):
		return this.entries.get(name, default)

	def GetNames(this):
		return list(this.entries.keys())
