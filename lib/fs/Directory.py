"""
lib/fs/Directory.py

Purpose:
Implements a Directory inode (subclass of Inode) specialized for directories.

Place in Architecture:
A Directory owns its children: one NameTable of child directories and one of child files. Destroying a Directory destroys its whole subtree. A Directory with a link_target is a symlink placeholder pointing at a directory and keeps no children.

Interface:

	__init__(name, mode, uid, gid, id): Initializes an empty directory.
	HasChild(name): Whether any child, file or directory, is called name.
	GetChild(name): The child directory or file called name, or None.
	GetChildNames(): Child directory names, then child file names.
	GetLinkCount(), GetSize(): The synthetic attribute policy (see below).
	Destroy(arena): Release the whole subtree.

TODOs/FIXMEs:
None.
"""

from .common.Inode import Inode
from .common.NameTable import NameTable

class Directory (Inode):
	def __init__(this, name, mode, uid=0, gid=0, id=None):
		super().__init__(name, mode, uid, gid, id)

		this.dirs = NameTable()
		this.files = NameTable()

	def __len__(this):
		return len(this.dirs) + len(this.files)

	# Files and directories share one namespace per directory.
	def HasChild(this, name):
		return name in this.dirs or name in this.files

	def GetChild(this, name):
		ret = this.dirs.Get(name)
		if (ret is None):
			ret = this.files.Get(name)
		return ret

	def GetChildNames(this):
		return this.dirs.GetNames() + this.files.GetNames()

	# Directory attributes are synthetic:
	# nlink is 2 plus one per direct child, size is the sum of the child name lengths.
	def GetLinkCount(this):
		return 2 + len(this)

	def GetSize(this):
		return sum(len(name.encode('utf-8')) for name in this.GetChildNames())

	# Iterative: trees may be deeper than the recursion limit.
	def Destroy(this, arena):
		stack = [this]
		while (stack):
			directory = stack.pop()
			for file in directory.files:
				directory.files.Remove(file.name)
				file.Destroy(arena)

			for child in directory.dirs:
				directory.dirs.Remove(child.name)
				stack.append(child)

			Inode.Destroy(directory, arena)
