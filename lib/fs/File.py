"""
lib/fs/File.py

Purpose:
Implements a File inode (subclass of Inode) specialized for files.

Place in Architecture:
A File is a name for content. Regular files hold the id of a Content record in the Tree's ContentArena; hardlinks are further Files holding the same id. Symlinks hold a link_target and no content.

Interface:

	__init__(name, mode, uid, gid, id, content=None): Initializes a File.
	Destroy(arena): Count *this out of its Content record.

TODOs/FIXMEs:
None.
"""

from .common.Inode import Inode

class File (Inode):
	def __init__(this, name, mode, uid=0, gid=0, id=None, content=None):
		super().__init__(name, mode, uid, gid, id)

		this.content = content # id of a Content record in the ContentArena.

	# Content is reclaimed by the arena once its last name is gone.
	def Destroy(this, arena):
		if (this.content is not None):
			arena.Release(this.content)
			this.content = None
		super().Destroy(arena)
