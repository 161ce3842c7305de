"""
lib/fs/Tree.py

Purpose:
The Tree engine: a whole filesystem, held in memory. It owns the root Directory and the ContentArena, and exposes one method per filesystem operation.

Place in Architecture:
Created and torn down by the SpiderFS executor. The FUSE shell calls the operations concurrently from its worker threads; each operation holds this.lock while it touches the tree. Calls to the provisioning hook are made without the lock.

Interface:

	__init__(hook, root_mode, uid, gid, max_file_size, placeholder_name, query_separator): Configure; no root yet.
	Init(): Construct the root.
	Teardown(): Destroy every entry and all content.
	IsInitialized()
	Provision(context, query): Content for a new entry, from the hook.
	Operations: getattr, readdir, readlink, mkdir, rmdir, create, open, read, write, truncate,
		unlink, rename, link, symlink, chmod, chown, utimens, access, statfs.

TODOs/FIXMEs:
None.
"""

import os
import stat
import threading
import logging

from .common.Content import ContentArena
from .Directory import Directory
from .fsop.dir import DirectoryOps
from .fsop.file import FileOps
from .fsop.link import LinkOps
from .fsop.common import CommonOps

class Tree(DirectoryOps, FileOps, LinkOps, CommonOps):
	def __init__(this,
		hook=None,
		root_mode=0o755,
		uid=None,
		gid=None,
		max_file_size=0,
		placeholder_name="results",
		query_separator=" "
	):
		# One lock for the whole tree.
		this.lock = threading.RLock()

		this.hook = hook
		this.root_mode = root_mode
		this.uid = os.getuid() if uid is None else uid
		this.gid = os.getgid() if gid is None else gid
		this.max_file_size = max_file_size
		this.placeholder_name = placeholder_name
		this.query_separator = query_separator

		this.arena = ContentArena(max_file_size)
		this.root = None

	def __repr__(this):
		return f"<Tree ({len(this.arena)} content records)>"

	def IsInitialized(this):
		return this.root is not None

	def Init(this):
		with this.lock:
			if (this.root is not None):
				return

			this.arena = ContentArena(this.max_file_size)
			this.root = Directory(
				"",
				stat.S_IFDIR | stat.S_IMODE(this.root_mode),
				this.uid,
				this.gid,
				id=this.arena.NextId()
			)
		logging.info(f"Initialized tree (root mode {oct(this.root.mode)})")

	def Teardown(this):
		with this.lock:
			if (this.root is None):
				return

			this.root.Destroy(this.arena)
			leaked = len(this.arena)
			this.arena.Clear()
			this.root = None

		if (leaked):
			logging.error(f"{leaked} content records outlived the tree")
		logging.info("Tore down tree")

	# Never called with this.lock held: the hook may block on the network.
	def Provision(this, context, query):
		if (this.hook is None):
			return b""
		return this.hook(context, query)
