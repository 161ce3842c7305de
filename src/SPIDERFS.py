import logging
import fuse

from libspiderfs import SpiderFS

from .Utils import ConfigureLogging
from .FuseMethod import FuseMethod

fuse.fuse_python_api = (0, 2)

# SPIDERFS is a SpiderFS that mounts to the local filesystem.
# Name is caps to make it executable per eons weirdness.
class SPIDERFS(SpiderFS, fuse.Fuse):
	def __init__(this, name="SpiderFS"):
		super(SPIDERFS, this).__init__(name)

		this.arg.kw.required.append("mount")

		this.arg.kw.optional["daemon"] = False

		# Supported FUSE args
		this.arg.kw.optional["multithreaded"] = True


	def Function(this):
		ConfigureLogging(this.log_level, this.mount, foreground=not this.daemon)

		# fuse.Fuse resets multithreaded on construction.
		multithreaded = bool(this.multithreaded)
		fuse.Fuse.__init__(this, dash_s_do='setsingle')
		this.multithreaded = multithreaded

		this.fuse_args = fuse.FuseArgs()
		this.fuse_args.mountpoint = this.mount

		if (not this.daemon):
			this.fuse_args.setmod('foreground')

		logging.info(f"Mounting at {this.mount}")
		try:
			fuse.Fuse.main(this)
		finally:
			this.Teardown()

	# New entries belong to the calling process.
	def GetCaller(this):
		context = this.GetContext()
		return context.get('uid'), context.get('gid')

	# -- Directory ops

	@FuseMethod
	def readdir(this, path, offset):
		return [fuse.Direntry(name) for name in this.tree.readdir(path)]

	@FuseMethod
	def mkdir(this, path, mode):
		uid, gid = this.GetCaller()
		this.tree.mkdir(path, mode, uid, gid)
		return 0

	@FuseMethod
	def rmdir(this, path):
		this.tree.rmdir(path)
		return 0

	# -- File ops

	@FuseMethod
	def create(this, path, flags, mode):
		uid, gid = this.GetCaller()
		this.tree.create(path, mode, uid, gid)
		return 0

	@FuseMethod
	def open(this, path, flags):
		this.tree.open(path)
		return 0

	@FuseMethod
	def read(this, path, size, offset):
		return this.tree.read(path, size, offset)

	@FuseMethod
	def write(this, path, data, offset):
		return this.tree.write(path, data, offset)

	@FuseMethod
	def truncate(this, path, size):
		this.tree.truncate(path, size)
		return 0

	@FuseMethod
	def release(this, path, flags):
		return 0

	@FuseMethod
	def fsync(this, path, isfsyncfile):
		return 0

	# -- Link ops

	@FuseMethod
	def unlink(this, path):
		this.tree.unlink(path)
		return 0

	@FuseMethod
	def link(this, path, path1):
		this.tree.link(path, path1)
		return 0

	@FuseMethod
	def symlink(this, path, path1):
		uid, gid = this.GetCaller()
		this.tree.symlink(path, path1, uid, gid)
		return 0

	@FuseMethod
	def readlink(this, path):
		return this.tree.readlink(path)

	# -- Handleless ops

	@FuseMethod
	def getattr(this, path):
		st = fuse.Stat()
		for key, value in this.tree.getattr(path).items():
			setattr(st, key, value)
		return st

	@FuseMethod
	def rename(this, path, path1):
		this.tree.rename(path, path1, 0)
		return 0

	@FuseMethod
	def chmod(this, path, mode):
		this.tree.chmod(path, mode)
		return 0

	@FuseMethod
	def chown(this, path, user, group):
		this.tree.chown(path, user, group)
		return 0

	@FuseMethod
	def utimens(this, path, ts_acc, ts_mod):
		this.tree.utimens(
			path,
			ts_acc.tv_sec + ts_acc.tv_nsec / 1e9,
			ts_mod.tv_sec + ts_mod.tv_nsec / 1e9
		)
		return 0

	@FuseMethod
	def access(this, path, mode):
		this.tree.access(path, mode)
		return 0

	@FuseMethod
	def statfs(this):
		st = fuse.StatVfs()
		for key, value in this.tree.statfs().items():
			setattr(st, key, value)
		return st


def main():
	SPIDERFS()()
