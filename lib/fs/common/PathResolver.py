import errno

from ...Upath import UniversalPath

# Walk from root to the directory containing the final segment of upath.
# Only child directories are followed; a file or a directory symlink in the middle of the path is ENOENT.
# The root itself has no parent, so callers must handle it before resolving.
# RETURNS [root, ..., parent]: every directory walked, outermost first.
def ResolveChain(root, upath):
	upath = UniversalPath(upath)
	if (upath.IsRoot()):
		raise IOError(errno.EINVAL, "the root directory has no parent")

	ret = [root]
	for segment in upath.segments[:-1]:
		child = ret[-1].dirs.Get(segment)
		if (child is None or child.IsLink()):
			raise IOError(errno.ENOENT, f"{upath.AsPath()}: no such directory {segment}")
		ret.append(child)

	return ret


# RETURNS (parent, name)
def ResolveParent(root, upath):
	upath = UniversalPath(upath)
	return ResolveChain(root, upath)[-1], upath.GetName()
