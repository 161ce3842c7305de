import errno
import stat

from StandardTestFixture import StandardTestFixture


class TestHardLinks(StandardTestFixture):

	def test_shared_content(this):
		this.tree.create("/a", 0o644)
		this.tree.link("/a", "/b")
		this.tree.write("/b", b"shared", 0)
		this.assert_equal(this.tree.read("/a", 6, 0), b"shared")

	def test_link_count(this):
		this.tree.create("/a", 0o644)
		this.tree.link("/a", "/b")
		this.tree.link("/b", "/c")
		for path in ["/a", "/b", "/c"]:
			this.assert_equal(this.tree.getattr(path)['st_nlink'], 3)

	def test_same_inode(this):
		this.tree.create("/a", 0o644)
		this.tree.link("/a", "/b")
		this.assert_equal(this.tree.getattr("/a")['st_ino'], this.tree.getattr("/b")['st_ino'])

	def test_alias_survives_original(this):
		this.tree.create("/a", 0o644)
		this.tree.write("/a", b"keep me", 0)
		this.tree.link("/a", "/b")

		this.tree.unlink("/a")
		this.assert_equal(this.tree.read("/b", 100, 0), b"keep me")
		this.assert_equal(this.tree.getattr("/b")['st_nlink'], 1)
		this.assert_equal(len(this.tree.arena), 1)

		this.tree.unlink("/b")
		this.assert_equal(len(this.tree.arena), 0)

	def test_original_survives_alias(this):
		this.tree.create("/a", 0o644)
		this.tree.link("/a", "/b")
		this.tree.unlink("/b")
		this.tree.write("/a", b"still here", 0)
		this.assert_equal(this.tree.getattr("/a")['st_nlink'], 1)

	def test_link_across_directories(this):
		this.tree.mkdir("/x", 0o755)
		this.tree.mkdir("/y", 0o755)
		this.tree.create("/x/f", 0o600)
		this.tree.link("/x/f", "/y/g")
		this.tree.write("/x/f", b"hi", 0)
		this.assert_equal(this.tree.read("/y/g", 2, 0), b"hi")
		this.assert_equal(this.tree.getattr("/y/g")['st_mode'], stat.S_IFREG | 0o600)

	def test_rmdir_keeps_outside_alias(this):
		this.tree.mkdir("/d", 0o755)
		this.tree.create("/d/f", 0o644)
		this.tree.write("/d/f", b"outlive", 0)
		this.tree.link("/d/f", "/g")

		this.tree.rmdir("/d")
		this.assert_equal(this.tree.read("/g", 100, 0), b"outlive")
		this.assert_equal(this.tree.getattr("/g")['st_nlink'], 1)

	def test_link_directory(this):
		this.tree.mkdir("/d", 0o755)
		this.assert_errno(errno.EINVAL, this.tree.link, "/d", "/e")
		this.assert_errno(errno.EINVAL, this.tree.link, "/", "/e")

	def test_link_missing(this):
		this.assert_errno(errno.ENOENT, this.tree.link, "/a", "/b")

	def test_link_collision(this):
		this.tree.create("/a", 0o644)
		this.tree.create("/b", 0o644)
		this.tree.mkdir("/c", 0o755)
		this.assert_errno(errno.EEXIST, this.tree.link, "/a", "/b")
		this.assert_errno(errno.EEXIST, this.tree.link, "/a", "/c")
		this.assert_equal(this.tree.getattr("/a")['st_nlink'], 1)

	def test_link_name_too_long(this):
		this.tree.create("/a", 0o644)
		this.assert_errno(errno.ENAMETOOLONG, this.tree.link, "/a", "/" + "b" * 256)


class TestSymlinks(StandardTestFixture):

	def test_file_symlink(this):
		this.tree.create("/target", 0o644)
		this.tree.symlink("/target", "/link")
		this.assert_equal(this.tree.readlink("/link"), "/target")
		assert "link" in this.tree.root.files

		attrs = this.tree.getattr("/link")
		assert stat.S_ISLNK(attrs['st_mode'])
		this.assert_equal(attrs['st_nlink'], 1)
		this.assert_equal(attrs['st_size'], 1)

	def test_directory_symlink(this):
		this.tree.mkdir("/target", 0o755)
		this.tree.symlink("/target", "/link")
		assert "link" in this.tree.root.dirs
		assert stat.S_ISLNK(this.tree.getattr("/link")['st_mode'])
		this.assert_equal(this.tree.readlink("/link"), "/target")

	def test_relative_directory_symlink(this):
		this.tree.mkdir("/a", 0o755)
		this.tree.mkdir("/a/b", 0o755)
		this.tree.symlink("b", "/a/link")
		assert "link" in this.tree.GetDirectory("/a").dirs
		this.assert_equal(this.tree.readlink("/a/link"), "b")

	def test_dangling_symlink(this):
		this.tree.symlink("/nowhere/at/all", "/link")
		this.assert_equal(this.tree.readlink("/link"), "/nowhere/at/all")

	def test_symlink_collision(this):
		this.tree.create("/link", 0o644)
		this.assert_errno(errno.EEXIST, this.tree.symlink, "/x", "/link")

	def test_symlink_missing_parent(this):
		this.assert_errno(errno.ENOENT, this.tree.symlink, "/x", "/no/link")

	def test_readlink_not_a_link(this):
		this.tree.create("/f", 0o644)
		this.assert_equal(this.tree.readlink("/f"), "")

	def test_readlink_missing(this):
		this.assert_errno(errno.ENOENT, this.tree.readlink, "/nope")

	def test_unlink_symlinks(this):
		this.tree.mkdir("/d", 0o755)
		this.tree.create("/f", 0o644)
		this.tree.symlink("/d", "/dl")
		this.tree.symlink("/f", "/fl")
		this.tree.unlink("/dl")
		this.tree.unlink("/fl")
		this.assert_equal(this.tree.readdir("/"), [".", "..", "d", "f"])

	def test_symlink_has_no_content(this):
		this.tree.symlink("/f", "/fl")
		this.assert_errno(errno.EINVAL, this.tree.read, "/fl", 1, 0)

	def test_hardlink_to_symlink(this):
		this.tree.symlink("/somewhere", "/l1")
		this.tree.link("/l1", "/l2")
		this.assert_equal(this.tree.readlink("/l2"), "/somewhere")
