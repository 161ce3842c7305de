import errno
import logging
import threading

from StandardTestFixture import StandardTestFixture, RecordingProvider, BlockingProvider, FailingProvider

from libspiderfs import Tree, ProvisioningHook, NullProvider
from libspiderfs.provider.Hook import SerializeResults

RESULTS = [
	("Python", "https://www.python.org/"),
	("Python (programming language)", "https://en.wikipedia.org/wiki/Python_(programming_language)"),
]
SERIALIZED = (
	b"Python\nhttps://www.python.org/\n"
	b"Python (programming language)\nhttps://en.wikipedia.org/wiki/Python_(programming_language)\n"
)


class TestProvisioningHook(StandardTestFixture):

	def test_serialize(this):
		this.assert_equal(SerializeResults(RESULTS), SERIALIZED)
		this.assert_equal(SerializeResults([]), b"")

	def test_serialize_unicode(this):
		this.assert_equal(SerializeResults([("Über", "https://x/ü")]), "Über\nhttps://x/ü\n".encode('utf-8'))

	def test_hook(this):
		provider = RecordingProvider(RESULTS)
		hook = ProvisioningHook(provider)
		this.assert_equal(hook("a b", "c"), SERIALIZED)
		this.assert_equal(provider.calls, [("a b", "c")])

	def test_no_results(this):
		this.assert_equal(ProvisioningHook(NullProvider())("a", "b"), b"")

	def test_failure_is_swallowed(this):
		this.assert_equal(ProvisioningHook(FailingProvider())("a", "b"), b"")


class TestTreeProvisioning(StandardTestFixture):

	def MakeTree(this):
		this.provider = RecordingProvider(RESULTS)
		return Tree(hook=ProvisioningHook(this.provider), uid=0, gid=0)

	def test_mkdir_at_root_is_not_provisioned(this):
		this.tree.mkdir("/python", 0o755)
		this.assert_equal(this.provider.calls, [])
		this.assert_equal(this.tree.readdir("/python"), [".", ".."])

	def test_create_at_root_is_not_provisioned(this):
		this.tree.create("/python", 0o644)
		this.assert_equal(this.provider.calls, [])
		this.assert_equal(this.tree.getattr("/python")['st_size'], 0)

	def test_mkdir_materializes_placeholder(this):
		this.tree.mkdir("/python", 0o755)
		this.tree.mkdir("/python/asyncio", 0o755)

		this.assert_equal(this.provider.calls, [("python", "asyncio")])
		this.assert_equal(this.tree.readdir("/python/asyncio"), [".", "..", "results"])
		this.assert_equal(this.tree.read("/python/asyncio/results", 4096, 0), SERIALIZED)

	def test_create_materializes_content(this):
		this.tree.mkdir("/python", 0o755)
		this.tree.mkdir("/python/web", 0o755)
		this.tree.create("/python/web/flask", 0o644)

		this.assert_equal(this.provider.calls[-1], ("python web", "flask"))
		this.assert_equal(this.tree.getattr("/python/web/flask")['st_size'], len(SERIALIZED))
		this.assert_equal(this.tree.read("/python/web/flask", 4096, 0), SERIALIZED)

	def test_placeholder_is_an_ordinary_file(this):
		this.tree.mkdir("/a", 0o755)
		this.tree.mkdir("/a/b", 0o755)
		this.tree.write("/a/b/results", b"X", 0)
		this.assert_equal(this.tree.read("/a/b/results", 1, 0), b"X")
		this.tree.unlink("/a/b/results")
		this.assert_equal(this.tree.readdir("/a/b"), [".", ".."])


class TestEmptyProvisioning(StandardTestFixture):

	def MakeTree(this):
		return Tree(hook=ProvisioningHook(FailingProvider()), uid=0, gid=0, placeholder_name="found")

	def test_failed_create_leaves_empty_file(this):
		this.tree.mkdir("/a", 0o755)
		this.tree.create("/a/f", 0o644)
		this.assert_equal(this.tree.getattr("/a/f")['st_size'], 0)

	def test_failed_mkdir_leaves_empty_placeholder(this):
		this.tree.mkdir("/a", 0o755)
		this.tree.mkdir("/a/b", 0o755)
		this.assert_equal(this.tree.readdir("/a/b"), [".", "..", "found"])
		this.assert_equal(this.tree.getattr("/a/b/found")['st_size'], 0)


class TestProvisioningSizeLimit(StandardTestFixture):

	def MakeTree(this):
		return Tree(hook=ProvisioningHook(RecordingProvider(RESULTS)), uid=0, gid=0, max_file_size=10)

	def test_results_are_cut_to_limit(this, caplog):
		caplog.set_level(logging.INFO)
		this.tree.mkdir("/python", 0o755)
		this.tree.mkdir("/python/asyncio", 0o755)

		this.assert_equal(this.tree.read("/python/asyncio/results", 100, 0), SERIALIZED[:10])
		assert any("Cut content" in record.getMessage() for record in caplog.records)


class TestSeparator(StandardTestFixture):

	def MakeTree(this):
		this.provider = RecordingProvider()
		return Tree(hook=ProvisioningHook(this.provider), uid=0, gid=0, query_separator="+")

	def test_context_key(this):
		this.tree.mkdir("/a", 0o755)
		this.tree.mkdir("/a/b", 0o755)
		this.tree.create("/a/b/c", 0o644)
		this.assert_equal(this.provider.calls, [("a", "b"), ("a+b", "c")])


class TestConcurrentProvisioning(StandardTestFixture):

	def MakeTree(this):
		this.provider = BlockingProvider(RESULTS)
		return Tree(hook=ProvisioningHook(this.provider), uid=0, gid=0)

	def Start(this, func, *args):
		thread = threading.Thread(target=func, args=args)
		thread.start()
		assert this.provider.started.wait(10)
		return thread

	def Finish(this, thread):
		this.provider.proceed.set()
		thread.join(10)
		assert not thread.is_alive()

	def test_hook_runs_without_lock(this):
		this.tree.mkdir("/a", 0o755)
		thread = this.Start(this.tree.mkdir, "/a/b", 0o755)
		try:
			acquired = this.tree.lock.acquire(timeout=5)
			assert acquired, "tree lock held while provisioning"
			this.tree.lock.release()

			# The directory exists, empty, until the provider answers.
			this.assert_equal(this.tree.readdir("/a/b"), [".", ".."])
		finally:
			this.Finish(thread)

		this.assert_equal(this.tree.readdir("/a/b"), [".", "..", "results"])

	def test_write_before_provisioning_wins(this):
		this.tree.mkdir("/a", 0o755)
		thread = this.Start(this.tree.create, "/a/f", 0o644)
		try:
			this.tree.write("/a/f", b"mine", 0)
		finally:
			this.Finish(thread)

		this.assert_equal(this.tree.read("/a/f", 4096, 0), b"mine")

	def test_removed_before_provisioning(this):
		this.tree.mkdir("/a", 0o755)
		thread = this.Start(this.tree.mkdir, "/a/b", 0o755)
		try:
			this.tree.rmdir("/a/b")
		finally:
			this.Finish(thread)

		this.assert_errno(errno.ENOENT, this.tree.getattr, "/a/b")
		this.assert_equal(len(this.tree.arena), 0)

	def test_unlinked_before_provisioning(this):
		this.tree.mkdir("/a", 0o755)
		thread = this.Start(this.tree.create, "/a/f", 0o644)
		try:
			this.tree.unlink("/a/f")
		finally:
			this.Finish(thread)

		this.assert_errno(errno.ENOENT, this.tree.getattr, "/a/f")
		this.assert_equal(len(this.tree.arena), 0)
