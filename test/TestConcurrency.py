import threading

from StandardTestFixture import StandardTestFixture


class TestConcurrency(StandardTestFixture):

	def Run(this, target, count):
		errors = []

		def wrapped(i):
			try:
				target(i)
			except Exception as e:
				errors.append(e)

		threads = [threading.Thread(target=wrapped, args=(i,)) for i in range(count)]
		for thread in threads:
			thread.start()
		for thread in threads:
			thread.join(30)
		this.assert_equal(errors, [])

	def test_parallel_creates(this):
		this.tree.mkdir("/d", 0o755)

		def create(i):
			path = f"/d/f{i}"
			this.tree.create(path, 0o644)
			this.tree.write(path, str(i).encode() * 100, 0)

		this.Run(create, 32)

		names = this.tree.readdir("/d")[2:]
		this.assert_equal(sorted(names), sorted(f"f{i}" for i in range(32)))
		for i in range(32):
			this.assert_equal(this.tree.read(f"/d/f{i}", 1000, 0), str(i).encode() * 100)

	def test_racing_mkdir(this):
		results = []

		def mkdir(i):
			try:
				this.tree.mkdir("/same", 0o755)
				results.append(True)
			except FileExistsError:
				results.append(False)

		this.Run(mkdir, 16)
		this.assert_equal(results.count(True), 1)
		this.assert_equal(this.tree.readdir("/"), [".", "..", "same"])

	def test_shared_writes_through_links(this):
		this.tree.create("/f", 0o644)
		for i in range(8):
			this.tree.link("/f", f"/l{i}")

		def write(i):
			this.tree.write(f"/l{i}", bytes([65 + i]), i)

		this.Run(write, 8)
		this.assert_equal(this.tree.read("/f", 8, 0), b"ABCDEFGH")

	def test_link_and_unlink_counts(this):
		this.tree.create("/f", 0o644)

		def churn(i):
			name = f"/link{i}"
			this.tree.link("/f", name)
			this.tree.unlink(name)

		this.Run(churn, 16)
		this.assert_equal(this.tree.getattr("/f")['st_nlink'], 1)
		this.assert_equal(len(this.tree.arena), 1)
