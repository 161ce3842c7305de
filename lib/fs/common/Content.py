"""
lib/fs/common/Content.py

Purpose:
Stores file data. Every regular file name in the tree refers to a Content record by integer id; hardlinked names share one record.

Place in Architecture:
The only place file bytes live. Inodes never hold a reference to a record, only its id, so a name can never reach content that has already been reclaimed.

Interface:

	Content: id, data (bytearray), link_count, atime, mtime.
	ContentArena:
		NextId(): Draw a new inode number.
		Allocate(data=b""): Create a record with link_count 1 and return its id.
		Get(id): The record for id. A missing record is tree corruption (RuntimeError).
		Acquire(id) / Release(id): Count a name in or out. A record is reclaimed when its count reaches 0.
		Read(id, size, offset), Write(id, data, offset), Truncate(id, size), Fill(id, data): data access.
		GetTotalSize(), Clear().

TODOs/FIXMEs:
None.
"""

import errno
import itertools
import logging
import time

class Content(object):
	def __init__(this, id, data=b""):
		this.id = id
		this.data = bytearray(data)
		this.link_count = 1

		now = time.time()
		this.atime = now
		this.mtime = now

	def __len__(this):
		return len(this.data)


# A Content is only reclaimed here, by Release, once no name refers to it.
# NOTE: callers serialize access through the Tree lock; *this does no locking of its own.
class ContentArena(object):
	def __init__(this, max_size=0):
		this.records = {}
		this.max_size = max_size # Per file cap. 0 means no limit.
		this.counter = itertools.count(1)

	def __len__(this):
		return len(this.records)

	def __contains__(this, id):
		return id in this.records

	def NextId(this):
		return next(this.counter)

	def Allocate(this, data=b""):
		id = this.NextId()
		this.records[id] = Content(id, data)
		return id

	def Get(this, id):
		try:
			return this.records[id]
		except KeyError:
			raise RuntimeError(f"content record {id} is referenced but does not exist")

	def Acquire(this, id):
		content = this.Get(id)
		content.link_count += 1
		return content.link_count

	# RETURNS True if the record was reclaimed.
	def Release(this, id):
		content = this.Get(id)
		content.link_count -= 1
		if (content.link_count > 0):
			return False

		del this.records[id]
		logging.debug(f"Reclaimed content {id} ({len(content)} bytes)")
		return True

	def Read(this, id, size, offset):
		content = this.Get(id)
		content.atime = time.time()

		if (offset >= len(content.data)):
			return b""
		size = min(size, len(content.data) - offset)
		return bytes(content.data[offset:offset + size])

	def Write(this, id, data, offset):
		content = this.Get(id)

		end = offset + len(data)
		if (end > len(content.data)):
			this.Grow(content, end)
		content.data[offset:end] = data
		content.mtime = time.time()
		return len(data)

	def Truncate(this, id, size):
		content = this.Get(id)
		if (size > len(content.data)):
			this.Grow(content, size)
		else:
			del content.data[size:]
		content.mtime = time.time()

	# Replace the whole buffer, e.g. with provisioned results.
	def Fill(this, id, data):
		content = this.Get(id)
		if (this.max_size and len(data) > this.max_size):
			logging.info(f"Cut content {id} from {len(data)} to {this.max_size} bytes")
			data = data[:this.max_size]
		content.data = bytearray(data)
		content.mtime = time.time()

	# The newly extended region is zero filled.
	def Grow(this, content, size):
		if (this.max_size and size > this.max_size):
			raise IOError(errno.ENOMEM, f"cannot grow content {content.id} to {size} bytes (limit {this.max_size})")
		try:
			content.data.extend(bytes(size - len(content.data)))
		except (MemoryError, OverflowError):
			raise IOError(errno.ENOMEM, f"cannot grow content {content.id} to {size} bytes")

	def GetTotalSize(this):
		return sum(len(content) for content in this.records.values())

	def Clear(this):
		this.records.clear()
