"""
lib/SpiderFS.py

Purpose:
Implements the SpiderFS executor: a filesystem that lives entirely in memory and fills new directories and files with web search results.

Place in Architecture:
Acts as the lifecycle shell around the Tree. It declares and validates the configuration, builds the content provider and provisioning hook, constructs the Tree at startup and tears it down at shutdown.

Interface:

	Inherits from eons.Executor.
	Sets up optional arguments (log_level, root_mode, root_uid, root_gid, max_file_size, provider, placeholder_name, query_separator, search_url, title_xpath, link_xpath, max_results, net_timeout).
	Methods include:
		ValidateArgs(): Fetches arguments, then CheckArgs().
		CheckArgs(): Checks and converts arguments.
		BeforeFunction(): Builds the provider and hook, then constructs and initializes the Tree.
		Function(): (Abstract) to be implemented by child classes.
		GetContentProvider(), GetTree(), Teardown().

TODOs/FIXMEs:
None.
"""

import eons
import os
import logging

from .Utils import parse_size, parse_mode, parse_log_level
from .fs.Tree import Tree
from .provider.Hook import ProvisioningHook
from .provider.WebSearch import WebSearchProvider, DEFAULT_SEARCH_URL, DEFAULT_TITLE_XPATH, DEFAULT_LINK_XPATH


# SpiderFS is a generic in-memory file system whose new entries are provisioned from an external content provider.
# NOTE: For thread safety, it is illegal to write to any SpiderFS args after it has been started.
# This class is functionally abstract and requires child classes to implement the Function method.
class SpiderFS(eons.Executor):
	def __init__(this, name="SpiderFS"):

		super().__init__(name)

		this.arg.kw.optional["log_level"] = "warning"
		this.arg.kw.optional["root_mode"] = "755"
		this.arg.kw.optional["root_uid"] = os.getuid()
		this.arg.kw.optional["root_gid"] = os.getgid()
		this.arg.kw.optional["max_file_size"] = "0" # Maximum size of a single file. 0 means no limit.

		this.arg.kw.optional["provider"] = "none" # none or web
		this.arg.kw.optional["placeholder_name"] = "results" # File that receives the results for a new directory.
		this.arg.kw.optional["query_separator"] = " "
		this.arg.kw.optional["search_url"] = DEFAULT_SEARCH_URL
		this.arg.kw.optional["title_xpath"] = DEFAULT_TITLE_XPATH
		this.arg.kw.optional["link_xpath"] = DEFAULT_LINK_XPATH
		this.arg.kw.optional["max_results"] = 10
		this.arg.kw.optional["net_timeout"] = "30" # Network timeout (seconds).

		this.tree = None

	# ValidateArgs is automatically called before Function, per eons.Functor.
	def ValidateArgs(this):
		super().ValidateArgs()
		this.CheckArgs()

	# Convert and check the Fetched arguments in place.
	def CheckArgs(this):
		try:
			this.log_level = parse_log_level(this.log_level)
		except ValueError:
			raise eons.MissingArgumentError(f"error: --log-level {this.log_level} is not a valid log level")

		try:
			this.root_mode = parse_mode(this.root_mode)
		except ValueError:
			raise eons.MissingArgumentError(f"error: --root-mode {this.root_mode} is not a valid mode")

		try:
			this.root_uid = int(this.root_uid)
			this.root_gid = int(this.root_gid)
		except ValueError:
			raise eons.MissingArgumentError(f"error: --root-uid / --root-gid must be numeric")

		try:
			this.max_file_size = parse_size(this.max_file_size)
		except ValueError:
			raise eons.MissingArgumentError(f"error: --max-file-size {this.max_file_size} is not a valid size specifier")

		try:
			this.max_results = int(this.max_results)
			if (this.max_results < 0):
				raise ValueError()
		except ValueError:
			raise eons.MissingArgumentError(f"error: --max-results {this.max_results} is not a valid count")

		try:
			this.net_timeout = float(this.net_timeout)
			if not 0 < this.net_timeout < float('inf'):
				raise ValueError()
		except ValueError:
			raise eons.MissingArgumentError(f"error: --net-timeout {this.net_timeout} is not a valid timeout")

		this.provider = str(this.provider).lower()
		if (this.provider not in ('none', 'web')):
			raise eons.MissingArgumentError(f"error: --provider {this.provider} must be one of: none, web")

		if (not this.placeholder_name or "/" in this.placeholder_name):
			raise eons.MissingArgumentError(f"error: --placeholder-name {this.placeholder_name!r} is not a valid file name")

		if ("{query}" not in this.search_url):
			raise eons.MissingArgumentError(f"error: --search-url must contain {{query}}")


	def BeforeFunction(this):
		provider = this.GetContentProvider()
		hook = ProvisioningHook(provider) if provider is not None else None

		this.tree = Tree(
			hook=hook,
			root_mode=this.root_mode,
			uid=this.root_uid,
			gid=this.root_gid,
			max_file_size=this.max_file_size,
			placeholder_name=this.placeholder_name,
			query_separator=this.query_separator
		)
		logging.info(f"Provisioning new entries from: {provider if provider is not None else 'nothing'}")
		this.tree.Init()


	# Override this in your child class.
	def Function(this):
		pass


	def GetContentProvider(this):
		if (this.provider == 'web'):
			return WebSearchProvider(
				search_url=this.search_url,
				title_xpath=this.title_xpath,
				link_xpath=this.link_xpath,
				max_results=this.max_results,
				timeout=this.net_timeout
			)
		return None

	def GetTree(this):
		return this.tree

	def Teardown(this):
		if (this.tree is not None):
			this.tree.Teardown()
			this.tree = None
