"""
lib/provider/ContentProvider.py

Purpose:
Defines the contract for content providers: given a context key and a query term, return an ordered list of (title, link) pairs.

Place in Architecture:
Providers are consulted by the ProvisioningHook when the Tree creates a directory or a file below the root. They are external collaborators; the Tree never calls one directly.

Interface:

	Search(context, query): RETURNS a list of (title, link) string tuples. May be empty.

TODOs/FIXMEs:
None.
"""

class ContentProvider(object):
	def __init__(this, name="Content Provider"):
		this.name = name

	def __repr__(this):
		return f"<{this.__class__.__name__} {this.name}>"

	# Please override for your child class.
	def Search(this, context, query):
		raise NotImplementedError(f"{this.__class__.__name__} does not implement Search")

	# The term actually searched for: context and query, joined with spaces.
	@staticmethod
	def GetSearchTerm(context, query):
		return " ".join(part for part in (context, query) if part)


# A provider that never finds anything.
class NullProvider(ContentProvider):
	def __init__(this, name="Null Provider"):
		super().__init__(name)

	def Search(this, context, query):
		return []
