import logging

# Results become file content as alternating lines: title, link, title, link, ...
def SerializeResults(results):
	return "".join(f"{title}\n{link}\n" for title, link in results).encode('utf-8')


# The ProvisioningHook turns a provider's search results into initial file content.
# Provisioning is best effort: whatever goes wrong in the provider, the caller gets empty content.
class ProvisioningHook(object):
	def __init__(this, provider):
		this.provider = provider

	def __repr__(this):
		return f"<ProvisioningHook for {this.provider!r}>"

	def __call__(this, context, query):
		try:
			results = this.provider.Search(context, query)
		except Exception:
			logging.warning(f"Provisioning {context!r} / {query!r} failed", exc_info=True)
			return b""

		if (not results):
			return b""
		return SerializeResults(results)
