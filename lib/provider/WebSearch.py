"""
lib/provider/WebSearch.py

Purpose:
A ContentProvider that scrapes a web search results page: the search term is sent to an HTML search endpoint and result titles and links are pulled out with XPath.

Place in Architecture:
The content provider used when SpiderFS runs with provider=web. Wrapped by the ProvisioningHook, which turns the pairs into file content.

Interface:

	__init__(search_url, title_xpath, link_xpath, max_results, timeout): Configure the endpoint and parsing.
	GetUrl(term): The search URL for a term.
	Fetch(url): The raw response body.
	Parse(html): (title, link) pairs found in a results page.
	Search(context, query): Fetch + Parse. Network and parse failures yield [].

TODOs/FIXMEs:
None.
"""

import logging
from urllib.request import Request, urlopen
from urllib.parse import quote_plus
from urllib.error import HTTPError, URLError

import lxml.html
from lxml import etree

from .ContentProvider import ContentProvider

DEFAULT_SEARCH_URL = "https://html.duckduckgo.com/html/?q={query}"
DEFAULT_TITLE_XPATH = '//a[contains(concat(" ", normalize-space(@class), " "), " result__a ")]'
DEFAULT_LINK_XPATH = '//a[contains(concat(" ", normalize-space(@class), " "), " result__a ")]/@href'

class WebSearchProvider(ContentProvider):
	def __init__(this,
		search_url=DEFAULT_SEARCH_URL,
		title_xpath=DEFAULT_TITLE_XPATH,
		link_xpath=DEFAULT_LINK_XPATH,
		max_results=10,
		timeout=30,
		name="Web Search"
	):
		super().__init__(name)
		assert isinstance(search_url, str)
		assert "{query}" in search_url, search_url

		this.search_url = search_url
		this.title_xpath = title_xpath
		this.link_xpath = link_xpath
		this.max_results = max_results
		this.timeout = timeout

	def GetUrl(this, term):
		return this.search_url.format(query=quote_plus(term))

	def Fetch(this, url):
		req = Request(url, headers={
			'Accept': 'text/html',
			'User-Agent': 'spiderfs',
		})
		response = urlopen(req, timeout=this.timeout)
		try:
			return response.read()
		finally:
			response.close()

	# xpath() hands back elements for node tests and strings for attribute / text() tests.
	@staticmethod
	def _text(item):
		if (isinstance(item, str)):
			return item.strip()
		return item.text_content().strip()

	def Parse(this, html):
		document = lxml.html.fromstring(html)
		titles = [this._text(item) for item in document.xpath(this.title_xpath)]
		links = [this._text(item) for item in document.xpath(this.link_xpath)]

		ret = [(title, link) for title, link in zip(titles, links) if title or link]
		if (this.max_results):
			ret = ret[:this.max_results]
		return ret

	def Search(this, context, query):
		term = this.GetSearchTerm(context, query)
		if (not term):
			return []

		url = this.GetUrl(term)
		try:
			html = this.Fetch(url)
		except (HTTPError, URLError, OSError) as e:
			logging.warning(f"Search for {term!r} failed: {e}")
			return []

		try:
			ret = this.Parse(html)
		except (etree.ParserError, etree.XPathError, ValueError) as e:
			logging.warning(f"Could not parse results for {term!r}: {e}")
			return []

		logging.debug(f"Search for {term!r} found {len(ret)} results")
		return ret
