import re
import urllib.parse
from typing import Tuple

from bitsquat.services.errors import SplitError

# label "." extension, where the extension may hold further dots (e.g. co.uk)
SPLIT_REGEX = re.compile(r'^(?P<domain>[a-z0-9](?:[a-z0-9-]*[a-z0-9])?)\.(?P<extension>[a-z0-9-]+(?:\.[a-z0-9-]+)*)$')


def trim_protocol(url: str) -> str:
	"""Strips scheme, credentials, port, path, query and fragment, returning the host."""
	if not url or not isinstance(url, str):
		raise SplitError('argument has to be non-empty string')
	url = url.strip()
	try:
		u = urllib.parse.urlparse(url if '://' in url else '//' + url)
		host = u.hostname
	except ValueError:
		raise SplitError(f"Failed to parse URL: {url}") from None
	if not host:
		raise SplitError(f"No host name in URL: {url}")
	return host.rstrip('.')


def split_url(url: str) -> Tuple[str, str]:
	"""
	Splits a URL into its first domain label and the remaining extension.

	``https://www.example.com/x`` gives ``('www', 'example.com')`` and
	``foobar.co.uk`` gives ``('foobar', 'co.uk')``.

	Raises:
		SplitError: If the host is not of the ``label.extension`` shape.
	"""
	host = trim_protocol(url)
	if not host.isascii():
		raise SplitError(f"Non-ASCII host names are not supported: {host}")
	match = SPLIT_REGEX.match(host)
	if match is None:
		raise SplitError(f"Failed to split URL: {url} into domain name and extension")
	return match.group('domain'), match.group('extension')
