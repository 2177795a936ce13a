from typing import Callable, Iterable, Iterator, TypeVar

import idna

from bitsquat.config.bconfig import MAX_DOMAIN_LENGTH, VALID_FQDN_REGEX

T = TypeVar('T')


def is_valid_domain(candidate: str) -> bool:
	"""Pass/fail gate: True if the candidate is a syntactically valid domain name."""
	if not isinstance(candidate, str):
		return False
	if len(candidate) < 1 or len(candidate) > MAX_DOMAIN_LENGTH:
		return False
	if VALID_FQDN_REGEX.match(candidate):
		try:
			_ = idna.decode(candidate)
		except (idna.IDNAError, UnicodeError):
			return False
		else:
			return True
	return False


def filter_valid(candidates: Iterable[T],
				 predicate: Callable[[str], bool] = is_valid_domain,
				 key: Callable[[T], str] = str) -> Iterator[T]:
	"""Yields, in order, the candidates whose ``key`` passes ``predicate``."""
	for candidate in candidates:
		if predicate(key(candidate)):
			yield candidate
