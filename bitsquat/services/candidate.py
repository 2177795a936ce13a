from typing import Any

# --- Candidate Class ---
# Stores one reassembled "domain.extension" candidate. Behaves like a dictionary
# but allows attribute-style access (e.g., c.domain instead of c['domain'])
# and defines hashing/comparison for use in sets and sorting.

class Candidate(dict):
    """
    Represents a single bitsquatted candidate.

    Acts as a dictionary holding the candidate string ('domain'), its position in
    generation order ('index') and the indexes of the domain and extension
    variants it was built from.
    """
    # Allow accessing dictionary keys via attribute access (e.g., cand.domain)
    def __getattr__(self, item: str) -> Any:
       try:
          return self[item]
       except KeyError:
          raise AttributeError(f"'{type(self).__name__}' object has no attribute '{item}'") from None

    __setattr__ = dict.__setitem__

    def __init__(self, **kwargs: Any):
       """
       Initialize the Candidate object.

       Args:
          domain (str): The candidate domain string. Defaults to ''.
          index (int): Position in generation order. Defaults to 0.
          domain_variant (int): Index of the domain variant, -1 for the untouched
             domain in strict mode. Defaults to 0.
          extension_variant (Optional[int]): Index of the extension variant, None
             when the extension was kept fixed.
          **kwargs: Any additional data associated with the candidate.
       """
       super().__init__()
       self['domain'] = kwargs.pop('domain', '')
       self['index'] = kwargs.pop('index', 0)
       self['domain_variant'] = kwargs.pop('domain_variant', 0)
       self['extension_variant'] = kwargs.pop('extension_variant', None)
       self.update(kwargs)

    def __hash__(self) -> int:
       """Hash based solely on the domain string."""
       return hash(self.get('domain', ''))

    def __eq__(self, other: object) -> bool:
       """Equality based solely on the domain string."""
       if not isinstance(other, dict):
             return NotImplemented
       return self.get('domain', '') == other.get('domain', '')

    def __lt__(self, other: 'Candidate') -> bool:
       """Comparison for sorting: generation order."""
       if not isinstance(other, Candidate):
             return NotImplemented
       return self.get('index', 0) < other.get('index', 0)

    def __str__(self) -> str:
        return self.domain

    def copy(self) -> 'Candidate':
       """Return a shallow copy of this Candidate object."""
       return Candidate(**self)

    def __repr__(self) -> str:
        core_items = f"domain='{self.domain}', index={self.index}"
        other_items = ", ".join(f"{k}={v!r}" for k, v in self.items() if k not in ('domain', 'index'))
        items_str = core_items + (f", {other_items}" if other_items else "")
        return f"{type(self).__name__}({items_str})"
