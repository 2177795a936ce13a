import logging
from typing import Callable, List, Optional, Tuple

from bitsquat.services import bit_codec
from bitsquat.services.candidate import Candidate
from bitsquat.services.combiner import iter_combinations, iter_neighbours
from bitsquat.services.flipper import generate_variants
from bitsquat.services.url_parser import split_url, trim_protocol
from bitsquat.services.validator import filter_valid, is_valid_domain

# --- Bitsquatter Class ---

class Bitsquatter:
    """
    Enumerates the domains reachable from an input URL by a single bit error.

    The URL is split into a domain label and an extension, both labels are
    turned into bits, every bit position is flipped once, the variants are
    decoded and joined back into ``domain.extension`` candidates, and the
    candidates are passed through a validity predicate.
    """

    def __init__(self,
                 url: str,
                 permutate_extension: bool = False,
                 strict: bool = False,
                 validator: Callable[[str], bool] = is_valid_domain) -> None:
        """
        Args:
            url (str): Target URL, with or without protocol prefix.
            permutate_extension (bool): Also flip the bits of the extension and
                combine every domain variant with every extension variant.
            strict (bool): Drop the unflipped duplicate entries and emit only true
                single-bit neighbours of the input.
            validator (Callable[[str], bool]): Gate deciding which candidates are emitted.

        Raises:
            SplitError: If the URL cannot be split. Nothing is generated.
            EncodingError: If a label holds a character outside 0-255.
        """
        self.url = url
        self.host = trim_protocol(url)
        self.domain, self.extension = split_url(url)
        self.permutate_extension = permutate_extension
        self.strict = strict
        self.validator = validator

        self.domain_bits: List[int] = bit_codec.encode(self.domain)
        self.extension_bits: List[int] = bit_codec.encode(self.extension)

    def bitstrings(self) -> Tuple[str, str]:
        """Domain and extension bits as '0'/'1' strings."""
        return bit_codec.to_bitstring(self.domain_bits), bit_codec.to_bitstring(self.extension_bits)

    def _decoded_variants(self, bits: List[int], length: int) -> List[str]:
        return [bit_codec.decode(variant, length) for variant in generate_variants(bits, strict=self.strict)]

    def candidates(self) -> List[Candidate]:
        """Every reassembled candidate, valid or not, in generation order."""
        domain_variants = self._decoded_variants(self.domain_bits, len(self.domain))
        extension_variants: Optional[List[str]] = None
        if self.permutate_extension:
            extension_variants = self._decoded_variants(self.extension_bits, len(self.extension))

        if self.strict:
            combinations = iter_neighbours(self.domain, domain_variants, self.extension, extension_variants)
        else:
            combinations = iter_combinations(domain_variants, self.extension, extension_variants,
                                             self.permutate_extension)

        generated = [Candidate(domain=candidate, index=index, domain_variant=i, extension_variant=j)
                     for index, (i, j, candidate) in enumerate(combinations)]
        logging.debug("Bitsquatter generated %d candidates for %s", len(generated), self.host)
        return generated

    def permutations(self) -> List[Candidate]:
        """Candidates accepted by the validator, in generation order."""
        valid = list(filter_valid(self.candidates(), self.validator, key=lambda c: c.domain))
        logging.debug("Bitsquatter kept %d valid candidates for %s", len(valid), self.host)
        return valid


def perform_bitsquatting(url: str, permutate_extension: bool = False, strict: bool = False) -> List[str]:
    squatter = Bitsquatter(url, permutate_extension=permutate_extension, strict=strict)
    return [candidate.domain for candidate in squatter.permutations()]
