from typing import Generator, List, Optional, Sequence, Tuple

from bitsquat.services.errors import InvalidLength

# (domain variant index, extension variant index or None, candidate string)
Combination = Tuple[int, Optional[int], str]


def _join(domain_label: str, extension_label: str, domain_length: int, extension_length: int) -> str:
    if len(domain_label) != domain_length:
        raise InvalidLength(f"Domain variant {domain_label!r} is not {domain_length} characters long")
    if len(extension_label) != extension_length:
        raise InvalidLength(f"Extension variant {extension_label!r} is not {extension_length} characters long")
    return f"{domain_label}.{extension_label}"


def iter_combinations(domain_variants: Sequence[str],
                      extension: str,
                      extension_variants: Optional[Sequence[str]] = None,
                      permutate_extension: bool = False) -> Generator[Combination, None, None]:
    """
    Reassembles decoded variants into ``domain.extension`` candidates.

    Domain variant index is the outer loop and extension variant index the inner
    one. Without extension permutation every domain variant is joined to the
    fixed ``extension`` and the extension index is reported as None.

    Args:
        domain_variants (Sequence[str]): Decoded domain variants, in variant order.
        extension (str): The original extension label.
        extension_variants (Optional[Sequence[str]]): Decoded extension variants;
            required when ``permutate_extension`` is True.
        permutate_extension (bool): Build the full domain x extension product.

    Yields:
        Combination: ``(domain_index, extension_index, candidate)``.

    Raises:
        ValueError: If extension permutation is requested without variants.
        InvalidLength: If a variant does not keep its label's character length.
    """
    domain_length = len(domain_variants[0]) if domain_variants else 0
    extension_length = len(extension)

    if permutate_extension:
        if extension_variants is None:
            raise ValueError("extension_variants are required when permutating the extension")
        for i, domain_label in enumerate(domain_variants):
            for j, extension_label in enumerate(extension_variants):
                yield i, j, _join(domain_label, extension_label, domain_length, extension_length)
    else:
        for i, domain_label in enumerate(domain_variants):
            yield i, None, _join(domain_label, extension, domain_length, extension_length)


def iter_neighbours(domain: str,
                    domain_variants: Sequence[str],
                    extension: str,
                    extension_variants: Optional[Sequence[str]] = None) -> Generator[Combination, None, None]:
    """
    Strict-mode combination: only candidates one bit away from ``domain.extension``.

    Each domain variant is joined to the original extension, then (if extension
    variants are given) the original domain is joined to each extension variant.
    Indexes follow :func:`iter_combinations`; -1 marks the untouched label.
    """
    for i, domain_label in enumerate(domain_variants):
        yield i, -1 if extension_variants is not None else None, \
            _join(domain_label, extension, len(domain), len(extension))
    if extension_variants is not None:
        for j, extension_label in enumerate(extension_variants):
            yield -1, j, _join(domain, extension_label, len(domain), len(extension))


def combine(domain_variants: Sequence[str],
            extension: str,
            extension_variants: Optional[Sequence[str]] = None,
            permutate_extension: bool = False) -> List[str]:
    """Candidate strings of :func:`iter_combinations`, in generation order."""
    return [candidate for _, _, candidate in
            iter_combinations(domain_variants, extension, extension_variants, permutate_extension)]
