from .taxonomy import KeywordTaxonomy, DEFAULT_TAXONOMY
from .extractor import RequirementExtractor, split_segments, make_title
from .classifier import classify_response

__all__ = [
    "KeywordTaxonomy",
    "DEFAULT_TAXONOMY",
    "RequirementExtractor",
    "split_segments",
    "make_title",
    "classify_response",
]
