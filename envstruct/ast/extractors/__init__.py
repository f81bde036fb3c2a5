"""
Language-Specific Extractors

Each extractor implements the LanguageExtractor interface for a specific language.
"""

from envstruct.ast.extractors.base import LanguageExtractor, get_extractor, register_extractor

# Import extractors to trigger registration
from envstruct.ast.extractors.go import GoExtractor

__all__ = [
    "LanguageExtractor",
    "get_extractor",
    "register_extractor",
    "GoExtractor",
]
