"""
Text normalization utilities for slide text extraction.

Handles special whitespace characters, control characters and whitespace
collapsing so that slide text can be compared word by word.
"""

import re
from typing import Iterable, Optional


class TextNormalizer:
    """Normalizes text content extracted from PresentationML shapes."""
    
    # Characters PowerPoint emits that should read as plain whitespace or nothing
    SPECIAL_CHARS = {
        '\u00a0': ' ',      # Non-breaking space → regular space
        '\u2009': ' ',      # Thin space → regular space
        '\u2007': ' ',      # Figure space → regular space
        '\u2008': ' ',      # Punctuation space → regular space
        '\u000b': '\n',     # Vertical tab (soft line break) → newline
        '\u200b': '',       # Zero-width space → remove
        '\u200c': '',       # Zero-width non-joiner → remove
        '\u200d': '',       # Zero-width joiner → remove
        '\ufeff': '',       # Byte order mark → remove
        '\u00ad': '',       # Soft hyphen → remove
    }
    
    WHITESPACE_PATTERN = re.compile(r'\s+')
    
    # Control characters except tabs, newlines, carriage returns
    CONTROL_CHARS_PATTERN = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]')
    
    def normalize_text(self, text: Optional[str]) -> str:
        """Normalize a single piece of shape text."""
        if not text:
            return ""
        
        normalized = self._replace_special_chars(text)
        normalized = self._remove_control_chars(normalized)
        return self._normalize_whitespace(normalized)
    
    def join_pieces(self, pieces: Iterable[str]) -> str:
        """Normalize each piece and join the non-empty ones with one space."""
        normalized = (self.normalize_text(piece) for piece in pieces)
        return ' '.join(piece for piece in normalized if piece)
    
    def _replace_special_chars(self, text: str) -> str:
        for original, replacement in self.SPECIAL_CHARS.items():
            text = text.replace(original, replacement)
        return text
    
    def _remove_control_chars(self, text: str) -> str:
        return self.CONTROL_CHARS_PATTERN.sub('', text)
    
    def _normalize_whitespace(self, text: str) -> str:
        """Collapse whitespace runs to single spaces and trim."""
        return self.WHITESPACE_PATTERN.sub(' ', text).strip()

