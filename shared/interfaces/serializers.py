"""
Serializer helpers for payloads whose keys arrive under several spellings.
"""
from typing import Dict, Tuple

from rest_framework import serializers


class AliasedSerializer(serializers.Serializer):
    """
    Serializer that folds alternate key spellings into one canonical key.

    Subclasses declare `aliases = {'canonical': ('Alias1', 'alias2', ...)}`.
    The first alias present with a non-empty value wins; the canonical key
    itself is tried first.
    """
    aliases: Dict[str, Tuple[str, ...]] = {}

    def to_internal_value(self, data):
        if hasattr(data, 'items'):
            data = self.normalize_keys(data)
        return super().to_internal_value(data)

    @classmethod
    def normalize_keys(cls, data) -> dict:
        normalized = dict(data)
        for canonical, alternates in cls.aliases.items():
            for key in (canonical, *alternates):
                value = data.get(key)
                if value not in (None, ''):
                    normalized[canonical] = value
                    break
        return normalized
