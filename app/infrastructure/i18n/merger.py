"""Dictionary merging for multi-namespace loads.

Each namespace dictionary is nested under the key path obtained by
splitting its namespace on "/", so "common" lands under {"common": ...}
and "legacy/ui" under {"legacy": {"ui": ...}}. Namespaces are applied in
input order; callers list them from lowest to highest priority.
"""

import copy
from typing import Sequence

from infrastructure.i18n.models import Dictionary, MergedDictionary, is_nested


def deep_merge(target: Dictionary, source: Dictionary) -> Dictionary:
    """Recursively merge source into target, in place.

    Nested dictionaries present on both sides are merged key by key; any
    other value from source (strings, lists, None, or a dictionary
    replacing a leaf) overwrites the target value.

    Args:
        target: Dictionary to merge into. Mutated.
        source: Dictionary whose values win on conflict. Not mutated.

    Returns:
        target, for chaining.
    """
    for key, value in source.items():
        existing = target.get(key)
        if is_nested(value) and is_nested(existing):
            deep_merge(existing, value)
        else:
            target[key] = copy.deepcopy(value)
    return target


def merge_namespace(
    merged: MergedDictionary, namespace: str, dictionary: Dictionary
) -> MergedDictionary:
    """Merge one namespace dictionary into an accumulator, in place.

    A single-segment namespace is wrapped as {namespace: dictionary} and
    deep-merged. A path-like namespace creates (or reuses) nested objects
    along every segment but the last and assigns the dictionary as the
    leaf, replacing whatever was there.
    """
    segments = namespace.split("/")
    if len(segments) == 1:
        return deep_merge(merged, {namespace: dictionary})

    current = merged
    for segment in segments[:-1]:
        if not is_nested(current.get(segment)):
            current[segment] = {}
        current = current[segment]
    current[segments[-1]] = copy.deepcopy(dictionary)
    return merged


def merge_namespaces(
    namespaces: Sequence[str], dictionaries: Sequence[Dictionary]
) -> MergedDictionary:
    """Combine namespace dictionaries into one nested structure.

    Args:
        namespaces: Namespace names; namespaces[i] names dictionaries[i].
        dictionaries: Loaded dictionaries, index-paired with namespaces.

    Returns:
        New merged dictionary. Inputs are not mutated.

    Raises:
        ValueError: If the two sequences differ in length.
    """
    if len(namespaces) != len(dictionaries):
        raise ValueError(
            f"Got {len(namespaces)} namespaces but {len(dictionaries)} dictionaries"
        )

    merged: MergedDictionary = {}
    for namespace, dictionary in zip(namespaces, dictionaries):
        merge_namespace(merged, namespace, dictionary)
    return merged


def has_translations(dictionary: Dictionary) -> bool:
    """True if any leaf value exists below the given dictionary.

    A merge of namespaces that all failed to load still has one empty
    dictionary per namespace key; this treats such a result as empty.
    """
    for value in dictionary.values():
        if not is_nested(value) or has_translations(value):
            return True
    return False
