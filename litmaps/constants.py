"""Fixed names used across litmaps."""

# Registered family names
HASH_MAP = "HashMap"
SORTED_MAP = "SortedMap"
HASH_SET = "HashSet"
SORTED_SET = "SortedSet"

BUILTIN_FAMILIES = (HASH_MAP, SORTED_MAP, HASH_SET, SORTED_SET)

# Name of the optional classmethod a container type may expose to accept a
# capacity hint, e.g. ``MyMap.with_capacity(16)``.
CAPACITY_CONSTRUCTOR = "with_capacity"

# Number of items in a map entry: (key, value)
PAIR_ARITY = 2
