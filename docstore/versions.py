"""
Version sentinels understood by the document store

See org.elasticsearch.common.lucene.uid.Versions and
org.elasticsearch.index.VersionType.
"""

MATCH_ANY = -3
MATCH_ANY_PRE_120 = 0
NOT_FOUND = -1
NOT_SET = -2

VERSION_TYPE_INTERNAL = "internal"

VERSION_TYPES = (
    VERSION_TYPE_INTERNAL,
    "external",
    "external_gt",
    "external_gte",
    "force",
)
