from tests_helpers import cond_list

from fieldmap._internal.feature_requirement import HAS_ATTRS_PKG

collect_ignore_glob = [
    *cond_list(not HAS_ATTRS_PKG, ["*_attrs.py", "*_attrs_*.py"]),
]
