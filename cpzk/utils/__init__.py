from cpzk.utils.numbers import ensure_bn, bn_to_str
