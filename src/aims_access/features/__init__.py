"""Features – permission-backed feature flags."""
from aims_access.features.flags import (
    FEATURE_FLAGS,
    FeatureFlagOptions,
    FeatureFlagResolver,
    FeatureFlagResult,
    FeatureFlagSummary,
    check_feature_flag,
    is_enabled,
    use_all_feature_flags,
    use_feature_flag,
    use_multiple_feature_flags,
)

__all__ = [
    "FEATURE_FLAGS",
    "FeatureFlagOptions",
    "FeatureFlagResolver",
    "FeatureFlagResult",
    "FeatureFlagSummary",
    "check_feature_flag",
    "is_enabled",
    "use_all_feature_flags",
    "use_feature_flag",
    "use_multiple_feature_flags",
]
