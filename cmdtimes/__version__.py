"""Version information for cmdtimes."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to CLI output or configuration keys
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Configuration and reporting
#         - YAML/env configuration via ConfigService (frozen TimingsConfig)
#         - --maxlines now limits the default report (0 = all rows)
#         - Over-long input lines are skipped as a whole
# 0.1.0 - Initial release
#         - Threaded parse pool with a single record collector
#         - Default report and `line INDEX` detail mode
