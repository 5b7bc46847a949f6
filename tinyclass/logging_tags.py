# tinyclass/logging_tags.py
"""
Subsystem tags prefixed to log messages so output stays searchable.

Changing a tag here updates it project-wide.
"""

REGISTRY = "[REGISTRY]"
MRO = "[MRO]"
ACCESSORS = "[ACCESSORS]"
BUILD = "[BUILD]"
DEMOLISH = "[DEMOLISH]"
CONFIG = "[CONFIG]"
CLI = "[CLI]"
