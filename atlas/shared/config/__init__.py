"""
Shared Config Module
====================

Configuration files packaged with Atlas.

Structure:
- settings/: YAML configuration files (defaults, project, user)
"""
