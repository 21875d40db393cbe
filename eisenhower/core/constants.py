"""
FILE: eisenhower/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - STORAGE_KEY: Key the task snapshot is persisted under
  - CORRUPT_BACKUP_KEY: Key an unreadable snapshot is copied to
  - SCHEMA_VERSION: Version written into every snapshot
  - LEGACY_INBOX_KEY: Inbox key used by unversioned snapshots
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - Centralized constants to avoid magic strings
  - List names live on the TaskList enum (core/models.py), not here
"""

# Persistence
STORAGE_KEY = "eisenhower-tasks"
CORRUPT_BACKUP_KEY = f"{STORAGE_KEY}.corrupt"
SCHEMA_VERSION = 1
LEGACY_INBOX_KEY = "taskBank"

# Display
TASK_ID_DISPLAY_LENGTH = 6
