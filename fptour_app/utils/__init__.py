"""
Utility functions module.

Filesystem helpers shared by the file source strategy and the tour driver.
Reads and writes are scoped: handles are released whether the operation
completes or fails.
"""
