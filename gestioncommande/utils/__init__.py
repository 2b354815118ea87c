"""
Utility modules: configuration and logging.
"""
