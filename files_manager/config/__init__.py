"""
Configuration

Environment-driven settings for Redis and the application.
"""
