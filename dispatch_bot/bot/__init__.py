"""
Discord client and configuration.
"""
