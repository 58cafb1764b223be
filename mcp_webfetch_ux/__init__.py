"""
webfetch-ux MCP

Readable web content and grep-like search for agents.
"""
__version__ = "0.1.0"
