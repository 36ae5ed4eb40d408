"""
Shaafii CMS: server-rendered content administration backend
"""
__version__ = "0.1.0"
