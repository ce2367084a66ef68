"""
Google Workspace skill: Gmail and Calendar tools served over MCP.
"""
