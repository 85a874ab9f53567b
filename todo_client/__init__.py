"""
Consumers of the todo task API: HTTP client, web front end and CLI
"""
