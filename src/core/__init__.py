"""Core domain package for guildwatch.

Core contains validation, outcome classification, and the scan cycle without
any STRATZ or Discord-specific transport code, keeping the business logic
portable.
"""
