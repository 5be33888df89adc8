"""Dependency lookup, command execution and error types"""
