"""
Test fixtures for remote_mount

This package contains reusable pytest fixtures organized by category:
- binaries.py: Fake sshfs/fusermount executables on an isolated $PATH
- handlers.py: Connection parameters and handler instances
"""
