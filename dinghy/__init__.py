"""Manage a docker-machine development VM with SSH and NFS connectivity."""

__version__ = '0.1.0'
