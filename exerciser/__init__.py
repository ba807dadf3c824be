"""Worked exercise solutions, status-message helpers and a rust-analyzer project file writer."""

__version__ = "5.4.1"