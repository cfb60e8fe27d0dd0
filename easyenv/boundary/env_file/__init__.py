"""
Environment file boundary: one dotenv file per project.

Exports:
  - EnvFileExporter: write/read a project's variables keyed by project ID
"""

from easyenv.boundary.env_file.exporter import EnvFileExporter

__all__ = ["EnvFileExporter"]
