"""Sequential file pipeline.

Reads a starter file, deletes it, writes its content to a reply file,
appends a marker, renames the reply, and reads the result back. Any failing
step aborts the run.
"""

__version__ = "0.1.0"
