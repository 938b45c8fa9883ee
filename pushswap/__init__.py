"""Sort integers with two stacks, printing the operations used.

Also holds the string, byte-buffer, conversion and printf-style helpers
the command is built on.
"""

__version__ = "1.0.0"