"""Text messaging between processes over SIGUSR1 and SIGUSR2.

Modules: protocol (bit framing and decoding), server, client, and the
printf and text helpers they use.
"""

__version__ = "0.1.0"