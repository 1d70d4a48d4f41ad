"""
External authentication program for ejabberd.

ejabberd talks to this process over stdin/stdout using 2-byte length-prefixed frames;
each request is dispatched to an :class:`~extauth.providers.AuthProvider` and answered
with a boolean status.
"""

__version__ = "0.1.0"
