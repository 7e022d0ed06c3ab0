"""HTTP endpoint module for termsession.

Hosts a single terminal session behind an in-memory screen so it can be
driven with keystroke requests and read back over HTTP.
"""
