"""glswitch API layer.

Each file exports exactly one function or class. Commands (``cmd_*``) return a
StageResult and never print.
"""
