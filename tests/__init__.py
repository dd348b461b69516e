"""
Test package.

Prefer per-test monkeypatch/fixtures over global patching of sys.modules.
"""
