"""
EBMS E2E Test Suite

Test categories:
- unit/ - browser-free tests of config, data, page objects and sessions
- e2e/  - Playwright specs against a running EBMS instance
"""
