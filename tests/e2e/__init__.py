"""
EBMS E2E Test Suite

End-to-end browser tests using Playwright.

Structure:
    conftest.py          - Fixtures and configuration
    test_auth.py         - Authentication tests
    test_page_objects.py - Fixture-provided page objects
    test_users_list.py   - Admin users list tests
    test_create_user.py  - Admin create-user tests

Page objects live in the ebms_e2e.pages package.

Running Tests:
    # Install dependencies
    pip install -e ".[test]"
    playwright install

    # Point the suite at an EBMS instance
    export BASE_URL=https://ebms.example.com TEST_EMAIL=... TEST_PASSWORD=...

    # Run all tests
    pytest tests/e2e/

    # Run with visible browser
    pytest tests/e2e/ --headed

    # Run specific browser
    pytest tests/e2e/ --browser firefox

    # Run smoke tests only
    pytest tests/e2e/ -m smoke
"""
