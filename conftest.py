"""Local pytest configuration shared by the tests of every package."""

pytest_plugins = ["pytest_plugins.logging.logging"]
