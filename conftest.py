"""Root conftest: loads the framework's pytest plugin for every test directory."""

pytest_plugins = ["demoqa.plugin", "pytester"]
