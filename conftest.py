pytest_plugins = ["exception_assert.pytest_plugin"]
