pytest_plugins = [
    "conf_mock",
    "conf_utils",
]
