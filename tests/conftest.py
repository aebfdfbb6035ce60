# pytest configuration

import logging

# the plugin is also registered through its entry point under the same name
pytest_plugins = ["pytester", "lazylet.pytest_plugin"]

logging.getLogger("lazylet").setLevel(logging.DEBUG)
